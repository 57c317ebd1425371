"""Tests for JSON report formatter."""
import json

from license_policy import __version__
from license_policy.constants import LEGAL_DISCLAIMER
from license_policy.models.dependency import Dependency, DependencyResult, Verdict
from license_policy.models.license import License
from license_policy.models.policy import (
    PolicyViolation,
    ValidationReport,
    ViolationKind,
)
from license_policy.models.scan import CheckResult, ModuleReport
from license_policy.output.report_json import CheckJsonFormatter


def _result() -> CheckResult:
    return CheckResult(
        modules=[
            ModuleReport(
                module="app",
                report=ValidationReport(
                    results=[
                        DependencyResult(
                            dependency=Dependency(
                                name="lib-c",
                                version="1.0",
                                license="(GPL-3.0 AND MIT)",
                                source_url="https://example.org",
                            ),
                            verdict=Verdict.NOT_ALLOWED,
                            reason="GPL-3.0",
                        )
                    ],
                    violations=[
                        PolicyViolation(
                            kind=ViolationKind.NOT_ALLOWED,
                            dependency_name="lib-c",
                            message="Dependency lib-c uses a not allowed license: GPL v3",
                        )
                    ],
                ),
                used_licenses=[License(identifier="GPL-3.0", name="GPL v3")],
            )
        ]
    )


class TestCheckJsonFormatter:
    """Tests for CheckJsonFormatter."""

    def test_output_is_valid_json(self) -> None:
        """Test that the output parses as JSON with all sections."""
        data = json.loads(CheckJsonFormatter().format_check_result(_result()))

        assert set(data) == {"metadata", "summary", "modules"}
        assert data["metadata"]["tool_version"] == __version__
        assert data["metadata"]["disclaimer"] == LEGAL_DISCLAIMER

    def test_summary(self) -> None:
        """Test summary counts and status."""
        data = json.loads(CheckJsonFormatter().format_check_result(_result()))

        assert data["summary"] == {
            "modules": 1,
            "total_dependencies": 1,
            "violations": 1,
            "status": "violations_found",
        }

    def test_module_section(self) -> None:
        """Test dependency, violation and used license entries."""
        data = json.loads(CheckJsonFormatter().format_check_result(_result()))
        module = data["modules"][0]

        assert module["module"] == "app"
        assert module["dependencies"] == [
            {
                "name": "lib-c",
                "version": "1.0",
                "license": "(GPL-3.0 AND MIT)",
                "verdict": "not_allowed",
                "reason": "GPL-3.0",
                "source_url": "https://example.org",
            }
        ]
        assert module["violations"][0]["kind"] == "not-allowed"
        assert module["used_licenses"] == [
            {"identifier": "GPL-3.0", "name": "GPL v3", "allowed": False}
        ]

    def test_pass_status(self) -> None:
        """Test the status of a result without violations."""
        data = json.loads(CheckJsonFormatter().format_check_result(CheckResult()))

        assert data["summary"]["status"] == "pass"
