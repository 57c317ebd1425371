"""JSON output formatter for license check results."""
import json
from datetime import datetime, timezone
from typing import Any

from license_policy import __version__
from license_policy.constants import LEGAL_DISCLAIMER
from license_policy.models.scan import CheckResult, ModuleReport


class CheckJsonFormatter:
    """Format check results as JSON output.

    Provides a structured representation of verdicts and violations for
    programmatic processing and CI/CD integration.
    """

    def format_check_result(self, result: CheckResult) -> str:
        """Format check result as JSON string.

        Args:
            result: The check result to format.

        Returns:
            JSON string representation of the check result.
        """
        output = {
            "metadata": self._build_metadata(),
            "summary": self._build_summary(result),
            "modules": [self._build_module(module) for module in result.modules],
        }
        return json.dumps(output, indent=2)

    def _build_metadata(self) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "generated_at": timestamp,
            "tool_version": __version__,
            "disclaimer": LEGAL_DISCLAIMER,
        }

    def _build_summary(self, result: CheckResult) -> dict[str, Any]:
        return {
            "modules": len(result.modules),
            "total_dependencies": result.total_dependencies,
            "violations": result.total_violations,
            "status": "violations_found" if result.has_violations else "pass",
        }

    def _build_module(self, module: ModuleReport) -> dict[str, Any]:
        """Build the section of one module.

        Args:
            module: The module report.

        Returns:
            Dictionary with dependencies, violations and licenses in use.
        """
        return {
            "module": module.module,
            "dependencies": [
                {
                    "name": r.dependency.name,
                    "version": r.dependency.version,
                    "license": r.dependency.license,
                    "verdict": r.verdict.value,
                    "reason": r.reason,
                    "source_url": r.dependency.source_url,
                }
                for r in module.report.results
            ],
            "violations": [
                {
                    "kind": v.kind.value,
                    "dependency": v.dependency_name,
                    "message": v.message,
                }
                for v in module.report.violations
            ],
            "used_licenses": [
                {"identifier": lic.identifier, "name": lic.name, "allowed": lic.allowed}
                for lic in module.used_licenses
            ],
        }
