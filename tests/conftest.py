"""Shared fixtures for license-policy tests."""

import json
from pathlib import Path
from typing import Any, Callable

import pytest
from click.testing import CliRunner

from license_policy.models.license import License, LicenseCatalog


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def catalog() -> LicenseCatalog:
    """Catalog with one allowed and one denied license."""
    return LicenseCatalog(
        licenses=(
            License(identifier="MIT", name="MIT License", allowed=True),
            License(identifier="GPL-3.0", name="GPL v3", allowed=False),
        )
    )


@pytest.fixture
def write_report() -> Callable[[Path, Any], Path]:
    """Write a Gradle license-details.json report into a module directory."""

    def _write(module_dir: Path, data: Any) -> Path:
        report_dir = module_dir / "build" / "reports" / "dependency-license"
        report_dir.mkdir(parents=True, exist_ok=True)
        path = report_dir / "license-details.json"
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
