"""Scan-related Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from license_policy.models.license import License
from license_policy.models.policy import ValidationReport


class Verbosity(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"


class ScanOptions(BaseModel):
    """Options for a license check operation."""

    model_config = {"extra": "forbid"}

    format: Literal["terminal", "json"] = Field(
        default="terminal",
        description="Output format for check results",
    )
    verbosity: Verbosity = Field(
        default=Verbosity.NORMAL,
        description="Output verbosity level (quiet, normal, verbose)",
    )


class ModuleReport(BaseModel):
    """Validation outcome for the dependencies of one module."""

    model_config = {"extra": "forbid"}

    module: str = Field(description="Module directory that was scanned")
    report: ValidationReport = Field(
        default_factory=ValidationReport,
        description="Per-dependency verdicts and violations",
    )
    used_licenses: list[License] = Field(
        default_factory=list,
        description="Catalog licenses cited as reasons, ordered by identifier",
    )

    @property
    def has_violations(self) -> bool:
        """True if this module has any violations."""
        return self.report.has_violations


class CheckResult(BaseModel):
    """Result of checking one or more modules."""

    model_config = {"extra": "forbid"}

    modules: list[ModuleReport] = Field(
        default_factory=list,
        description="One report per scanned module",
    )

    @property
    def total_dependencies(self) -> int:
        """Total dependencies validated across all modules."""
        return sum(len(m.report.results) for m in self.modules)

    @property
    def total_violations(self) -> int:
        """Total violations across all modules."""
        return sum(len(m.report.violations) for m in self.modules)

    @property
    def has_violations(self) -> bool:
        """True if any module has violations.

        Returns:
            True if at least one violation was found, False otherwise.
        """
        return self.total_violations > 0
