"""Pydantic data models for license-policy."""

from license_policy.models.config import PolicyConfig
from license_policy.models.dependency import (
    Dependency,
    DependencyResult,
    EvaluationResult,
    RawObservation,
    Verdict,
)
from license_policy.models.license import License, LicenseCatalog, NormalizationRule
from license_policy.models.policy import (
    PolicyViolation,
    ValidationReport,
    ViolationKind,
)
from license_policy.models.scan import (
    CheckResult,
    ModuleReport,
    ScanOptions,
    Verbosity,
)

__all__ = [
    "CheckResult",
    "Dependency",
    "DependencyResult",
    "EvaluationResult",
    "License",
    "LicenseCatalog",
    "ModuleReport",
    "NormalizationRule",
    "PolicyConfig",
    "PolicyViolation",
    "RawObservation",
    "ScanOptions",
    "ValidationReport",
    "Verbosity",
    "Verdict",
    "ViolationKind",
]
