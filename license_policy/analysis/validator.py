"""License policy validation for dependencies."""
from __future__ import annotations

import logging
from typing import Iterable

from license_policy.analysis.expression import evaluate
from license_policy.models.dependency import Dependency, DependencyResult, Verdict
from license_policy.models.license import License, LicenseCatalog
from license_policy.models.policy import (
    PolicyViolation,
    ValidationReport,
    ViolationKind,
)

logger = logging.getLogger(__name__)


def _license_not_found(dependency: Dependency) -> PolicyViolation:
    logger.info("No License found for Dependency %s", dependency.name)
    return PolicyViolation(
        kind=ViolationKind.UNLISTED,
        dependency_name=dependency.name,
        message=f"No License found for Dependency: {dependency.name}",
    )


def _license_not_allowed(dependency: Dependency, denied: list[License]) -> PolicyViolation:
    names = " ".join(lic.name for lic in denied)
    logger.info("Dependency %s uses a not allowed license %s", dependency.name, names)
    return PolicyViolation(
        kind=ViolationKind.NOT_ALLOWED,
        dependency_name=dependency.name,
        message=f"Dependency {dependency.name} uses a not allowed license: {names}",
    )


def validate_dependency(
    dependency: Dependency,
    catalog: LicenseCatalog,
) -> tuple[DependencyResult, list[PolicyViolation]]:
    """Validate a single dependency against the catalog.

    Args:
        dependency: Dependency with its license expression.
        catalog: Known licenses with policy flags.

    Returns:
        The dependency's result and the violations it raises (at most one).
    """
    if not dependency.has_license:
        result = DependencyResult(dependency=dependency, verdict=Verdict.NOT_FOUND)
        return result, [_license_not_found(dependency)]

    evaluation = evaluate(dependency.license or "", catalog)
    result = DependencyResult(
        dependency=dependency,
        verdict=evaluation.verdict,
        reason=evaluation.reason,
    )

    if evaluation.verdict == Verdict.ALLOWED:
        return result, []
    if evaluation.missing or not evaluation.denied:
        # No denied catalog license to name
        return result, [_license_not_found(dependency)]
    return result, [_license_not_allowed(dependency, evaluation.denied)]


def validate_dependencies(
    dependencies: Iterable[Dependency],
    catalog: LicenseCatalog,
) -> ValidationReport:
    """Check dependencies against the license catalog.

    One dependency's license never prevents validating the rest: every
    outcome is a verdict, not an exception.

    Args:
        dependencies: Dependencies with their license expressions.
        catalog: Known licenses with policy flags, shared read-only.

    Returns:
        ValidationReport with one result per dependency and all violations.
    """
    report = ValidationReport()

    for dependency in dependencies:
        result, violations = validate_dependency(dependency, catalog)
        report.results.append(result)
        report.violations.extend(violations)

    return report


def get_used_licenses(
    dependencies: Iterable[Dependency],
    catalog: LicenseCatalog,
) -> list[License]:
    """Get the catalog licenses cited as a dependency's reason.

    Args:
        dependencies: Dependencies with their reason filled in.
        catalog: Known licenses.

    Returns:
        Matching catalog licenses without duplicates, ordered by identifier.
    """
    reasons = {dep.reason for dep in dependencies if dep.reason}
    used = {lic.identifier: lic for lic in catalog.licenses if lic.identifier in reasons}
    return sorted(used.values())
