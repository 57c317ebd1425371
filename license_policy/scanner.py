"""Scanner module for module discovery and license validation."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

from license_policy.analysis.reconciler import reconcile
from license_policy.analysis.validator import get_used_licenses, validate_dependencies
from license_policy.models.dependency import RawObservation
from license_policy.models.license import LicenseCatalog, NormalizationRule
from license_policy.models.scan import CheckResult, ModuleReport
from license_policy.scanners.base import BaseScanner
from license_policy.scanners.gradle import GradleDependencyScanner

logger = logging.getLogger(__name__)


def default_scanners() -> list[BaseScanner]:
    """Get the scanners used when none are given explicitly."""
    return [GradleDependencyScanner()]


def check_module(
    module_dir: Path,
    catalog: LicenseCatalog,
    rules: Sequence[NormalizationRule] = (),
    scanners: Optional[Sequence[BaseScanner]] = None,
) -> ModuleReport:
    """Scan, reconcile and validate the dependencies of one module.

    Args:
        module_dir: Root directory of the module.
        catalog: Known licenses with policy flags, shared read-only.
        rules: Ordered label normalization rules.
        scanners: Scanners to read dependency reports with. Defaults to
            default_scanners().

    Returns:
        ModuleReport with verdicts, violations and the licenses in use.
    """
    active_scanners = scanners if scanners is not None else default_scanners()

    observations: list[RawObservation] = []
    for scanner in active_scanners:
        observations.extend(scanner.scan(module_dir))

    dependencies = reconcile(observations, rules)
    report = validate_dependencies(dependencies, catalog)
    logger.info(
        "Validated %d dependencies in %s: %d violation(s)",
        len(report.results),
        module_dir,
        len(report.violations),
    )

    return ModuleReport(
        module=str(module_dir),
        report=report,
        used_licenses=get_used_licenses(report.dependencies, catalog),
    )


def check_modules(
    module_dirs: Iterable[Path],
    catalog: LicenseCatalog,
    rules: Sequence[NormalizationRule] = (),
    scanners: Optional[Sequence[BaseScanner]] = None,
) -> CheckResult:
    """Check every module independently against the same catalog.

    Args:
        module_dirs: Module root directories, checked in the given order.
        catalog: Known licenses with policy flags.
        rules: Ordered label normalization rules.
        scanners: Scanners to read dependency reports with.

    Returns:
        CheckResult with one ModuleReport per module.
    """
    return CheckResult(
        modules=[
            check_module(module_dir, catalog, rules, scanners)
            for module_dir in module_dirs
        ]
    )
