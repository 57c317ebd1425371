"""Reconciliation of raw license observations into dependencies.

A build tool may report several licenses for one artifact. Divergent
reports are combined into a single AND-expression: every reported license
must hold, rather than silently picking one.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from license_policy.analysis.normalizer import LabelNormalizer
from license_policy.constants import AND_SEPARATOR
from license_policy.models.dependency import Dependency, RawObservation
from license_policy.models.license import NormalizationRule

logger = logging.getLogger(__name__)


def combine_licenses(licenses: Iterable[str]) -> Optional[str]:
    """Combine distinct license labels into one expression.

    Args:
        licenses: License labels reported for the same dependency.

    Returns:
        None if there are no labels, the label itself if there is only one
        distinct label, otherwise "(A AND B ...)" over the sorted labels.
    """
    distinct = sorted(set(licenses))
    if not distinct:
        return None
    if len(distinct) == 1:
        return distinct[0]
    return "(" + AND_SEPARATOR.join(distinct) + ")"


def reconcile(
    observations: Iterable[RawObservation],
    rules: Sequence[NormalizationRule] = (),
) -> list[Dependency]:
    """Merge raw observations into one dependency per name.

    Each label is normalized first. Observations with a blank label are kept
    so that the dependency is still reported; they only drop out when the
    same dependency also has a non-blank label.

    Args:
        observations: Raw observations from a scanner, in report order.
        rules: Ordered normalization rules.

    Returns:
        List of Dependency objects sorted by name. Version and source URL
        come from the first observation of each name.
    """
    normalizer = LabelNormalizer(rules)
    groups: dict[str, list[RawObservation]] = {}
    labels: dict[str, list[str]] = {}

    for observation in observations:
        groups.setdefault(observation.name, []).append(observation)
        labels.setdefault(observation.name, [])

        label = normalizer.normalize(observation.license)
        if label is None:
            logger.debug("No license label reported for %s", observation.name)
            continue
        if label != observation.license:
            logger.debug(
                "Normalized license of %s: %r -> %r",
                observation.name,
                observation.license,
                label,
            )
        labels[observation.name].append(label)

    dependencies: list[Dependency] = []
    for name in sorted(groups):
        first = groups[name][0]
        license_expr = combine_licenses(labels[name])
        if license_expr is None:
            logger.warning("License not found for dependency %s", name)
        elif len(set(labels[name])) > 1:
            logger.debug("Combined licenses of %s into %s", name, license_expr)

        dependencies.append(
            Dependency(
                name=name,
                version=first.version,
                license=license_expr,
                source_url=first.source_url,
            )
        )

    return dependencies
