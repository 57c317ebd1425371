"""License label normalization.

Build tools report licenses as free text ("The Apache Software License,
Version 2.0"). Normalization maps those labels to canonical identifiers
using configured pattern rules.
"""
from __future__ import annotations

from typing import Optional, Sequence

from license_policy.models.license import NormalizationRule


def normalize_label(raw_label: str, rules: Sequence[NormalizationRule]) -> str:
    """Map a raw license label to a canonical identifier.

    Rules are tried in order and the first whose pattern matches the whole
    label wins. Rule order is significant configuration.

    Args:
        raw_label: License label as reported by a build tool.
        rules: Ordered normalization rules.

    Returns:
        The canonical identifier of the first matching rule, or the raw
        label unchanged if no rule matches.
    """
    for rule in rules:
        if rule.matches(raw_label):
            return rule.license
    return raw_label


class LabelNormalizer:
    """Normalizes license labels with a fixed, ordered rule list."""

    def __init__(self, rules: Sequence[NormalizationRule] = ()) -> None:
        """Initialize the normalizer.

        Args:
            rules: Ordered normalization rules.
        """
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[NormalizationRule, ...]:
        """The rules in the order they are applied."""
        return self._rules

    def normalize(self, raw_label: Optional[str]) -> Optional[str]:
        """Normalize a label, keeping blank labels blank.

        Args:
            raw_label: License label, possibly None or whitespace.

        Returns:
            None for blank labels, otherwise the normalized label.
        """
        if raw_label is None or not raw_label.strip():
            return None
        return normalize_label(raw_label, self._rules)
