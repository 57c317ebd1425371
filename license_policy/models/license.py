"""License catalog models for license-policy.

The catalog is the single source of truth for identifier-to-policy mapping.
It is loaded once per run and never modified afterwards, so a single
instance can be shared by every module being checked.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class License(BaseModel):
    """A known license and whether project policy permits it."""

    model_config = {"extra": "forbid", "frozen": True}

    identifier: str = Field(description="Canonical short code, e.g. 'MIT'")
    name: str = Field(description="Human-readable display name")
    allowed: bool = Field(
        default=False,
        description="True if the license is permitted by project policy",
    )

    def __lt__(self, other: License) -> bool:
        return self.identifier < other.identifier


class LicenseCatalog(BaseModel):
    """Ordered, immutable collection of known licenses.

    Catalog order is significant: when several entries match a dependency,
    the first one in catalog order is reported.
    """

    model_config = {"extra": "forbid", "frozen": True}

    licenses: tuple[License, ...] = Field(
        default=(),
        description="Known licenses in configuration order",
    )

    @field_validator("licenses")
    @classmethod
    def _unique_identifiers(cls, value: tuple[License, ...]) -> tuple[License, ...]:
        seen: set[str] = set()
        duplicates: list[str] = []
        for lic in value:
            if lic.identifier in seen:
                duplicates.append(lic.identifier)
            seen.add(lic.identifier)
        if duplicates:
            raise ValueError(
                f"duplicate license identifiers: {', '.join(sorted(set(duplicates)))}"
            )
        return value

    def __len__(self) -> int:
        return len(self.licenses)

    def find(self, identifier: str) -> Optional[License]:
        """Look up a license by exact identifier.

        Args:
            identifier: Canonical identifier to look up.

        Returns:
            The matching License, or None if the catalog has no such entry.
        """
        for lic in self.licenses:
            if lic.identifier == identifier:
                return lic
        return None

    def matching(self, text: str) -> list[License]:
        """Get every license whose identifier occurs inside the given text.

        Matching is substring containment, so "GPL-3.0" also matches a
        text containing "LGPL-3.0".

        Args:
            text: Raw license field of a dependency.

        Returns:
            Matching licenses in catalog order.
        """
        return [lic for lic in self.licenses if lic.identifier in text]

    def with_identifiers(self, identifiers: list[str]) -> list[License]:
        """Get the licenses whose identifier is exactly one of the given ones."""
        wanted = set(identifiers)
        return [lic for lic in self.licenses if lic.identifier in wanted]


class NormalizationRule(BaseModel):
    """Maps free-text license labels to a canonical identifier.

    The pattern must match the whole label, not just part of it.
    """

    model_config = {"extra": "forbid", "frozen": True}

    pattern: str = Field(description="Regular expression matched against the full label")
    license: str = Field(description="Canonical license identifier to use on match")

    @field_validator("pattern")
    @classmethod
    def _valid_regex(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regular expression {value!r}: {e}") from e
        return value

    def matches(self, label: str) -> bool:
        """True if the pattern matches the entire label."""
        return re.fullmatch(self.pattern, label) is not None
