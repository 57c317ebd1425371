"""Dependency models for license-policy.

Raw observations come from build-tool reports; dependencies are the
reconciled, one-per-name records that get validated.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from license_policy.models.license import License


class Verdict(Enum):
    """Outcome of checking a license expression against the catalog."""

    ALLOWED = "allowed"
    NOT_ALLOWED = "not_allowed"
    NOT_FOUND = "not_found"


class RawObservation(BaseModel):
    """A single license report for a dependency, as seen by a scanner.

    A dependency may be observed several times with different labels.
    """

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="Artifact or module identifier")
    version: Optional[str] = Field(default=None, description="Artifact version")
    license: Optional[str] = Field(
        default=None,
        description="Raw license label as reported (None if absent)",
    )
    source_url: Optional[str] = Field(
        default=None,
        description="Project or license URL reported alongside the label",
    )


class Dependency(BaseModel):
    """A third-party dependency with its license expression."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="Artifact or module identifier")
    version: Optional[str] = Field(default=None, description="Artifact version")
    license: Optional[str] = Field(
        default=None,
        description="License expression, e.g. 'MIT' or '(Apache-2.0 AND MIT)'",
    )
    reason: Optional[str] = Field(
        default=None,
        description="Identifier chosen as the representative driver of the verdict",
    )
    source_url: Optional[str] = Field(
        default=None,
        description="Provenance pointer (informational only)",
    )

    @property
    def has_license(self) -> bool:
        """True if any license information is present."""
        return bool(self.license and self.license.strip())


class EvaluationResult(BaseModel):
    """Result of evaluating one license expression."""

    model_config = {"extra": "forbid", "frozen": True}

    verdict: Verdict = Field(description="Policy verdict for the expression")
    reason: Optional[str] = Field(
        default=None,
        description="Representative license identifier, if one could be chosen",
    )
    matches: tuple[License, ...] = Field(
        default=(),
        description="Catalog entries whose identifier occurs in the expression",
    )
    missing: tuple[str, ...] = Field(
        default=(),
        description="Sorted AND-terms that no matching catalog entry covers",
    )

    @property
    def denied(self) -> list[License]:
        """Matching catalog entries that policy does not allow."""
        return [lic for lic in self.matches if not lic.allowed]


class DependencyResult(BaseModel):
    """Immutable validation outcome for one dependency."""

    model_config = {"extra": "forbid", "frozen": True}

    dependency: Dependency = Field(description="The dependency as validated")
    verdict: Verdict = Field(description="Policy verdict")
    reason: Optional[str] = Field(
        default=None,
        description="Representative license identifier",
    )

    def applied(self) -> Dependency:
        """Get a copy of the dependency with the reason filled in."""
        return self.dependency.model_copy(update={"reason": self.reason})
