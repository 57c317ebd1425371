"""Policy-related Pydantic models for license-policy."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from license_policy.models.dependency import Dependency, DependencyResult, Verdict


class ViolationKind(Enum):
    """Kinds of policy violation, matching the rules that report them."""

    UNLISTED = "unlisted"
    NOT_ALLOWED = "not-allowed"


class PolicyViolation(BaseModel):
    """A license policy violation for a dependency.

    Consumed by whatever renders issues: a terminal table, a JSON report,
    or a code-quality server.
    """

    model_config = {"extra": "forbid"}

    kind: ViolationKind = Field(description="Which rule the dependency violates")
    dependency_name: str = Field(description="Name of the dependency with violation")
    message: str = Field(description="Human-readable description of the violation")


class ValidationReport(BaseModel):
    """Verdicts and violations for a set of dependencies."""

    model_config = {"extra": "forbid"}

    results: list[DependencyResult] = Field(
        default_factory=list,
        description="One result per validated dependency, in input order",
    )
    violations: list[PolicyViolation] = Field(
        default_factory=list,
        description="Violations to report, in detection order",
    )

    @property
    def has_violations(self) -> bool:
        """True if at least one violation was found."""
        return len(self.violations) > 0

    @property
    def dependencies(self) -> list[Dependency]:
        """Dependencies with their representative reason filled in."""
        return [result.applied() for result in self.results]

    def count(self, verdict: Verdict) -> int:
        """Number of dependencies with the given verdict."""
        return sum(1 for result in self.results if result.verdict == verdict)
