"""License expression parsing and evaluation.

Supports the single-level subset of SPDX expressions that build tools
actually report:

- a plain identifier: ``MIT``
- an OR-group: ``(MIT OR Apache-2.0)``
- an AND-group: ``(MIT AND Apache-2.0)``

Groups do not nest. Parentheses are removed wherever they occur, and an
expression containing both " OR " and " AND " is treated as an OR-group.
"""
from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

from license_policy.constants import AND_SEPARATOR, OR_SEPARATOR
from license_policy.models.dependency import EvaluationResult, Verdict
from license_policy.models.license import License, LicenseCatalog


class SingleLicense(BaseModel):
    """A plain license identifier."""

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["single"] = "single"
    identifier: str = Field(description="The license identifier")

    @property
    def identifiers(self) -> tuple[str, ...]:
        return (self.identifier,)


class AndExpression(BaseModel):
    """Every listed license applies at once."""

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["and"] = "and"
    identifiers: tuple[str, ...] = Field(description="Conjunct identifiers")


class OrExpression(BaseModel):
    """Any one of the listed licenses may be chosen."""

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["or"] = "or"
    identifiers: tuple[str, ...] = Field(description="Alternative identifiers")


LicenseExpression = Union[SingleLicense, AndExpression, OrExpression]


def _strip_parentheses(text: str) -> str:
    return text.replace("(", "").replace(")", "")


def _split(text: str, separator: str) -> list[str]:
    return [token for token in text.split(separator) if token]


def parse_expression(text: str) -> LicenseExpression:
    """Parse a license expression string.

    Args:
        text: License expression, e.g. "(MIT AND Apache-2.0)".

    Returns:
        OrExpression if the text contains " OR ", else AndExpression if it
        contains " AND ", else SingleLicense.
    """
    stripped = _strip_parentheses(text)

    if OR_SEPARATOR in stripped:
        tokens = _split(stripped, OR_SEPARATOR)
        if tokens:
            return OrExpression(identifiers=tuple(tokens))
    elif AND_SEPARATOR in stripped:
        tokens = _split(stripped, AND_SEPARATOR)
        if tokens:
            return AndExpression(identifiers=tuple(tokens))

    return SingleLicense(identifier=stripped)


def check_expression(expression: LicenseExpression, catalog: LicenseCatalog) -> Verdict:
    """Evaluate a parsed expression against the catalog.

    Args:
        expression: Parsed license expression.
        catalog: Known licenses with policy flags.

    Returns:
        ALLOWED, NOT_ALLOWED or NOT_FOUND.
    """
    if isinstance(expression, OrExpression):
        found = catalog.with_identifiers(list(expression.identifiers))
        if any(lic.allowed for lic in found):
            return Verdict.ALLOWED
        return Verdict.NOT_ALLOWED if found else Verdict.NOT_FOUND

    if isinstance(expression, AndExpression):
        count = len(expression.identifiers)
        found = catalog.with_identifiers(list(expression.identifiers))
        allowed_count = sum(1 for lic in found if lic.allowed)
        if allowed_count == count:
            return Verdict.ALLOWED
        if len(found) == count:
            return Verdict.NOT_ALLOWED
        return Verdict.NOT_FOUND

    candidates = [
        lic for lic in catalog.licenses if lic.identifier == expression.identifier
    ]
    if len(candidates) == 1 and candidates[0].allowed:
        return Verdict.ALLOWED
    # A denied single identifier is reported as not found at this layer
    return Verdict.NOT_FOUND


def and_terms(text: str) -> list[str]:
    """Split an expression into its AND-terms, sorted.

    OR-groups and plain identifiers yield a single term holding the whole
    text without parentheses.
    """
    return sorted(_split(_strip_parentheses(text), AND_SEPARATOR))


def _representative_reason(
    verdict: Verdict,
    terms: list[str],
    matches: list[License],
    missing: list[str],
) -> Optional[str]:
    if verdict == Verdict.ALLOWED:
        if matches and not missing and terms:
            return terms[0]
        return None
    if missing:
        return missing[0]
    for lic in matches:
        if not lic.allowed:
            return lic.identifier
    return None


def evaluate(expression: str, catalog: LicenseCatalog) -> EvaluationResult:
    """Evaluate a license expression and pick a representative license.

    The representative reason is the single identifier used to explain the
    verdict:

    - allowed, with every AND-term a matching catalog identifier: the first
      AND-term in sorted order;
    - not allowed with AND-terms missing from the matching catalog entries:
      the first missing term in sorted order;
    - otherwise: the first denied matching catalog entry, in catalog order.

    Args:
        expression: License expression string of a dependency.
        catalog: Known licenses with policy flags.

    Returns:
        EvaluationResult with verdict, reason, substring matches and missing
        AND-terms.
    """
    verdict = check_expression(parse_expression(expression), catalog)
    matches = catalog.matching(expression)
    matched_identifiers = {lic.identifier for lic in matches}
    terms = and_terms(expression)
    missing = [term for term in terms if term not in matched_identifiers]

    return EvaluationResult(
        verdict=verdict,
        reason=_representative_reason(verdict, terms, matches, missing),
        matches=tuple(matches),
        missing=tuple(missing),
    )
