"""Configuration Pydantic models for license-policy."""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from license_policy.models.license import License, LicenseCatalog, NormalizationRule


class PolicyConfig(BaseModel):
    """Configuration for license-policy.

    Both lists are ordered: catalog order decides which license is reported
    first, and mapping order decides which rule normalizes a label.
    """

    model_config = {"extra": "forbid"}

    licenses: List[License] = Field(
        default_factory=list,
        description="Known licenses with their allowed/denied flag.",
    )
    mappings: List[NormalizationRule] = Field(
        default_factory=list,
        description="Pattern rules mapping free-text labels to identifiers.",
    )

    def build_catalog(self) -> LicenseCatalog:
        """Build the read-only license catalog for a run.

        Returns:
            LicenseCatalog holding the configured licenses in order.

        Raises:
            pydantic.ValidationError: If identifiers are not unique.
        """
        return LicenseCatalog(licenses=tuple(self.licenses))
