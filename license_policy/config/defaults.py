"""Default configuration values for license-policy."""

from __future__ import annotations

from license_policy.models.config import PolicyConfig

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".license-policy.yaml", ".license-policy.yml"]


def get_default_config() -> PolicyConfig:
    """Get the default configuration.

    Returns:
        PolicyConfig with an empty catalog and no mappings, so every
        dependency license is reported as not found.
    """
    return PolicyConfig()
