"""Configuration handling for license-policy."""
from __future__ import annotations

from license_policy.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_policy.config.loader import (
    build_catalog,
    find_config_file,
    load_config,
    load_config_file,
)
from license_policy.models.config import PolicyConfig

__all__ = [
    "DEFAULT_CONFIG_NAMES",
    "PolicyConfig",
    "build_catalog",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
]
