"""Policy file discovery and loading for license-policy."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from license_policy.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_policy.exceptions import ConfigurationError
from license_policy.models.config import PolicyConfig
from license_policy.models.license import LicenseCatalog


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find the policy file in the specified directory.

    Searches for `.license-policy.yaml` first, then `.license-policy.yml`.

    Args:
        start_dir: Directory to search. Defaults to current working directory.

    Returns:
        Path to the policy file if found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()
    for name in DEFAULT_CONFIG_NAMES:
        config_path = search_dir / name
        if config_path.exists():
            return config_path
    return None


def _read_yaml(path: Path) -> Optional[Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, PermissionError) as e:
        raise ConfigurationError(f"Cannot read policy file '{path}': {e}") from e

    if not content.strip():
        return None

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e


def _format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into a readable string.

    Args:
        error: The Pydantic ValidationError.

    Returns:
        Formatted error message string.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        messages.append(f"{loc}: {err['msg']}")
    return "; ".join(messages)


def build_catalog(config: PolicyConfig, source: Path | None = None) -> LicenseCatalog:
    """Build the license catalog of a configuration.

    Args:
        config: Loaded policy configuration.
        source: Policy file the configuration came from, for error messages.

    Returns:
        Read-only LicenseCatalog.

    Raises:
        ConfigurationError: If license identifiers are not unique.
    """
    try:
        return config.build_catalog()
    except ValidationError as e:
        where = f" in '{source}'" if source is not None else ""
        raise ConfigurationError(
            f"Invalid license catalog{where}: {_format_validation_errors(e)}"
        ) from e


def load_config_file(path: Path) -> PolicyConfig:
    """Load and validate a policy file.

    Args:
        path: Path to the YAML policy file.

    Returns:
        Validated PolicyConfig instance.

    Raises:
        ConfigurationError: If the file cannot be read, has invalid YAML,
            fails Pydantic validation, or lists a license twice.
    """
    data = _read_yaml(path)

    # Empty file, or YAML that is only comments
    if data is None:
        return get_default_config()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    try:
        config = PolicyConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {_format_validation_errors(e)}"
        ) from e

    build_catalog(config, source=path)
    return config


def load_config(config_path: str | None = None) -> PolicyConfig:
    """Load the policy from file or use defaults.

    If a config_path is provided, loads from that file. Otherwise searches
    for a policy file in the current directory, falling back to the
    default (empty) policy.

    Args:
        config_path: Optional path to the policy file.

    Returns:
        PolicyConfig with loaded or default values.

    Raises:
        ConfigurationError: If the policy file is invalid.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    discovered = find_config_file()
    if discovered is not None:
        return load_config_file(discovered)

    return get_default_config()
