"""Custom exceptions for license-policy."""


class LicensePolicyError(Exception):
    """Base exception for all license-policy errors."""

    pass


class ConfigurationError(LicensePolicyError):
    """Exception raised when configuration is invalid."""

    pass


class ScanError(LicensePolicyError):
    """Exception raised when a dependency report cannot be parsed."""

    pass
