"""Output formatters for license-policy."""

from license_policy.output.report_json import CheckJsonFormatter
from license_policy.output.terminal import TerminalFormatter

__all__ = [
    "CheckJsonFormatter",
    "TerminalFormatter",
]
