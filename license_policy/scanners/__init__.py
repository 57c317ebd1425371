"""Dependency report scanners package."""

from license_policy.scanners.base import BaseScanner
from license_policy.scanners.gradle import GradleDependencyScanner, parse_license_details

__all__ = [
    "BaseScanner",
    "GradleDependencyScanner",
    "parse_license_details",
]
