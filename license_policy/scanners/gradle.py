"""Gradle dependency-license report scanner.

Reads the ``license-details.json`` report written by the Gradle
dependency-license-report plugin:

.. code-block:: json

    {"dependencies": [
        {"moduleName": "org.slf4j:slf4j-api",
         "moduleVersion": "1.7.30",
         "moduleUrls": ["http://www.slf4j.org"],
         "moduleLicenses": [{"moduleLicense": "MIT License",
                             "moduleLicenseUrl": "http://www.opensource.org/licenses/mit-license.php"}]}
    ]}
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from license_policy.constants import GRADLE_LICENSE_REPORT
from license_policy.exceptions import ScanError
from license_policy.models.dependency import RawObservation
from license_policy.scanners.base import BaseScanner

logger = logging.getLogger(__name__)


def _get_string(obj: dict[str, Any], key: str) -> Optional[str]:
    value = obj.get(key)
    return value if isinstance(value, str) else None


def _license_labels(entry: dict[str, Any]) -> list[Optional[str]]:
    """Extract the license labels of one report entry.

    Falls back to the license URL (up to the first comma) when an entry has
    no license name. An entry without licenses yields a single None label.
    """
    module_licenses = entry.get("moduleLicenses")
    if not isinstance(module_licenses, list) or not module_licenses:
        return [None]

    labels: list[Optional[str]] = []
    for item in module_licenses:
        if not isinstance(item, dict):
            continue
        label = _get_string(item, "moduleLicense")
        if label is None:
            url = _get_string(item, "moduleLicenseUrl")
            if url is not None:
                label = url.split(",", 1)[0]
        if label not in labels:
            labels.append(label)

    return labels or [None]


def _first_url(entry: dict[str, Any]) -> Optional[str]:
    module_urls = entry.get("moduleUrls")
    if isinstance(module_urls, list) and module_urls and isinstance(module_urls[0], str):
        return module_urls[0]
    return None


def parse_license_details(content: Union[str, bytes]) -> list[RawObservation]:
    """Parse a Gradle license-details.json report.

    Args:
        content: Raw report content.

    Returns:
        One RawObservation per (module, license label) pair, in report
        order. Entries without a module name are skipped.

    Raises:
        ScanError: If the content is not JSON or has no dependencies array.
    """
    try:
        data = json.loads(content)
    except ValueError as e:
        raise ScanError(f"Invalid JSON in license report: {e}") from e

    if not isinstance(data, dict):
        raise ScanError(
            f"Invalid license report: expected an object at root level, "
            f"got {type(data).__name__}"
        )

    entries = data.get("dependencies")
    if not isinstance(entries, list):
        raise ScanError("Invalid license report: missing 'dependencies' array")

    observations: list[RawObservation] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            logger.warning("Skipping malformed dependency entry #%d", index)
            continue

        name = _get_string(entry, "moduleName")
        if not name:
            logger.warning("Skipping dependency entry #%d without moduleName", index)
            continue

        version = _get_string(entry, "moduleVersion")
        source_url = _first_url(entry)
        for label in _license_labels(entry):
            observations.append(
                RawObservation(
                    name=name,
                    version=version,
                    license=label,
                    source_url=source_url,
                )
            )

    return observations


class GradleDependencyScanner(BaseScanner):
    """Scanner for the Gradle dependency-license report of a module."""

    def report_path(self, module_dir: Path) -> Path:
        """Location of the license report inside a module directory."""
        return module_dir.joinpath(*GRADLE_LICENSE_REPORT)

    def scan(self, module_dir: Path) -> list[RawObservation]:
        """Read raw license observations from the module's Gradle report.

        A missing report is not an error: the module simply has no Gradle
        dependencies to check. Unreadable or malformed reports are logged
        and yield no observations.

        Args:
            module_dir: Root directory of the module to scan.

        Returns:
            Raw observations in report order.
        """
        path = self.report_path(module_dir)
        if not path.exists():
            logger.info(
                "No license-details.json file found in %s - skipping Gradle dependency scan",
                path,
            )
            return []

        try:
            content = path.read_bytes()
        except OSError as e:
            logger.error("Problems reading Gradle license file %s: %s", path, e)
            return []

        try:
            observations = parse_license_details(content)
        except ScanError as e:
            logger.error("Problems reading Gradle license file %s: %s", path, e)
            return []

        logger.debug("Read %d license observations from %s", len(observations), path)
        return observations
