"""Base scanner interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from license_policy.models.dependency import RawObservation


class BaseScanner(ABC):
    """Abstract base class for dependency report scanners.

    All scanners must inherit from this class and implement scan().
    """

    @abstractmethod
    def scan(self, module_dir: Path) -> list[RawObservation]:
        """Read raw license observations for a module.

        Args:
            module_dir: Root directory of the module to scan.

        Returns:
            Raw observations in report order. An empty list if the module
            has no report or the report cannot be read.
        """
