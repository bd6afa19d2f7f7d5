"""Port: configuration loader."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from configinator.l1_entities.config import LiftConfig


class ConfigLoader(Protocol):
    """Abstract configuration loader."""

    def load_file(self, path: str | Path) -> LiftConfig:
        """Parse a single configuration file.

        Raises ConfigFileNotFoundError when *path* is not a regular file.
        """
        ...

    def load_from_directory(self, root: str | Path) -> LiftConfig | None:
        """Parse the highest-priority configuration under *root*, or None if there is none."""
        ...
