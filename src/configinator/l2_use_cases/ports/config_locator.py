"""Port: configuration file locator."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class ConfigLocator(Protocol):
    """Finds candidate configuration files under a project root."""

    def locate(self, root: str | Path) -> list[Path]:
        """Return existing candidate files in priority order (possibly empty)."""
        ...
