"""Gateway: filesystem configuration locator — implements ConfigLocator port."""

from __future__ import annotations

import logging
from pathlib import Path

from configinator.l1_entities.errors import ConfigDirectoryNotFoundError

log = logging.getLogger('cfg.locate')

# Highest priority first.
CONFIGURATION_FILES = (
    '.lift/config.toml',
    '.lift.toml',
    '.muse/config.toml',
    '.muse.toml',
    '.muse/config',
)


def is_regular_file(path: Path) -> bool:
    """Like Path.is_file, but any stat failure (e.g. ENAMETOOLONG, EACCES) counts as absent."""
    try:
        return path.is_file()
    except OSError:
        return False


def is_directory(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def locate_files(root: str | Path) -> list[Path]:
    """Return every candidate under *root* that exists as a regular file, in priority order."""
    root_path = Path(root)
    if not is_directory(root_path):
        raise ConfigDirectoryNotFoundError(root)
    found = [root_path / name for name in CONFIGURATION_FILES if is_regular_file(root_path / name)]
    log.debug('Found %d configuration file(s) under %s', len(found), root_path)
    return found


class FilesystemConfigLocator:
    """Probes a project root for the well-known configuration filenames."""

    def locate(self, root: str | Path) -> list[Path]:
        return locate_files(root)
