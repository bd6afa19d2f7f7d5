"""Debug log file for the cfg.* loggers."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FILENAME = 'configinator_debug.log'


def setup_file_logging(log_dir: Path) -> Path:
    """Send every cfg.* record to *log_dir*/configinator_debug.log and return that path.

    Calling it again for the same directory does not attach a second handler.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = (log_dir / LOG_FILENAME).resolve()
    root = logging.getLogger('cfg')
    root.setLevel(logging.DEBUG)
    already = any(
        isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path for h in root.handlers
    )
    if not already:
        handler = logging.FileHandler(log_path, encoding='utf-8')
        handler.setFormatter(logging.Formatter('%(asctime)s %(name)s %(levelname)s %(message)s'))
        root.addHandler(handler)
        root.info('Debug logging started → %s', log_path)
    return log_path
