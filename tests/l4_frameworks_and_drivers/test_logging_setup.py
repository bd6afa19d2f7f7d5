"""Tests for file logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from configinator.l4_frameworks_and_drivers.logging_setup import LOG_FILENAME, setup_file_logging


@pytest.fixture
def cfg_root_logger():
    root = logging.getLogger('cfg')
    before = list(root.handlers)
    yield root
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()


def _flush(root: logging.Logger) -> None:
    for handler in root.handlers:
        handler.flush()


class TestSetupFileLogging:
    def test_writes_package_records(self, tmp_path: Path, cfg_root_logger):
        log_path = setup_file_logging(tmp_path / 'out')
        logging.getLogger('cfg.load').debug('hello %s', 'there')
        _flush(cfg_root_logger)
        content = log_path.read_text(encoding='utf-8')
        assert log_path.name == LOG_FILENAME
        assert 'cfg INFO Debug logging started' in content
        assert 'cfg.load DEBUG hello there' in content

    def test_second_call_does_not_duplicate_handler(self, tmp_path: Path, cfg_root_logger):
        count = len(cfg_root_logger.handlers)
        setup_file_logging(tmp_path)
        setup_file_logging(tmp_path)
        assert len(cfg_root_logger.handlers) == count + 1

    def test_ignores_unrelated_loggers(self, tmp_path: Path, cfg_root_logger):
        log_path = setup_file_logging(tmp_path)
        logging.getLogger('elsewhere').warning('not ours')
        _flush(cfg_root_logger)
        assert 'not ours' not in log_path.read_text(encoding='utf-8')
