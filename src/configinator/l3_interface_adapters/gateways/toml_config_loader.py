"""Gateway: TOML configuration loader — implements ConfigLoader port."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from configinator.l1_entities.config import LiftConfig
from configinator.l1_entities.errors import ConfigFileNotFoundError, ConfigParseError, ConfigReadError
from configinator.l2_use_cases.ports.config_locator import ConfigLocator
from configinator.l3_interface_adapters.gateways.filesystem_locator import FilesystemConfigLocator, is_regular_file

log = logging.getLogger('cfg.load')


def parse_text(text: str) -> LiftConfig:
    """Parse TOML *text* into a LiftConfig, ignoring unknown keys."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(str(e)) from e
    try:
        return LiftConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(str(e)) from e


class TomlConfigLoader:
    """Loads LiftConfig from a single TOML file or from a project directory."""

    def __init__(self, locator: ConfigLocator | None = None) -> None:
        self._locator = locator or FilesystemConfigLocator()

    def load_file(self, path: str | Path) -> LiftConfig:
        file_path = Path(path)
        if not is_regular_file(file_path):
            raise ConfigFileNotFoundError(path)
        try:
            text = file_path.read_bytes().decode('utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(str(e)) from e
        config = parse_text(text)
        log.debug('Loaded configuration from %s', file_path)
        return config

    def load_from_directory(self, root: str | Path) -> LiftConfig | None:
        candidates = self._locator.locate(root)
        if not candidates:
            log.debug('No configuration found under %s', root)
            return None
        # Only the highest-priority file is read; a broken one is not skipped.
        return self.load_file(candidates[0])
