"""Domain error types."""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Base class for every failure while locating or loading a configuration."""


class ConfigFileNotFoundError(ConfigError):
    """Raised when a configuration path does not exist or is not a regular file.

    Callers treat this as "no configuration present" rather than a fault.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = path
        super().__init__(f'Could not find configuration {str(path)!r}')


class ConfigDirectoryNotFoundError(ConfigError):
    """Raised when the project root to search does not exist or is not a directory."""

    def __init__(self, path: str | Path) -> None:
        self.path = path
        super().__init__(f'Could not find configurations in folder {str(path)!r}')


class ConfigReadError(ConfigError):
    """Raised when an existing configuration file cannot be read."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f'Could not read configuration file: {detail}')


class ConfigParseError(ConfigError):
    """Raised when a configuration file is not valid TOML or has mistyped fields."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f'Failed to parse file as a toml file: {detail}')


class BoundaryError(RuntimeError):
    """Raised across the handle boundary in place of a domain error."""


class ConfigurationFailedToLoadError(RuntimeError):
    """Raised by the host-side Config when a path holds no loadable configuration."""

    def __init__(self, path: str | Path) -> None:
        self.path = path
        super().__init__(f'Could not load configuration at {path}')


class ConfigurationUsedAfterCleanupError(RuntimeError):
    """Raised by the host-side Config when it is read after being closed."""

    def __init__(self) -> None:
        super().__init__('Attempted to use a configuration after it was cleaned up')
