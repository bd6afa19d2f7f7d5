"""Host-side Config object — owns one boundary handle and exposes its fields."""

from __future__ import annotations

import os
from typing import Any

from configinator.l1_entities.errors import ConfigurationFailedToLoadError, ConfigurationUsedAfterCleanupError
from configinator.l3_interface_adapters.controllers.config_boundary import ConfigBoundary

_DEFAULT_BOUNDARY = ConfigBoundary()


class Config:
    """A loaded configuration. Close it (or use it as a context manager) to release the handle."""

    def __init__(self, boundary: ConfigBoundary, handle: int) -> None:
        self._boundary = boundary
        self._handle: int | None = handle

    @classmethod
    def load_from_file(cls, path: str | os.PathLike[str], boundary: ConfigBoundary | None = None) -> Config:
        """Load *path*; raises ConfigurationFailedToLoadError when it does not exist."""
        boundary = boundary or _DEFAULT_BOUNDARY
        handle = boundary.open(path)
        if handle is None:
            raise ConfigurationFailedToLoadError(path)
        return cls(boundary, handle)

    @classmethod
    def load_from_directory(
        cls,
        root: str | os.PathLike[str],
        boundary: ConfigBoundary | None = None,
    ) -> Config | None:
        """Load the highest-priority configuration under *root*, or None when there is none."""
        boundary = boundary or _DEFAULT_BOUNDARY
        handle = boundary.open_directory(root)
        if handle is None:
            return None
        return cls(boundary, handle)

    @property
    def closed(self) -> bool:
        return self._handle is None

    @property
    def setup(self) -> str | None:
        return self._boundary.get_setup(self._loaded_handle())

    @property
    def build(self) -> str | None:
        return self._boundary.get_build(self._loaded_handle())

    @property
    def important_rules(self) -> list[str] | None:
        return self._boundary.get_important_rules(self._loaded_handle())

    @property
    def ignore_rules(self) -> list[str] | None:
        return self._boundary.get_ignore_rules(self._loaded_handle())

    @property
    def ignore_files(self) -> str | None:
        return self._boundary.get_ignore_files(self._loaded_handle())

    @property
    def tools(self) -> list[str] | None:
        return self._boundary.get_tools(self._loaded_handle())

    @property
    def disable_tools(self) -> list[str] | None:
        return self._boundary.get_disable_tools(self._loaded_handle())

    @property
    def custom_tools(self) -> list[str] | None:
        return self._boundary.get_custom_tools(self._loaded_handle())

    @property
    def allow(self) -> list[str] | None:
        return self._boundary.get_allow(self._loaded_handle())

    @property
    def jdk_11(self) -> bool | None:
        return self._boundary.get_jdk_11(self._loaded_handle())

    @property
    def android_version(self) -> int | None:
        return self._boundary.get_android_version(self._loaded_handle())

    @property
    def errorprone_bug_patterns(self) -> list[str] | None:
        return self._boundary.get_errorprone_bug_patterns(self._loaded_handle())

    @property
    def summary_comments(self) -> bool | None:
        return self._boundary.get_summary_comments(self._loaded_handle())

    def close(self) -> None:
        if self._handle is not None:
            handle, self._handle = self._handle, None
            self._boundary.close(handle)

    def __enter__(self) -> Config:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def __del__(self) -> None:
        # Attributes may be missing if __init__ never completed.
        if getattr(self, '_handle', None) is not None:
            self.close()

    def _loaded_handle(self) -> int:
        if self._handle is None:
            raise ConfigurationUsedAfterCleanupError()
        return self._handle
