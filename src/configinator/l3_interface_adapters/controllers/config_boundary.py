"""ConfigBoundary — hands loaded configurations to a host runtime through opaque handles.

The boundary owns every LiftConfig it opens. Callers only ever see an integer
handle; fields are read one at a time through ``get_<field>`` accessors that
return host-native values, or None when the field is absent.
"""

from __future__ import annotations

import itertools
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, NoReturn

from configinator.l1_entities.config import LiftConfig
from configinator.l1_entities.errors import BoundaryError, ConfigFileNotFoundError
from configinator.l2_use_cases.ports.config_loader import ConfigLoader
from configinator.l3_interface_adapters.gateways.toml_config_loader import TomlConfigLoader

log = logging.getLogger('cfg.boundary')

# Fallback when the preferred exception class cannot be instantiated.
RUNTIME_EXCEPTION_CLASS = RuntimeError


class HostValueFactory:
    """Builds host-native values. Subclass to target a different runtime."""

    def new_string(self, value: str) -> Any:
        return str(value)

    def new_boolean(self, value: bool) -> Any:
        return bool(value)

    def new_integer(self, value: int) -> Any:
        return int(value)

    def new_string_list(self, values: list[str]) -> Any:
        return [self.new_string(v) for v in values]


class ConfigBoundary:
    """Handle table mapping opaque integer handles to owned LiftConfig records."""

    def __init__(
        self,
        loader: ConfigLoader | None = None,
        host: HostValueFactory | None = None,
        error_class: Callable[[str], BaseException] = BoundaryError,
    ) -> None:
        self._loader = loader or TomlConfigLoader()
        self._host = host or HostValueFactory()
        self._error_class = error_class
        self._records: dict[int, LiftConfig] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    @property
    def open_handles(self) -> int:
        with self._lock:
            return len(self._records)

    # --- Lifecycle ---

    def open(self, path: str | os.PathLike[str]) -> int | None:
        """Load the file at *path* and return its handle.

        Returns None when the file does not exist; every other failure raises.
        """
        config_path = self._coerce_path(path)
        try:
            config = self._loader.load_file(config_path)
        except ConfigFileNotFoundError:
            log.debug('No configuration at %s', config_path)
            return None
        except Exception as e:
            self.throw(str(e), cause=e)
        return self._register(config)

    def open_directory(self, root: str | os.PathLike[str]) -> int | None:
        """Load the highest-priority configuration under *root*; None if there is none."""
        root_path = self._coerce_path(root)
        try:
            config = self._loader.load_from_directory(root_path)
        except Exception as e:
            self.throw(str(e), cause=e)
        if config is None:
            return None
        return self._register(config)

    def close(self, handle: int) -> None:
        """Release the record behind *handle*. The handle is invalid afterwards."""
        with self._lock:
            released = self._records.pop(handle, None)
        if released is None:
            self.throw(f'Unknown or already released configuration handle: {handle}')
        log.debug('Released configuration handle %d', handle)

    # --- Accessors ---

    def get_setup(self, handle: int) -> Any:
        return self._string(handle, 'setup')

    def get_build(self, handle: int) -> Any:
        return self._string(handle, 'build')

    def get_important_rules(self, handle: int) -> Any:
        return self._string_list(handle, 'important_rules')

    def get_ignore_rules(self, handle: int) -> Any:
        return self._string_list(handle, 'ignore_rules')

    def get_ignore_files(self, handle: int) -> Any:
        return self._string(handle, 'ignore_files')

    def get_tools(self, handle: int) -> Any:
        return self._string_list(handle, 'tools')

    def get_disable_tools(self, handle: int) -> Any:
        return self._string_list(handle, 'disable_tools')

    def get_custom_tools(self, handle: int) -> Any:
        return self._string_list(handle, 'custom_tools')

    def get_allow(self, handle: int) -> Any:
        return self._string_list(handle, 'allow')

    def get_jdk_11(self, handle: int) -> Any:
        return self._marshal(handle, 'jdk_11', 'a boolean', self._host.new_boolean)

    def get_android_version(self, handle: int) -> Any:
        return self._marshal(handle, 'android_version', 'an integer', self._host.new_integer)

    def get_errorprone_bug_patterns(self, handle: int) -> Any:
        return self._string_list(handle, 'errorprone_bug_patterns')

    def get_summary_comments(self, handle: int) -> Any:
        return self._marshal(handle, 'summary_comments', 'a boolean', self._host.new_boolean)

    # --- Error translation ---

    def throw(self, message: str, cause: BaseException | None = None) -> NoReturn:
        """Raise the preferred boundary exception, falling back to RuntimeError."""
        try:
            exc = self._error_class(message)
        except Exception as e:
            message = f'{message}\n\nCreating custom exception failed:\n{e!r}'
            raise RUNTIME_EXCEPTION_CLASS(message) from cause
        raise exc from cause

    # --- Internals ---

    def _coerce_path(self, path: Any) -> Path:
        try:
            return Path(os.fspath(path))
        except TypeError as e:
            self.throw(f'Could not process the config path as a string:\n{e}', cause=e)

    def _register(self, config: LiftConfig) -> int:
        with self._lock:
            handle = next(self._ids)
            self._records[handle] = config
        log.debug('Opened configuration handle %d', handle)
        return handle

    def _record(self, handle: int) -> LiftConfig:
        with self._lock:
            config = self._records.get(handle)
        if config is None:
            self.throw(f'Unknown or already released configuration handle: {handle}')
        return config

    def _string(self, handle: int, field: str) -> Any:
        return self._marshal(handle, field, 'a string', self._host.new_string)

    def _string_list(self, handle: int, field: str) -> Any:
        return self._marshal(handle, field, 'a list of strings', self._host.new_string_list)

    def _marshal(self, handle: int, field: str, kind: str, build: Callable[[Any], Any]) -> Any:
        value = getattr(self._record(handle), field)
        if value is None:
            return None
        try:
            return build(value)
        except Exception as e:
            self.throw(f'Failed to create {kind} for the {field}:\n{e}', cause=e)
