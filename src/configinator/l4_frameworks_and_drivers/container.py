"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from configinator.l2_use_cases.ports.config_loader import ConfigLoader
from configinator.l2_use_cases.ports.config_locator import ConfigLocator
from configinator.l3_interface_adapters.controllers.config_boundary import ConfigBoundary, HostValueFactory
from configinator.l3_interface_adapters.gateways.filesystem_locator import FilesystemConfigLocator
from configinator.l3_interface_adapters.gateways.toml_config_loader import TomlConfigLoader


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(self, host: HostValueFactory | None = None) -> None:
        self.locator: ConfigLocator = FilesystemConfigLocator()
        self.loader: ConfigLoader = TomlConfigLoader(self.locator)
        self.boundary = ConfigBoundary(loader=self.loader, host=host)

    @staticmethod
    def config_loader() -> TomlConfigLoader:
        return TomlConfigLoader()
