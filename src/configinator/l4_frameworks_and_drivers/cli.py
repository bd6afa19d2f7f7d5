"""CLI entry point for configinator."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from configinator import __version__

log = logging.getLogger('cfg.cli')


def _render(data: dict, fmt: str) -> str:
    """Render the dumped config as JSON or YAML text."""
    if fmt == 'yaml':
        import yaml  # noqa: PLC0415 -- deferred: only needed for --format yaml

        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip('\n')
    return json.dumps(data, indent=2, ensure_ascii=False)


@click.command()
@click.argument('target', default='.', type=click.Path(path_type=Path))
@click.option(
    '-f',
    '--format',
    'fmt',
    default='json',
    type=click.Choice(['json', 'yaml']),
    help='Output format for the resolved configuration.',
)
@click.option(
    '--log-dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Write a debug log into this directory.',
)
@click.version_option(version=__version__)
def cli(target: Path, fmt: str, log_dir: Path | None):
    """configinator -- show the Lift configuration a project resolves to.

    TARGET is a project directory (searched for .lift/config.toml, .lift.toml,
    .muse/config.toml, .muse.toml and .muse/config) or a single config file.
    """
    from configinator.l1_entities.errors import ConfigError  # noqa: PLC0415 -- deferred: not needed for --help
    from configinator.l3_interface_adapters.gateways.filesystem_locator import (  # noqa: PLC0415 -- deferred: not needed for --help
        is_directory,
    )
    from configinator.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: pydantic stack not loaded on --help
        DependencyContainer,
    )

    if log_dir is not None:
        from configinator.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: only with --log-dir
            setup_file_logging,
        )

        setup_file_logging(log_dir)

    loader = DependencyContainer.config_loader()
    log.debug('Resolving configuration for %s', target)
    try:
        if is_directory(target):
            config = loader.load_from_directory(target)
        else:
            config = loader.load_file(target)
    except ConfigError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    if config is None:
        click.echo(f'No configuration found in {target}', err=True)
        return

    click.echo(_render(config.model_dump(by_alias=True, exclude_none=True), fmt))
