"""CLI Helper Functions for devcontainer-init.

This module provides reusable helper functions for CLI commands to reduce
code duplication and standardize behavior across all commands.

The helpers provide:
- The configuration options shared by every command
- Turning a config file and/or options into a validated configuration
- Consistent error reporting and table formatting
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click
from tabulate import tabulate

from devcontainer_init.core.constants import ALL_RUNTIMES
from devcontainer_init.models.config import AssistantMode, DevcontainerConfig
from devcontainer_init.utils.config_manager import ConfigManager

from .wizard import build_config, collect_config, parse_ports


def _ports_callback(ctx, param, value):
    if value is None:
        return None
    try:
        return parse_ports(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def config_options(func):
    """Attach the configuration options shared by the generating commands."""
    options = [
        click.option('--config', 'config_file', type=click.Path(exists=True, dir_okay=False, path_type=Path),
                     help='JSON or YAML file with the configuration'),
        click.option('--runtime', type=click.Choice(ALL_RUNTIMES), help='Runtime and package manager'),
        click.option('--runtime-version', help='Node.js or Python version used as base image tag'),
        click.option('--timezone', help='Timezone of the container (e.g. Europe/Paris)'),
        click.option('--ports', callback=_ports_callback, help='Comma-separated ports to forward'),
        click.option('--firewall/--no-firewall', default=None, help='Restrict outbound traffic to an allow-list'),
        click.option('--assistant', type=click.Choice([mode.value for mode in AssistantMode]),
                     help='Claude CLI setup: none, local (mount host config) or fresh'),
        click.option('--extension', 'extensions', multiple=True, help='VS Code extension id (repeatable)'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def option_overrides(runtime=None, runtime_version=None, timezone=None, ports=None,
                     firewall=None, assistant=None, extensions=()) -> Dict[str, Any]:
    """Collect the options that were actually given on the command line."""
    overrides = {
        'runtime': runtime,
        'runtime_version': runtime_version,
        'timezone': timezone,
        'ports': ports,
        'enable_firewall': firewall,
        'assistant_mode': assistant,
        'extensions': list(extensions) or None,
    }
    return {key: value for key, value in overrides.items() if value is not None}


def resolve_config(config_file: Optional[Path] = None, interactive: bool = False,
                   **options: Any) -> DevcontainerConfig:
    """Build the configuration from a file, options and (optionally) prompts.

    Options given on the command line take precedence over the file. Without
    a file, missing values are asked for when interactive, or defaulted.
    """
    overrides = option_overrides(**options)

    if config_file:
        config = ConfigManager(config_file).load_config()
        if not overrides:
            return config
        data = config.model_dump()
        data.update(overrides)
        return build_config(**data)

    return collect_config(interactive=interactive, **options)


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    click.echo(click.style(f"Error: {message}", fg='red'), err=True)
    sys.exit(1)


def cancel() -> None:
    """Report a cancelled run and exit with status 1."""
    click.echo(click.style("Cancelled.", fg='red'), err=True)
    sys.exit(1)


def print_table(headers: list[str], rows: list[list[Any]],
                tablefmt: str = "simple") -> None:
    """Print a table with project-wide defaults.

    Args:
        headers: Table headers
        rows: Table rows
        tablefmt: Table format (default: "simple")
    """
    table_str = tabulate(rows, headers=headers, tablefmt=tablefmt)
    click.echo(table_str)


# Re-export commonly used functions for convenience
__all__ = [
    'parse_ports',
    'config_options',
    'collect_config',
    'build_config',
    'option_overrides',
    'resolve_config',
    'fail',
    'cancel',
    'print_table',
]
