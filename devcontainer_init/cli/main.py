"""Main CLI entry point for devcontainer-init."""

import logging

import click

from .. import __version__
from .commands.domains import domains
from .commands.init import init
from .commands.preview import preview

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@click.group()
@click.version_option(__version__, prog_name='devcontainer-init')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """devcontainer-init - Generate VS Code devcontainers with an optional egress firewall"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


# Register commands
cli.add_command(init)
cli.add_command(preview)
cli.add_command(domains)


if __name__ == '__main__':
    cli()
