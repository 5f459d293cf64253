"""Preview command for devcontainer-init."""

from pathlib import Path

import click

from devcontainer_init.cli.helpers import config_options, fail, resolve_config
from ...core.constants import DEVCONTAINER_JSON_NAME, DOCKERFILE_NAME, FIREWALL_SCRIPT_NAME
from ...core.devcontainer_generator import DevcontainerGenerator
from ...services.exceptions import GeneratorError


@click.command()
@click.argument('artifact', type=click.Choice([DEVCONTAINER_JSON_NAME, DOCKERFILE_NAME, FIREWALL_SCRIPT_NAME]))
@config_options
def preview(artifact, config_file, **options):
    """Print one generated artifact without writing anything"""
    try:
        config = resolve_config(config_file, interactive=False, **options)
    except GeneratorError as e:
        fail(str(e))

    artifacts = DevcontainerGenerator(Path.cwd()).generate(config)
    if artifact not in artifacts:
        fail(f"{artifact} is only generated with the firewall enabled (--firewall)")

    click.echo(artifacts[artifact], nl=False)
