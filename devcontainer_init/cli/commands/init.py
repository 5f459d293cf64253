"""Init command for devcontainer-init."""

from pathlib import Path

import click
from rich.console import Console

from devcontainer_init.cli.helpers import cancel, config_options, fail, resolve_config
from ...core.devcontainer_generator import DevcontainerGenerator
from ...services.exceptions import GeneratorError
from ...utils.config_manager import ConfigManager


@click.command()
@click.argument('target', default='.', type=click.Path(file_okay=False, path_type=Path))
@config_options
@click.option('--save-config', type=click.Path(dir_okay=False, path_type=Path),
              help='Save the configuration to a JSON or YAML file for later runs')
@click.option('--force', is_flag=True, help='Overwrite an existing .devcontainer directory')
@click.option('--yes', '-y', is_flag=True, help='Never prompt; use defaults for missing values')
def init(target, config_file, save_config, force, yes, **options):
    """Generate a .devcontainer directory for a project.

    Anything not given as an option (or in --config) is asked for
    interactively, unless --yes is passed.

    Examples:
        devcontainer-init init
        devcontainer-init init ./api --runtime python --runtime-version 3.12 --ports 8000 -y
        devcontainer-init init --config devcontainer.yaml --force
    """
    console = Console()
    console.print("\n[bold blue]  Devcontainer Initializer[/bold blue]\n")

    target = target.resolve()
    # created together with .devcontainer once the configuration is valid
    if not target.exists() and not yes:
        if not click.confirm(f"Directory {target} does not exist. Create it?", default=True):
            cancel()

    generator = DevcontainerGenerator(target)
    if generator.artifact_service.devcontainer_exists() and not force:
        if yes:
            fail(f"{generator.devcontainer_dir} already exists. Use --force to overwrite it.")
        if not click.confirm("A .devcontainer already exists. Overwrite?", default=False):
            cancel()
        force = True

    try:
        config = resolve_config(config_file, interactive=not yes, **options)
        if save_config:
            ConfigManager(save_config).save_config(config)
        console.print("\n[blue]Generating .devcontainer...[/blue]\n")
        written = generator.write(config, force=force)
    except GeneratorError as e:
        fail(str(e))

    for path in written:
        console.print(f"[dim]  ✓ {path.name}[/dim]")

    console.print("\n[bold green]  .devcontainer created![/bold green]\n")
    console.print(f"[dim]  Path: {generator.devcontainer_dir}[/dim]")
    console.print(f"[dim]  Runtime: {config.runtime.value} {config.runtime_version}[/dim]\n")
    console.print("[blue]  To start:[/blue]")
    console.print(f"    code {target}")
    console.print("    # Then 'Reopen in Container'\n")
