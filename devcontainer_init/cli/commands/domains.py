"""Domains command for devcontainer-init."""

import click

from devcontainer_init.cli.helpers import config_options, fail, print_table, resolve_config
from ...core.domain_policy import domain_policy
from ...services.exceptions import GeneratorError


@click.command()
@config_options
def domains(config_file, **options):
    """Show the domains the firewall allows for a configuration"""
    try:
        config = resolve_config(config_file, interactive=False, **options)
    except GeneratorError as e:
        fail(str(e))

    rows = [
        [domain, group]
        for group, group_domains in domain_policy(config)
        for domain in group_domains
    ]
    print_table(["DOMAIN", "POLICY"], rows)

    if not config.enable_firewall:
        click.echo("\nNote: the firewall is disabled for this configuration.")
