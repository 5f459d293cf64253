"""Allow running as ``python -m devcontainer_init``."""

from .cli.main import cli

if __name__ == '__main__':
    cli()
