"""devcontainer-init - Generate VS Code devcontainers for Node.js and Python projects."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
