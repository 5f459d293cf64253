"""Utilities for devcontainer-init."""

from .config_manager import ConfigManager

__all__ = [
    'ConfigManager'
]
