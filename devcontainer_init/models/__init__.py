"""Models for devcontainer-init."""

from .config import AssistantMode, DevcontainerConfig, Runtime

__all__ = [
    'AssistantMode',
    'DevcontainerConfig',
    'Runtime'
]
