"""Service layer for writing generated artifacts."""

from .artifact_service import ArtifactService
from .exceptions import (
    GeneratorError,
    ConfigError,
    ArtifactWriteError,
    DevcontainerExistsError,
)

__all__ = [
    "ArtifactService",
    "GeneratorError",
    "ConfigError",
    "ArtifactWriteError",
    "DevcontainerExistsError",
]
