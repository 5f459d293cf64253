"""Custom exceptions for devcontainer-init."""


class GeneratorError(Exception):
    """Base exception for all devcontainer-init errors."""

    pass


class ConfigError(GeneratorError):
    """Exception raised when a configuration cannot be loaded or is invalid."""

    pass


class ArtifactWriteError(GeneratorError):
    """Exception raised when generated artifacts cannot be written."""

    pass


class DevcontainerExistsError(ArtifactWriteError):
    """Exception raised when the target already has a .devcontainer directory."""

    pass
