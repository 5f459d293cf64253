"""Configuration models for devcontainer generation."""

from enum import Enum
from typing import Annotated, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt


class Runtime(str, Enum):
    """Language runtime and package manager of the generated environment."""

    NODE_PNPM = "node-pnpm"
    NODE_BUN = "node-bun"
    PYTHON = "python"

    @property
    def is_node(self) -> bool:
        return self in (Runtime.NODE_PNPM, Runtime.NODE_BUN)


class AssistantMode(str, Enum):
    """How the coding-assistant CLI is set up inside the container."""

    NONE = "none"
    LOCAL = "local"  # mount the host's config and credentials
    FRESH = "fresh"  # install the CLI with a blank config


# booleans are not ports
Port = Annotated[StrictInt, Field(gt=0)]


class DevcontainerConfig(BaseModel):
    """Validated input of one generation run."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    runtime: Runtime
    runtime_version: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("runtime_version", "runtimeVersion"),
        serialization_alias="runtimeVersion",
    )
    timezone: str = Field("Europe/Paris", min_length=1)
    ports: Tuple[Port, ...] = Field(default_factory=tuple)
    enable_firewall: bool = Field(
        False,
        validation_alias=AliasChoices("enable_firewall", "enableFirewall"),
        serialization_alias="enableFirewall",
    )
    assistant_mode: AssistantMode = Field(
        AssistantMode.NONE,
        validation_alias=AliasChoices("assistant_mode", "assistantMode", "claudeMode"),
        serialization_alias="assistantMode",
    )
    extensions: Tuple[str, ...] = Field(default_factory=tuple)
