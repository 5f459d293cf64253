"""Per-run generation plan shared by all artifact compilers."""

from dataclasses import dataclass
from typing import ClassVar, Tuple, Union

from .constants import NODE_USER, PYTHON_USER
from .domain_policy import resolve_domains
from ..models.config import AssistantMode, DevcontainerConfig, Runtime


@dataclass(frozen=True)
class NodeRuntime:
    """Node.js base image with pnpm or bun as package manager."""

    version: str
    package_manager: str

    image: ClassVar[str] = "node"
    user: ClassVar[str] = NODE_USER

    @property
    def base_image(self) -> str:
        return f"{self.image}:{self.version}"


@dataclass(frozen=True)
class PythonRuntime:
    """Python base image; it ships without a non-root user."""

    version: str

    image: ClassVar[str] = "python"
    user: ClassVar[str] = PYTHON_USER

    @property
    def base_image(self) -> str:
        return f"{self.image}:{self.version}"


RuntimeProfile = Union[NodeRuntime, PythonRuntime]


def runtime_profile(config: DevcontainerConfig) -> RuntimeProfile:
    """Map the configured runtime onto its profile."""
    if config.runtime == Runtime.PYTHON:
        return PythonRuntime(version=config.runtime_version)
    package_manager = "bun" if config.runtime == Runtime.NODE_BUN else "pnpm"
    return NodeRuntime(version=config.runtime_version, package_manager=package_manager)


@dataclass(frozen=True)
class GenerationPlan:
    """Decisions derived once from a configuration.

    The user name, home directory and domain allow-list appear in more than
    one artifact; every compiler reads them from here so the artifacts stay
    consistent with each other.
    """

    config: DevcontainerConfig
    runtime: RuntimeProfile
    domains: Tuple[str, ...]

    @property
    def user(self) -> str:
        return self.runtime.user

    @property
    def home(self) -> str:
        return f"/home/{self.user}"

    @property
    def is_node(self) -> bool:
        return isinstance(self.runtime, NodeRuntime)

    @property
    def firewall(self) -> bool:
        return self.config.enable_firewall

    @property
    def assistant(self) -> bool:
        return self.config.assistant_mode != AssistantMode.NONE

    @property
    def mount_credentials(self) -> bool:
        return self.config.assistant_mode == AssistantMode.LOCAL


def plan_generation(config: DevcontainerConfig) -> GenerationPlan:
    """Build the generation plan for a configuration."""
    return GenerationPlan(
        config=config,
        runtime=runtime_profile(config),
        domains=tuple(resolve_domains(config)),
    )


def ensure_plan(source: Union[DevcontainerConfig, GenerationPlan]) -> GenerationPlan:
    """Accept either a configuration or an already computed plan."""
    if isinstance(source, GenerationPlan):
        return source
    return plan_generation(source)
