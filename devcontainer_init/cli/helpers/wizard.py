"""Interactive collection of a devcontainer configuration."""

from typing import Any, List, Optional, Sequence

import click
import questionary
from pydantic import ValidationError

from devcontainer_init.core.constants import (
    DEFAULT_NODE_VERSION,
    DEFAULT_PORTS,
    DEFAULT_PYTHON_VERSION,
    DEFAULT_TIMEZONE,
    EXTENSION_CATALOG,
    NODE_VERSIONS,
    PYTHON_VERSIONS,
    RUNTIME_OPTIONS,
)
from devcontainer_init.models.config import AssistantMode, DevcontainerConfig, Runtime
from devcontainer_init.services.exceptions import ConfigError


def parse_ports(text: str) -> List[int]:
    """Parse a comma-separated port list such as ``"3000, 5432"``.

    Raises:
        ValueError: If an entry is not a positive integer
    """
    ports = []
    for item in text.split(','):
        item = item.strip()
        if not item:
            continue
        if not item.isdigit() or int(item) == 0:
            raise ValueError(f"'{item}' is not a valid port")
        ports.append(int(item))
    return ports


def build_config(**values: Any) -> DevcontainerConfig:
    """Validate configuration values.

    Raises:
        ConfigError: If the values do not form a valid configuration
    """
    try:
        return DevcontainerConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration:\n{e}") from e


def default_runtime_version(runtime: str) -> str:
    if Runtime(runtime).is_node:
        return DEFAULT_NODE_VERSION
    return DEFAULT_PYTHON_VERSION


def default_ports(runtime: str) -> List[int]:
    family = "node" if Runtime(runtime).is_node else "python"
    return list(DEFAULT_PORTS[family])


def available_extensions(runtime: str):
    """Catalog entries that apply to a runtime."""
    return [entry for entry in EXTENSION_CATALOG if runtime in entry[3]]


def default_extensions(runtime: str) -> List[str]:
    return [ext_id for _, ext_id, checked, _ in available_extensions(runtime) if checked]


def _ask(question) -> Any:
    """Ask a questionary question; Ctrl-C aborts the command."""
    answer = question.ask()
    if answer is None:
        raise click.Abort()
    return answer


def _validate_ports(text: str):
    try:
        parse_ports(text)
    except ValueError as e:
        return str(e)
    return True


def ask_runtime() -> str:
    choices = [questionary.Choice(title, value=value) for value, title in RUNTIME_OPTIONS]
    return _ask(questionary.select("Runtime / environment", choices=choices))


def ask_runtime_version(runtime: str) -> str:
    is_node = Runtime(runtime).is_node
    versions = NODE_VERSIONS if is_node else PYTHON_VERSIONS
    choices = [questionary.Choice(title, value=value) for value, title in versions]
    return _ask(questionary.select(
        "Node.js version" if is_node else "Python version",
        choices=choices,
        default=default_runtime_version(runtime),
    ))


def ask_assistant_mode() -> str:
    if not _ask(questionary.confirm("Use Claude Code?", default=True)):
        return AssistantMode.NONE.value
    choices = [
        questionary.Choice(
            "Local - mount ~/.claude (keeps your config, history and API key)",
            value=AssistantMode.LOCAL.value,
        ),
        questionary.Choice("Fresh - new instance with a blank config", value=AssistantMode.FRESH.value),
    ]
    return _ask(questionary.select("Claude configuration", choices=choices))


def ask_timezone() -> str:
    return _ask(questionary.text("Timezone", default=DEFAULT_TIMEZONE))


def ask_ports(runtime: str) -> List[int]:
    default = ",".join(str(port) for port in default_ports(runtime))
    answer = _ask(questionary.text(
        "Ports to forward (comma-separated)",
        default=default,
        validate=_validate_ports,
    ))
    return parse_ports(answer)


def ask_firewall(default: bool) -> bool:
    return _ask(questionary.confirm(
        "Enable the firewall (allow only GitHub, npm/PyPI and Anthropic)?",
        default=default,
    ))


def ask_extensions(runtime: str) -> List[str]:
    choices = [
        questionary.Choice(f"{label} ({ext_id})", value=ext_id, checked=checked)
        for label, ext_id, checked, _ in available_extensions(runtime)
    ]
    return _ask(questionary.checkbox("VS Code extensions", choices=choices))


def collect_config(interactive: bool = True,
                   runtime: Optional[str] = None,
                   runtime_version: Optional[str] = None,
                   timezone: Optional[str] = None,
                   ports: Optional[Sequence[int]] = None,
                   firewall: Optional[bool] = None,
                   assistant: Optional[str] = None,
                   extensions: Sequence[str] = ()) -> DevcontainerConfig:
    """Fill in every value not given on the command line.

    Missing values are prompted for when interactive, otherwise the wizard's
    defaults are used. The firewall defaults to on when Claude is used.
    """
    if runtime is None:
        runtime = ask_runtime() if interactive else Runtime.NODE_PNPM.value
    if runtime_version is None:
        runtime_version = ask_runtime_version(runtime) if interactive else default_runtime_version(runtime)
    if assistant is None:
        assistant = ask_assistant_mode() if interactive else AssistantMode.NONE.value
    if timezone is None:
        timezone = ask_timezone() if interactive else DEFAULT_TIMEZONE
    if ports is None:
        ports = ask_ports(runtime) if interactive else default_ports(runtime)
    if firewall is None:
        use_assistant = assistant != AssistantMode.NONE.value
        firewall = ask_firewall(use_assistant) if interactive else use_assistant
    if not extensions:
        extensions = ask_extensions(runtime) if interactive else default_extensions(runtime)

    return build_config(
        runtime=runtime,
        runtime_version=runtime_version,
        timezone=timezone,
        ports=ports,
        enable_firewall=firewall,
        assistant_mode=assistant,
        extensions=extensions,
    )
