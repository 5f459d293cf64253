"""devcontainer.json generation."""

import json
from typing import Any, Dict, Union

from .constants import (
    ASSISTANT_CONFIG_DIR_NAME,
    ASSISTANT_CONFIG_ENV,
    ASSISTANT_CONFIG_FILE_NAME,
    COMMAND_HISTORY_DIR,
    DOCKERFILE_NAME,
    FIREWALL_SCRIPT_PATH,
    MEMORY_LIMIT_NODE_OPTIONS,
    NODE_FORMATTER,
    PRIMARY_PORT_LABEL,
    PYTHON_FORMATTER,
    PYTHON_INTERPRETER_PATH,
    WORKSPACE_BASENAME,
)
from .plan import GenerationPlan, ensure_plan
from ..models.config import DevcontainerConfig


def port_attributes(ports) -> Dict[str, Dict[str, str]]:
    """Label forwarded ports; the first one is the application port.

    A port listed twice keeps the label of its first occurrence.
    """
    attributes = {}
    for index, port in enumerate(ports):
        label = PRIMARY_PORT_LABEL if index == 0 else f"Port {port}"
        attributes.setdefault(str(port), {"label": label, "onAutoForward": "notify"})
    return attributes


def generate_devcontainer_json(source: Union[DevcontainerConfig, GenerationPlan]) -> Dict[str, Any]:
    """Build the devcontainer.json document for a configuration or plan."""
    plan = ensure_plan(source)
    config = plan.config
    user = plan.user

    settings: Dict[str, Any] = {
        "editor.formatOnSave": True,
        "terminal.integrated.defaultProfile.linux": "zsh",
    }
    run_args = [f"--name={WORKSPACE_BASENAME}-devcontainer"]
    mounts = [
        f"source=devcontainer-bashhistory-${{devcontainerId}},target={COMMAND_HISTORY_DIR},type=volume"
    ]
    container_env: Dict[str, str] = {}

    manifest: Dict[str, Any] = {
        "name": WORKSPACE_BASENAME,
        "build": {
            "dockerfile": DOCKERFILE_NAME,
            "args": {
                "TZ": f"${{localEnv:TZ:{config.timezone}}}",
            },
        },
        "runArgs": run_args,
        "customizations": {
            "vscode": {
                "extensions": list(config.extensions),
                "settings": settings,
            },
        },
        "remoteUser": user,
        "mounts": mounts,
        "containerEnv": container_env,
        "workspaceMount": (
            f"source=${{localWorkspaceFolder}},target=/{WORKSPACE_BASENAME},"
            "type=bind,consistency=delegated"
        ),
        "workspaceFolder": f"/{WORKSPACE_BASENAME}",
        "forwardPorts": list(config.ports),
        "portsAttributes": port_attributes(config.ports),
    }

    if plan.firewall:
        # Capabilities go in front of the container name argument
        run_args[:0] = ["--cap-add=NET_ADMIN", "--cap-add=NET_RAW"]
        manifest["postCreateCommand"] = f"sudo {FIREWALL_SCRIPT_PATH}"

    if plan.mount_credentials:
        config_dir = f"{plan.home}/{ASSISTANT_CONFIG_DIR_NAME}"
        mounts.append(
            f"source=${{localEnv:HOME}}/{ASSISTANT_CONFIG_DIR_NAME},target={config_dir},type=bind"
        )
        mounts.append(
            f"source=${{localEnv:HOME}}/{ASSISTANT_CONFIG_FILE_NAME},"
            f"target={plan.home}/{ASSISTANT_CONFIG_FILE_NAME},type=bind"
        )
        container_env[ASSISTANT_CONFIG_ENV] = config_dir

    if plan.is_node:
        container_env["NODE_OPTIONS"] = MEMORY_LIMIT_NODE_OPTIONS
        settings["editor.defaultFormatter"] = NODE_FORMATTER
        settings["editor.codeActionsOnSave"] = {"source.fixAll.eslint": "explicit"}
    else:
        settings["python.defaultInterpreterPath"] = PYTHON_INTERPRETER_PATH
        settings["editor.defaultFormatter"] = PYTHON_FORMATTER

    return manifest


def render_devcontainer_json(manifest: Dict[str, Any]) -> str:
    """Serialize a manifest the way it is written to disk."""
    return json.dumps(manifest, indent=2) + "\n"
