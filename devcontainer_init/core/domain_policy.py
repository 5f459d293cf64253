"""Egress allow-list policy.

The firewall only lets traffic out to the addresses of a short list of
domains. The list is assembled from independent policy groups, each guarded
by one configuration axis:

- source hosting: always allowed
- package registry: npm for the node runtimes, PyPI for python
- assistant: the assistant vendor's API and telemetry endpoints, whenever the
  assistant CLI is installed (``local`` and ``fresh`` alike)
"""

from typing import List, Tuple

from .constants import (
    ASSISTANT_DOMAINS,
    NODE_REGISTRY_DOMAINS,
    PYTHON_REGISTRY_DOMAINS,
    SOURCE_HOSTING_DOMAINS,
)
from ..models.config import AssistantMode, DevcontainerConfig, Runtime


def domain_policy(config: DevcontainerConfig) -> List[Tuple[str, List[str]]]:
    """Return the applicable policy groups as ``(group, domains)`` pairs."""
    groups = [("source hosting", list(SOURCE_HOSTING_DOMAINS))]

    if config.runtime.is_node:
        groups.append(("npm registry", list(NODE_REGISTRY_DOMAINS)))
    elif config.runtime == Runtime.PYTHON:
        groups.append(("python package index", list(PYTHON_REGISTRY_DOMAINS)))

    if config.assistant_mode != AssistantMode.NONE:
        groups.append(("assistant", list(ASSISTANT_DOMAINS)))

    return groups


def resolve_domains(config: DevcontainerConfig) -> List[str]:
    """Resolve the ordered list of domains the firewall allows."""
    domains = []
    for _, group in domain_policy(config):
        for domain in group:
            if domain not in domains:
                domains.append(domain)
    return domains
