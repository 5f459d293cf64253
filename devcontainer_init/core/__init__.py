"""Core functionality for devcontainer-init."""

from .devcontainer_json import generate_devcontainer_json, render_devcontainer_json
from .dockerfile_template import generate_dockerfile
from .domain_policy import resolve_domains
from .firewall_script import generate_firewall_script
from .plan import GenerationPlan, plan_generation

__all__ = [
    'GenerationPlan',
    'generate_devcontainer_json',
    'generate_dockerfile',
    'generate_firewall_script',
    'plan_generation',
    'render_devcontainer_json',
    'resolve_domains'
]
