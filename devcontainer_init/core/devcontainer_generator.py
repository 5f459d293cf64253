"""Devcontainer generation logic."""

import logging
from pathlib import Path
from typing import Dict, List

from .constants import DEVCONTAINER_JSON_NAME, DOCKERFILE_NAME, FIREWALL_SCRIPT_NAME
from .devcontainer_json import generate_devcontainer_json, render_devcontainer_json
from .dockerfile_template import generate_dockerfile
from .firewall_script import generate_firewall_script
from .plan import plan_generation
from ..models.config import DevcontainerConfig
from ..services.artifact_service import ArtifactService

logger = logging.getLogger(__name__)


class DevcontainerGenerator:
    """Generates the .devcontainer artifacts for a project."""

    def __init__(self, project_root: Path):
        """Initialize generator."""
        self.project_root = Path(project_root)
        self.artifact_service = ArtifactService(self.project_root)

    @property
    def devcontainer_dir(self) -> Path:
        return self.artifact_service.devcontainer_dir

    def generate(self, config: DevcontainerConfig) -> Dict[str, str]:
        """Render every artifact the configuration asks for, keyed by file name."""
        plan = plan_generation(config)
        logger.debug(
            f"Plan: image={plan.runtime.base_image} user={plan.user} "
            f"domains={', '.join(plan.domains)}"
        )

        artifacts = {
            DEVCONTAINER_JSON_NAME: render_devcontainer_json(generate_devcontainer_json(plan)),
            DOCKERFILE_NAME: generate_dockerfile(plan),
        }
        if plan.firewall:
            artifacts[FIREWALL_SCRIPT_NAME] = generate_firewall_script(plan)
        return artifacts

    def write(self, config: DevcontainerConfig, force: bool = False) -> List[Path]:
        """Generate the artifacts and write them into the project's .devcontainer."""
        artifacts = self.generate(config)
        return self.artifact_service.write_all(artifacts, force=force)
