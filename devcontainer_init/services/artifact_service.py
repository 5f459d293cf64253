"""Artifact service for writing generated files to disk."""

import logging
from pathlib import Path
from typing import Dict, List

from ..core.constants import (
    DEVCONTAINER_DIR_NAME,
    DEVCONTAINER_JSON_NAME,
    DOCKERFILE_NAME,
    FIREWALL_SCRIPT_NAME,
)
from .exceptions import ArtifactWriteError, DevcontainerExistsError

logger = logging.getLogger(__name__)

GENERATED_ARTIFACTS = (DEVCONTAINER_JSON_NAME, DOCKERFILE_NAME, FIREWALL_SCRIPT_NAME)
EXECUTABLE_ARTIFACTS = {FIREWALL_SCRIPT_NAME}


class ArtifactService:
    """Service for writing devcontainer artifacts into a project."""

    def __init__(self, target_dir: Path):
        """Initialize artifact service.

        Args:
            target_dir: Project directory that receives the .devcontainer folder
        """
        self.target_dir = Path(target_dir)
        self.devcontainer_dir = self.target_dir / DEVCONTAINER_DIR_NAME

    def devcontainer_exists(self) -> bool:
        """Check if the project already has a .devcontainer directory."""
        return self.devcontainer_dir.exists()

    def prepare(self, force: bool = False) -> None:
        """Create the .devcontainer directory.

        Args:
            force: Write into an existing .devcontainer directory

        Raises:
            DevcontainerExistsError: If the directory exists and force=False
            ArtifactWriteError: If the directory cannot be created
        """
        if self.devcontainer_exists():
            if not force:
                raise DevcontainerExistsError(
                    f"{self.devcontainer_dir} already exists. Use --force to overwrite it."
                )
            logger.info(f"Overwriting artifacts in {self.devcontainer_dir}")

        try:
            self.devcontainer_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ArtifactWriteError(f"Failed to create {self.devcontainer_dir}: {e}") from e

    def write_artifact(self, name: str, content: str) -> Path:
        """Write one artifact into the .devcontainer directory.

        Args:
            name: File name of the artifact
            content: Text content

        Returns:
            Path of the written file

        Raises:
            ArtifactWriteError: If the file cannot be written
        """
        path = self.devcontainer_dir / name
        try:
            path.write_text(content)
            if name in EXECUTABLE_ARTIFACTS:
                path.chmod(0o755)
        except OSError as e:
            raise ArtifactWriteError(f"Failed to write {path}: {e}") from e

        logger.info(f"Wrote {path}")
        return path

    def remove_stale(self, keep) -> List[Path]:
        """Delete generated artifacts left over from an earlier run.

        Only file names this tool generates are considered; anything else in
        the .devcontainer directory is left alone.

        Args:
            keep: Names of the artifacts produced by the current run

        Returns:
            Paths of the removed files

        Raises:
            ArtifactWriteError: If a file cannot be removed
        """
        removed = []
        for name in GENERATED_ARTIFACTS:
            path = self.devcontainer_dir / name
            if name in keep or not path.exists():
                continue
            try:
                path.unlink()
            except OSError as e:
                raise ArtifactWriteError(f"Failed to remove {path}: {e}") from e
            logger.info(f"Removed stale {path}")
            removed.append(path)
        return removed

    def write_all(self, artifacts: Dict[str, str], force: bool = False) -> List[Path]:
        """Write every artifact, creating the .devcontainer directory first.

        Args:
            artifacts: Mapping of file name to content
            force: Write into an existing .devcontainer directory

        Returns:
            Paths of the written files, in the order given
        """
        self.prepare(force=force)
        self.remove_stale(artifacts)
        return [self.write_artifact(name, content) for name, content in artifacts.items()]
