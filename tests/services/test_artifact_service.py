"""Tests for the artifact service."""

import os
from unittest.mock import patch

import pytest

from devcontainer_init.services.artifact_service import ArtifactService
from devcontainer_init.services.exceptions import (
    ArtifactWriteError,
    DevcontainerExistsError,
    GeneratorError,
)


class TestArtifactService:
    """Test suite for ArtifactService."""

    def test_initialization(self, temp_project_dir):
        service = ArtifactService(temp_project_dir)

        assert service.target_dir == temp_project_dir
        assert service.devcontainer_dir == temp_project_dir / ".devcontainer"
        assert service.devcontainer_exists() is False

    def test_write_all(self, temp_project_dir):
        service = ArtifactService(temp_project_dir)

        written = service.write_all({"Dockerfile": "FROM node:20\n", "devcontainer.json": "{}\n"})

        assert [path.name for path in written] == ["Dockerfile", "devcontainer.json"]
        assert (service.devcontainer_dir / "Dockerfile").read_text() == "FROM node:20\n"
        assert service.devcontainer_exists() is True

    def test_firewall_script_is_executable(self, temp_project_dir):
        service = ArtifactService(temp_project_dir)

        path, = service.write_all({"init-firewall.sh": "#!/bin/bash\n"})

        assert os.access(path, os.X_OK)

    def test_existing_directory_requires_force(self, temp_project_dir):
        service = ArtifactService(temp_project_dir)
        service.devcontainer_dir.mkdir()

        with pytest.raises(DevcontainerExistsError, match="--force"):
            service.write_all({"Dockerfile": "FROM node:20\n"})

    def test_force_keeps_unrelated_files(self, temp_project_dir):
        """Test force overwrites generated files but deletes nothing."""
        service = ArtifactService(temp_project_dir)
        service.devcontainer_dir.mkdir()
        (service.devcontainer_dir / "Dockerfile").write_text("old")
        (service.devcontainer_dir / "notes.md").write_text("keep me")

        service.write_all({"Dockerfile": "new"}, force=True)

        assert (service.devcontainer_dir / "Dockerfile").read_text() == "new"
        assert (service.devcontainer_dir / "notes.md").read_text() == "keep me"

    def test_force_removes_artifacts_no_longer_generated(self, temp_project_dir):
        """Test a firewall script from an earlier run is removed."""
        service = ArtifactService(temp_project_dir)
        service.write_all({"Dockerfile": "old", "init-firewall.sh": "#!/bin/bash\n"})
        (service.devcontainer_dir / "notes.md").write_text("keep me")

        service.write_all({"Dockerfile": "new"}, force=True)

        assert not (service.devcontainer_dir / "init-firewall.sh").exists()
        assert (service.devcontainer_dir / "Dockerfile").read_text() == "new"
        assert (service.devcontainer_dir / "notes.md").exists()

    def test_remove_stale_failure(self, temp_project_dir):
        service = ArtifactService(temp_project_dir)
        service.write_all({"init-firewall.sh": "#!/bin/bash\n"})

        with patch('pathlib.Path.unlink', side_effect=PermissionError("denied")):
            with pytest.raises(ArtifactWriteError, match="Failed to remove"):
                service.remove_stale({"Dockerfile"})

    def test_write_failure(self, temp_project_dir):
        service = ArtifactService(temp_project_dir)
        service.prepare()

        with patch('pathlib.Path.write_text', side_effect=PermissionError("denied")):
            with pytest.raises(ArtifactWriteError, match="Failed to write"):
                service.write_artifact("Dockerfile", "FROM node:20\n")

    def test_prepare_failure(self, temp_project_dir):
        service = ArtifactService(temp_project_dir)

        with patch('pathlib.Path.mkdir', side_effect=OSError("read-only file system")):
            with pytest.raises(ArtifactWriteError, match="Failed to create"):
                service.prepare()

    def test_errors_share_base_class(self):
        assert issubclass(DevcontainerExistsError, ArtifactWriteError)
        assert issubclass(ArtifactWriteError, GeneratorError)
