import pytest
from click.testing import CliRunner
import tempfile
from pathlib import Path

from devcontainer_init.models.config import AssistantMode, DevcontainerConfig, Runtime


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def temp_project_dir():
    """Creates an empty temporary project directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def node_config():
    """Provides a minimal node-pnpm configuration."""
    return DevcontainerConfig(
        runtime=Runtime.NODE_PNPM,
        runtime_version="20",
        timezone="Europe/Paris",
        ports=[3000],
        enable_firewall=False,
        assistant_mode=AssistantMode.NONE,
        extensions=["dbaeumer.vscode-eslint"],
    )


@pytest.fixture
def python_config():
    """Provides a minimal python configuration."""
    return DevcontainerConfig(
        runtime=Runtime.PYTHON,
        runtime_version="3.12",
        timezone="Europe/Paris",
        ports=[8000],
        enable_firewall=False,
        assistant_mode=AssistantMode.NONE,
        extensions=[],
    )


@pytest.fixture
def make_config(node_config):
    """Provides a factory deriving configurations from the node baseline."""
    def _make(**changes):
        data = node_config.model_dump()
        data.update(changes)
        return DevcontainerConfig(**data)
    return _make


@pytest.fixture
def isolated_cli_runner(cli_runner):
    """Provides a CLI runner with isolated filesystem."""
    with cli_runner.isolated_filesystem():
        yield cli_runner
