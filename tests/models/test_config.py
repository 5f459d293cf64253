"""Tests for config models."""

import pytest
from pydantic import ValidationError

from devcontainer_init.models.config import AssistantMode, DevcontainerConfig, Runtime


class TestDevcontainerConfig:
    """Test suite for the configuration model."""

    def test_defaults(self):
        """Test optional fields fall back to their defaults."""
        config = DevcontainerConfig(runtime="python", runtime_version="3.12")

        assert config.timezone == "Europe/Paris"
        assert config.ports == ()
        assert config.enable_firewall is False
        assert config.assistant_mode == AssistantMode.NONE
        assert config.extensions == ()

    def test_accepts_camel_case_keys(self):
        """Test the camelCase keys used in config files."""
        config = DevcontainerConfig.model_validate({
            "runtime": "node-bun",
            "runtimeVersion": "22",
            "enableFirewall": True,
            "claudeMode": "fresh",
            "ports": [3000, 5432],
        })

        assert config.runtime == Runtime.NODE_BUN
        assert config.runtime_version == "22"
        assert config.enable_firewall is True
        assert config.assistant_mode == AssistantMode.FRESH
        assert config.ports == (3000, 5432)

    def test_assistant_mode_alias(self):
        """Test assistantMode is accepted as well as claudeMode."""
        config = DevcontainerConfig.model_validate({
            "runtime": "python",
            "runtimeVersion": "3.11",
            "assistantMode": "local",
        })
        assert config.assistant_mode == AssistantMode.LOCAL

    def test_duplicate_ports_are_kept(self):
        """Test duplicate ports are passed through unchanged."""
        config = DevcontainerConfig(runtime="python", runtime_version="3.12", ports=[8000, 8000])
        assert config.ports == (8000, 8000)

    @pytest.mark.parametrize("changes", [
        {"runtime": "ruby"},
        {"runtime_version": ""},
        {"ports": [0]},
        {"ports": [-80]},
        {"assistant_mode": "remote"},
        {"timezone": ""},
        {"enable_firwall": True},
        {"ports": [True]},
        {"ports": ["3000"]},
    ])
    def test_invalid_values_rejected(self, changes):
        """Test invalid states cannot be represented."""
        data = {"runtime": "node-pnpm", "runtime_version": "20"}
        data.update(changes)
        with pytest.raises(ValidationError):
            DevcontainerConfig(**data)

    def test_config_is_frozen(self, node_config):
        """Test a configuration cannot be changed after validation."""
        with pytest.raises(ValidationError):
            node_config.runtime_version = "22"

    def test_dump_by_alias(self, node_config):
        """Test serialization uses the camelCase keys."""
        data = node_config.model_dump(mode="json", by_alias=True)
        assert data == {
            "runtime": "node-pnpm",
            "runtimeVersion": "20",
            "timezone": "Europe/Paris",
            "ports": [3000],
            "enableFirewall": False,
            "assistantMode": "none",
            "extensions": ["dbaeumer.vscode-eslint"],
        }


class TestRuntime:
    """Test suite for the runtime enum."""

    @pytest.mark.parametrize("runtime,expected", [
        (Runtime.NODE_PNPM, True),
        (Runtime.NODE_BUN, True),
        (Runtime.PYTHON, False),
    ])
    def test_is_node(self, runtime, expected):
        assert runtime.is_node is expected
