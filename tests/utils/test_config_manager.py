import json

import pytest
import yaml

from devcontainer_init.models.config import AssistantMode, Runtime
from devcontainer_init.services.exceptions import ConfigError
from devcontainer_init.utils.config_manager import ConfigManager


class TestConfigManager:
    """Smoke tests for ConfigManager functionality."""

    def test_config_manager_initialization(self, temp_project_dir):
        """Test ConfigManager initialization."""
        config_file = temp_project_dir / "devcontainer.yaml"
        manager = ConfigManager(config_file)

        assert manager.config_file == config_file
        assert manager.is_yaml is True
        assert ConfigManager(temp_project_dir / "devcontainer.json").is_yaml is False

    def test_load_json_config(self, temp_project_dir):
        """Test loading a JSON file with camelCase keys."""
        config_file = temp_project_dir / "devcontainer.json"
        config_file.write_text(json.dumps({
            "runtime": "python",
            "runtimeVersion": "3.11",
            "ports": [8000, 5432],
            "enableFirewall": True,
            "claudeMode": "local",
        }))

        config = ConfigManager(config_file).load_config()

        assert config.runtime == Runtime.PYTHON
        assert config.runtime_version == "3.11"
        assert config.ports == (8000, 5432)
        assert config.enable_firewall is True
        assert config.assistant_mode == AssistantMode.LOCAL

    def test_load_yaml_config(self, temp_project_dir):
        """Test loading a YAML file."""
        config_file = temp_project_dir / "devcontainer.yml"
        config_file.write_text(
            "runtime: node-bun\n"
            "runtimeVersion: '22'\n"
            "timezone: UTC\n"
            "extensions:\n"
            "  - esbenp.prettier-vscode\n"
        )

        config = ConfigManager(config_file).load_config()

        assert config.runtime == Runtime.NODE_BUN
        assert config.runtime_version == "22"
        assert config.timezone == "UTC"
        assert config.extensions == ("esbenp.prettier-vscode",)

    def test_save_and_load_json(self, temp_project_dir, node_config):
        """Test a saved JSON config loads back unchanged."""
        config_file = temp_project_dir / "configs" / "devcontainer.json"
        manager = ConfigManager(config_file)

        manager.save_config(node_config)

        data = json.loads(config_file.read_text())
        assert data["runtimeVersion"] == "20"
        assert data["assistantMode"] == "none"
        assert manager.load_config() == node_config

    def test_save_and_load_yaml(self, temp_project_dir, python_config):
        """Test a saved YAML config keeps its key order and loads back."""
        config_file = temp_project_dir / "devcontainer.yaml"
        manager = ConfigManager(config_file)

        manager.save_config(python_config)

        data = yaml.safe_load(config_file.read_text())
        assert list(data) == [
            "runtime", "runtimeVersion", "timezone", "ports",
            "enableFirewall", "assistantMode", "extensions",
        ]
        assert manager.load_config() == python_config

    def test_missing_file(self, temp_project_dir):
        """Test a missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            ConfigManager(temp_project_dir / "missing.json").load_config()

    def test_corrupted_json(self, temp_project_dir):
        """Test unparseable JSON raises ConfigError."""
        config_file = temp_project_dir / "devcontainer.json"
        config_file.write_text("not valid json")

        with pytest.raises(ConfigError, match="Could not read"):
            ConfigManager(config_file).load_config()

    def test_non_mapping_yaml(self, temp_project_dir):
        """Test a YAML list is rejected."""
        config_file = temp_project_dir / "devcontainer.yaml"
        config_file.write_text("- node-pnpm\n- '20'\n")

        with pytest.raises(ConfigError, match="mapping"):
            ConfigManager(config_file).load_config()

    def test_invalid_values(self, temp_project_dir):
        """Test validation errors are reported as ConfigError."""
        config_file = temp_project_dir / "devcontainer.json"
        config_file.write_text(json.dumps({"runtime": "ruby", "runtimeVersion": "3"}))

        with pytest.raises(ConfigError, match="Invalid configuration"):
            ConfigManager(config_file).load_config()

    def test_misspelled_key(self, temp_project_dir):
        """Test a misspelled setting is rejected instead of ignored."""
        config_file = temp_project_dir / "devcontainer.yaml"
        config_file.write_text("runtime: node-pnpm\nruntimeVersion: '20'\nenable_firwall: true\n")

        with pytest.raises(ConfigError, match="enable_firwall"):
            ConfigManager(config_file).load_config()
