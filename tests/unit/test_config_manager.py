"""Tests for ConfigManager implementation."""

from pathlib import Path

import pytest
import yaml

from reflect_mapper.config import ConfigManager, JSONOptions
from reflect_mapper.exceptions import ConfigurationError
from tests.unit.sample_models import Person


def _write(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)
    return path


class TestConfigManager:
    """Test cases for ConfigManager."""

    def test_defaults_without_config_file(self, tmp_path):
        """Test that a missing config file means defaults and no file is written."""
        config_path = tmp_path / "reflect_mapper.yaml"

        config_manager = ConfigManager(config_path=config_path)

        assert not config_path.exists()
        assert config_manager.mapping.include_null is False
        assert config_manager.mapping.max_nesting == 3
        assert config_manager.json.indent is None
        assert config_manager.logging.level == "INFO"
        assert config_manager.environment == "development"

    def test_config_loading_from_file(self, tmp_path):
        """Test loading configuration from an existing YAML file."""
        config_path = _write(
            tmp_path / "reflect_mapper.yaml",
            {
                "mapping": {"include_null": True, "max_nesting": 5},
                "json": {"indent": 2, "sort_keys": True},
                "logging": {"level": "DEBUG", "format": "json"},
            },
        )

        config_manager = ConfigManager(config_path=config_path)

        assert config_manager.mapping.include_null is True
        assert config_manager.mapping.max_nesting == 5
        assert config_manager.json.as_kwargs() == {
            "indent": 2,
            "sort_keys": True,
            "ensure_ascii": True,
        }
        assert config_manager.logging.format == "json"

    def test_environment_variable_overrides(self, tmp_path, monkeypatch):
        """Test that environment variables override config values."""
        config_path = _write(
            tmp_path / "reflect_mapper.yaml", {"mapping": {"max_nesting": 5}}
        )
        monkeypatch.setenv("REFLECT_MAPPER_MAX_NESTING", "1")
        monkeypatch.setenv("REFLECT_MAPPER_INCLUDE_NULL", "yes")
        monkeypatch.setenv("REFLECT_MAPPER_JSON_INDENT", "4")
        monkeypatch.setenv("REFLECT_MAPPER_LOG_LEVEL", "debug")

        config_manager = ConfigManager(config_path=config_path)

        assert config_manager.mapping.max_nesting == 1
        assert config_manager.mapping.include_null is True
        assert config_manager.json.indent == 4
        assert config_manager.logging.level == "DEBUG"

    def test_config_path_from_environment(self, tmp_path, monkeypatch):
        """Test that REFLECT_MAPPER_CONFIG_PATH locates the config file."""
        config_path = _write(tmp_path / "custom.yaml", {"mapping": {"max_nesting": 9}})
        monkeypatch.setenv("REFLECT_MAPPER_CONFIG_PATH", str(config_path))

        config_manager = ConfigManager()

        assert config_manager.config_path == config_path
        assert config_manager.mapping.max_nesting == 9

    def test_environment_overlay(self, tmp_path):
        """Test that environments/<name>.yaml is merged over the base file."""
        config_path = _write(
            tmp_path / "reflect_mapper.yaml",
            {"mapping": {"include_null": True, "max_nesting": 2}},
        )
        _write(tmp_path / "environments" / "staging.yaml", {"mapping": {"max_nesting": 7}})

        config_manager = ConfigManager(config_path=config_path, environment="staging")

        assert config_manager.environment == "staging"
        assert config_manager.mapping.max_nesting == 7
        assert config_manager.mapping.include_null is True

    def test_invalid_values_are_rejected(self, tmp_path):
        """Test that out-of-range values raise ConfigurationError."""
        config_path = _write(
            tmp_path / "reflect_mapper.yaml", {"mapping": {"max_nesting": -1}}
        )

        with pytest.raises(ConfigurationError):
            ConfigManager(config_path=config_path)

    def test_invalid_yaml_is_rejected(self, tmp_path):
        """Test that unparsable YAML raises ConfigurationError."""
        config_path = tmp_path / "reflect_mapper.yaml"
        config_path.write_text("mapping: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(config_path=config_path)

        assert exc_info.value.details["config_path"] == str(config_path)

    def test_non_mapping_root_is_rejected(self, tmp_path):
        """Test that a YAML list at the root raises ConfigurationError."""
        config_path = _write(tmp_path / "reflect_mapper.yaml", [1, 2])

        with pytest.raises(ConfigurationError):
            ConfigManager(config_path=config_path)

    def test_empty_section_uses_defaults(self, tmp_path, monkeypatch):
        """Test that a section with no entries falls back to defaults."""
        config_path = tmp_path / "reflect_mapper.yaml"
        config_path.write_text("mapping:\njson:\n", encoding="utf-8")
        monkeypatch.setenv("REFLECT_MAPPER_JSON_SORT_KEYS", "true")

        config_manager = ConfigManager(config_path=config_path)

        assert config_manager.mapping.max_nesting == 3
        assert config_manager.json.sort_keys is True

    @pytest.mark.parametrize("content", ["json: 5\n", "logging: [console]\n"])
    def test_non_mapping_section_is_rejected(self, tmp_path, monkeypatch, content):
        """Test that a section which is not a mapping raises ConfigurationError."""
        config_path = tmp_path / "reflect_mapper.yaml"
        config_path.write_text(content, encoding="utf-8")
        monkeypatch.setenv("REFLECT_MAPPER_JSON_INDENT", "2")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(config_path=config_path)

        assert "must be a mapping" in exc_info.value.message

    def test_redact_values_env_override(self, tmp_path, monkeypatch):
        """Test that value redaction can be switched off from the environment."""
        monkeypatch.setenv("REFLECT_MAPPER_LOG_REDACT_VALUES", "false")

        config_manager = ConfigManager(config_path=tmp_path / "reflect_mapper.yaml")

        assert config_manager.logging.redact_values is False

    def test_invalid_integer_env_override(self, tmp_path, monkeypatch):
        """Test that a non-numeric nesting override raises ConfigurationError."""
        monkeypatch.setenv("REFLECT_MAPPER_MAX_NESTING", "deep")

        with pytest.raises(ConfigurationError):
            ConfigManager(config_path=tmp_path / "reflect_mapper.yaml")

    def test_config_save_and_reload(self, tmp_path):
        """Test that saved configuration loads back identically."""
        config_path = _write(
            tmp_path / "reflect_mapper.yaml", {"mapping": {"max_nesting": 4}}
        )
        config_manager = ConfigManager(config_path=config_path)
        saved_path = config_manager.save_config(tmp_path / "copy" / "saved.yaml")

        reloaded = ConfigManager(config_path=saved_path)

        assert reloaded.get_config_dict() == config_manager.get_config_dict()

    def test_reload_config_picks_up_changes(self, tmp_path):
        """Test that reload_config re-reads the file."""
        config_path = _write(
            tmp_path / "reflect_mapper.yaml", {"mapping": {"max_nesting": 4}}
        )
        config_manager = ConfigManager(config_path=config_path)
        _write(config_path, {"mapping": {"max_nesting": 6}})

        config_manager.reload_config()

        assert config_manager.mapping.max_nesting == 6

    def test_create_mapper_uses_mapping_defaults(self, tmp_path):
        """Test that the created mapper applies the configured defaults."""
        config_path = _write(
            tmp_path / "reflect_mapper.yaml", {"mapping": {"include_null": True}}
        )
        mapper = ConfigManager(config_path=config_path).create_mapper()
        person = Person()
        person.name = "Ann"

        assert mapper.to_map(person) == {"name": "Ann", "age": None}


class TestJSONOptions:
    """Test cases for JSONOptions."""

    def test_unset_indent_is_left_out(self):
        """Test that compact output is kept when no indent is configured."""
        assert JSONOptions().as_kwargs() == {"sort_keys": False, "ensure_ascii": True}
