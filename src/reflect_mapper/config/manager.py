"""
Configuration Manager for Reflect Mapper.

Loads mapping defaults, JSON encoder options and logging settings from an
optional YAML file, applies an environment overlay file and then environment
variable overrides.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigurationError
from .settings import JSONOptions, LoggingConfig, MappingConfig

if TYPE_CHECKING:
    from ..core.mapper import ReflectiveMapper

_TRUE_VALUES = ("true", "1", "yes", "on")


class ConfigManager:
    """
    Manages YAML-configurable settings for Reflect Mapper.

    Precedence: defaults -> config file -> environment overlay -> env vars.
    """

    ENV_MAPPINGS = {
        "REFLECT_MAPPER_ENVIRONMENT": (None, "environment"),
        "REFLECT_MAPPER_INCLUDE_NULL": ("mapping", "include_null"),
        "REFLECT_MAPPER_MAX_NESTING": ("mapping", "max_nesting"),
        "REFLECT_MAPPER_JSON_INDENT": ("json", "indent"),
        "REFLECT_MAPPER_JSON_SORT_KEYS": ("json", "sort_keys"),
        "REFLECT_MAPPER_JSON_ENSURE_ASCII": ("json", "ensure_ascii"),
        "REFLECT_MAPPER_LOG_LEVEL": ("logging", "level"),
        "REFLECT_MAPPER_LOG_FORMAT": ("logging", "format"),
        "REFLECT_MAPPER_LOG_REDACT_VALUES": ("logging", "redact_values"),
    }

    INT_KEYS = {"max_nesting", "indent"}
    BOOL_KEYS = {"include_null", "sort_keys", "ensure_ascii", "redact_values"}

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        environment: Optional[str] = None,
    ):
        """
        Initialize ConfigManager.

        Args:
            config_path: Path to YAML configuration file. If None, uses default locations.
            environment: Optional environment name selecting an overlay file
                from ``environments/<name>.yaml`` beside the config file
        """
        self.config_path = self._resolve_config_path(config_path)
        self._requested_environment = environment
        self._config_data: Dict[str, Any] = {}
        self._load_config()

    def _resolve_config_path(self, config_path: Optional[Union[str, Path]]) -> Path:
        """Resolve configuration file path."""
        if config_path:
            return Path(config_path)

        env_path = os.getenv("REFLECT_MAPPER_CONFIG_PATH")
        if env_path:
            return Path(env_path)

        default_paths = [
            Path("reflect_mapper.yaml"),
            Path("config/reflect_mapper.yaml"),
        ]
        for path in default_paths:
            if path.exists():
                return path

        return Path("reflect_mapper.yaml")

    def _load_config(self) -> None:
        """Load configuration from YAML file, overlays and environment."""
        self._config_data = self._read_yaml(self.config_path)
        self._apply_environment_overrides()
        self._apply_env_overrides()
        self._initialize_config_sections()

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML configuration: {e}", config_path=str(path)
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration root must be a mapping", config_path=str(path)
            )
        return data

    def _initialize_config_sections(self) -> None:
        """Initialize configuration sections from loaded data."""
        try:
            self.mapping = MappingConfig(**self._section("mapping"))
            self.json = JSONOptions(**self._section("json"))
            self.logging = LoggingConfig(**self._section("logging"))
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration values: {e}", config_path=str(self.config_path)
            ) from e

    def _section(self, name: str) -> Dict[str, Any]:
        section = self._config_data.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(
                f"Configuration section '{name}' must be a mapping",
                config_path=str(self.config_path),
            )
        return section

    @property
    def environment(self) -> str:
        """Name of the active environment."""
        return str(self._config_data.get("environment", "development"))

    def _apply_environment_overrides(self) -> None:
        """Deep-merge ``environments/<env>.yaml`` if present."""
        env_name = (
            self._requested_environment
            or os.getenv("REFLECT_MAPPER_ENVIRONMENT")
            or self._config_data.get("environment")
            or "development"
        )
        self._config_data["environment"] = env_name

        env_file = self.config_path.parent / "environments" / f"{env_name}.yaml"
        self._deep_update(self._config_data, self._read_yaml(env_file))

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides to configuration."""
        for env_var, (section, key) in self.ENV_MAPPINGS.items():
            value_str = os.getenv(env_var)
            if value_str is None:
                continue

            if section is None:
                self._config_data[key] = value_str
                continue

            converted_value: Any = value_str
            if key in self.INT_KEYS:
                try:
                    converted_value = int(value_str)
                except ValueError as e:
                    raise ConfigurationError(
                        f"{env_var} must be an integer, got {value_str!r}"
                    ) from e
            elif key in self.BOOL_KEYS:
                converted_value = value_str.lower() in _TRUE_VALUES
            elif key == "level":
                converted_value = value_str.upper()

            section_data = self._config_data.get(section)
            if section_data is None:
                section_data = self._config_data[section] = {}
            elif not isinstance(section_data, dict):
                # Reported by _initialize_config_sections.
                continue
            section_data[key] = converted_value

    def get_config_dict(self) -> Dict[str, Any]:
        """Get the full configuration as a dictionary."""
        return {
            "environment": self.environment,
            "mapping": self.mapping.model_dump(),
            "json": self.json.model_dump(),
            "logging": self.logging.model_dump(),
        }

    def save_config(self, path: Optional[Union[str, Path]] = None) -> Path:
        """Save current configuration to YAML file."""
        save_path = Path(path) if path else self.config_path
        save_path.parent.mkdir(parents=True, exist_ok=True)

        with open(save_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.get_config_dict(), f, default_flow_style=False, indent=2)
        return save_path

    def reload_config(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def create_mapper(self) -> "ReflectiveMapper":
        """Build a mapper using the configured read-path defaults."""
        from ..core.mapper import ReflectiveMapper

        return ReflectiveMapper(self.mapping)

    @staticmethod
    def _deep_update(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep-merge override into base and return the merged dict."""
        for k, v in (override or {}).items():
            if k in base and isinstance(base[k], dict) and isinstance(v, dict):
                ConfigManager._deep_update(base[k], v)
            else:
                base[k] = v
        return base

    def __repr__(self) -> str:
        """String representation of ConfigManager."""
        return f"ConfigManager(config_path={self.config_path})"
