"""Configuration management for Reflect Mapper."""

from .manager import ConfigManager
from .settings import JSONOptions, LoggingConfig, MappingConfig

__all__ = ["ConfigManager", "JSONOptions", "LoggingConfig", "MappingConfig"]
