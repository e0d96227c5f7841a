"""
Reflect Mapper: reflective object <-> dict <-> JSON conversion.

Classes gain ``to_map``/``from_map``/``to_json``/``from_json`` by inheriting
from :class:`Mappable`, or can be converted by a :class:`ReflectiveMapper`
without any cooperation from the class.
"""

__version__ = "0.1.0"

from .config import ConfigManager, JSONOptions, MappingConfig
from .core import Mappable, ReflectiveMapper, SupportsMapping, enumerate_properties
from .exceptions import (
    ConfigurationError,
    InvalidStructureError,
    MapperError,
    NotWritableError,
)
from .logging import get_logger, setup_logging

__all__ = [
    "ConfigManager",
    "ConfigurationError",
    "InvalidStructureError",
    "JSONOptions",
    "Mappable",
    "MapperError",
    "MappingConfig",
    "NotWritableError",
    "ReflectiveMapper",
    "SupportsMapping",
    "enumerate_properties",
    "get_logger",
    "setup_logging",
]
