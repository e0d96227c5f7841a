"""Mixin giving any class the mapping capability."""

from typing import Any, Dict, Mapping, Type, TypeVar

from .introspection import SupportsMapping
from .mapper import ReflectiveMapper

M = TypeVar("M", bound="Mappable")

_mapper = ReflectiveMapper()


class Mappable:
    """
    Adds ``to_map``/``from_map``/``to_json``/``from_json`` to a class.

    Subclasses only declare their data members (annotations, ``__slots__`` or
    attributes set in ``__init__``) and, optionally, ``get``/``is``/``has``/``set``
    accessor methods. ``__init__`` must be callable without arguments for
    ``from_map`` to work.

    Example:
        class Person(Mappable):
            name: Optional[str] = None
            age: Optional[int] = None

        Person.from_map({"name": "Ann", "age": 30}).to_json()
        # '{"name":"Ann","age":30}'
    """

    def to_map(self, include_null: bool = False, max_nesting: int = 3) -> Dict[str, Any]:
        """Represent the object as an ordered key-value structure."""
        return _mapper.to_map(self, include_null, max_nesting)

    @classmethod
    def from_map(cls: Type[M], data: Mapping[str, Any]) -> M:
        """Create a new instance from a key-value structure."""
        return _mapper.from_map(cls, data)

    def to_json(self, include_null: bool = False, **options: Any) -> str:
        """Represent the object as JSON text; ``options`` go to ``json.dumps``."""
        return _mapper.to_json(self, include_null, **options)

    @classmethod
    def from_json(cls: Type[M], text: str) -> M:
        """Create a new instance from JSON text."""
        return _mapper.from_json(cls, text)

    def set_property_value(self, name: str, value: Any) -> None:
        """Set a single property through its setter or public field."""
        _mapper.set_property_value(self, name, value)


__all__ = ["Mappable", "SupportsMapping"]
