"""
Reflective mapping between objects and key-value structures.

The read path turns an object into an ordered ``dict`` by enumerating its data
members and resolving each one through an accessor method when the type
exposes one. The write path builds a new instance and assigns each entry
through a setter or a public field, converting nested mappings into nested
mappable objects when the declared type allows it.
"""

from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from ..config.settings import MappingConfig
from ..exceptions import InvalidStructureError, NotWritableError
from ..logging import get_logger
from . import codec
from .introspection import (
    PropertyDescriptor,
    enumerate_properties,
    field_type,
    find_accessor,
    is_mappable,
    is_mappable_type,
    is_public_field,
    parameter_type,
    sequence_element_type,
    unwrap_optional,
)
from .naming import READ_PREFIXES, WRITE_PREFIX

T = TypeVar("T")


class ReflectiveMapper:
    """
    Converts arbitrary objects to and from key-value structures and JSON.

    ``include_null`` and ``max_nesting`` arguments left as None fall back to
    the mapper's :class:`MappingConfig`.
    """

    def __init__(self, config: Optional[MappingConfig] = None):
        self.config = config or MappingConfig()
        self.logger = get_logger(__name__)

    def _include_null(self, include_null: Optional[bool]) -> bool:
        return self.config.include_null if include_null is None else include_null

    def _max_nesting(self, max_nesting: Optional[int]) -> int:
        return self.config.max_nesting if max_nesting is None else max_nesting

    # ----- Read path -----
    def get_property_value(
        self,
        obj: Any,
        name: str,
        include_null: Optional[bool] = None,
        max_nesting: Optional[int] = None,
    ) -> Any:
        """
        Resolve the effective value of property ``name`` on ``obj``.

        A public zero-argument ``get``/``is``/``has`` accessor, probed in that
        order, takes precedence over the raw attribute. Mappable results are
        expanded with their own ``to_map`` while the nesting budget lasts,
        except when the result is ``obj`` itself.

        Args:
            obj: Object to read from
            name: Property name
            include_null: Passed on to nested ``to_map`` calls
            max_nesting: Remaining nesting budget

        Returns:
            Raw value, accessor result, nested structure, or None
        """
        include_null = self._include_null(include_null)
        max_nesting = self._max_nesting(max_nesting)

        value = getattr(obj, name, None)

        accessor = find_accessor(obj, READ_PREFIXES, name, arity=0)
        if accessor is not None:
            method_name, method = accessor
            value = method()
            self.logger.debug(
                "Accessor resolved",
                class_name=type(obj).__name__,
                property=name,
                accessor=method_name,
            )

        if is_mappable(value):
            return self._expand(obj, name, value, include_null, max_nesting)

        if isinstance(value, (list, tuple)) and any(is_mappable(item) for item in value):
            if max_nesting <= 0:
                return value
            return [
                self._expand(obj, name, item, include_null, max_nesting)
                if is_mappable(item)
                else item
                for item in value
            ]

        return value

    def _expand(
        self, owner: Any, name: str, value: Any, include_null: bool, max_nesting: int
    ) -> Any:
        if value is owner:
            return value
        if max_nesting <= 0:
            self.logger.debug(
                "Nesting budget exhausted",
                class_name=type(owner).__name__,
                property=name,
            )
            return value

        self.logger.debug(
            "Expanding nested object",
            class_name=type(owner).__name__,
            property=name,
            nested_class=type(value).__name__,
            remaining_budget=max_nesting - 1,
        )
        return value.to_map(include_null, max_nesting - 1)

    def to_map(
        self,
        obj: Any,
        include_null: Optional[bool] = None,
        max_nesting: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Represent ``obj`` as an ordered key-value structure.

        Static members are skipped. Entries whose value resolves to None are
        left out unless ``include_null`` is set.
        """
        include_null = self._include_null(include_null)
        max_nesting = self._max_nesting(max_nesting)

        result: Dict[str, Any] = {}
        for descriptor in enumerate_properties(type(obj), obj):
            if descriptor.static:
                continue

            value = self.get_property_value(obj, descriptor.name, include_null, max_nesting)
            if value is not None or include_null:
                result[descriptor.name] = value

        return result

    def to_json(self, obj: Any, include_null: Optional[bool] = None, **options: Any) -> str:
        """Represent ``obj`` as JSON text; ``options`` go to the encoder."""
        include_null = self._include_null(include_null)
        return codec.encode(self.to_map(obj, include_null), include_null, **options)

    # ----- Write path -----
    def _descriptors(self, obj: Any) -> Dict[str, PropertyDescriptor]:
        return {d.name: d for d in enumerate_properties(type(obj), obj)}

    def is_writable(self, obj: Any, name: Any) -> bool:
        """Whether ``name`` has a public one-argument setter or a public field."""
        if not isinstance(name, str):
            return False
        if find_accessor(obj, (WRITE_PREFIX,), name, arity=1) is not None:
            return True
        return is_public_field(obj, name, self._descriptors(obj))

    def validate_keys(self, obj: Any, data: Mapping[Any, Any]) -> None:
        """
        Check every non-None entry of ``data`` against the writable properties.

        Raises:
            NotWritableError: listing all rejected keys, before anything is assigned
        """
        rejected = [
            str(key)
            for key, value in data.items()
            if value is not None and not self.is_writable(obj, key)
        ]
        if rejected:
            self.logger.warning(
                "Properties not writable",
                class_name=type(obj).__name__,
                property_names=rejected,
            )
            raise NotWritableError(rejected, class_name=type(obj).__name__)

    def set_property_value(self, obj: Any, name: str, value: Any) -> None:
        """
        Assign ``value`` to property ``name`` on ``obj``.

        A public one-argument ``set`` accessor takes precedence over direct
        assignment to a public field. Mappings (and lists of mappings) are
        converted with ``from_map`` when the declared type is mappable.

        Raises:
            NotWritableError: if there is neither a setter nor a public field
        """
        setter = find_accessor(obj, (WRITE_PREFIX,), name, arity=1)
        if setter is not None:
            method_name, method = setter
            method(self._coerce(name, value, parameter_type(method)))
            self.logger.debug(
                "Setter applied",
                class_name=type(obj).__name__,
                property=name,
                accessor=method_name,
            )
            return

        descriptors = self._descriptors(obj)
        if is_public_field(obj, name, descriptors):
            setattr(obj, name, self._coerce(name, value, field_type(obj, name, descriptors)))
            return

        raise NotWritableError([name], class_name=type(obj).__name__)

    def _coerce(self, name: str, value: Any, declared_type: Any) -> Any:
        target = unwrap_optional(declared_type)

        if isinstance(value, Mapping) and is_mappable_type(target):
            self.logger.debug(
                "Converting nested structure", property=name, target=target.__name__
            )
            return target.from_map(value)

        element = sequence_element_type(target)
        if element is not None and isinstance(value, list):
            container, item_type = element
            if is_mappable_type(item_type):
                items: List[Any] = [
                    item_type.from_map(item) if isinstance(item, Mapping) else item
                    for item in value
                ]
                return container(items)

        return value

    def from_map(self, cls: Type[T], data: Any) -> T:
        """
        Build a new ``cls`` instance from a key-value structure.

        ``cls`` is constructed without arguments. Every key is validated before
        any assignment; entries whose value is None are skipped and keep the
        instance default.

        Raises:
            InvalidStructureError: if ``data`` is not a mapping
            NotWritableError: if any key cannot be written
        """
        if not isinstance(data, Mapping):
            raise InvalidStructureError(
                f"{cls.__name__} can only be built from a key-value structure",
                received_type=type(data).__name__,
            )

        instance = cls()
        self.validate_keys(instance, data)

        for key, value in data.items():
            if value is not None:
                self.set_property_value(instance, key, value)

        return instance

    def from_json(self, cls: Type[T], text: str) -> T:
        """Build a new ``cls`` instance from JSON text."""
        return self.from_map(cls, codec.decode(text))
