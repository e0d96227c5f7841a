"""
Type introspection used by the reflective mapper.

Answers the questions the read and write paths ask about a type: which data
members it declares, which accessor methods it exposes and what parameter
types those accessors declare.
"""

import dataclasses
import inspect
import types
import typing
from collections import abc
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    ClassVar,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    runtime_checkable,
)

from .naming import accessor_candidates

_MISSING = object()

_SEQUENCE_ORIGINS = {list, tuple, abc.Sequence, abc.MutableSequence}
_SLOT_INTERNALS = {"__dict__", "__weakref__"}


@runtime_checkable
class SupportsMapping(Protocol):
    """Protocol describing objects that can be converted to and from a mapping."""

    def to_map(self, include_null: bool = False, max_nesting: int = 3) -> Dict[str, Any]:
        """Return the object's properties as an ordered key-value structure."""
        ...

    @classmethod
    def from_map(cls, data: Mapping[str, Any]) -> Any:
        """Build a new instance from a key-value structure."""
        ...


@dataclass(frozen=True)
class PropertyDescriptor:
    """A data member discovered on a type (or on an instance of it)."""

    name: str
    declared_type: Any = None
    public: bool = True
    static: bool = False
    declared: bool = True


def is_public(name: str) -> bool:
    """Names without a leading underscore are public."""
    return not name.startswith("_")


def is_mappable(value: Any) -> bool:
    """Return True for instances (not classes) exposing to_map/from_map."""
    return not isinstance(value, type) and isinstance(value, SupportsMapping)


def is_mappable_type(tp: Any) -> bool:
    """Return True for classes whose instances can be built with ``from_map``."""
    return (
        isinstance(tp, type)
        and callable(getattr(tp, "from_map", None))
        and callable(getattr(tp, "to_map", None))
    )


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or typing.get_origin(annotation) is ClassVar


def _is_init_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("InitVar", "dataclasses.InitVar"))
    return annotation is dataclasses.InitVar or isinstance(annotation, dataclasses.InitVar)


def _slot_names(klass: type) -> List[str]:
    slots = klass.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [name for name in slots if name not in _SLOT_INTERNALS]


def _resolved_hints(klass: type) -> Dict[str, Any]:
    """Resolve string annotations where possible, keeping the raw ones otherwise."""
    try:
        return typing.get_type_hints(klass)
    except (NameError, TypeError):
        hints: Dict[str, Any] = {}
        for base in reversed(klass.__mro__):
            hints.update(inspect.get_annotations(base))
        return hints


def enumerate_properties(cls: type, instance: Any = None) -> List[PropertyDescriptor]:
    """
    List the data members of ``cls`` in declaration order.

    Annotated members are collected from the most basic class down to ``cls``,
    so inherited members come first. ``ClassVar`` members are reported as
    static. Unannotated ``__slots__`` entries are instance members. When an
    ``instance`` is given, attributes found only in its ``__dict__`` are
    appended with ``declared=False``.

    Args:
        cls: Type to inspect
        instance: Optional instance of ``cls`` for dynamic attributes

    Returns:
        Ordered property descriptors, private ones included
    """
    hints = _resolved_hints(cls)
    properties: Dict[str, PropertyDescriptor] = {}

    for klass in reversed(cls.__mro__):
        if klass is object:
            continue

        for name, annotation in inspect.get_annotations(klass).items():
            if _is_init_var(annotation):
                continue
            resolved = hints.get(name, annotation)
            static = _is_class_var(annotation) or _is_class_var(resolved)
            if name in properties:
                # Redeclaration keeps the original position, adopts the new type.
                properties[name] = dataclasses.replace(
                    properties[name], declared_type=resolved, static=static
                )
                continue
            properties[name] = PropertyDescriptor(
                name=name,
                declared_type=resolved,
                public=is_public(name),
                static=static,
            )

        for name in _slot_names(klass):
            if name not in properties:
                properties[name] = PropertyDescriptor(name=name, public=is_public(name))

    if instance is not None:
        for name in getattr(instance, "__dict__", {}):
            if name not in properties:
                properties[name] = PropertyDescriptor(
                    name=name, public=is_public(name), declared=False
                )

    return list(properties.values())


def _parameters(method: Callable[..., Any]) -> Optional[Sequence[inspect.Parameter]]:
    try:
        return list(inspect.signature(method).parameters.values())
    except (TypeError, ValueError):
        return None


def _has_arity(method: Callable[..., Any], arity: int) -> bool:
    parameters = _parameters(method)
    if parameters is None or len(parameters) != arity:
        return False
    return all(
        p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
        for p in parameters
    )


def find_accessor(
    obj: Any, prefixes: Iterable[str], name: str, arity: int
) -> Optional[Tuple[str, Callable[..., Any]]]:
    """
    Find the first public accessor method for property ``name``.

    Prefixes are probed in the given order; within a prefix the PascalCase name
    is probed before the snake_case one. Only methods defined on the type count,
    and only those taking exactly ``arity`` positional parameters.

    Returns:
        ``(method_name, bound_method)`` or None
    """
    obj_type = type(obj)
    for prefix in prefixes:
        for method_name in accessor_candidates(prefix, name):
            if not is_public(method_name):
                continue
            static_attr = inspect.getattr_static(obj_type, method_name, _MISSING)
            if static_attr is _MISSING or isinstance(static_attr, property):
                continue
            bound = getattr(obj, method_name)
            if callable(bound) and _has_arity(bound, arity):
                return method_name, bound
    return None


def parameter_type(method: Callable[..., Any]) -> Any:
    """Declared type of the first parameter of ``method``, or None."""
    parameters = _parameters(method)
    if not parameters:
        return None

    param = parameters[0]
    func = getattr(method, "__func__", method)
    try:
        hints = typing.get_type_hints(func)
    except (NameError, TypeError):
        hints = getattr(func, "__annotations__", {})

    annotation = hints.get(param.name, param.annotation)
    if annotation is inspect.Parameter.empty:
        return None
    return annotation


def field_type(obj: Any, name: str, descriptors: Mapping[str, PropertyDescriptor]) -> Any:
    """Declared type of a field, looking through ``property`` setters."""
    descriptor = descriptors.get(name)
    if descriptor is not None and descriptor.declared_type is not None:
        return descriptor.declared_type

    static_attr = inspect.getattr_static(type(obj), name, _MISSING)
    if isinstance(static_attr, property) and static_attr.fset is not None:
        hints = _fset_hints(static_attr.fset)
        return next(iter(hints), None)
    return None


def _fset_hints(fset: Callable[..., Any]) -> List[Any]:
    try:
        hints = typing.get_type_hints(fset)
    except (NameError, TypeError):
        hints = dict(getattr(fset, "__annotations__", {}))
    hints.pop("return", None)
    return list(hints.values())


def is_public_field(
    obj: Any, name: str, descriptors: Mapping[str, PropertyDescriptor]
) -> bool:
    """
    Check whether ``name`` is a public field that can be assigned directly.

    Writable fields are declared instance members, attributes already present
    on the instance, and properties that define a setter.
    """
    if not is_public(name) or not name.isidentifier():
        return False

    static_attr = inspect.getattr_static(type(obj), name, _MISSING)
    if isinstance(static_attr, property):
        return static_attr.fset is not None

    descriptor = descriptors.get(name)
    if descriptor is not None:
        return not descriptor.static

    return name in getattr(obj, "__dict__", {})


def unwrap_optional(tp: Any) -> Any:
    """``Optional[X]`` (or ``X | None``) becomes ``X``; anything else is unchanged."""
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def sequence_element_type(tp: Any) -> Optional[Tuple[type, Any]]:
    """
    For ``list[X]``, ``Sequence[X]`` or ``tuple[X, ...]`` return ``(container, X)``.

    The container is ``tuple`` for tuple annotations and ``list`` otherwise.
    """
    origin = typing.get_origin(tp)
    if origin not in _SEQUENCE_ORIGINS:
        return None

    args = typing.get_args(tp)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple, args[0]
        return None
    if len(args) != 1:
        return None
    return list, args[0]
