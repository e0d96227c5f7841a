"""JSON text encoding and decoding for key-value structures."""

import functools
import json
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any, Dict
from uuid import UUID

from .introspection import is_mappable, is_public

COMPACT_SEPARATORS = (",", ":")
PRETTY_SEPARATORS = (",", ": ")


def shallow_map(obj: Any, include_null: bool = False) -> Dict[str, Any]:
    """
    Render a mappable object that ``to_map`` left unexpanded.

    Only the object's own values are kept; nested mappable objects, bare or
    inside lists, are left out.
    """
    result: Dict[str, Any] = {}
    for key, value in obj.to_map(include_null, 0).items():
        if is_mappable(value):
            continue
        if isinstance(value, (list, tuple)):
            value = [item for item in value if not is_mappable(item)]
        result[key] = value
    return result


def to_jsonable(obj: Any, include_null: bool = False) -> Any:
    """
    Convert a value ``json`` cannot encode natively.

    Used as the encoder's ``default`` hook, so it is only called for values
    outside the JSON data model.
    """
    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()
    elif isinstance(obj, Enum):
        return obj.value
    elif isinstance(obj, UUID):
        return str(obj)
    elif isinstance(obj, Decimal):
        return str(obj)
    elif isinstance(obj, PurePath):
        return str(obj)
    elif isinstance(obj, (set, frozenset)):
        return list(obj)
    elif is_mappable(obj):
        return shallow_map(obj, include_null)
    elif hasattr(obj, "__dict__"):
        return {key: value for key, value in vars(obj).items() if is_public(key)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode(structure: Any, include_null: bool = False, **options: Any) -> str:
    """
    Encode a key-value structure as JSON text.

    Output is compact by default. Keyword options are passed through to
    :func:`json.dumps`; an ``indent`` without explicit ``separators`` switches
    to the conventional pretty separators. ``include_null`` applies to mappable
    objects rendered by :func:`to_jsonable`.
    """
    if "separators" not in options:
        options["separators"] = (
            PRETTY_SEPARATORS if options.get("indent") is not None else COMPACT_SEPARATORS
        )
    options.setdefault("default", functools.partial(to_jsonable, include_null=include_null))
    return json.dumps(structure, **options)


def decode(text: str) -> Any:
    """Decode JSON text. Errors propagate as :class:`json.JSONDecodeError`."""
    return json.loads(text)
