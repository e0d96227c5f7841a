"""Reflective mapping core."""

from .codec import decode, encode, to_jsonable
from .introspection import PropertyDescriptor, SupportsMapping, enumerate_properties
from .mappable import Mappable
from .mapper import ReflectiveMapper
from .naming import accessor_candidates, accessor_fragment

__all__ = [
    "Mappable",
    "PropertyDescriptor",
    "ReflectiveMapper",
    "SupportsMapping",
    "accessor_candidates",
    "accessor_fragment",
    "decode",
    "encode",
    "enumerate_properties",
    "to_jsonable",
]
