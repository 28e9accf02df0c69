"""
Sample value shapes.

Every sample value is classified once into one of seven tagged shapes before a
filter type is generated for it. Classification order is significant: a
reference descriptor is itself a mapping, and a date is itself a string, so
both are checked ahead of the generic shapes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Union

from .dates import is_date_value
from .scalars import is_number

logger = logging.getLogger(__name__)

REFERENCE_KEYS = frozenset(("typeName", "isList"))


@dataclass(frozen=True)
class Reference:
    """A relation to nodes of another content type."""

    type_name: str
    is_list: bool = False


class ShapeKind(Enum):
    REFERENCE = "reference"
    DATE = "date"
    LIST = "list"
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    OBJECT = "object"


@dataclass(frozen=True)
class ReferenceShape:
    reference: Reference
    kind: ShapeKind = ShapeKind.REFERENCE


@dataclass(frozen=True)
class DateShape:
    value: Any
    kind: ShapeKind = ShapeKind.DATE


@dataclass(frozen=True)
class ListShape:
    items: Sequence[Any]
    kind: ShapeKind = ShapeKind.LIST


@dataclass(frozen=True)
class StringShape:
    value: str
    kind: ShapeKind = ShapeKind.STRING


@dataclass(frozen=True)
class BooleanShape:
    value: bool
    kind: ShapeKind = ShapeKind.BOOLEAN


@dataclass(frozen=True)
class NumberShape:
    value: Any
    kind: ShapeKind = ShapeKind.NUMBER


@dataclass(frozen=True)
class ObjectShape:
    fields: Mapping
    kind: ShapeKind = ShapeKind.OBJECT


SampleShape = Union[
    ReferenceShape,
    DateShape,
    ListShape,
    StringShape,
    BooleanShape,
    NumberShape,
    ObjectShape,
]


def is_reference_field(value: Any) -> bool:
    """
    Check whether a value describes a reference to another content type.

    A reference is either a ``Reference`` instance or a mapping holding exactly
    the two keys ``typeName`` and ``isList``. The key values are not checked.
    """
    if isinstance(value, Reference):
        return True
    return isinstance(value, Mapping) and set(value.keys()) == REFERENCE_KEYS


def to_reference(value: Any) -> Reference:
    """Normalize a reference descriptor to a ``Reference``."""
    if isinstance(value, Reference):
        return value
    return Reference(type_name=value["typeName"], is_list=bool(value["isList"]))


def classify_value(value: Any) -> Optional[SampleShape]:
    """
    Classify a sample value into its shape.

    Returns None for values that have no filterable shape (None, callables,
    bytes and arbitrary objects).
    """
    if is_reference_field(value):
        return ReferenceShape(to_reference(value))
    if is_date_value(value):
        return DateShape(value)
    if isinstance(value, (list, tuple)):
        return ListShape(value)
    if isinstance(value, str):
        return StringShape(value)
    if isinstance(value, bool):
        return BooleanShape(value)
    if is_number(value):
        return NumberShape(value)
    if isinstance(value, Mapping):
        return ObjectShape(value)

    logger.debug(f"Unsupported sample value of type {type(value).__name__}")
    return None


__all__ = [
    "Reference",
    "ShapeKind",
    "ReferenceShape",
    "DateShape",
    "ListShape",
    "StringShape",
    "BooleanShape",
    "NumberShape",
    "ObjectShape",
    "SampleShape",
    "REFERENCE_KEYS",
    "is_reference_field",
    "to_reference",
    "classify_value",
]
