"""
Scalar mapping for sample values.

Resolves a primitive sample value to the graphene scalar used by the operator
fields of its filter type.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import Any, Optional, Type, Union

import graphene

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class _ListMarker:
    """Returned by map_scalar for list values; callers inspect the elements."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "LIST_MARKER"


LIST_MARKER = _ListMarker()

ScalarType = Type[graphene.Scalar]


def is_number(value: Any) -> bool:
    """True for real numbers; booleans are excluded."""
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def is_32bit_int(value: Any) -> bool:
    """
    Check whether a number is exactly representable as a signed 32-bit integer.

    Examples:
        >>> is_32bit_int(42)
        True
        >>> is_32bit_int(3.0)
        True
        >>> is_32bit_int(2147483648)
        False
        >>> is_32bit_int(3.14)
        False
    """
    if not is_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return INT32_MIN <= value <= INT32_MAX
    try:
        as_float = float(value)
    except (OverflowError, ValueError):
        return False
    if math.isnan(as_float) or math.isinf(as_float):
        return False
    return as_float.is_integer() and INT32_MIN <= as_float <= INT32_MAX


def map_scalar(value: Any) -> Union[ScalarType, _ListMarker, None]:
    """
    Map a sample value to a graphene scalar type.

    Lists map to LIST_MARKER, strings to String, booleans to Boolean and
    numbers to Int when they fit in 32 bits, Float otherwise. Any other
    value maps to None.
    """
    if isinstance(value, (list, tuple)):
        return LIST_MARKER
    if isinstance(value, str):
        return graphene.String
    if isinstance(value, bool):
        return graphene.Boolean
    if is_number(value):
        return graphene.Int if is_32bit_int(value) else graphene.Float
    return None


def resolve_element_scalar(values: Any) -> Optional[ScalarType]:
    """
    Resolve the scalar type of a list's elements from its first element.

    Empty lists, nested lists and non-primitive elements resolve to None.
    """
    if not values:
        return None
    scalar = map_scalar(values[0])
    if scalar is LIST_MARKER:
        return None
    return scalar


__all__ = [
    "INT32_MIN",
    "INT32_MAX",
    "LIST_MARKER",
    "is_number",
    "is_32bit_int",
    "map_scalar",
    "resolve_element_scalar",
]
