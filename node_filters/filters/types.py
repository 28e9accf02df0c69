"""
Marker base classes for generated filter types.

The schema assembly layer tells reference filters, whose values are node IDs
to resolve, apart from plain value filters by their base class.
"""

from __future__ import annotations

import inspect
from typing import Any

import graphene


class InputFilterObjectType(graphene.InputObjectType):
    """Base of filter types over a property value (string, number, date, list)."""

    class Meta:
        abstract = True


class InputFilterReferenceType(graphene.InputObjectType):
    """Base of filter types over a reference to other nodes."""

    class Meta:
        abstract = True


def is_reference_filter(filter_type: Any) -> bool:
    return inspect.isclass(filter_type) and issubclass(
        filter_type, InputFilterReferenceType
    )


def is_value_filter(filter_type: Any) -> bool:
    return inspect.isclass(filter_type) and issubclass(
        filter_type, InputFilterObjectType
    )


__all__ = [
    "InputFilterObjectType",
    "InputFilterReferenceType",
    "is_reference_filter",
    "is_value_filter",
]
