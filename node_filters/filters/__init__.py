"""
Filters Package for node-filters.

This package turns the inferred schema of a content type, a mapping of field
name to sample value, into graphene filter input types.

Package Structure:
    - generator: FilterTypeGenerator and module-level helpers
    - shapes: Sample value classification (reference, date, list, primitives, object)
    - dates: ISO 8601 date detection
    - scalars: Sample value to graphene scalar mapping
    - operators: Operator descriptions and per-shape operator sets
    - naming: Filter type naming
    - types: Marker base classes for reference and value filters
    - exceptions: Package exceptions

Example Usage:
    from node_filters.filters import create_filter_types

    filters = create_filter_types(
        {"title": "Hello", "author": {"typeName": "Author", "isList": False}},
        "Post",
    )
    filters["title"].type  # PostTitleInputFilter
"""

from .generator import (
    FilterTypeGenerator,
    create_filter_argument,
    create_filter_input,
    create_filter_type,
    create_filter_types,
)
from .shapes import (
    Reference,
    ShapeKind,
    classify_value,
    is_reference_field,
)
from .dates import ISO_8601_FORMATS, is_date_value
from .scalars import LIST_MARKER, is_32bit_int, map_scalar
from .operators import OPERATOR_DESCRIPTIONS, build_operator_fields
from .naming import FieldPath, filter_type_name, to_pascal_case
from .types import (
    InputFilterObjectType,
    InputFilterReferenceType,
    is_reference_filter,
    is_value_filter,
)
from .exceptions import (
    FilterConfigurationError,
    FilterNamingError,
    NodeFilterError,
)

__all__ = [
    # Generator
    "FilterTypeGenerator",
    "create_filter_types",
    "create_filter_type",
    "create_filter_input",
    "create_filter_argument",
    # Shapes
    "Reference",
    "ShapeKind",
    "classify_value",
    "is_reference_field",
    "is_date_value",
    "ISO_8601_FORMATS",
    # Scalars
    "LIST_MARKER",
    "is_32bit_int",
    "map_scalar",
    # Operators
    "OPERATOR_DESCRIPTIONS",
    "build_operator_fields",
    # Naming
    "FieldPath",
    "filter_type_name",
    "to_pascal_case",
    # Marker types
    "InputFilterObjectType",
    "InputFilterReferenceType",
    "is_reference_filter",
    "is_value_filter",
    # Exceptions
    "NodeFilterError",
    "FilterNamingError",
    "FilterConfigurationError",
]
