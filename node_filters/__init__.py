"""
node-filters: GraphQL filter input types inferred from content samples.
"""

from .defaults import LIBRARY_VERSION as __version__
from .filters import (
    FilterTypeGenerator,
    InputFilterObjectType,
    InputFilterReferenceType,
    Reference,
    create_filter_argument,
    create_filter_input,
    create_filter_type,
    create_filter_types,
)

__all__ = [
    "__version__",
    "FilterTypeGenerator",
    "InputFilterObjectType",
    "InputFilterReferenceType",
    "Reference",
    "create_filter_types",
    "create_filter_type",
    "create_filter_input",
    "create_filter_argument",
]
