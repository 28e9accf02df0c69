"""
Filter operators.

Holds the shared operator description table and the operator sets attached to
each sample shape.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

import graphene

OPERATOR_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "eq": "Filter nodes by property of (strict) equality.",
        "ne": "Filter nodes by property not equal to provided value.",
        "dteq": "Filter nodes by date property equal to provided date value",
        "gt": "Filter nodes by property greater than provided value.",
        "gte": "Filter nodes by property greater or equal to provided value.",
        "lt": "Filter nodes by property less than provided value.",
        "lte": "Filter nodes by property less than or equal to provided value.",
        "between": "Filter nodes by property between provided values.",
        "regex": "Filter nodes by property matching provided regular expression.",
        "in": "Filter nodes by property matching any of the provided values.",
        "nin": "Filter nodes by property not matching any of the provided values.",
        "contains": "Filter nodes by property containing the provided value.",
        "containsAny": "Filter nodes by property containing any of the provided values.",
        "containsNone": "Filter nodes by property containing none of the provided values.",
        "size": "Filter nodes which have an array property of specified size.",
        "len": "Filter nodes which have a string property of specified length.",
    }
)

STRING_OPERATORS = ("len", "eq", "ne", "regex", "in", "nin")
BOOLEAN_OPERATORS = ("eq", "ne", "in", "nin")
NUMBER_OPERATORS = ("eq", "ne", "gt", "gte", "lt", "lte", "in", "nin", "between")
DATE_OPERATORS = ("dteq", "gt", "gte", "lt", "lte", "between")
LIST_OPERATORS = ("size", "contains", "containsAny", "containsNone")
REFERENCE_OPERATORS = ("eq", "ne", "regex", "in", "nin")
REFERENCE_LIST_OPERATORS = LIST_OPERATORS

# Operators taking a sequence of values.
LIST_VALUED_OPERATORS = frozenset(
    ("in", "nin", "between", "contains", "containsAny", "containsNone")
)

# Operators always typed as Int regardless of the field's scalar.
INT_VALUED_OPERATORS = frozenset(("size", "len"))


def operator_type(operator: str, scalar):
    """Return the graphene type taken by ``operator`` on a field of ``scalar``."""
    if operator in INT_VALUED_OPERATORS:
        return graphene.Int
    if operator in LIST_VALUED_OPERATORS:
        return graphene.List(scalar)
    return scalar


def build_operator_fields(
    operators: Iterable[str],
    scalar,
    describe: bool = True,
) -> Dict[str, graphene.InputField]:
    """
    Build the input fields for a set of operators.

    Args:
        operators: Operator names, in declaration order
        scalar: graphene scalar of the filtered property
        describe: Attach the shared operator descriptions

    Returns:
        Ordered mapping of operator name to graphene InputField
    """
    fields = {}
    for operator in operators:
        description: Optional[str] = (
            OPERATOR_DESCRIPTIONS.get(operator) if describe else None
        )
        fields[operator] = graphene.InputField(
            operator_type(operator, scalar), description=description
        )
    return fields


__all__ = [
    "OPERATOR_DESCRIPTIONS",
    "STRING_OPERATORS",
    "BOOLEAN_OPERATORS",
    "NUMBER_OPERATORS",
    "DATE_OPERATORS",
    "LIST_OPERATORS",
    "REFERENCE_OPERATORS",
    "REFERENCE_LIST_OPERATORS",
    "LIST_VALUED_OPERATORS",
    "INT_VALUED_OPERATORS",
    "operator_type",
    "build_operator_fields",
]
