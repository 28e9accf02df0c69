"""
Filter Type Generator for GraphQL.

This module provides the FilterTypeGenerator class that turns the inferred
schema of a content type (field name to sample value) into graphene input
types expressing query filters, one per filterable field.

Example generated schema for ``{"title": "Hello", "views": 42}`` on ``Post``:
    input PostTitleInputFilter {
        len: Int
        eq: String
        ne: String
        regex: String
        in: [String]
        nin: [String]
    }

    input PostViewsInputFilter {
        eq: Int
        ...
        between: [Int]
    }

Fields whose sample value has no filterable shape are left out, and nested
objects without any filterable field are pruned.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Type, Union

import graphene

from ..core.settings import FilteringSettings
from .exceptions import FilterNamingError
from .naming import FieldPath, filter_type_name, to_pascal_case
from .operators import (
    BOOLEAN_OPERATORS,
    DATE_OPERATORS,
    LIST_OPERATORS,
    NUMBER_OPERATORS,
    REFERENCE_LIST_OPERATORS,
    REFERENCE_OPERATORS,
    STRING_OPERATORS,
    build_operator_fields,
)
from .scalars import map_scalar, resolve_element_scalar
from .shapes import (
    BooleanShape,
    DateShape,
    ListShape,
    NumberShape,
    ObjectShape,
    ReferenceShape,
    ShapeKind,
    StringShape,
    classify_value,
)
from .types import (
    InputFilterObjectType,
    InputFilterReferenceType,
    is_reference_filter,
    is_value_filter,
)

logger = logging.getLogger(__name__)

FilterType = Type[graphene.InputObjectType]

# Class attributes graphene reserves on InputObjectType subclasses.
RESERVED_ATTRIBUTE_NAMES = frozenset(("Meta", "_meta"))


def _attribute_name(field_name: str) -> str:
    if field_name in RESERVED_ATTRIBUTE_NAMES:
        return f"{field_name}_"
    return field_name


def _build_input_type(
    base: FilterType,
    name: str,
    fields: Dict[str, graphene.InputField],
    description: Optional[str] = None,
) -> FilterType:
    """Create a named graphene input type from a mapping of fields."""
    meta = type("Meta", (), {"name": name, "description": description})
    return type(name, (base,), {"Meta": meta, **fields})


def _container_fields(
    filter_types: Mapping[str, FilterType],
) -> Dict[str, graphene.InputField]:
    """Mount child filter types as input fields keeping their exposed names."""
    return {
        _attribute_name(field_name): graphene.InputField(filter_type, name=field_name)
        for field_name, filter_type in filter_types.items()
    }


class FilterTypeGenerator:
    """
    Generates GraphQL filter input types from sample field values.

    Generation is a pure function of its inputs: calling it twice with the
    same fields and type name yields types with identical names and fields.
    Types are built fresh on every call; callers rebuilding a schema discard
    the previous set wholesale.

    Attributes:
        settings: FilteringSettings controlling names, descriptions and depth
    """

    def __init__(self, settings: Optional[FilteringSettings] = None):
        self.settings = settings or FilteringSettings.from_settings()
        self._builders: Dict[
            ShapeKind, Callable[[Any, FieldPath, str], Optional[FilterType]]
        ] = {
            ShapeKind.REFERENCE: self._create_reference_filter,
            ShapeKind.DATE: self._create_date_filter,
            ShapeKind.LIST: self._create_list_filter,
            ShapeKind.STRING: self._create_string_filter,
            ShapeKind.BOOLEAN: self._create_boolean_filter,
            ShapeKind.NUMBER: self._create_number_filter,
            ShapeKind.OBJECT: self._create_object_filter,
        }

    def create_filter_types(
        self,
        fields: Mapping[str, Any],
        type_name: str,
    ) -> Dict[str, graphene.InputField]:
        """
        Generate filter fields for every filterable field of a content type.

        Args:
            fields: Mapping of field name to sample value
            type_name: Name of the owning content type

        Returns:
            Mapping of field name to an InputField whose ``type`` is the
            generated filter type. Unfilterable fields are omitted.

        Raises:
            FilterNamingError: If two fields generate the same type name
        """
        filter_types = self._create_root_filters(fields, type_name)
        logger.debug(
            f"Generated {len(filter_types)} filter fields for {type_name} "
            f"({len(fields) - len(filter_types)} skipped)"
        )
        return {
            field_name: graphene.InputField(filter_type, name=field_name)
            for field_name, filter_type in filter_types.items()
        }

    def create_filter_type(
        self,
        value: Any,
        field_name: Union[str, FieldPath],
        type_name: str,
    ) -> Optional[FilterType]:
        """
        Generate the filter type for one field.

        Args:
            value: Sample value of the field
            field_name: Field name, space separated ancestry, or FieldPath
            type_name: Name of the owning content type

        Returns:
            The generated input type, or None when the value has no
            filterable shape.
        """
        if isinstance(field_name, FieldPath):
            path = field_name
        else:
            path = FieldPath(tuple(str(field_name).split(" ")))
        return self._create_filter_type(value, path, type_name)

    def create_filter_input(
        self,
        fields: Mapping[str, Any],
        type_name: str,
    ) -> Optional[FilterType]:
        """
        Wrap the filter fields of a content type into its root filter input.

        The root input, named ``{TypeName}Filters`` by default, is the type
        of the ``filter`` argument of a node-listing query. Returns None when
        no field of the content type is filterable.
        """
        filter_types = self._create_root_filters(fields, type_name)
        if not filter_types:
            logger.debug(f"No filterable fields on {type_name}, skipping filter input")
            return None

        name = to_pascal_case(f"{type_name} {self.settings.root_input_suffix}")
        return _build_input_type(
            graphene.InputObjectType,
            name,
            _container_fields(filter_types),
            self._describe(f"Filter for {type_name} nodes."),
        )

    def create_filter_argument(
        self,
        fields: Mapping[str, Any],
        type_name: str,
    ) -> Optional[graphene.Argument]:
        """Build the ``filter`` argument of a node-listing query, if any."""
        filter_input = self.create_filter_input(fields, type_name)
        if filter_input is None:
            return None
        return graphene.Argument(
            filter_input, description=self._describe(f"Filter for {type_name} nodes.")
        )

    def _create_root_filters(
        self,
        fields: Mapping[str, Any],
        type_name: str,
    ) -> Dict[str, FilterType]:
        filter_types = self._create_child_filters(fields, FieldPath(), type_name)
        self._check_unique_names(filter_types, type_name)
        return filter_types

    def _check_unique_names(
        self,
        filter_types: Mapping[str, FilterType],
        type_name: str,
    ) -> None:
        """
        Ensure no two fields of one content type share a generated type name.

        ``authorName`` and the nested ``author.name`` both map to
        ``{Type}AuthorNameInputFilter``; mounting both in one schema would
        fail or silently alias one filter to the other.

        Raises:
            FilterNamingError: If a generated name is reused
        """
        seen: Dict[str, str] = {}
        pending = [(FieldPath.of(name), ft) for name, ft in filter_types.items()]
        while pending:
            path, filter_type = pending.pop(0)
            name = filter_type._meta.name
            if name in seen:
                logger.error(
                    f"Filter type name {name} generated for both "
                    f"{type_name}.{seen[name]} and {type_name}.{path.label}"
                )
                raise FilterNamingError(
                    f"Filter type name '{name}' is generated for both "
                    f"'{seen[name]}' and '{path.label}'",
                    type_name=type_name,
                    field_path=path.label,
                )
            seen[name] = path.label
            if is_value_filter(filter_type) or is_reference_filter(filter_type):
                continue
            for attribute, field in filter_type._meta.fields.items():
                pending.append((path.child(field.name or attribute), field.type))

    def _create_child_filters(
        self,
        fields: Mapping[str, Any],
        parent: FieldPath,
        type_name: str,
    ) -> Dict[str, FilterType]:
        filter_types = {}
        for field_name, value in fields.items():
            filter_type = self._create_filter_type(
                value, parent.child(field_name), type_name
            )
            if filter_type is not None:
                filter_types[field_name] = filter_type
        return filter_types

    def _create_filter_type(
        self,
        value: Any,
        path: FieldPath,
        type_name: str,
    ) -> Optional[FilterType]:
        shape = classify_value(value)
        if shape is None:
            logger.debug(f"Skipping {type_name}.{path.label}: unsupported value")
            return None
        return self._builders[shape.kind](shape, path, type_name)

    def _name(self, type_name: str, path: FieldPath) -> str:
        return filter_type_name(type_name, path, suffix=self.settings.type_name_suffix)

    def _describe(self, description: str) -> Optional[str]:
        return description if self.settings.generate_descriptions else None

    def _default_description(self, type_name: str, path: FieldPath) -> Optional[str]:
        return self._describe(f"Filter {type_name} nodes by {path.label}")

    def _operator_filter(
        self,
        operators,
        scalar,
        path: FieldPath,
        type_name: str,
        base: FilterType = InputFilterObjectType,
    ) -> FilterType:
        return _build_input_type(
            base,
            self._name(type_name, path),
            build_operator_fields(
                operators, scalar, describe=self.settings.generate_descriptions
            ),
            self._default_description(type_name, path),
        )

    def _create_reference_filter(
        self, shape: ReferenceShape, path: FieldPath, type_name: str
    ) -> FilterType:
        operators = (
            REFERENCE_LIST_OPERATORS if shape.reference.is_list else REFERENCE_OPERATORS
        )
        return self._operator_filter(
            operators, graphene.String, path, type_name, base=InputFilterReferenceType
        )

    def _create_date_filter(
        self, shape: DateShape, path: FieldPath, type_name: str
    ) -> FilterType:
        return self._operator_filter(DATE_OPERATORS, graphene.String, path, type_name)

    def _create_list_filter(
        self, shape: ListShape, path: FieldPath, type_name: str
    ) -> Optional[FilterType]:
        element_scalar = resolve_element_scalar(shape.items)
        if element_scalar is None:
            logger.debug(
                f"Skipping {type_name}.{path.label}: list elements have no scalar type"
            )
            return None
        return self._operator_filter(LIST_OPERATORS, element_scalar, path, type_name)

    def _create_string_filter(
        self, shape: StringShape, path: FieldPath, type_name: str
    ) -> FilterType:
        return self._operator_filter(STRING_OPERATORS, graphene.String, path, type_name)

    def _create_boolean_filter(
        self, shape: BooleanShape, path: FieldPath, type_name: str
    ) -> FilterType:
        # Boolean filters carry no descriptions.
        return _build_input_type(
            InputFilterObjectType,
            self._name(type_name, path),
            build_operator_fields(BOOLEAN_OPERATORS, graphene.Boolean, describe=False),
        )

    def _create_number_filter(
        self, shape: NumberShape, path: FieldPath, type_name: str
    ) -> FilterType:
        return self._operator_filter(
            NUMBER_OPERATORS, map_scalar(shape.value), path, type_name
        )

    def _create_object_filter(
        self, shape: ObjectShape, path: FieldPath, type_name: str
    ) -> Optional[FilterType]:
        max_depth = self.settings.max_nested_depth
        if max_depth is not None and len(path) > max_depth:
            logger.debug(
                f"Skipping {type_name}.{path.label}: nested deeper than {max_depth}"
            )
            return None

        filter_types = self._create_child_filters(shape.fields, path, type_name)
        if not filter_types:
            logger.debug(f"Pruning {type_name}.{path.label}: no filterable fields")
            return None

        return _build_input_type(
            graphene.InputObjectType,
            self._name(type_name, path),
            _container_fields(filter_types),
        )


def _default_generator() -> FilterTypeGenerator:
    return FilterTypeGenerator(FilteringSettings.from_settings())


def create_filter_types(
    fields: Mapping[str, Any], type_name: str
) -> Dict[str, graphene.InputField]:
    """Generate filter fields for a content type using the project settings."""
    return _default_generator().create_filter_types(fields, type_name)


def create_filter_type(
    value: Any, field_name: Union[str, FieldPath], type_name: str
) -> Optional[FilterType]:
    """Generate the filter type of one field using the project settings."""
    return _default_generator().create_filter_type(value, field_name, type_name)


def create_filter_input(
    fields: Mapping[str, Any], type_name: str
) -> Optional[FilterType]:
    return _default_generator().create_filter_input(fields, type_name)


def create_filter_argument(
    fields: Mapping[str, Any], type_name: str
) -> Optional[graphene.Argument]:
    return _default_generator().create_filter_argument(fields, type_name)


__all__ = [
    "FilterTypeGenerator",
    "create_filter_types",
    "create_filter_type",
    "create_filter_input",
    "create_filter_argument",
]
