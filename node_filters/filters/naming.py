"""
Naming of generated filter types.

Every filter type is named from the owning content type and the full ancestry
of the filtered field. Field names that only differ in casing or separators
(``authorName`` and ``author.name``) map to the same name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple, Union

from graphene.utils.str_converters import to_camel_case, to_snake_case

from .exceptions import FilterNamingError

DEFAULT_TYPE_NAME_SUFFIX = "InputFilter"

_WORD_SEPARATOR_RE = re.compile(r"[\s_\-.]+")
_GRAPHQL_NAME_INVALID_RE = re.compile(r"[^_0-9A-Za-z]")


@dataclass(frozen=True)
class FieldPath:
    """Ancestry of field names from the content type root to a field."""

    parts: Tuple[str, ...] = ()

    @classmethod
    def of(cls, *names: str) -> "FieldPath":
        return cls(tuple(str(name) for name in names))

    def child(self, name: str) -> "FieldPath":
        return FieldPath(self.parts + (str(name),))

    @property
    def leaf(self) -> str:
        return self.parts[-1] if self.parts else ""

    @property
    def label(self) -> str:
        return " ".join(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __str__(self) -> str:
        return self.label


def to_pascal_case(value: str) -> str:
    """
    Convert a space, dash, dot or underscore separated string to PascalCase.

    Each word goes through graphene's snake/camel converters, so camelCase
    words keep their word breaks and acronyms are normalized
    (``HTTPStatus`` becomes ``HttpStatus``).

    Examples:
        >>> to_pascal_case("post author name InputFilter")
        "PostAuthorNameInputFilter"
        >>> to_pascal_case("blogPost published_at")
        "BlogPostPublishedAt"
    """
    words = [word for word in _WORD_SEPARATOR_RE.split(str(value)) if word]
    pascal = "".join(_pascal_word(word) for word in words)
    pascal = _GRAPHQL_NAME_INVALID_RE.sub("", pascal)
    if pascal and pascal[0].isdigit():
        pascal = "_" + pascal
    return pascal


def _pascal_word(word: str) -> str:
    camel = to_camel_case(to_snake_case(word))
    return camel[:1].upper() + camel[1:]


def filter_type_name(
    type_name: str,
    field_path: Union[str, FieldPath],
    suffix: str = DEFAULT_TYPE_NAME_SUFFIX,
) -> str:
    """
    Build the GraphQL name of a field's filter type.

    Args:
        type_name: Owning content type name
        field_path: Field name, space separated ancestry, or FieldPath
        suffix: Literal suffix appended to every filter type name

    Returns:
        PascalCase name such as ``PostAuthorNameInputFilter``

    Raises:
        FilterNamingError: If the type name or field path is empty
    """
    label = field_path.label if isinstance(field_path, FieldPath) else str(field_path)

    if not type_name or not str(type_name).strip():
        raise FilterNamingError(
            "Cannot name a filter type without an owning type name",
            type_name=type_name,
            field_path=label,
        )
    if not label.strip():
        raise FilterNamingError(
            f"Cannot name a filter type of {type_name} without a field path",
            type_name=type_name,
            field_path=label,
        )

    return to_pascal_case(f"{type_name} {label} {suffix}")


__all__ = [
    "DEFAULT_TYPE_NAME_SUFFIX",
    "FieldPath",
    "to_pascal_case",
    "filter_type_name",
]
