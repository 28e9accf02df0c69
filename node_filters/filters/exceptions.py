"""
Custom exceptions for filter type generation.

Synthesis skips unsupported sample values rather than raising. These
exceptions cover caller mistakes such as invalid naming input, field names
that generate the same filter type name, or invalid settings.
"""

from typing import Optional


class NodeFilterError(Exception):
    """Base exception for node filter errors."""

    def __init__(self, message: str, type_name: Optional[str] = None):
        self.type_name = type_name
        super().__init__(message)


class FilterNamingError(NodeFilterError, ValueError):
    """Raised when a filter type name cannot be derived or is generated twice."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        field_path: Optional[str] = None,
    ):
        self.field_path = field_path
        super().__init__(message, type_name)


class FilterConfigurationError(NodeFilterError, ValueError):
    """Raised when filtering settings hold an invalid value."""

    def __init__(self, message: str, setting: Optional[str] = None):
        self.setting = setting
        super().__init__(message)


__all__ = [
    "NodeFilterError",
    "FilterNamingError",
    "FilterConfigurationError",
]
