"""
FilteringSettings implementation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Optional

from django.conf import settings as django_settings

from ..defaults import LIBRARY_DEFAULTS, merge_settings
from ..filters.exceptions import FilterConfigurationError

logger = logging.getLogger(__name__)

SETTINGS_NAME = "NODE_FILTERS"
SECTION_NAME = "filtering_settings"


def get_project_settings() -> dict[str, Any]:
    """Get the filtering section of the ``NODE_FILTERS`` Django setting."""
    if not django_settings.configured:
        return {}
    project_settings = getattr(django_settings, SETTINGS_NAME, None) or {}
    if not isinstance(project_settings, dict):
        logger.warning(f"Ignoring {SETTINGS_NAME}: expected a dict")
        return {}
    if SECTION_NAME in project_settings:
        return dict(project_settings[SECTION_NAME] or {})
    return dict(project_settings)


@dataclass
class FilteringSettings:
    """Settings for filter type generation."""

    type_name_suffix: str = "InputFilter"
    root_input_suffix: str = "Filters"
    generate_descriptions: bool = True
    max_nested_depth: Optional[int] = None

    def __post_init__(self):
        if not self.type_name_suffix or not str(self.type_name_suffix).strip():
            raise FilterConfigurationError(
                "type_name_suffix must be a non-empty string",
                setting="type_name_suffix",
            )
        if not self.root_input_suffix or not str(self.root_input_suffix).strip():
            raise FilterConfigurationError(
                "root_input_suffix must be a non-empty string",
                setting="root_input_suffix",
            )
        if self.max_nested_depth is not None and (
            isinstance(self.max_nested_depth, bool)
            or not isinstance(self.max_nested_depth, int)
            or self.max_nested_depth < 0
        ):
            raise FilterConfigurationError(
                f"max_nested_depth must be a non-negative integer or None, "
                f"got {self.max_nested_depth!r}",
                setting="max_nested_depth",
            )

    @classmethod
    def from_settings(cls, **overrides: Any) -> "FilteringSettings":
        defaults = LIBRARY_DEFAULTS.get(SECTION_NAME, {})
        merged = merge_settings(defaults, get_project_settings(), overrides)
        valid_fields = {f.name for f in fields(cls)}
        unknown = set(merged) - valid_fields
        if unknown:
            logger.debug(f"Ignoring unknown filtering settings: {sorted(unknown)}")
        return cls(**{k: v for k, v in merged.items() if k in valid_fields})
