"""
Default configuration for the node-filters library.

Each section mirrors one of the dataclasses defined in
``node_filters.core.settings``. Projects override values through the
``NODE_FILTERS`` Django setting.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "node-filters"


LIBRARY_DEFAULTS: dict[str, Any] = {
    "filtering_settings": {
        "type_name_suffix": "InputFilter",
        "root_input_suffix": "Filters",
        "generate_descriptions": True,
        "max_nested_depth": None,
    },
}


def merge_settings(*settings_dicts: dict[str, Any]) -> dict[str, Any]:
    """
    Merge multiple settings dictionaries with deep merging for nested dicts.
    Later dictionaries override earlier ones.
    """
    result: dict[str, Any] = {}
    for settings_dict in settings_dicts:
        if not settings_dict:
            continue
        for key, value in settings_dict.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = merge_settings(result[key], value)
            else:
                result[key] = value
    return result
