"""
Core configuration for node-filters.
"""

from .settings import FilteringSettings, get_project_settings

__all__ = ["FilteringSettings", "get_project_settings"]
