"""Scenario template catalog."""

from lead_magnet.catalog.scenario_templates import (
    SCENARIO_TEMPLATES,
    all_categories,
    all_supported_apps,
    find_by_category,
    find_by_id,
    find_by_keywords,
    find_by_supported_apps,
)

__all__ = [
    "SCENARIO_TEMPLATES",
    "all_categories",
    "all_supported_apps",
    "find_by_category",
    "find_by_id",
    "find_by_keywords",
    "find_by_supported_apps",
]
