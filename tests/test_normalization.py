"""Tests for category and building-block normalization."""

from __future__ import annotations

import pytest

from lead_magnet.models import BUILDING_BLOCKS, SCENARIO_CATEGORIES
from lead_magnet.services.normalization import map_building_blocks, map_category, normalize_token


class TestMapCategory:
    @pytest.mark.parametrize("category", SCENARIO_CATEGORIES)
    def test_canonical_values_map_to_themselves(self, category: str) -> None:
        assert map_category(category) == category

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Unified API", "unified-api"),
            ("data_import_export", "data-import-export"),
            ("Bi-Directional Sync", "bi-directional-sync"),
            ("Workflow Automation", "workflow-automation"),
            ("webhook events", "webhook-events"),
            ("ETL", "data-transformation"),
            ("export", "data-import-export"),
            ("Event driven", "webhook-events"),
        ],
    )
    def test_synonyms(self, raw: str, expected: str) -> None:
        assert map_category(raw) == expected

    @pytest.mark.parametrize("raw", ["", "something else", "   ", "42"])
    def test_unknown_falls_back_to_workflow_automation(self, raw: str) -> None:
        assert map_category(raw) == "workflow-automation"

    def test_none_is_tolerated(self) -> None:
        assert map_category(None) == "workflow-automation"


class TestMapBuildingBlocks:
    def test_maps_synonyms_and_drops_unknowns(self) -> None:
        assert map_building_blocks(["Events", "field_mappings", "teleport"]) == ["events", "field-mappings"]

    def test_removes_duplicates_keeping_first_seen_order(self) -> None:
        assert map_building_blocks(["flow", "actions", "Flows", "action"]) == ["flows", "actions"]

    def test_empty_input_becomes_actions(self) -> None:
        assert map_building_blocks([]) == ["actions"]

    def test_all_unknown_becomes_actions(self) -> None:
        assert map_building_blocks(["quantum", "magic"]) == ["actions"]

    def test_result_is_subset_of_fixed_set(self) -> None:
        result = map_building_blocks(["Data Collections", "unified data model", "mappings", "nope"])
        assert set(result) <= set(BUILDING_BLOCKS)
        assert result == ["data-collections", "unified-data-models", "field-mappings"]


def test_normalize_token_strips_separators() -> None:
    assert normalize_token("Bi-Directional_Sync Now") == "bidirectionalsyncnow"
