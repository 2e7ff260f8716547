"""Tests for building-block details, complexity and integration flow."""

from __future__ import annotations

import pytest

from lead_magnet.catalog import find_by_id
from lead_magnet.models import BUILDING_BLOCKS
from lead_magnet.services.building_blocks import (
    building_blocks_summary,
    describe_building_blocks,
    estimate_complexity,
    generate_integration_flow,
)


class TestDescribeBuildingBlocks:
    def test_all_six_in_fixed_order(self) -> None:
        details = describe_building_blocks(find_by_id("etl-pipeline"))
        assert [d.id for d in details] == list(BUILDING_BLOCKS)

    def test_active_flags_follow_scenario(self) -> None:
        scenario = find_by_id("etl-pipeline")
        active = {d.id for d in describe_building_blocks(scenario) if d.is_active}
        assert active == set(scenario.building_blocks)


class TestEstimateComplexity:
    @pytest.mark.parametrize(
        ("blocks", "level"),
        [
            (["actions"], "simple"),
            (["actions", "events"], "simple"),
            (["actions", "events", "flows"], "moderate"),
            (["actions", "events", "flows", "data-collections"], "moderate"),
            (["actions", "events", "flows", "data-collections", "field-mappings"], "complex"),
        ],
    )
    def test_levels(self, blocks: list[str], level: str) -> None:
        estimate = estimate_complexity(blocks)
        assert estimate.level == level
        assert estimate.score == len(blocks)


class TestIntegrationFlow:
    def test_full_flow_with_systems(self) -> None:
        flow = generate_integration_flow(list(BUILDING_BLOCKS), "Salesforce", "HubSpot")
        assert flow == [
            "Connect to Salesforce",
            "Listen for real-time events",
            "Query and collect data",
            "Transform data to target schema",
            "Normalize to unified model",
            "Process through workflow logic",
            "Execute target system actions",
            "Update HubSpot",
        ]

    def test_generic_endpoints(self) -> None:
        assert generate_integration_flow(["actions"]) == [
            "Connect to source system",
            "Execute target system actions",
            "Update destination system",
        ]

    def test_no_destination_without_actions(self) -> None:
        assert generate_integration_flow(["events"]) == [
            "Connect to source system",
            "Listen for real-time events",
        ]


class TestSummary:
    def test_empty(self) -> None:
        assert building_blocks_summary([]) == "This integration uses core Membrane functionality."

    def test_lines(self) -> None:
        summary = building_blocks_summary(["actions", "events"])
        assert summary.splitlines() == [
            "**Actions**: Execute API requests and queries to external applications",
            "**Events**: Listen for and respond to changes in external systems",
        ]
