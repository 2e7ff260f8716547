"""Tests for the static scenario catalog and its lookup helpers."""

from __future__ import annotations

from lead_magnet.catalog import (
    SCENARIO_TEMPLATES,
    all_categories,
    all_supported_apps,
    find_by_category,
    find_by_id,
    find_by_keywords,
    find_by_supported_apps,
)
from lead_magnet.models import BUILDING_BLOCKS, SCENARIO_CATEGORIES


class TestCatalogInvariants:
    def test_ids_are_unique(self) -> None:
        ids = [t.id for t in SCENARIO_TEMPLATES]
        assert len(ids) == len(set(ids))

    def test_categories_and_blocks_in_fixed_sets(self) -> None:
        for template in SCENARIO_TEMPLATES:
            assert template.category in SCENARIO_CATEGORIES
            assert set(template.building_blocks) <= set(BUILDING_BLOCKS)
            assert len(template.building_blocks) == len(set(template.building_blocks))

    def test_how_it_works_has_three_or_four_steps(self) -> None:
        for template in SCENARIO_TEMPLATES:
            assert 3 <= len(template.how_it_works) <= 4, template.id

    def test_no_template_is_generated(self) -> None:
        assert not any(t.is_generated for t in SCENARIO_TEMPLATES)


class TestHelpers:
    def test_find_by_id(self) -> None:
        assert find_by_id("calendar-sync").name == "Multi-Calendar Synchronization"
        assert find_by_id("missing") is None

    def test_find_by_keywords_is_case_insensitive(self) -> None:
        ids = [t.id for t in find_by_keywords(["ETL"])]
        assert ids == ["bulk-data-import", "etl-pipeline"]

    def test_find_by_category(self) -> None:
        ids = [t.id for t in find_by_category("webhook-events")]
        assert ids == ["webhook-processor", "real-time-alerts", "ecommerce-order-events"]

    def test_find_by_supported_apps(self) -> None:
        ids = {t.id for t in find_by_supported_apps(["shopify"])}
        assert {"webhook-processor", "ecommerce-order-events"} <= ids

    def test_all_supported_apps_sorted_and_unique(self) -> None:
        apps = all_supported_apps()
        assert apps == sorted(set(apps))
        assert "Salesforce" in apps

    def test_all_categories_first_seen_order(self) -> None:
        assert all_categories() == [
            "unified-api",
            "data-import-export",
            "bi-directional-sync",
            "workflow-automation",
            "webhook-events",
            "data-transformation",
        ]
