"""Tests for the deterministic keyword scorer."""

from __future__ import annotations

from lead_magnet.catalog import SCENARIO_TEMPLATES
from lead_magnet.models import ScenarioTemplate
from lead_magnet.services import keyword_scorer
from lead_magnet.services.keyword_scorer import score, score_all, score_template


def make_template(**overrides) -> ScenarioTemplate:
    fields = dict(
        id="t",
        name="Widget Mirror",
        description="Mirror widgets between two tools",
        category="workflow-automation",
        keywords=(),
        supported_apps=(),
        building_blocks=("actions",),
        code_example="",
        how_it_works=("a", "b", "c"),
    )
    fields.update(overrides)
    return ScenarioTemplate(**fields)


class TestScoreTemplate:
    """Individual scoring rules."""

    def test_name_contained_in_query(self) -> None:
        template = make_template()
        assert score_template("please set up a widget mirror for us", template) == 10

    def test_query_contained_in_description(self) -> None:
        template = make_template()
        assert score_template("between two", template) == 5

    def test_keyword_in_query_also_counts_token_overlap(self) -> None:
        template = make_template(keywords=("orders",))
        # +3 for the keyword, +1 for the token "orders"
        assert score_template("ship orders fast", template) == 4

    def test_token_overlap_in_either_direction(self) -> None:
        template = make_template(keywords=("invoices",))
        # "invoice" is inside the keyword; the keyword itself is not in the query
        assert score_template("invoice", template) == 1

    def test_category_bonus(self) -> None:
        template = make_template(category="bi-directional-sync")
        assert score_template("sync stuff", template) == 5

    def test_scoring_is_case_insensitive(self) -> None:
        template = make_template(keywords=("CRM",))
        assert score_template("crm", template) == score_template("CRM", template)

    def test_no_overlap_scores_zero(self) -> None:
        template = make_template(keywords=("orders",))
        assert score_template("zzz", template) == 0

    def test_example_query_ranks_unified_companies_first(self) -> None:
        query = "Sync companies across Salesforce, HubSpot, and Pipedrive using unified API"
        scores = {t.id: s for t, s in score_all(query, SCENARIO_TEMPLATES)}
        assert scores["unified-companies-sync"] == 24
        assert max(scores, key=scores.get) == "unified-companies-sync"


class TestScore:
    """Shortlisting behaviour."""

    def test_default_limit(self) -> None:
        assert keyword_scorer.DEFAULT_LIMIT == 30

    def test_respects_limit(self) -> None:
        assert len(score("sync data", SCENARIO_TEMPLATES, limit=3)) == 3

    def test_limit_larger_than_catalog_returns_everything(self) -> None:
        assert len(score("sync data", SCENARIO_TEMPLATES)) == len(SCENARIO_TEMPLATES)

    def test_empty_catalog(self) -> None:
        assert score("anything", []) == []

    def test_is_deterministic(self) -> None:
        query = "export invoices to a data warehouse"
        first = [t.id for t in score(query, SCENARIO_TEMPLATES)]
        second = [t.id for t in score(query, SCENARIO_TEMPLATES)]
        assert first == second

    def test_ties_keep_catalog_order(self) -> None:
        ranked = score("zzz", SCENARIO_TEMPLATES)
        assert [t.id for t in ranked] == [t.id for t in SCENARIO_TEMPLATES]

    def test_scores_are_non_increasing(self) -> None:
        pairs = score_all("import csv files into our warehouse", SCENARIO_TEMPLATES)
        scores = [s for _, s in pairs]
        assert scores == sorted(scores, reverse=True)

    def test_higher_score_ranks_first(self) -> None:
        low = make_template(id="low", keywords=("calendar",))
        high = make_template(id="high", keywords=("orders", "shipping"))
        ranked = score("orders shipping", [low, high])
        assert [t.id for t in ranked] == ["high", "low"]
