"""Tests for ScenarioMatcher gating and fallbacks."""

from __future__ import annotations

import pytest

from conftest import FakeClassifier, make_analysis, make_generated
from lead_magnet.catalog import SCENARIO_TEMPLATES
from lead_magnet.services.scenario_matcher import (
    DEFAULT_TEMPLATE_CONFIDENCE,
    GENERATED_CONFIDENCE,
    ScenarioMatcher,
)
from lead_magnet.services.use_case_classifier import ClassifierResult

USE_CASE = "Sync companies across Salesforce, HubSpot, and Pipedrive using unified API"


def make_matcher(classifier: FakeClassifier, **kwargs) -> ScenarioMatcher:
    return ScenarioMatcher(classifier, clock=lambda: 1700000000.5, **kwargs)


class TestEmptyInput:
    @pytest.mark.parametrize("use_case", ["", "   ", "\n\t"])
    def test_returns_none_without_calling_classifier(self, company, use_case: str) -> None:
        classifier = FakeClassifier()
        assert make_matcher(classifier).match(use_case, company) is None
        assert classifier.match_calls == []
        assert classifier.generate_calls == []


class TestCatalogMatch:
    def test_high_confidence_match_uses_catalog_template(self, company) -> None:
        classifier = FakeClassifier(match=ClassifierResult.success(make_analysis("unified-companies-sync", 92)))

        result = make_matcher(classifier).match(USE_CASE, company)

        assert result.scenario.id == "unified-companies-sync"
        assert result.confidence == 92
        assert result.scenario.confidence == 92
        assert result.is_generated is False
        assert result.personalized_description == "Tailored description"
        assert len(classifier.match_calls) == 1
        assert classifier.generate_calls == []

    def test_shortlist_is_keyword_ranked(self, company) -> None:
        classifier = FakeClassifier(match=ClassifierResult.success(make_analysis("unified-companies-sync", 92)))

        make_matcher(classifier).match(USE_CASE, company)

        shortlist = classifier.match_calls[0][2]
        assert shortlist[0].id == "unified-companies-sync"
        assert len(shortlist) == len(SCENARIO_TEMPLATES)

    def test_shortlist_limit_is_forwarded(self, company) -> None:
        classifier = FakeClassifier(match=ClassifierResult.success(make_analysis("unified-companies-sync", 92)))

        make_matcher(classifier, shortlist_limit=5).match(USE_CASE, company)

        assert len(classifier.match_calls[0][2]) == 5

    def test_persona_is_forwarded(self, company) -> None:
        classifier = FakeClassifier(match=ClassifierResult.success(make_analysis("etl-pipeline", 70)))

        make_matcher(classifier).match("build an etl pipeline", company, "technical")

        assert classifier.match_calls[0][3] == "technical"

    def test_personalized_snippet_wins(self, company) -> None:
        analysis = make_analysis("etl-pipeline", 70, snippet="// custom code")
        classifier = FakeClassifier(match=ClassifierResult.success(analysis))

        result = make_matcher(classifier).match("etl", company)

        assert result.code_snippet == "// custom code"

    def test_confidence_exactly_at_threshold_is_accepted(self, company) -> None:
        classifier = FakeClassifier(match=ClassifierResult.success(make_analysis("etl-pipeline", 30)))

        result = make_matcher(classifier).match("etl", company)

        assert result.scenario.id == "etl-pipeline"
        assert classifier.generate_calls == []

    def test_id_outside_shortlist_resolves_against_full_catalog(self, company) -> None:
        classifier = FakeClassifier(match=ClassifierResult.success(make_analysis("calendar-sync", 80)))

        result = make_matcher(classifier, shortlist_limit=1).match(USE_CASE, company)

        assert result.scenario.id == "calendar-sync"
        assert result.is_generated is False


class TestGenerationFallback:
    def test_low_confidence_triggers_generation(self, company) -> None:
        classifier = FakeClassifier(
            match=ClassifierResult.success(make_analysis("etl-pipeline", 29)),
            generated=ClassifierResult.success(make_generated()),
        )

        result = make_matcher(classifier).match("widgets", company)

        assert len(classifier.match_calls) == 1
        assert len(classifier.generate_calls) == 1
        assert result.is_generated is True
        assert result.confidence == GENERATED_CONFIDENCE
        assert result.scenario.id == "custom-generated-1700000000500"

    def test_generated_scenario_is_normalized(self, company) -> None:
        classifier = FakeClassifier(
            match=ClassifierResult.success(make_analysis(None, 10)),
            generated=ClassifierResult.success(make_generated()),
        )

        scenario = make_matcher(classifier).match("widgets", company).scenario

        assert scenario.category == "bi-directional-sync"
        assert scenario.building_blocks == ("events", "field-mappings")
        assert scenario.confidence == GENERATED_CONFIDENCE

    def test_generation_receives_parsed_use_case(self, company, parsed_use_case) -> None:
        classifier = FakeClassifier(
            match=ClassifierResult.success(make_analysis(None, 0, parsed=parsed_use_case)),
            generated=ClassifierResult.success(make_generated()),
        )

        result = make_matcher(classifier).match("widgets", company)

        assert classifier.generate_calls[0][2] == parsed_use_case
        assert result.parsed_use_case == parsed_use_case

    def test_unknown_scenario_id_triggers_generation(self, company) -> None:
        classifier = FakeClassifier(
            match=ClassifierResult.success(make_analysis("does-not-exist", 95)),
            generated=ClassifierResult.success(make_generated()),
        )

        result = make_matcher(classifier).match("widgets", company)

        assert result.is_generated is True
        assert len(classifier.generate_calls) == 1

    def test_classifier_failure_triggers_generation(self, company) -> None:
        classifier = FakeClassifier(
            match=ClassifierResult.failure("Rate limit exceeded. Please try again later."),
            generated=ClassifierResult.success(make_generated()),
        )

        result = make_matcher(classifier).match("widgets", company)

        assert result.is_generated is True
        assert result.parsed_use_case.description == "widgets"
        assert "Rate limit" in result.fallback_reason

    def test_classifier_exception_is_contained(self, company) -> None:
        classifier = FakeClassifier(
            match=RuntimeError("boom"),
            generated=ClassifierResult.success(make_generated()),
        )

        result = make_matcher(classifier).match("widgets", company)

        assert result.is_generated is True
        assert result.confidence == GENERATED_CONFIDENCE

    def test_generation_failure_uses_default_template(self, company, parsed_use_case) -> None:
        classifier = FakeClassifier(
            match=ClassifierResult.success(make_analysis(None, 5, parsed=parsed_use_case)),
            generated=ClassifierResult.failure("Invalid response"),
        )

        result = make_matcher(classifier).match("widgets", company)

        assert result.is_generated is True
        assert result.confidence == DEFAULT_TEMPLATE_CONFIDENCE
        assert result.scenario.name == "Custom Salesforce to HubSpot Integration"
        assert result.scenario.category == "bi-directional-sync"
        assert result.scenario.building_blocks == ("actions", "events", "flows", "field-mappings")
        assert parsed_use_case.description in result.scenario.code_example

    def test_everything_failing_still_returns_usable_confidence(self, company) -> None:
        classifier = FakeClassifier(match=RuntimeError("down"), generated=RuntimeError("down"))

        result = make_matcher(classifier).match("widgets", company)

        assert result is not None
        assert result.confidence >= 30
        assert result.scenario.id.startswith("custom-generated-")
