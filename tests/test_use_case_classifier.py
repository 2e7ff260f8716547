"""Tests for UseCaseClassifier prompt building and result handling."""

from __future__ import annotations

from unittest.mock import MagicMock

from conftest import make_analysis, make_generated
from lead_magnet.catalog import SCENARIO_TEMPLATES
from lead_magnet.exceptions import LLMError
from lead_magnet.models import CombinedAnalysis, GeneratedScenario, ParsedUseCase
from lead_magnet.prompts import PERSONA_INTROS
from lead_magnet.services.use_case_classifier import (
    UseCaseClassifier,
    format_company_block,
    format_systems_block,
)


class TestPrompts:
    def test_matching_prompt_contents(self, company) -> None:
        classifier = UseCaseClassifier(MagicMock(), min_confidence=30)

        system, user = classifier.build_matching_prompts(
            "sync invoices", company, list(SCENARIO_TEMPLATES[:2]), "technical"
        )

        assert system.startswith(PERSONA_INTROS["technical"])
        assert "confidence < 30" in system
        assert '"id": "unified-companies-sync"' in system
        assert '"id": "unified-contacts-sync"' in system
        assert '"id": "unified-invoices-sync"' not in system
        assert "Company: Acme" in user
        assert "Use Case: sync invoices" in user

    def test_company_block(self, company) -> None:
        assert format_company_block(company) == (
            "Company: Acme\nDescription: Acme builds sales software\nIndustry: Software"
        )

    def test_systems_block(self, parsed_use_case) -> None:
        assert format_systems_block(parsed_use_case) == (
            "Source System: Salesforce\nDestination System: HubSpot"
        )
        assert format_systems_block(None) == ""


class TestMatchUseCase:
    def test_success(self, company) -> None:
        llm = MagicMock()
        llm.query.return_value = make_analysis("etl-pipeline", 77)

        result = UseCaseClassifier(llm).match_use_case("etl", company, list(SCENARIO_TEMPLATES))

        assert result.ok
        assert result.value.matched_scenario.scenario_id == "etl-pipeline"
        assert llm.query.call_args.args[2] is CombinedAnalysis

    def test_llm_error_becomes_failure(self, company) -> None:
        llm = MagicMock()
        llm.query.side_effect = LLMError("Invalid response", "bad json")

        result = UseCaseClassifier(llm).match_use_case("etl", company, [])

        assert not result.ok
        assert result.error == "Invalid response"


class TestGenerateScenario:
    def test_success(self, company, parsed_use_case) -> None:
        llm = MagicMock()
        llm.query.return_value = make_generated()

        result = UseCaseClassifier(llm).generate_scenario("widgets", company, parsed_use_case)

        assert result.ok
        system, user, schema = llm.query.call_args.args
        assert schema is GeneratedScenario
        assert "Source System: Salesforce" in user

    def test_failure(self, company) -> None:
        llm = MagicMock()
        llm.query.side_effect = LLMError("Request timed out")

        result = UseCaseClassifier(llm).generate_scenario("widgets", company)

        assert result.error == "Request timed out"


class TestParseUseCase:
    def test_returns_parsed(self, company, parsed_use_case) -> None:
        llm = MagicMock()
        llm.query.return_value = parsed_use_case

        assert UseCaseClassifier(llm).parse_use_case("sync", company) == parsed_use_case
        assert "Company Description: Acme builds sales software" in llm.query.call_args.args[1]

    def test_failure_falls_back_to_raw_text(self) -> None:
        llm = MagicMock()
        llm.query.side_effect = LLMError("LLM service error")

        parsed = UseCaseClassifier(llm).parse_use_case("move invoices to xero")

        assert parsed == ParsedUseCase(description="move invoices to xero")

    def test_empty_input_skips_llm(self) -> None:
        llm = MagicMock()
        assert UseCaseClassifier(llm).parse_use_case("  ").description == ""
        llm.query.assert_not_called()
