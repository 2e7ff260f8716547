"""LLM-backed use-case classification: parse, match against a shortlist, or invent a scenario."""

import json
import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from lead_magnet.exceptions import LLMError
from lead_magnet.models.company import CompanyContext
from lead_magnet.models.llm_schemas import CombinedAnalysis, GeneratedScenario
from lead_magnet.models.scenario import ParsedUseCase, Persona, ScenarioTemplate
from lead_magnet.prompts import (
    CODE_STYLE_INSTRUCTIONS,
    PERSONA_INTROS,
    SCENARIO_GENERATION_SYSTEM_PROMPT,
    SCENARIO_GENERATION_USER_PROMPT,
    SCENARIO_MATCHING_SYSTEM_PROMPT,
    SCENARIO_MATCHING_USER_PROMPT,
    USE_CASE_PARSING_SYSTEM_PROMPT,
    USE_CASE_PARSING_USER_PROMPT,
)
from lead_magnet.services.llm_client import LLMClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ClassifierResult(Generic[T]):
    """Tagged result of a classifier call: either ``value`` or ``error`` is set."""
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None

    @classmethod
    def success(cls, value: T) -> "ClassifierResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "ClassifierResult[T]":
        return cls(error=error)


def format_company_block(company: CompanyContext) -> str:
    """Company lines shared by every prompt."""
    lines = [f"Company: {company.name}"]
    if company.description:
        lines.append(f"Description: {company.description}")
    if company.industry:
        lines.append(f"Industry: {company.industry}")
    return "\n".join(lines)


def format_systems_block(parsed: ParsedUseCase | None) -> str:
    if parsed is None:
        return ""
    lines = []
    if parsed.source_system:
        lines.append(f"Source System: {parsed.source_system}")
    if parsed.destination_system:
        lines.append(f"Destination System: {parsed.destination_system}")
    return "\n".join(lines)


class UseCaseClassifier:
    """Builds classification prompts and returns schema-validated results."""

    def __init__(self, llm: LLMClient, min_confidence: int = 30):
        self.llm = llm
        self.min_confidence = min_confidence

    def build_matching_prompts(
        self,
        use_case: str,
        company: CompanyContext,
        shortlist: list[ScenarioTemplate],
        persona: Persona = "executive",
    ) -> tuple[str, str]:
        """Build (system, user) prompts for the combined parse-and-match call."""
        scenarios = json.dumps([s.summary() for s in shortlist], indent=2)
        system_prompt = SCENARIO_MATCHING_SYSTEM_PROMPT.format(
            persona_intro=PERSONA_INTROS[persona],
            min_confidence=self.min_confidence,
            code_instructions=CODE_STYLE_INSTRUCTIONS[persona],
            scenarios=scenarios,
        )
        user_prompt = SCENARIO_MATCHING_USER_PROMPT.format(
            company_block=format_company_block(company),
            use_case=use_case,
        )
        return system_prompt, user_prompt

    def match_use_case(
        self,
        use_case: str,
        company: CompanyContext,
        shortlist: list[ScenarioTemplate],
        persona: Persona = "executive",
    ) -> ClassifierResult[CombinedAnalysis]:
        """Parse the use case and pick a scenario from ``shortlist``."""
        system_prompt, user_prompt = self.build_matching_prompts(use_case, company, shortlist, persona)

        logger.info(f"Matching use case against {len(shortlist)} scenarios (persona={persona})")

        try:
            analysis = self.llm.query(system_prompt, user_prompt, CombinedAnalysis)
        except LLMError as e:
            logger.warning(f"Scenario matching failed: {e}")
            return ClassifierResult.failure(e.reason)

        selection = analysis.matched_scenario
        logger.info(
            f"Classifier picked scenario={selection.scenario_id} "
            f"confidence={selection.confidence:.0f}"
        )
        return ClassifierResult.success(analysis)

    def generate_scenario(
        self,
        use_case: str,
        company: CompanyContext,
        parsed: ParsedUseCase | None = None,
    ) -> ClassifierResult[GeneratedScenario]:
        """Ask the model to invent a complete scenario template for the use case."""
        user_prompt = SCENARIO_GENERATION_USER_PROMPT.format(
            company_block=format_company_block(company),
            use_case=use_case,
            systems_block=format_systems_block(parsed),
        )

        logger.info("Generating custom scenario")

        try:
            generated = self.llm.query(SCENARIO_GENERATION_SYSTEM_PROMPT, user_prompt, GeneratedScenario)
        except LLMError as e:
            logger.warning(f"Scenario generation failed: {e}")
            return ClassifierResult.failure(e.reason)

        return ClassifierResult.success(generated)

    def parse_use_case(self, use_case: str, company: CompanyContext | None = None) -> ParsedUseCase:
        """Extract structured requirements from a use case on its own.

        Never raises: on failure the raw text becomes the description.
        """
        if not use_case or not use_case.strip():
            return ParsedUseCase(description="")

        user_prompt = USE_CASE_PARSING_USER_PROMPT.format(
            company_name=company.name if company else "Unknown",
            company_description=f"Company Description: {company.description}\n"
            if company and company.description
            else "",
            use_case=use_case,
        )

        try:
            return self.llm.query(USE_CASE_PARSING_SYSTEM_PROMPT, user_prompt, ParsedUseCase)
        except LLMError as e:
            logger.warning(f"Use case parsing failed: {e}")
            return ParsedUseCase(description=use_case)
