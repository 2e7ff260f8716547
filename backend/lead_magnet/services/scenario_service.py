"""Scenario generation entrypoint: company lookup, matching and artifact assembly."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from lead_magnet.config import Settings
from lead_magnet.exceptions import InvalidInputError
from lead_magnet.models.company import CompanyContext, CompanyLookupResult
from lead_magnet.models.llm_schemas import PersonalizedScenario
from lead_magnet.models.scenario import PERSONAS, ParsedUseCase, Persona, ScenarioTemplate
from lead_magnet.services.artifacts import build_json_spec
from lead_magnet.services.building_blocks import (
    BuildingBlockDetail,
    ComplexityEstimate,
    describe_building_blocks,
    estimate_complexity,
    generate_integration_flow,
)
from lead_magnet.services.company_cache import CompanyCache
from lead_magnet.services.company_scraper import CompanyScraper
from lead_magnet.services.llm_client import LLMClient
from lead_magnet.services.logo_urls import application_logo_urls
from lead_magnet.services.personalizer import personalize_scenario
from lead_magnet.services.scenario_matcher import ScenarioMatcher
from lead_magnet.services.use_case_classifier import UseCaseClassifier

logger = logging.getLogger(__name__)

MAX_APPLICATION_LOGOS = 8
NO_MATCH_MESSAGE = "Could not match your use case to a scenario. Please try with more details."
WEAK_MATCH_MESSAGE = "No strong match found for your use case."
GENERATION_FAILED_MESSAGE = "Failed to generate scenario"


@dataclass
class ScenarioGenerationResult:
    """Everything the results page shows for one generated scenario."""
    company_context: CompanyContext
    parsed_use_case: ParsedUseCase
    matched_scenario: ScenarioTemplate
    personalized_description: str
    code_snippet: str
    json_spec: dict[str, Any]
    application_logos: list[str]
    confidence: int
    is_generated: bool
    building_blocks: list[BuildingBlockDetail]
    integration_flow: list[str]
    complexity: ComplexityEstimate
    personalization: PersonalizedScenario | None = None


@dataclass
class GenerationOutcome:
    """Result envelope of ``generate_scenario``.

    ``no_match`` distinguishes "nothing usable was found" from other failures.
    """
    success: bool
    data: ScenarioGenerationResult | None = None
    error: str | None = None
    no_match: bool = False

    @classmethod
    def failure(cls, error: str, no_match: bool = False) -> "GenerationOutcome":
        return cls(success=False, error=error, no_match=no_match)


@dataclass
class ScenarioService:
    """Wires the scraper, matcher and artifact generators together."""
    matcher: ScenarioMatcher
    scraper: CompanyScraper
    llm: LLMClient | None = None
    min_confidence: int = 30
    logo_token: str | None = None
    now: Callable[[], datetime] = field(default=lambda: datetime.now(timezone.utc))

    def lookup_company(self, domain: str) -> CompanyLookupResult:
        """Look up company metadata; raises InvalidDomainError for malformed domains."""
        return self.scraper.lookup(domain)

    def parse_use_case(self, use_case: str, company: CompanyContext | None = None) -> ParsedUseCase:
        if not use_case or not use_case.strip():
            raise InvalidInputError("Use case must not be empty")
        return self.matcher.classifier.parse_use_case(use_case, company)

    def generate_scenario(
        self,
        company: CompanyContext,
        use_case: str,
        persona: Persona = "executive",
        personalize: bool = False,
    ) -> GenerationOutcome:
        """Generate a scenario and its artifacts for a company and use case.

        Args:
            company: Company context from a previous lookup
            use_case: Free-text integration use case
            persona: Audience for the code snippet and description
            personalize: Also produce a long-form personalized write-up

        Returns:
            GenerationOutcome; ``no_match`` is set when no usable scenario exists

        Raises:
            InvalidInputError: If ``use_case`` is empty or ``persona`` is unknown
        """
        if not use_case or not use_case.strip():
            raise InvalidInputError("Use case must not be empty")
        if persona not in PERSONAS:
            raise InvalidInputError(f"Unknown persona: {persona!r}")

        try:
            match = self.matcher.match(use_case, company, persona)

            if match is None:
                return GenerationOutcome.failure(NO_MATCH_MESSAGE, no_match=True)

            if match.confidence < self.min_confidence:
                logger.info(f"Match confidence {match.confidence} below threshold for {company.domain}")
                return GenerationOutcome.failure(WEAK_MATCH_MESSAGE, no_match=True)

            scenario = match.scenario
            parsed = match.parsed_use_case

            personalization = None
            if personalize and self.llm is not None:
                personalization = personalize_scenario(self.llm, scenario, company, parsed)

            result = ScenarioGenerationResult(
                company_context=company,
                parsed_use_case=parsed,
                matched_scenario=scenario,
                personalized_description=match.personalized_description,
                code_snippet=match.code_snippet,
                json_spec=build_json_spec(scenario, company, parsed, match.confidence, now=self.now()),
                application_logos=application_logo_urls(
                    list(scenario.supported_apps), self.logo_token, MAX_APPLICATION_LOGOS
                ),
                confidence=match.confidence,
                is_generated=match.is_generated,
                building_blocks=describe_building_blocks(scenario),
                integration_flow=generate_integration_flow(
                    list(scenario.building_blocks), parsed.source_system, parsed.destination_system
                ),
                complexity=estimate_complexity(list(scenario.building_blocks)),
                personalization=personalization,
            )
        except Exception as e:
            logger.exception(f"Error generating scenario for {company.domain}: {e}")
            return GenerationOutcome.failure(GENERATION_FAILED_MESSAGE)

        logger.info(
            f"Generated scenario {result.matched_scenario.id} for {company.domain} "
            f"(confidence={result.confidence}, generated={result.is_generated})"
        )
        return GenerationOutcome(success=True, data=result)


def build_service(settings: Settings) -> ScenarioService:
    """Construct the service and its external clients once per process."""
    llm = LLMClient(settings)
    classifier = UseCaseClassifier(llm, min_confidence=settings.min_confidence)
    matcher = ScenarioMatcher(
        classifier,
        shortlist_limit=settings.shortlist_limit,
        min_confidence=settings.min_confidence,
    )
    cache = CompanyCache(settings) if settings.company_cache_enabled else None
    scraper = CompanyScraper(settings, cache=cache)

    return ScenarioService(
        matcher=matcher,
        scraper=scraper,
        llm=llm,
        min_confidence=settings.min_confidence,
        logo_token=settings.logo_dev_api_key,
    )
