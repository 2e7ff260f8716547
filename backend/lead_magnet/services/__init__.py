"""Business logic services."""

from lead_magnet.services.company_scraper import CompanyScraper
from lead_magnet.services.llm_client import LLMClient
from lead_magnet.services.scenario_matcher import ScenarioMatcher
from lead_magnet.services.scenario_service import (
    GenerationOutcome,
    ScenarioGenerationResult,
    ScenarioService,
    build_service,
)
from lead_magnet.services.use_case_classifier import UseCaseClassifier

__all__ = [
    "CompanyScraper",
    "LLMClient",
    "ScenarioMatcher",
    "GenerationOutcome",
    "ScenarioGenerationResult",
    "ScenarioService",
    "build_service",
    "UseCaseClassifier",
]
