"""Shared fixtures and fakes for the scenario generator tests."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from lead_magnet.config import Settings
from lead_magnet.models import (
    CombinedAnalysis,
    CompanyContext,
    GeneratedScenario,
    ParsedUseCase,
    ScenarioSelection,
)
from lead_magnet.services.use_case_classifier import ClassifierResult


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        openai_api_key="sk-test",
        anthropic_api_key=None,
        firecrawl_api_key="fc-test",
        logo_dev_api_key=None,
        scrape_max_attempts=2,
    )


@pytest.fixture
def company() -> CompanyContext:
    return CompanyContext(
        url="https://acme.com",
        domain="acme.com",
        name="Acme",
        description="Acme builds sales software",
        industry="Software",
    )


@pytest.fixture
def parsed_use_case() -> ParsedUseCase:
    return ParsedUseCase(
        description="Sync companies from Salesforce to HubSpot",
        entities=["companies"],
        actions=["sync"],
        source_system="Salesforce",
        destination_system="HubSpot",
        integration_type="sync",
    )


def make_analysis(
    scenario_id: str | None,
    confidence: float,
    parsed: ParsedUseCase | None = None,
    snippet: str = "",
) -> CombinedAnalysis:
    return CombinedAnalysis(
        parsed_use_case=parsed or ParsedUseCase(description="Sync companies", entities=["companies"]),
        matched_scenario=ScenarioSelection(
            scenario_id=scenario_id,
            confidence=confidence,
            personalized_description="Tailored description",
            customized_code_snippet=snippet,
            reasoning="Keywords overlap",
        ),
    )


def make_generated(**overrides) -> GeneratedScenario:
    fields = dict(
        name="Custom Widget Sync",
        description="Sync widgets between tools",
        category="Bi-Directional Sync",
        keywords=["widgets"],
        supported_apps=["Salesforce", "Airtable"],
        building_blocks=["Events", "field_mappings", "teleport"],
        code_example="membrane.flows.create({ provider: 'salesforce' })",
        how_it_works=["Connect", "Listen", "Write"],
    )
    fields.update(overrides)
    return GeneratedScenario(**fields)


class FakeClassifier:
    """Stands in for UseCaseClassifier, returning canned results and counting calls."""

    def __init__(
        self,
        match: ClassifierResult | Exception | None = None,
        generated: ClassifierResult | Exception | None = None,
        parsed: ParsedUseCase | None = None,
    ):
        self.match = match or ClassifierResult.failure("not configured")
        self.generated = generated or ClassifierResult.failure("not configured")
        self.parsed = parsed
        self.match_calls: list[tuple] = []
        self.generate_calls: list[tuple] = []
        self.parse_calls: list[tuple] = []

    def match_use_case(self, use_case, company, shortlist, persona="executive"):
        self.match_calls.append((use_case, company, list(shortlist), persona))
        if isinstance(self.match, Exception):
            raise self.match
        return self.match

    def generate_scenario(self, use_case, company, parsed=None):
        self.generate_calls.append((use_case, company, parsed))
        if isinstance(self.generated, Exception):
            raise self.generated
        return self.generated

    def parse_use_case(self, use_case, company=None):
        self.parse_calls.append((use_case, company))
        return self.parsed or ParsedUseCase(description=use_case)


class FakeRedis:
    """Dict-backed subset of the redis client used by CompanyCache."""

    def __init__(self):
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int] = {}

    def get(self, key):
        return self.store.get(key)

    def setex(self, key, ttl, value):
        self.store[key] = value
        self.ttls[key] = ttl


class FakeFirecrawl:
    """Firecrawl client stand-in; each scrape pops the next outcome."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls: list[tuple[str, dict]] = []

    def scrape(self, url, **kwargs):
        self.calls.append((url, kwargs))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def firecrawl_document(title=None, description=None, **extra) -> SimpleNamespace:
    return SimpleNamespace(
        markdown="# Home",
        metadata=SimpleNamespace(title=title, description=description, **extra),
    )


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()
