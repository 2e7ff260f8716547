"""Domain types and LLM reply schemas."""

from lead_magnet.models.company import CompanyContext, CompanyLookupResult
from lead_magnet.models.llm_schemas import (
    CombinedAnalysis,
    GeneratedScenario,
    PersonalizedScenario,
    ScenarioSelection,
)
from lead_magnet.models.scenario import (
    BUILDING_BLOCKS,
    DEFAULT_CATEGORY,
    GENERATED_ID_PREFIX,
    INTEGRATION_TYPES,
    PERSONAS,
    SCENARIO_CATEGORIES,
    BuildingBlock,
    IntegrationType,
    MatchResult,
    ParsedUseCase,
    Persona,
    ScenarioCategory,
    ScenarioTemplate,
)

__all__ = [
    "BUILDING_BLOCKS",
    "DEFAULT_CATEGORY",
    "GENERATED_ID_PREFIX",
    "INTEGRATION_TYPES",
    "PERSONAS",
    "SCENARIO_CATEGORIES",
    "BuildingBlock",
    "CombinedAnalysis",
    "CompanyContext",
    "CompanyLookupResult",
    "GeneratedScenario",
    "IntegrationType",
    "MatchResult",
    "ParsedUseCase",
    "Persona",
    "PersonalizedScenario",
    "ScenarioCategory",
    "ScenarioSelection",
    "ScenarioTemplate",
]
