"""Scenario, use-case and match types."""

from dataclasses import dataclass, replace
from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ScenarioCategory = Literal[
    "unified-api",
    "data-import-export",
    "bi-directional-sync",
    "workflow-automation",
    "webhook-events",
    "data-transformation",
]

BuildingBlock = Literal[
    "actions",
    "events",
    "flows",
    "data-collections",
    "unified-data-models",
    "field-mappings",
]

IntegrationType = Literal["sync", "trigger", "action", "bidirectional", "import", "export"]

Persona = Literal["technical", "executive", "business"]

SCENARIO_CATEGORIES: tuple[str, ...] = get_args(ScenarioCategory)
BUILDING_BLOCKS: tuple[str, ...] = get_args(BuildingBlock)
INTEGRATION_TYPES: tuple[str, ...] = get_args(IntegrationType)
PERSONAS: tuple[str, ...] = get_args(Persona)

DEFAULT_CATEGORY: ScenarioCategory = "workflow-automation"
GENERATED_ID_PREFIX = "custom-generated"


@dataclass(frozen=True)
class ScenarioTemplate:
    """A canned integration pattern from the catalog, or a one-off generated one."""
    id: str
    name: str
    description: str
    category: ScenarioCategory
    keywords: tuple[str, ...]
    supported_apps: tuple[str, ...]
    building_blocks: tuple[BuildingBlock, ...]
    code_example: str
    how_it_works: tuple[str, ...]
    confidence: int | None = None

    @property
    def is_generated(self) -> bool:
        return self.id.startswith(GENERATED_ID_PREFIX)

    def with_confidence(self, confidence: int) -> "ScenarioTemplate":
        return replace(self, confidence=confidence)

    def summary(self, max_keywords: int = 5) -> dict:
        """Compact representation used in classifier prompts and catalog listings."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "keywords": list(self.keywords[:max_keywords]),
        }


class ParsedUseCase(BaseModel):
    """Structured reading of a free-text integration use case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    description: str
    entities: list[str] = Field(default_factory=list)
    actions: list[str] = Field(default_factory=list)
    source_system: str | None = None
    destination_system: str | None = None
    integration_type: IntegrationType | None = None


@dataclass
class MatchResult:
    """Outcome of matching a use case to a scenario.

    Confidence below 30 means "no usable match" for every caller.
    """
    parsed_use_case: ParsedUseCase
    scenario: ScenarioTemplate
    confidence: int
    personalized_description: str
    code_snippet: str
    is_generated: bool = False
    reasoning: str = ""
    fallback_reason: str | None = None
