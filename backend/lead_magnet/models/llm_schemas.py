"""Schemas the LLM replies are validated against.

Field names are camelCase on the wire, snake_case in Python.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lead_magnet.models.scenario import ParsedUseCase


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScenarioSelection(_CamelModel):
    scenario_id: str | None
    confidence: float = Field(ge=0, le=100)
    personalized_description: str
    customized_code_snippet: str
    reasoning: str
    fallback_reason: str | None = None


class CombinedAnalysis(_CamelModel):
    """Reply to the parse-and-match prompt."""

    parsed_use_case: ParsedUseCase
    matched_scenario: ScenarioSelection


class GeneratedScenario(_CamelModel):
    """Reply to the scenario generation prompt.

    Category and building blocks are free strings here; they are coerced into
    the fixed vocabularies afterwards.
    """

    name: str
    description: str
    category: str
    keywords: list[str]
    supported_apps: list[str]
    building_blocks: list[str]
    code_example: str
    how_it_works: list[str] = Field(min_length=3, max_length=4)


class PersonalizedScenario(_CamelModel):
    """Reply to the personalization prompt."""

    title: str
    description: str
    business_value: str
    implementation_steps: list[str] = Field(min_length=3, max_length=5)
    key_benefits: list[str] = Field(min_length=3, max_length=4)
    estimated_time_to_value: str
    suggested_next_steps: list[str] = Field(min_length=2, max_length=3)
    technical_highlights: Annotated[list[str], Field(min_length=2, max_length=3)] | None = None
