"""LLM prompts for various tasks."""

from lead_magnet.prompts.scenario_generation import (
    SCENARIO_GENERATION_SYSTEM_PROMPT,
    SCENARIO_GENERATION_USER_PROMPT,
)
from lead_magnet.prompts.scenario_matching import (
    CODE_STYLE_INSTRUCTIONS,
    PERSONA_INTROS,
    SCENARIO_MATCHING_SYSTEM_PROMPT,
    SCENARIO_MATCHING_USER_PROMPT,
)
from lead_magnet.prompts.scenario_personalization import (
    SCENARIO_PERSONALIZATION_SYSTEM_PROMPT,
    SCENARIO_PERSONALIZATION_USER_PROMPT,
)
from lead_magnet.prompts.use_case_parsing import (
    USE_CASE_PARSING_SYSTEM_PROMPT,
    USE_CASE_PARSING_USER_PROMPT,
)

__all__ = [
    "CODE_STYLE_INSTRUCTIONS",
    "PERSONA_INTROS",
    "SCENARIO_GENERATION_SYSTEM_PROMPT",
    "SCENARIO_GENERATION_USER_PROMPT",
    "SCENARIO_MATCHING_SYSTEM_PROMPT",
    "SCENARIO_MATCHING_USER_PROMPT",
    "SCENARIO_PERSONALIZATION_SYSTEM_PROMPT",
    "SCENARIO_PERSONALIZATION_USER_PROMPT",
    "USE_CASE_PARSING_SYSTEM_PROMPT",
    "USE_CASE_PARSING_USER_PROMPT",
]
