"""Personalize a matched scenario for one company."""

import logging
import re

from lead_magnet.exceptions import LLMError
from lead_magnet.models.company import CompanyContext
from lead_magnet.models.llm_schemas import PersonalizedScenario
from lead_magnet.models.scenario import ParsedUseCase, ScenarioTemplate
from lead_magnet.prompts import (
    SCENARIO_PERSONALIZATION_SYSTEM_PROMPT,
    SCENARIO_PERSONALIZATION_USER_PROMPT,
)
from lead_magnet.services.artifacts import is_bidirectional
from lead_magnet.services.llm_client import LLMClient
from lead_magnet.services.use_case_classifier import format_company_block, format_systems_block

logger = logging.getLogger(__name__)


def personalize_scenario(
    llm: LLMClient,
    scenario: ScenarioTemplate,
    company: CompanyContext,
    parsed: ParsedUseCase,
) -> PersonalizedScenario:
    """Ask the LLM for a company-specific write-up of a scenario.

    Args:
        llm: LLM client used for the structured call
        scenario: Matched or generated scenario
        company: Company the write-up is for
        parsed: Structured use case

    Returns:
        PersonalizedScenario; a deterministic basic write-up when the LLM call
        fails for any reason
    """
    user_prompt = SCENARIO_PERSONALIZATION_USER_PROMPT.format(
        company_block=format_company_block(company),
        domain=company.domain,
        use_case=parsed.description,
        entities=", ".join(parsed.entities),
        actions=", ".join(parsed.actions),
        systems_block=format_systems_block(parsed),
        scenario_name=scenario.name,
        scenario_description=scenario.description,
        scenario_category=scenario.category,
        supported_apps=", ".join(scenario.supported_apps[:10]),
        building_blocks=", ".join(scenario.building_blocks),
        company_name=company.name,
    )

    try:
        return llm.query(SCENARIO_PERSONALIZATION_SYSTEM_PROMPT, user_prompt, PersonalizedScenario)
    except LLMError as e:
        logger.warning(f"Personalization failed, using basic personalization: {e}")
        return basic_personalization(scenario, company, parsed)


def basic_personalization(
    scenario: ScenarioTemplate,
    company: CompanyContext,
    parsed: ParsedUseCase,
) -> PersonalizedScenario:
    """Template-driven personalization that needs no LLM."""
    company_name = company.name or "Your Company"
    industry = company.industry or "your industry"

    systems = [
        s
        for s in (parsed.source_system, parsed.destination_system, *scenario.supported_apps[:3])
        if s
    ][:4]
    entity = parsed.entities[0] if parsed.entities else None
    first_system = systems[0] if systems else None

    description = re.sub(r"your (company|business|organization)", company_name, scenario.description, flags=re.I)
    description = re.sub(r"across multiple", f"across {company_name}'s", description, flags=re.I)
    description = re.sub(r"all your", f"all {company_name}'s", description, flags=re.I)

    business_value = (
        f"By implementing this {scenario.category.replace('-', ' ', 1)} solution, {company_name} "
        f"can streamline {', '.join(parsed.entities)} management, reduce manual data entry by up "
        f"to 80%, and ensure real-time synchronization across {', '.join(systems)}. This will "
        f"significantly improve operational efficiency and data accuracy in {industry}."
    )

    bidirectional = is_bidirectional(scenario, parsed)
    has_events = "events" in scenario.building_blocks

    if has_events:
        external_step = (
            f"Continuous Sync (External): Subscribe to webhooks for real-time {entity or 'entity'} "
            f"created/updated/deleted events from {first_system or 'external system'}"
        )
    else:
        external_step = (
            f"Continuous Sync: Set up 5-minute polling intervals to detect changes in "
            f"{first_system or 'external system'}"
        )

    if bidirectional:
        outbound_step = (
            f"Continuous Sync (Your App): Configure webhook endpoint at "
            f"/webhook/{company.domain.replace('.', '-') or 'your-domain'} to send updates from "
            f"{company_name} to external systems"
        )
    else:
        target = systems[1] if len(systems) > 1 else first_system
        outbound_step = f"Data Flow: Transform and push {entity or 'data'} updates to {target or 'destination'}"

    implementation_steps = [
        f"Initial Sync: Import existing {entity or 'data'} from {first_system or 'source system'} "
        f"using paginated API calls (100 records per batch) to Membrane's unified data model",
        external_step,
        outbound_step,
        f"Field Mapping: Configure automatic transformation between {company_name}'s schema and "
        f"{'/'.join(systems)} field structures using Membrane's mapping engine",
    ]

    key_benefits = [
        f"Eliminate 100% of manual data entry between {' and '.join(systems[:2]) or 'systems'}",
        "Reduce integration development time by 90% (from months to days)",
        f"Enable real-time {entity or 'data'} synchronization with <1 second latency"
        if has_events
        else f"Synchronize {entity or 'data'} every 5 minutes across all systems",
        f"Handle {company_name}'s scale with automatic pagination and retry mechanisms",
    ]

    block_count = len(scenario.building_blocks)
    if block_count > 4:
        time_to_value = "2-3 weeks for full production deployment with testing"
    elif block_count > 2:
        time_to_value = "1-2 weeks for implementation and testing"
    else:
        time_to_value = "3-5 days for basic integration setup"

    return PersonalizedScenario(
        title=f"{scenario.name} for {company_name}",
        description=description,
        business_value=business_value,
        implementation_steps=implementation_steps,
        key_benefits=key_benefits,
        estimated_time_to_value=time_to_value,
        suggested_next_steps=[
            f"Book a technical demo to see the {scenario.name} pattern implemented for {company_name}",
            f"Start a 14-day free trial with pre-built connectors for {first_system or 'your systems'}",
            "Get API credentials and begin initial sync implementation within 24 hours",
        ],
        technical_highlights=[
            "Automatic handling of API rate limits and pagination",
            "Built-in error recovery with exponential backoff",
            f"Support for {', '.join(systems) if systems else 'multiple systems'} with unified API",
        ],
    )
