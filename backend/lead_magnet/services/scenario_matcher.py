"""Match a free-text use case to a scenario: keyword shortlist, LLM pick, generation fallback."""

import logging
import time
from typing import Callable, Iterable

from lead_magnet.catalog import SCENARIO_TEMPLATES
from lead_magnet.models.company import CompanyContext
from lead_magnet.models.llm_schemas import GeneratedScenario
from lead_magnet.models.scenario import (
    GENERATED_ID_PREFIX,
    MatchResult,
    ParsedUseCase,
    Persona,
    ScenarioTemplate,
)
from lead_magnet.services import keyword_scorer
from lead_magnet.services.artifacts import build_code_snippet
from lead_magnet.services.normalization import map_building_blocks, map_category
from lead_magnet.services.use_case_classifier import ClassifierResult, UseCaseClassifier

logger = logging.getLogger(__name__)

GENERATED_CONFIDENCE = 85
DEFAULT_TEMPLATE_CONFIDENCE = 50


class ScenarioMatcher:
    """Matches use cases to catalog scenarios, generating one when nothing fits.

    ``match`` returns ``None`` only for empty input. Every other path, including
    classifier failures, ends in a scenario with confidence of at least the
    usable threshold.
    """

    def __init__(
        self,
        classifier: UseCaseClassifier,
        catalog: Iterable[ScenarioTemplate] = SCENARIO_TEMPLATES,
        shortlist_limit: int = keyword_scorer.DEFAULT_LIMIT,
        min_confidence: int = 30,
        clock: Callable[[], float] = time.time,
    ):
        self.classifier = classifier
        self.catalog = tuple(catalog)
        self.shortlist_limit = shortlist_limit
        self.min_confidence = min_confidence
        self._clock = clock
        self._by_id = {template.id: template for template in self.catalog}

    def match(
        self,
        use_case: str,
        company: CompanyContext,
        persona: Persona = "executive",
    ) -> MatchResult | None:
        """Match a use case for a company.

        Args:
            use_case: Free-text integration use case
            company: Company context used in prompts and artifacts
            persona: Audience the generated code is written for

        Returns:
            MatchResult, or None when ``use_case`` is empty
        """
        if not use_case or not use_case.strip():
            return None

        shortlist = keyword_scorer.score(use_case, self.catalog, self.shortlist_limit)

        try:
            result = self.classifier.match_use_case(use_case, company, shortlist, persona)
        except Exception as e:
            logger.error(f"Classifier raised unexpectedly: {e}")
            result = ClassifierResult.failure(str(e))

        if not result.ok:
            return self._generate(use_case, company, None, f"Classifier failed: {result.error}")

        parsed = result.value.parsed_use_case
        selection = result.value.matched_scenario
        confidence = max(0, min(100, round(selection.confidence)))

        if not selection.scenario_id or confidence < self.min_confidence:
            reason = selection.fallback_reason or f"No usable match (confidence={confidence})"
            logger.info(f"Falling back to generation: {reason}")
            return self._generate(use_case, company, parsed, reason)

        # Resolve against the whole catalog, not just the shortlist
        scenario = self._by_id.get(selection.scenario_id)
        if scenario is None:
            logger.warning(f"Classifier returned unknown scenario id: {selection.scenario_id}")
            return self._generate(use_case, company, parsed, f"Unknown scenario id {selection.scenario_id}")

        return MatchResult(
            parsed_use_case=parsed,
            scenario=scenario.with_confidence(confidence),
            confidence=confidence,
            personalized_description=selection.personalized_description,
            code_snippet=build_code_snippet(scenario, company, parsed, selection.customized_code_snippet),
            is_generated=False,
            reasoning=selection.reasoning,
        )

    def _generated_id(self) -> str:
        return f"{GENERATED_ID_PREFIX}-{int(self._clock() * 1000)}"

    def _generate(
        self,
        use_case: str,
        company: CompanyContext,
        parsed: ParsedUseCase | None,
        reason: str,
    ) -> MatchResult:
        """Invent a scenario with the LLM, or fall back to a hard-coded template."""
        parsed = parsed or ParsedUseCase(description=use_case)

        try:
            result = self.classifier.generate_scenario(use_case, company, parsed)
        except Exception as e:
            logger.error(f"Scenario generation raised unexpectedly: {e}")
            result = ClassifierResult.failure(str(e))

        if result.ok:
            scenario = self._from_generated(result.value, GENERATED_CONFIDENCE)
            logger.info(f"Generated custom scenario '{scenario.name}' ({scenario.id})")
            return MatchResult(
                parsed_use_case=parsed,
                scenario=scenario,
                confidence=GENERATED_CONFIDENCE,
                personalized_description=scenario.description,
                code_snippet=build_code_snippet(scenario, company, parsed),
                is_generated=True,
                fallback_reason=reason,
            )

        logger.warning(f"Using default template, generation failed: {result.error}")
        scenario = self._default_template(parsed, company)
        return MatchResult(
            parsed_use_case=parsed,
            scenario=scenario,
            confidence=DEFAULT_TEMPLATE_CONFIDENCE,
            personalized_description=scenario.description,
            code_snippet=build_code_snippet(scenario, company, parsed),
            is_generated=True,
            fallback_reason=reason,
        )

    def _from_generated(self, generated: GeneratedScenario, confidence: int) -> ScenarioTemplate:
        return ScenarioTemplate(
            id=self._generated_id(),
            name=generated.name,
            description=generated.description,
            category=map_category(generated.category),
            keywords=tuple(generated.keywords),
            supported_apps=tuple(generated.supported_apps),
            building_blocks=tuple(map_building_blocks(generated.building_blocks)),
            code_example=generated.code_example,
            how_it_works=tuple(generated.how_it_works),
            confidence=confidence,
        )

    def _default_template(self, parsed: ParsedUseCase, company: CompanyContext) -> ScenarioTemplate:
        """Template built without the LLM from the use case and its systems."""
        source = parsed.source_system or "Source System"
        destination = parsed.destination_system or "Destination System"
        source_id = source.lower().replace(" ", "_")
        destination_id = destination.lower().replace(" ", "_")
        entity = parsed.entities[0] if parsed.entities else "record"

        code_example = f"""const membrane = require('@membrane/sdk');

// {parsed.description}
membrane.flows.create({{
  name: '{source} to {destination} for {company.name}',
  trigger: {{ provider: '{source_id}', event: '{entity}.updated' }},
  steps: [
    {{ action: 'fetch', provider: '{source_id}', entity: '{entity}' }},
    {{ action: 'map', mapping: 'default-{entity}-mapping' }},
    {{ action: 'upsert', provider: '{destination_id}', entity: '{entity}' }}
  ]
}});"""

        return ScenarioTemplate(
            id=self._generated_id(),
            name=f"Custom {source} to {destination} Integration",
            description=f"Custom integration for {company.name}: {parsed.description}",
            category=map_category(parsed.integration_type or ""),
            keywords=tuple(parsed.entities),
            supported_apps=tuple(s for s in (parsed.source_system, parsed.destination_system) if s),
            building_blocks=("actions", "events", "flows", "field-mappings"),
            code_example=code_example,
            how_it_works=(
                f"Connect {source} and {destination}",
                f"Listen for {entity} changes in {source}",
                "Map fields to the destination schema",
                f"Write updates to {destination}",
            ),
            confidence=DEFAULT_TEMPLATE_CONFIDENCE,
        )
