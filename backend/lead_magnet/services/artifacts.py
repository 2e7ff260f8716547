"""Display artifacts for a matched scenario: the code snippet and the JSON specification."""

import re
from datetime import datetime, timezone
from typing import Any

from lead_magnet.models.company import CompanyContext
from lead_magnet.models.scenario import GENERATED_ID_PREFIX, ParsedUseCase, ScenarioTemplate

SPEC_VERSION = "1.0.0"
GENERATED_BY = "membrane-lead-magnet"
HOURS_PER_BUILDING_BLOCK = 8


def _slug(name: str) -> str:
    """Identifier form of an app name as used inside code examples (``Google Sheets`` -> ``google_sheets``)."""
    return re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")


def _provider_variants(app: str) -> list[str]:
    lower = app.lower()
    variants = [lower, _slug(app), re.sub(r"[^a-z0-9]", "", lower)]
    return list(dict.fromkeys(v for v in variants if v))


def find_providers_in_code(scenario: ScenarioTemplate) -> list[str]:
    """Provider ids quoted in the scenario's code example, in order of first appearance.

    Only quoted occurrences count (``provider: 'salesforce'``), so SDK namespaces
    such as ``membrane.slack`` are never treated as placeholders.
    """
    found: list[tuple[int, str]] = []
    for app in scenario.supported_apps:
        positions = []
        for variant in _provider_variants(app):
            match = re.search(rf"(['\"]){re.escape(variant)}\1", scenario.code_example, re.IGNORECASE)
            if match:
                positions.append((match.start(), variant))
        if positions:
            found.append(min(positions))
    found.sort()
    return list(dict.fromkeys(variant for _, variant in found))


def build_code_snippet(
    scenario: ScenarioTemplate,
    company: CompanyContext,
    parsed_use_case: ParsedUseCase,
    personalized_snippet: str | None = None,
) -> str:
    """Return the code shown to the visitor.

    A snippet personalized by the classifier wins. Otherwise the static code
    example is adapted: the first two quoted providers become the source and
    destination systems, ``company.com`` becomes the company domain, ``your
    company`` becomes the company name, and a header comment names the company.
    Unquoted names such as ``membrane.slack`` are left alone.
    """
    if personalized_snippet and personalized_snippet.strip():
        return personalized_snippet

    code = scenario.code_example

    systems = [parsed_use_case.source_system, parsed_use_case.destination_system]
    replacements = {
        provider.lower(): _slug(system)
        for provider, system in zip(find_providers_in_code(scenario), systems)
        if system and _slug(system)
    }
    if replacements:
        pattern = re.compile(
            r"(['\"])(" + "|".join(re.escape(p) for p in replacements) + r")\1",
            re.IGNORECASE,
        )
        # Single pass so swapped source/destination names do not collide
        code = pattern.sub(lambda m: m.group(1) + replacements[m.group(2).lower()] + m.group(1), code)

    code = re.sub(r"\bcompany\.com\b", company.domain, code, flags=re.IGNORECASE)
    code = re.sub(r"\byour company\b", company.name, code, flags=re.IGNORECASE)

    header = f"// {scenario.name} for {company.name} ({company.domain})"
    return f"{header}\n{code}"


def _iso_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def is_bidirectional(scenario: ScenarioTemplate, parsed_use_case: ParsedUseCase) -> bool:
    return parsed_use_case.integration_type == "bidirectional" or scenario.category == "bi-directional-sync"


def build_json_spec(
    scenario: ScenarioTemplate,
    company: CompanyContext,
    parsed_use_case: ParsedUseCase,
    confidence: int | None = None,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Assemble the JSON integration specification.

    Pure apart from ``metadata.createdAt``, which comes from ``now`` when given.

    Args:
        scenario: Matched or generated scenario
        company: Company the spec is generated for
        parsed_use_case: Structured use case
        confidence: Match confidence; defaults to the scenario's, then 100
        now: Creation time; defaults to the current UTC time

    Returns:
        Nested dict with keys version, company, integration, useCase,
        syncPattern, configuration, implementation, metadata
    """
    if confidence is None:
        confidence = scenario.confidence or 100
    created_at = _iso_timestamp(now or datetime.now(timezone.utc))

    bidirectional = is_bidirectional(scenario, parsed_use_case)
    has_events = "events" in scenario.building_blocks
    block_count = len(scenario.building_blocks)

    return {
        "version": SPEC_VERSION,
        "company": {
            "name": company.name,
            "domain": company.domain,
            "industry": company.industry or "General",
        },
        "integration": {
            "id": scenario.id,
            "name": scenario.name,
            "category": scenario.category,
            "confidence": confidence,
            "isGenerated": scenario.id.startswith(GENERATED_ID_PREFIX),
        },
        "useCase": {
            "description": parsed_use_case.description,
            "entities": list(parsed_use_case.entities),
            "actions": list(parsed_use_case.actions),
            "sourceSystem": parsed_use_case.source_system or None,
            "destinationSystem": parsed_use_case.destination_system or None,
            "integrationType": parsed_use_case.integration_type or "sync",
        },
        "syncPattern": {
            "initialSync": {
                "method": "paginated-import",
                "pageSize": 100,
                "estimatedRecords": "varies",
            },
            "continuousSync": {
                "fromExternal": {
                    "method": "webhook" if has_events else "polling",
                    "frequency": "real-time" if has_events else "5-minutes",
                },
                "toExternal": {
                    "method": "webhook-receive",
                    "endpoint": f"/webhook/{company.domain.replace('.', '-')}",
                }
                if bidirectional
                else None,
            },
        },
        "configuration": {
            "buildingBlocks": list(scenario.building_blocks),
            "supportedApplications": list(scenario.supported_apps),
            "dataFlow": {
                "source": parsed_use_case.source_system or "multiple_sources",
                "destination": parsed_use_case.destination_system or "multiple_destinations",
                "direction": "bidirectional" if bidirectional else "unidirectional",
                "syncFrequency": "real-time",
            },
            "fieldMappings": [
                {
                    "sourceField": f"{parsed_use_case.source_system or 'source'}.{entity}",
                    "destinationField": f"{parsed_use_case.destination_system or 'destination'}.{entity}",
                    "transformation": "membrane.transform.map",
                    "validation": True,
                    "required": True,
                }
                for entity in parsed_use_case.entities
            ],
        },
        "implementation": {
            "estimatedHours": block_count * HOURS_PER_BUILDING_BLOCK,
            "complexity": "high" if block_count > 3 else "medium",
            "prerequisites": [
                prerequisite
                for prerequisite in (
                    "API credentials for connected systems",
                    "Membrane SDK license",
                    "Field mapping configuration",
                    "Webhook endpoint configuration" if bidirectional else None,
                )
                if prerequisite
            ],
        },
        "metadata": {
            "createdAt": created_at,
            "scenarioTemplateId": scenario.id,
            "confidenceScore": confidence,
            "generatedBy": GENERATED_BY,
        },
    }
