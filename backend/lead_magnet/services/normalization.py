"""Coerce loosely typed LLM output into the fixed category and building-block vocabularies."""

import re

from lead_magnet.models.scenario import DEFAULT_CATEGORY, BuildingBlock, ScenarioCategory

_SEPARATORS = re.compile(r"[_\s-]")

# Checked in order by containment, first match wins. Canonical names come
# before synonyms; "dataimportexport" must win over "import".
CATEGORY_SYNONYMS: list[tuple[str, ScenarioCategory]] = [
    ("unifiedapi", "unified-api"),
    ("dataimportexport", "data-import-export"),
    ("bidirectionalsync", "bi-directional-sync"),
    ("workflowautomation", "workflow-automation"),
    ("webhookevents", "webhook-events"),
    ("datatransformation", "data-transformation"),
    ("unified", "unified-api"),
    ("import", "data-import-export"),
    ("export", "data-import-export"),
    ("sync", "bi-directional-sync"),
    ("bidirectional", "bi-directional-sync"),
    ("workflow", "workflow-automation"),
    ("automation", "workflow-automation"),
    ("webhook", "webhook-events"),
    ("event", "webhook-events"),
    ("etl", "data-transformation"),
    ("transform", "data-transformation"),
    ("transformation", "data-transformation"),
]

# Exact lookup after normalization.
BUILDING_BLOCK_SYNONYMS: dict[str, BuildingBlock] = {
    "actions": "actions",
    "action": "actions",
    "events": "events",
    "event": "events",
    "flows": "flows",
    "flow": "flows",
    "datacollections": "data-collections",
    "datacollection": "data-collections",
    "collections": "data-collections",
    "unifieddatamodels": "unified-data-models",
    "unifieddatamodel": "unified-data-models",
    "unifiedmodels": "unified-data-models",
    "datamodels": "unified-data-models",
    "fieldmappings": "field-mappings",
    "fieldmapping": "field-mappings",
    "mappings": "field-mappings",
}


def normalize_token(raw: str) -> str:
    """Lower-case and strip ``_``, ``-`` and whitespace."""
    return _SEPARATORS.sub("", raw.lower())


def map_category(raw: str) -> ScenarioCategory:
    """Map any string onto one of the six scenario categories.

    Never raises; unrecognized input falls back to ``workflow-automation``.
    """
    normalized = normalize_token(raw or "")
    for key, category in CATEGORY_SYNONYMS:
        if key in normalized:
            return category
    return DEFAULT_CATEGORY


def map_building_blocks(raw: list[str]) -> list[BuildingBlock]:
    """Map strings onto building blocks, dropping unknowns.

    Duplicates are removed by canonical value, keeping first-seen order. The
    result is never empty: with nothing recognized it is ``["actions"]``.
    """
    result: list[BuildingBlock] = []
    for block in raw or []:
        mapped = BUILDING_BLOCK_SYNONYMS.get(normalize_token(block))
        if mapped and mapped not in result:
            result.append(mapped)

    if not result:
        result.append("actions")

    return result
