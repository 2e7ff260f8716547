"""Building-block details, complexity estimates and integration flow steps for display."""

from dataclasses import dataclass
from typing import Literal

from lead_magnet.models.scenario import BUILDING_BLOCKS, BuildingBlock, ScenarioTemplate


@dataclass(frozen=True)
class BuildingBlockDetail:
    id: BuildingBlock
    name: str
    description: str
    icon: str
    usage_example: str
    color: str
    is_active: bool = False


@dataclass(frozen=True)
class ComplexityEstimate:
    level: Literal["simple", "moderate", "complex"]
    score: int
    description: str


BUILDING_BLOCK_DEFINITIONS: dict[BuildingBlock, dict[str, str]] = {
    "actions": {
        "name": "Actions",
        "description": "Execute API requests and queries to external applications",
        "icon": "⚡",
        "usage_example": 'membrane.actions.create("send-email", data)',
        "color": "purple",
    },
    "events": {
        "name": "Events",
        "description": "Listen for and respond to changes in external systems",
        "icon": "📡",
        "usage_example": 'membrane.events.on("customer.created", handler)',
        "color": "blue",
    },
    "flows": {
        "name": "Flows",
        "description": "Orchestrate multi-step integrations with branching logic",
        "icon": "🔄",
        "usage_example": "membrane.flows.create({ steps: [...] })",
        "color": "green",
    },
    "data-collections": {
        "name": "Data Collections",
        "description": "Store, query, and manage integrated data",
        "icon": "💾",
        "usage_example": 'membrane.data.collection("customers").find()',
        "color": "orange",
    },
    "unified-data-models": {
        "name": "Unified Data Models",
        "description": "Consistent data structures across all integrations",
        "icon": "🎯",
        "usage_example": "membrane.models.customer.normalize(data)",
        "color": "indigo",
    },
    "field-mappings": {
        "name": "Field Mappings",
        "description": "Transform and map data between different schemas",
        "icon": "🔀",
        "usage_example": "membrane.mappings.transform(source, target)",
        "color": "pink",
    },
}


def describe_building_blocks(scenario: ScenarioTemplate) -> list[BuildingBlockDetail]:
    """All six building blocks, flagged active when the scenario uses them."""
    return [
        BuildingBlockDetail(
            id=block,
            is_active=block in scenario.building_blocks,
            **BUILDING_BLOCK_DEFINITIONS[block],
        )
        for block in BUILDING_BLOCKS
    ]


def building_blocks_summary(blocks: list[BuildingBlock]) -> str:
    """Markdown lines describing the given blocks."""
    if not blocks:
        return "This integration uses core Membrane functionality."

    return "\n".join(
        f"**{BUILDING_BLOCK_DEFINITIONS[block]['name']}**: {BUILDING_BLOCK_DEFINITIONS[block]['description']}"
        for block in blocks
    )


def estimate_complexity(blocks: list[BuildingBlock]) -> ComplexityEstimate:
    score = len(blocks)

    if score <= 2:
        return ComplexityEstimate(
            level="simple",
            score=score,
            description="Straightforward integration with basic data synchronization",
        )
    elif score <= 4:
        return ComplexityEstimate(
            level="moderate",
            score=score,
            description="Multi-component integration with data transformation and workflows",
        )
    else:
        return ComplexityEstimate(
            level="complex",
            score=score,
            description="Advanced integration with full orchestration and data management",
        )


def generate_integration_flow(
    blocks: list[BuildingBlock],
    source_system: str | None = None,
    destination_system: str | None = None,
) -> list[str]:
    """Ordered, human-readable steps data goes through for the given blocks."""
    flow = [f"Connect to {source_system}" if source_system else "Connect to source system"]

    if "events" in blocks:
        flow.append("Listen for real-time events")
    if "data-collections" in blocks:
        flow.append("Query and collect data")
    if "field-mappings" in blocks:
        flow.append("Transform data to target schema")
    if "unified-data-models" in blocks:
        flow.append("Normalize to unified model")
    if "flows" in blocks:
        flow.append("Process through workflow logic")
    if "actions" in blocks:
        flow.append("Execute target system actions")

    if destination_system:
        flow.append(f"Update {destination_system}")
    elif "actions" in blocks:
        flow.append("Update destination system")

    return flow
