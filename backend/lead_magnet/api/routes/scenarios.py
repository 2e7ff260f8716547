"""Scenario catalog and generation routes."""

from typing import Any

from fastapi import APIRouter, HTTPException, Query, Response, status
from pydantic import BaseModel, ConfigDict

from lead_magnet.api.deps import Service
from lead_magnet.api.routes.company import CompanyResponse
from lead_magnet.catalog import (
    SCENARIO_TEMPLATES,
    all_categories,
    all_supported_apps,
    find_by_category,
    find_by_id,
    find_by_keywords,
    find_by_supported_apps,
)
from lead_magnet.exceptions import InvalidInputError
from lead_magnet.models import ParsedUseCase, Persona, PersonalizedScenario, ScenarioCategory
from lead_magnet.services.building_blocks import (
    describe_building_blocks,
    estimate_complexity,
    generate_integration_flow,
)

router = APIRouter()


class ScenarioSummaryResponse(BaseModel):
    """Catalog entry as listed."""

    id: str
    name: str
    description: str
    category: str
    keywords: list[str]


class ScenarioListResponse(BaseModel):
    """List of catalog scenarios."""

    scenarios: list[ScenarioSummaryResponse]
    total: int


class CatalogFacetsResponse(BaseModel):
    """Values the catalog can be filtered by."""

    categories: list[str]
    supported_apps: list[str]


class ScenarioResponse(BaseModel):
    """Full scenario template."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    category: str
    keywords: list[str]
    supported_apps: list[str]
    building_blocks: list[str]
    code_example: str
    how_it_works: list[str]
    confidence: int | None = None
    is_generated: bool = False


class BuildingBlockResponse(BaseModel):
    """Building block with whether the scenario uses it."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    icon: str
    usage_example: str
    color: str
    is_active: bool


class ComplexityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    level: str
    score: int
    description: str


class ScenarioDetailResponse(BaseModel):
    """Scenario with its display artifacts."""

    scenario: ScenarioResponse
    building_blocks: list[BuildingBlockResponse]
    integration_flow: list[str]
    complexity: ComplexityResponse


class GenerateScenarioRequest(BaseModel):
    """Request to generate a scenario for a company."""

    company_url: str
    use_case: str
    persona: Persona = "executive"
    personalize: bool = False


class ScenarioGenerationResponse(BaseModel):
    """Generated scenario with every artifact shown on the results page."""

    model_config = ConfigDict(from_attributes=True)

    company_context: CompanyResponse
    parsed_use_case: ParsedUseCase
    matched_scenario: ScenarioResponse
    personalized_description: str
    code_snippet: str
    json_spec: dict[str, Any]
    application_logos: list[str]
    confidence: int
    is_generated: bool
    building_blocks: list[BuildingBlockResponse]
    integration_flow: list[str]
    complexity: ComplexityResponse
    personalization: PersonalizedScenario | None = None


class GenerateScenarioResponse(BaseModel):
    """Outcome of a generation request."""

    model_config = ConfigDict(from_attributes=True)

    success: bool
    data: ScenarioGenerationResponse | None = None
    error: str | None = None
    no_match: bool = False
    company_error: str | None = None  # Company lookup failed; fallback company data was used


class ParseUseCaseRequest(BaseModel):
    """Request to parse a use case without matching it."""

    use_case: str


@router.get("", response_model=ScenarioListResponse)
def list_scenarios(
    category: ScenarioCategory | None = None,
    app: list[str] | None = Query(None),
    keyword: list[str] | None = Query(None),
) -> ScenarioListResponse:
    """List catalog scenarios, optionally filtered by category, app or keyword."""
    wanted = {template.id for template in SCENARIO_TEMPLATES}
    if category:
        wanted &= {template.id for template in find_by_category(category)}
    if app:
        wanted &= {template.id for template in find_by_supported_apps(app)}
    if keyword:
        wanted &= {template.id for template in find_by_keywords(keyword)}

    scenarios = [
        ScenarioSummaryResponse(**template.summary())
        for template in SCENARIO_TEMPLATES
        if template.id in wanted
    ]
    return ScenarioListResponse(scenarios=scenarios, total=len(scenarios))


@router.get("/facets", response_model=CatalogFacetsResponse)
def get_facets() -> CatalogFacetsResponse:
    """Categories and applications present in the catalog."""
    return CatalogFacetsResponse(
        categories=all_categories(),
        supported_apps=all_supported_apps(),
    )


@router.get("/{scenario_id}", response_model=ScenarioDetailResponse)
def get_scenario(scenario_id: str) -> ScenarioDetailResponse:
    """Get a catalog scenario with its building blocks, flow and complexity."""
    scenario = find_by_id(scenario_id)
    if not scenario:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Scenario not found",
        )

    blocks = list(scenario.building_blocks)
    return ScenarioDetailResponse(
        scenario=ScenarioResponse.model_validate(scenario),
        building_blocks=[BuildingBlockResponse.model_validate(b) for b in describe_building_blocks(scenario)],
        integration_flow=generate_integration_flow(blocks),
        complexity=ComplexityResponse.model_validate(estimate_complexity(blocks)),
    )


@router.post(
    "/generate",
    response_model=GenerateScenarioResponse,
    response_model_by_alias=False,
)
def generate_scenario(
    request: GenerateScenarioRequest,
    service: Service,
    response: Response,
) -> GenerateScenarioResponse:
    """Look up the company and generate an integration scenario for the use case.

    Responds 404 with ``no_match`` set when no usable scenario was found.
    """
    if not request.use_case.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Use case must not be empty",
        )

    try:
        lookup = service.lookup_company(request.company_url)
        outcome = service.generate_scenario(
            lookup.company,
            request.use_case,
            request.persona,
            personalize=request.personalize,
        )
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    if outcome.no_match:
        response.status_code = status.HTTP_404_NOT_FOUND
    elif not outcome.success:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=outcome.error or "Failed to generate scenario",
        )

    result = GenerateScenarioResponse.model_validate(outcome)
    result.company_error = lookup.error
    return result


@router.post(
    "/parse-use-case",
    response_model=ParsedUseCase,
    response_model_by_alias=False,
)
def parse_use_case(
    request: ParseUseCaseRequest,
    service: Service,
) -> ParsedUseCase:
    """Extract entities, actions and systems from a use case."""
    try:
        return service.parse_use_case(request.use_case)
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
