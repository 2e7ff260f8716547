"""Dependency injection for FastAPI routes."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from lead_magnet.config import get_settings
from lead_magnet.services.scenario_service import ScenarioService, build_service


@lru_cache
def get_scenario_service() -> ScenarioService:
    """Get the process-wide scenario service."""
    return build_service(get_settings())


# Type alias for dependency injection
Service = Annotated[ScenarioService, Depends(get_scenario_service)]
