"""Company metadata lookup routes."""

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict

from lead_magnet.api.deps import Service
from lead_magnet.exceptions import InvalidDomainError

router = APIRouter()


class CompanyResponse(BaseModel):
    """Company metadata."""

    model_config = ConfigDict(from_attributes=True)

    url: str
    domain: str
    name: str
    description: str | None = None
    industry: str | None = None
    logo_url: str | None = None
    favicon_url: str | None = None


class CompanyLookupResponse(BaseModel):
    """Company lookup response."""

    model_config = ConfigDict(from_attributes=True)

    company: CompanyResponse
    has_full_data: bool
    error: str | None = None  # Shown to the visitor; fallback data is still returned
    cached: bool = False


@router.get("", response_model=CompanyLookupResponse)
def lookup_company(
    service: Service,
    domain: str = Query(..., min_length=1),
) -> CompanyLookupResponse:
    """Look up company name, description and logos for a domain."""
    try:
        result = service.lookup_company(domain)
    except InvalidDomainError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return CompanyLookupResponse.model_validate(result)
