"""Company metadata types."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class CompanyContext:
    """Basic metadata about the company a landing page is generated for."""
    url: str
    domain: str
    name: str
    description: str | None = None
    industry: str | None = None
    logo_url: str | None = None
    favicon_url: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "CompanyContext":
        return cls(
            url=data["url"],
            domain=data["domain"],
            name=data["name"],
            description=data.get("description"),
            industry=data.get("industry"),
            logo_url=data.get("logo_url"),
            favicon_url=data.get("favicon_url"),
        )


@dataclass
class CompanyLookupResult:
    """Result of a company metadata lookup.

    ``has_full_data`` is False whenever the company block was synthesized from
    the domain alone. ``error`` is set only when the failure should be shown to
    the user; a missing scraper key degrades silently.
    """
    company: CompanyContext
    has_full_data: bool
    error: str | None = None
    cached: bool = False
