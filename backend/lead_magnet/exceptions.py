"""Exceptions raised across the scenario generation pipeline."""


class LeadMagnetError(Exception):
    """Base exception for all application errors."""


class InvalidInputError(LeadMagnetError, ValueError):
    """Raised when request input is rejected before any external call.

    Examples: empty use case text, unknown persona.
    """


class InvalidDomainError(InvalidInputError):
    """Raised when a company domain is malformed."""

    def __init__(self, domain: str) -> None:
        self.domain = domain
        super().__init__(f"Invalid domain name: {domain!r}")


class LLMError(LeadMagnetError):
    """Raised when an LLM call fails or returns JSON that does not match the schema.

    Transport errors and schema-validation errors are not
    distinguished for callers; ``reason`` holds a short human-readable
    category.
    """

    def __init__(self, reason: str, detail: str | None = None) -> None:
        self.reason = reason
        self.detail = detail
        message = f"{reason}: {detail}" if detail else reason
        super().__init__(message)


class ScrapeError(LeadMagnetError):
    """Raised when a company homepage cannot be scraped.

    Attributes:
        reason: Stable, user-facing reason string.
        transient: Whether retrying the scrape may help.
    """

    def __init__(self, reason: str, transient: bool = False, detail: str | None = None) -> None:
        self.reason = reason
        self.transient = transient
        self.detail = detail
        super().__init__(f"{reason}: {detail}" if detail else reason)
