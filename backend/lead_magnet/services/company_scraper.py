"""Company metadata lookup using the Firecrawl API."""

import logging
import re
import socket

import httpx
from firecrawl import Firecrawl

from lead_magnet.config import Settings
from lead_magnet.exceptions import InvalidDomainError, ScrapeError
from lead_magnet.models.company import CompanyContext, CompanyLookupResult
from lead_magnet.services.company_cache import CompanyCache
from lead_magnet.services.logo_urls import clean_domain, company_logo_url, favicon_url

logger = logging.getLogger(__name__)

DOMAIN_NOT_FOUND = "Domain does not exist"
REQUEST_TIMEOUT = "Request timed out"
SERVER_ERROR = "Server error"
SERVICE_UNAVAILABLE = "Service unavailable"

DOMAIN_PATTERN = re.compile(r"^([a-z0-9]([a-z0-9\-]*[a-z0-9])?\.)+[a-z]{2,}$")

DNS_ERROR_MARKERS = (
    "enotfound",
    "getaddrinfo",
    "name or service not known",
    "nodename nor servname",
    "err_name_not_resolved",
    "could not resolve",
    "dns",
    "domain does not exist",
)
TIMEOUT_ERROR_MARKERS = ("timed out", "timeout", "etimedout")
UNAVAILABLE_ERROR_MARKERS = ("unavailable", "econnrefused", "connection refused", "503")
SERVER_ERROR_MARKERS = ("500", "502", "504", "server error", "bad gateway")


def normalize_domain(raw: str) -> str:
    """Reduce a URL or domain to a bare lower-case host and validate it.

    Raises:
        InvalidDomainError: If the result is not a plausible domain name
    """
    domain = clean_domain(raw or "").split(":")[0]
    if not DOMAIN_PATTERN.match(domain):
        raise InvalidDomainError(raw)
    return domain


def company_name_from(domain: str, title: str | None = None) -> str:
    """Company name from a page title, falling back to the first domain label."""
    if title:
        clean_title = re.split(r"[|–-]", title)[0].strip()
        if 2 < len(clean_title) < 50:
            return clean_title

    name_from_domain = domain.split(".")[0]
    return name_from_domain[:1].upper() + name_from_domain[1:]


def classify_scrape_error(error: Exception) -> ScrapeError:
    """Map any scraper exception onto a stable, user-facing reason."""
    if isinstance(error, ScrapeError):
        return error

    message = str(error).lower()
    status_code = getattr(error, "status_code", None)

    if isinstance(error, socket.gaierror) or any(m in message for m in DNS_ERROR_MARKERS):
        return ScrapeError(DOMAIN_NOT_FOUND, transient=False, detail=str(error))
    if isinstance(error, (TimeoutError, httpx.TimeoutException)) or any(
        m in message for m in TIMEOUT_ERROR_MARKERS
    ):
        return ScrapeError(REQUEST_TIMEOUT, transient=True, detail=str(error))
    if status_code == 503 or isinstance(error, (ConnectionError, httpx.ConnectError)) or any(
        m in message for m in UNAVAILABLE_ERROR_MARKERS
    ):
        return ScrapeError(SERVICE_UNAVAILABLE, transient=True, detail=str(error))
    if (isinstance(status_code, int) and status_code >= 500) or any(m in message for m in SERVER_ERROR_MARKERS):
        return ScrapeError(SERVER_ERROR, transient=True, detail=str(error))
    return ScrapeError(SERVICE_UNAVAILABLE, transient=True, detail=str(error))


class CompanyScraper:
    """Look up company metadata by scraping the company homepage."""

    def __init__(
        self,
        settings: Settings,
        client: Firecrawl | None = None,
        cache: CompanyCache | None = None,
    ):
        """Initialize scraper with settings.

        Args:
            settings: Application settings containing the Firecrawl API key
            client: Pre-built Firecrawl client; built from settings when omitted
            cache: Optional read-through cache keyed by domain
        """
        self.settings = settings
        self.cache = cache
        self.max_attempts = max(1, settings.scrape_max_attempts)
        self.timeout_ms = settings.scrape_timeout_ms
        if client is None and settings.firecrawl_api_key:
            client = Firecrawl(api_key=settings.firecrawl_api_key)
        self.client = client

    def fallback_company(self, domain: str) -> CompanyContext:
        """Company context derived from the domain alone."""
        return CompanyContext(
            url=f"https://{domain}",
            domain=domain,
            name=company_name_from(domain),
            logo_url=company_logo_url(domain, self.settings.logo_dev_api_key),
            favicon_url=favicon_url(domain, self.settings.logo_dev_api_key),
        )

    def lookup(self, raw_domain: str) -> CompanyLookupResult:
        """Look up company metadata for a domain.

        Args:
            raw_domain: Domain or URL entered by the visitor

        Returns:
            CompanyLookupResult; scrape failures are reported in ``error`` with
            fallback company data, never raised

        Raises:
            InvalidDomainError: If the domain is malformed (checked before any call)
        """
        domain = normalize_domain(raw_domain)

        if self.cache is not None:
            cached = self.cache.get(domain)
            if cached is not None:
                logger.info(f"Company cache hit: {domain}")
                return CompanyLookupResult(company=cached, has_full_data=True, cached=True)

        if self.client is None:
            logger.warning("FIRECRAWL_API_KEY not found, using fallback data")
            return CompanyLookupResult(company=self.fallback_company(domain), has_full_data=False)

        try:
            company = self._scrape_with_retry(domain)
        except ScrapeError as e:
            logger.error(f"Company lookup failed for {domain}: {e}")
            return CompanyLookupResult(
                company=self.fallback_company(domain),
                has_full_data=False,
                error=e.reason,
            )

        if self.cache is not None:
            self.cache.set(company)

        return CompanyLookupResult(company=company, has_full_data=True)

    def _scrape_with_retry(self, domain: str) -> CompanyContext:
        """Scrape, retrying transient failures up to ``max_attempts`` in total."""
        for attempt in range(1, self.max_attempts + 1):
            try:
                return self._scrape(domain)
            except ScrapeError as e:
                if not e.transient or attempt == self.max_attempts:
                    raise
                logger.warning(f"Scrape attempt {attempt} for {domain} failed ({e.reason}), retrying")
        raise ScrapeError(SERVICE_UNAVAILABLE, transient=True)

    def _scrape(self, domain: str) -> CompanyContext:
        url = f"https://{domain}"
        logger.info(f"Scraping company homepage: {url}")

        try:
            doc = self.client.scrape(
                url,
                formats=["markdown"],
                only_main_content=False,
                timeout=self.timeout_ms,
            )
        except Exception as e:
            raise classify_scrape_error(e) from e

        meta = getattr(doc, "metadata", None) if doc is not None else None
        if meta is None:
            raise ScrapeError(SERVICE_UNAVAILABLE, transient=True, detail="Failed to scrape URL")

        status_code = getattr(meta, "status_code", None)
        if isinstance(status_code, int) and status_code >= 500:
            raise ScrapeError(SERVER_ERROR, transient=True, detail=f"HTTP {status_code}")

        title = getattr(meta, "title", None) or getattr(meta, "og_title", None)
        description = getattr(meta, "description", None) or getattr(meta, "og_description", None)

        return CompanyContext(
            url=url,
            domain=domain,
            name=company_name_from(domain, title),
            description=description or None,
            logo_url=company_logo_url(domain, self.settings.logo_dev_api_key),
            favicon_url=favicon_url(domain, self.settings.logo_dev_api_key),
        )
