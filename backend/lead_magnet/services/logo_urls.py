"""logo.dev URL construction for company domains and application names.

Pure string templating; nothing here touches the network.
"""

from urllib.parse import urlencode

LOGO_BASE_URL = "https://img.logo.dev"

APP_DOMAINS = {
    "salesforce": "salesforce.com",
    "hubspot": "hubspot.com",
    "slack": "slack.com",
    "stripe": "stripe.com",
    "shopify": "shopify.com",
    "zoom": "zoom.us",
    "zendesk": "zendesk.com",
    "intercom": "intercom.com",
    "mailchimp": "mailchimp.com",
    "twilio": "twilio.com",
    "asana": "asana.com",
    "notion": "notion.so",
    "monday": "monday.com",
    "monday.com": "monday.com",
    "jira": "atlassian.com",
    "github": "github.com",
    "gitlab": "gitlab.com",
    "airtable": "airtable.com",
    "dropbox": "dropbox.com",
    "google": "google.com",
    "microsoft": "microsoft.com",
    "quickbooks": "quickbooks.intuit.com",
    "xero": "xero.com",
    "pipedrive": "pipedrive.com",
    "zoho": "zoho.com",
    "freshdesk": "freshdesk.com",
    "sendgrid": "sendgrid.com",
    "typeform": "typeform.com",
    "calendly": "calendly.com",
    "discord": "discord.com",
    "segment": "segment.com",
}


def clean_domain(domain: str) -> str:
    """Strip scheme, ``www.`` and any path from a domain or URL."""
    domain = domain.strip().lower()
    for prefix in ("https://", "http://"):
        if domain.startswith(prefix):
            domain = domain[len(prefix):]
    if domain.startswith("www."):
        domain = domain[4:]
    return domain.split("/")[0]


def _logo_url(domain: str, size: int, token: str | None) -> str:
    params = {"size": size}
    if token:
        params = {"token": token, **params}
    return f"{LOGO_BASE_URL}/{domain}?{urlencode(params)}"


def company_logo_url(domain: str, token: str | None = None, size: int = 256) -> str:
    return _logo_url(clean_domain(domain), size, token)


def favicon_url(domain: str, token: str | None = None) -> str:
    return _logo_url(clean_domain(domain), 32, token)


def app_domain(app_name: str) -> str:
    """Best-guess domain for an application name (``Jira`` -> ``atlassian.com``)."""
    key = app_name.strip().lower()
    if key in APP_DOMAINS:
        return APP_DOMAINS[key]
    return f"{key.replace(' ', '')}.com"


def application_logo_url(app_name: str, token: str | None = None, size: int = 128) -> str:
    return _logo_url(app_domain(app_name), size, token)


def application_logo_urls(app_names: list[str], token: str | None = None, limit: int = 8) -> list[str]:
    return [application_logo_url(name, token) for name in app_names[:limit]]
