"""Tests for logo.dev URL construction."""

from __future__ import annotations

from lead_magnet.services.logo_urls import (
    app_domain,
    application_logo_url,
    application_logo_urls,
    clean_domain,
    company_logo_url,
    favicon_url,
)


class TestCompanyLogos:
    def test_company_logo_default_size(self) -> None:
        assert company_logo_url("acme.com") == "https://img.logo.dev/acme.com?size=256"

    def test_token_included(self) -> None:
        assert company_logo_url("acme.com", "pk_123") == "https://img.logo.dev/acme.com?token=pk_123&size=256"

    def test_url_is_cleaned(self) -> None:
        assert company_logo_url("https://www.Acme.com/pricing") == "https://img.logo.dev/acme.com?size=256"

    def test_favicon(self) -> None:
        assert favicon_url("acme.com") == "https://img.logo.dev/acme.com?size=32"


class TestApplicationLogos:
    def test_alias_table(self) -> None:
        assert app_domain("Jira") == "atlassian.com"
        assert app_domain("Zoom") == "zoom.us"

    def test_default_domain(self) -> None:
        assert app_domain("Google Sheets") == "googlesheets.com"

    def test_application_logo_size(self) -> None:
        assert application_logo_url("Slack") == "https://img.logo.dev/slack.com?size=128"

    def test_urls_limited_to_eight(self) -> None:
        names = [f"App{i}" for i in range(12)]
        urls = application_logo_urls(names)
        assert len(urls) == 8
        assert urls[0] == "https://img.logo.dev/app0.com?size=128"

    def test_deterministic(self) -> None:
        assert application_logo_urls(["Stripe", "Xero"]) == application_logo_urls(["Stripe", "Xero"])


def test_clean_domain() -> None:
    assert clean_domain("HTTP://www.example.org/a/b") == "example.org"
