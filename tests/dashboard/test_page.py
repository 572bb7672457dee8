"""Tests for the dashboard page."""

import asyncio

import httpx

from src.dashboard.fetcher import SWRCache
from src.dashboard.page import DashboardPage


class TestDashboardPage:
    def test_widget_layout(self, data_cache, newsletter_disabled):
        page = DashboardPage(data_cache)
        assert [type(w).__name__ for w in page.widgets] == [
            "AnalyticsCard", "GitHubCard", "GumroadCard", "NewsletterCard",
        ]

    def test_disabled_widgets_have_no_endpoint(self, data_cache, newsletter_disabled):
        assert DashboardPage(data_cache).endpoints == ["/api/views", "/api/github", "/api/gumroad"]

    def test_refresh_fetches_enabled_widgets_only(self, data_cache, fake_fetcher, newsletter_disabled):
        page = DashboardPage(data_cache)
        states = asyncio.run(page.refresh())

        assert sorted(fake_fetcher.calls) == ["/api/github", "/api/gumroad", "/api/views"]
        assert "/api/subscribers" not in states
        assert all(not s.has_error for s in states.values())

    def test_render_after_refresh(self, data_cache, newsletter_disabled):
        page = DashboardPage(data_cache)
        asyncio.run(page.refresh())
        html = page.render()

        assert "<title>Dashboard – Gabriel Pan Gantes</title>" in html
        assert ">1,234</p>" in html
        assert ">321</p>" in html
        assert "$1,234" in html
        assert "Newsletter Subscribers" not in html
        assert 'href="/blog/fetching-data-with-swr"' in html
        assert "data-router-link" in html

    def test_render_before_refresh_shows_placeholders(self, data_cache, fake_fetcher, newsletter_disabled):
        html = DashboardPage(data_cache).render()
        assert html.count("metric-placeholder") == 3
        assert fake_fetcher.calls == []

    def test_one_failure_degrades_one_widget(self, fake_fetcher, newsletter_disabled):
        fake_fetcher.responses["/api/github"] = httpx.ConnectError("refused")
        page = DashboardPage(SWRCache(fake_fetcher))

        states = asyncio.run(page.refresh())
        html = page.render()

        assert states["/api/github"].has_error
        assert html.count("metric-placeholder") == 1
        assert ">1,234</p>" in html

    def test_enabled_newsletter_fetches(self, data_cache, fake_fetcher, monkeypatch):
        from src.common.config import settings

        monkeypatch.setattr(settings.metrics, "newsletter_enabled", True)
        page = DashboardPage(data_cache)
        asyncio.run(page.refresh())

        assert "/api/subscribers" in fake_fetcher.calls
        assert ">87</p>" in page.render()
