"""Dashboard page, a grid of metric widgets.

Usage:
    async with MetricsFetcher() as fetcher:
        page = DashboardPage(SWRCache(fetcher))
        await page.refresh()
        html = page.render()
"""

from __future__ import annotations

from pathlib import Path

from src.common.layout import render_page
from src.common.logging import setup_logging
from src.common.templating import TemplateRenderer
from src.mdx.navigation import router_link

from .fetcher import SWRCache
from .models import FetchState
from .widgets import AnalyticsCard, GitHubCard, GumroadCard, MetricWidget, NewsletterCard

logger = setup_logging(module_name="dashboard.page")

TEMPLATES_DIR = Path(__file__).parent / "templates"

PAGE_TITLE = "Dashboard – Gabriel Pan Gantes"
PAGE_DESCRIPTION = (
    "My personal dashboard, built with API routes deployed as serverless functions."
)
SERIES_PATH = "/blog/fetching-data-with-swr"


class DashboardPage:
    """Composes the metric widgets into the dashboard page."""

    def __init__(
        self,
        data: SWRCache | None = None,
        renderer: TemplateRenderer | None = None,
    ):
        self.data = data if data is not None else SWRCache()
        self.renderer = renderer or TemplateRenderer(TEMPLATES_DIR)
        self.rows: list[list[MetricWidget]] = [
            [AnalyticsCard(self.data), GitHubCard(self.data)],
            [GumroadCard(self.data), NewsletterCard(self.data)],
        ]

    @property
    def widgets(self) -> list[MetricWidget]:
        return [w for row in self.rows for w in row]

    @property
    def endpoints(self) -> list[str]:
        """Endpoints of enabled widgets; disabled widgets never fetch."""
        return [w.endpoint for w in self.widgets if not w.disabled]

    async def refresh(self) -> dict[str, FetchState]:
        """Revalidate every enabled widget's data concurrently."""
        states = await self.data.revalidate_all(self.endpoints)
        failed = [key for key, state in states.items() if state.has_error]
        logger.info(
            "Refreshed %d dashboard metrics (%d failed)", len(states), len(failed)
        )
        return states

    def render_body(self):
        series_link = router_link(
            SERIES_PATH,
            "blog series.",
            className="text-gray-900 dark:text-gray-100 underline",
        )
        return self.renderer.render(
            "dashboard.jinja2",
            rows=[[widget() for widget in row] for row in self.rows],
            series_link=series_link,
        )

    def render(self) -> str:
        """Render the full dashboard HTML page."""
        return render_page(
            self.render_body(),
            title=PAGE_TITLE,
            description=PAGE_DESCRIPTION,
            path="/dashboard",
        )
