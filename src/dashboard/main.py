"""CLI entry point for the metrics dashboard.

Usage:
    python -m src.dashboard.main --output data/exports/dashboard.html
    python -m src.dashboard.main --api-base-url https://gpanga.dev --output dashboard.html
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from src.common.config import DATA_EXPORTS_DIR, settings

from .fetcher import MetricsFetcher, SWRCache
from .page import DashboardPage

logging.basicConfig(
    level=settings.logging.level,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


async def build_dashboard(api_base_url: str | None = None) -> str:
    """Fetch all dashboard metrics and render the page."""
    async with MetricsFetcher(base_url=api_base_url) as fetcher:
        page = DashboardPage(SWRCache(fetcher))
        await page.refresh()
        return page.render()


def main() -> None:
    parser = argparse.ArgumentParser(description="Metrics dashboard renderer")
    parser.add_argument(
        "--api-base-url",
        type=str,
        help="Metrics API origin (default from config/settings.yaml)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=str(DATA_EXPORTS_DIR / "dashboard.html"),
        help="Output HTML file path",
    )

    args = parser.parse_args()

    html = asyncio.run(build_dashboard(args.api_base_url))

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html)
    logger.info("Dashboard written to %s", output_path)


if __name__ == "__main__":
    main()
