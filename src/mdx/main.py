"""CLI entry point for rendering compiled MDX documents.

Usage:
    python -m src.mdx.main --input content/blog/fetching-data-with-swr.json
    python -m src.mdx.main --input content/blog/fetching-data-with-swr.json --output data/exports/swr.html
    python -m src.mdx.main --input content/blog/fetching-data-with-swr.json --api-base-url https://gpanga.dev
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from src.common.config import DATA_EXPORTS_DIR, settings
from src.dashboard.fetcher import MetricsFetcher, SWRCache

from .registry import create_mdx_components
from .renderer import DocumentRenderer, render_document

logging.basicConfig(
    level=settings.logging.level,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Endpoints read by metric widgets embedded in posts
EMBEDDED_METRIC_ENDPOINTS = ["/api/views", "/api/gumroad"]


async def render_with_metrics(input_path: Path, api_base_url: str | None = None) -> str:
    """Render a document with embedded metric widgets populated."""
    async with MetricsFetcher(base_url=api_base_url) as fetcher:
        data = SWRCache(fetcher)
        await data.revalidate_all(EMBEDDED_METRIC_ENDPOINTS)
        renderer = DocumentRenderer(create_mdx_components(data=data))
        return render_document(input_path, renderer)


def main() -> None:
    parser = argparse.ArgumentParser(description="MDX document renderer")
    parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="Compiled MDX document (JSON tree)",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Output HTML file path (default: data/exports/<input stem>.html)",
    )
    parser.add_argument(
        "--api-base-url",
        type=str,
        help="Fetch metrics for embedded widgets from this origin",
    )
    parser.add_argument(
        "--no-metrics",
        action="store_true",
        help="Skip metric fetches; widgets render placeholders",
    )

    args = parser.parse_args()

    input_path = Path(args.input)
    if not input_path.exists():
        parser.error(f"Input not found: {input_path}")

    if args.no_metrics:
        html = render_document(input_path)
    else:
        html = asyncio.run(render_with_metrics(input_path, args.api_base_url))

    output_path = Path(args.output) if args.output else DATA_EXPORTS_DIR / f"{input_path.stem}.html"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html)
    logger.info("Rendered %s → %s", input_path, output_path)


if __name__ == "__main__":
    main()
