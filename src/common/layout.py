"""Site layout: wraps page content in the HTML shell with SEO meta tags."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from markupsafe import Markup

from .config import SiteSettings, settings
from .templating import TemplateRenderer

TEMPLATES_DIR = Path(__file__).parent / "templates"


def render_page(
    body: Markup,
    title: str,
    description: str = "",
    path: str = "/",
    date: Optional[str] = None,
    og_type: str = "website",
    site: SiteSettings | None = None,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Wrap rendered content in the site layout.

    Args:
        body: Rendered page content
        title: Page title
        description: Meta description (defaults to the site description)
        path: Page path, used for the canonical URL
        date: Publication date for articles
        og_type: Open Graph type ("website" or "article")
        site: Site settings override

    Returns:
        Full HTML document
    """
    site = site or settings.site
    renderer = renderer or TemplateRenderer(TEMPLATES_DIR)
    return str(renderer.render(
        "container.jinja2",
        site=site,
        title=title,
        description=description or site.description,
        canonical_url=f"{site.url.rstrip('/')}{path}",
        date=date,
        og_type=og_type,
        body=body,
    ))
