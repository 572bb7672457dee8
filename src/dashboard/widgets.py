"""Metric widgets — labeled figures backed by the metrics API.

Each widget reads its endpoint's state from the data-fetching hook and
renders a metric card. Pending or failed fetches render a placeholder.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Optional

from markupsafe import Markup
from pydantic import BaseModel, ValidationError

from src.common.config import settings
from src.common.html import render_attrs
from src.common.logging import setup_logging
from src.common.templating import TemplateRenderer
from src.mdx.links import external_link_attrs

from .fetcher import SWRCache
from .models import FetchState, GitHubStats, GumroadSales, MetricValue, Subscribers, Views

logger = setup_logging(module_name="dashboard.widgets")

TEMPLATES_DIR = Path(__file__).parent / "templates"

_renderer: TemplateRenderer | None = None


def _get_renderer() -> TemplateRenderer:
    global _renderer
    if _renderer is None:
        _renderer = TemplateRenderer(TEMPLATES_DIR)
    return _renderer


def format_metric(metric: MetricValue, is_currency: bool, currency_symbol: str | None = None) -> Optional[str]:
    """Format a metric for display, or None when it is not available.

    >>> format_metric(1234, is_currency=True)
    '$1,234'
    >>> format_metric(1234, is_currency=False)
    '1,234'
    """
    if metric is None or isinstance(metric, bool):
        return None
    if isinstance(metric, float) and not math.isfinite(metric):
        return None

    if isinstance(metric, float) and not metric.is_integer():
        figure = f"{metric:,.2f}"
    else:
        figure = f"{int(metric):,}"

    if is_currency:
        symbol = settings.metrics.currency_symbol if currency_symbol is None else currency_symbol
        return f"{symbol}{figure}"
    return figure


def render_metric_card(
    header: str,
    link: str | None,
    metric: MetricValue,
    is_currency: bool,
    renderer: TemplateRenderer | None = None,
) -> Markup:
    """Render a metric card.

    Args:
        header: Card label
        link: Optional outbound link; wraps the whole card as an external link
        metric: Value to show, or None for the placeholder
        is_currency: Format as currency instead of a plain count

    Returns:
        Card markup
    """
    renderer = renderer or _get_renderer()
    link_attrs = render_attrs(external_link_attrs({"href": link})) if link else Markup("")
    return renderer.render(
        "metric_card.jinja2",
        header=header,
        link=link,
        link_attrs=link_attrs,
        figure=format_metric(metric, is_currency),
    )


class MetricWidget:
    """A metric card bound to one metrics API endpoint.

    Subclasses set ``endpoint``, ``header``, ``payload_model`` and ``field``.
    A disabled widget renders nothing and never touches the data hook.
    """

    endpoint: str = ""
    header: str = ""
    payload_model: type[BaseModel] = BaseModel
    field: str = ""
    is_currency: bool = False
    link_setting: str = ""

    def __init__(
        self,
        data: SWRCache,
        link: str | None = None,
        disabled: bool = False,
    ):
        self.data = data
        self.link = link if link is not None else self.default_link()
        self.disabled = disabled

    @classmethod
    def default_link(cls) -> str:
        return getattr(settings.metrics, cls.link_setting, "") if cls.link_setting else ""

    def metric(self, state: FetchState) -> MetricValue:
        """Extract the metric from a fetch state; None unless resolved and valid."""
        if state.data is None or state.has_error:
            return None
        try:
            payload = self.payload_model.model_validate(state.data)
        except ValidationError:
            logger.warning("Unexpected payload from %s: %r", self.endpoint, state.data)
            return None
        return getattr(payload, self.field, None)

    def __call__(self, props: dict[str, Any] | None = None) -> Markup:
        if self.disabled:
            return Markup("")
        state = self.data.use(self.endpoint)
        return render_metric_card(self.header, self.link, self.metric(state), self.is_currency)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self.endpoint!r}, disabled={self.disabled})"


class AnalyticsCard(MetricWidget):
    endpoint = "/api/views"
    header = "All-Time Views"
    payload_model = Views
    field = "total"
    link_setting = "analytics_link"


class GitHubCard(MetricWidget):
    endpoint = "/api/github"
    header = "GitHub Stars"
    payload_model = GitHubStats
    field = "stars"
    link_setting = "github_link"


class GumroadCard(MetricWidget):
    endpoint = "/api/gumroad"
    header = "Gumroad Sales"
    payload_model = GumroadSales
    field = "sales"
    is_currency = True
    link_setting = "gumroad_link"


class NewsletterCard(MetricWidget):
    """Disabled until the newsletter backend exists (``newsletter_enabled``)."""

    endpoint = "/api/subscribers"
    header = "Newsletter Subscribers"
    payload_model = Subscribers
    field = "count"
    link_setting = "newsletter_link"

    def __init__(self, data: SWRCache, link: str | None = None, disabled: bool | None = None):
        if disabled is None:
            disabled = not settings.metrics.newsletter_enabled
        super().__init__(data, link=link, disabled=disabled)
