# Dashboard — metric widgets backed by the metrics API
"""
Dashboard module: data-fetching hook, metric widgets, and the dashboard page.
"""

from .fetcher import MetricsFetcher, SWRCache
from .models import FetchState, GitHubStats, GumroadSales, Subscribers, Views
from .page import DashboardPage
from .widgets import (
    AnalyticsCard,
    GitHubCard,
    GumroadCard,
    MetricWidget,
    NewsletterCard,
    format_metric,
    render_metric_card,
)

__all__ = [
    "MetricsFetcher",
    "SWRCache",
    "FetchState",
    "GitHubStats",
    "GumroadSales",
    "Subscribers",
    "Views",
    "DashboardPage",
    "AnalyticsCard",
    "GitHubCard",
    "GumroadCard",
    "MetricWidget",
    "NewsletterCard",
    "format_metric",
    "render_metric_card",
]
