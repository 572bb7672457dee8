"""Data models for dashboard metrics and the data-fetching hook."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import BaseModel, Field

MetricValue = Optional[Union[int, float]]


@dataclass(frozen=True)
class FetchState:
    """Snapshot of a keyed fetch: pending, resolved, or failed."""
    data: Any = None
    error: Optional[BaseException] = None

    @property
    def is_pending(self) -> bool:
        return self.data is None and self.error is None

    @property
    def has_error(self) -> bool:
        return self.error is not None


# === Metrics API payloads ===

class Views(BaseModel):
    """GET /api/views"""
    total: int = Field(ge=0)


class GitHubStats(BaseModel):
    """GET /api/github"""
    stars: int = Field(ge=0)
    followers: int = Field(default=0, ge=0)


class GumroadSales(BaseModel):
    """GET /api/gumroad (total sales in dollars)"""
    sales: float = Field(ge=0, allow_inf_nan=False)


class Subscribers(BaseModel):
    """GET /api/subscribers"""
    count: int = Field(ge=0)
