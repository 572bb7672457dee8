"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
CONTENT_DIR = PROJECT_ROOT / "content"
DATA_DIR = PROJECT_ROOT / "data"
DATA_EXPORTS_DIR = DATA_DIR / "exports"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class SiteSettings(BaseModel):
    """Site identity used by the page layout."""
    url: str = "https://gpanga.dev"
    title: str = "Gabriel Pan Gantes"
    description: str = "Developer, writer, and creator."
    locale: str = "en"


class MetricsSettings(BaseModel):
    """Metrics API and dashboard widget settings."""
    api_base_url: str = "http://localhost:3000"
    request_timeout_seconds: float = 10.0
    currency_symbol: str = "$"
    analytics_link: str = "https://gpanga.dev"
    github_link: str = "https://github.com/gpanga"
    gumroad_link: str = "https://gumroad.com/gpanga"
    newsletter_link: str = "https://www.getrevue.co/profile/gpanga"
    # Newsletter backend is not set up yet
    newsletter_enabled: bool = False


class ImageSettings(BaseModel):
    """Image optimization loader settings."""
    loader_path: str = "/_next/image"
    device_sizes: list[int] = Field(
        default_factory=lambda: [640, 750, 828, 1080, 1200, 1920, 2048, 3840]
    )
    quality: int = Field(default=75, ge=1, le=100)


class LoggingSettings(BaseModel):
    """Logging settings."""
    level: str = "INFO"


class Settings(BaseModel):
    """Top-level application settings."""
    site: SiteSettings = Field(default_factory=SiteSettings)
    metrics: MetricsSettings = Field(default_factory=MetricsSettings)
    images: ImageSettings = Field(default_factory=ImageSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, settings_path: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults.

        Environment variables override the file:
        SITE_URL, METRICS_API_BASE_URL, NEWSLETTER_ENABLED, LOG_LEVEL.
        """
        settings_path = settings_path or CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

        loaded = cls(**data)
        _apply_env_overrides(loaded)
        return loaded


def _apply_env_overrides(loaded: Settings) -> None:
    if os.getenv("SITE_URL"):
        loaded.site.url = os.environ["SITE_URL"]
    if os.getenv("METRICS_API_BASE_URL"):
        loaded.metrics.api_base_url = os.environ["METRICS_API_BASE_URL"]
    if os.getenv("NEWSLETTER_ENABLED"):
        loaded.metrics.newsletter_enabled = (
            os.environ["NEWSLETTER_ENABLED"].strip().lower() in ("1", "true", "yes")
        )
    if os.getenv("LOG_LEVEL"):
        loaded.logging.level = os.environ["LOG_LEVEL"].upper()


# Singleton settings instance
settings = Settings.load()
