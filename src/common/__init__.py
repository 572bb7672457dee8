# Common utilities and shared modules
"""
Shared components used by the MDX renderer and the dashboard:
- Project configuration
- Logging configuration
- HTML emission helpers
"""

from .config import settings, PROJECT_ROOT, CONTENT_DIR, DATA_DIR
from .logging import setup_logging

__all__ = [
    "settings",
    "PROJECT_ROOT",
    "CONTENT_DIR",
    "DATA_DIR",
    "setup_logging",
]
