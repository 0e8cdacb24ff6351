"""Settings for the desktop dashboard."""
from __future__ import annotations

from dataclasses import dataclass

# Django's development server; `python manage.py runserver` listens here.
API_BASE_URL = "http://127.0.0.1:8000"

# Seconds; applied to every request the dashboard makes.
DEFAULT_TIMEOUT = 30


@dataclass(frozen=True)
class DashboardConfig:
    """Where the CSV files live and how strictly numbers are read."""

    base_url: str = API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    # When True a non-numeric cell aborts its chart instead of becoming NaN.
    strict_numbers: bool = False

    def resource_url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
