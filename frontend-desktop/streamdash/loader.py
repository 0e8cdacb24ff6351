"""
Fetch CSV resources from the dashboard backend.

The Django backend serves the five files under `/data/`, so loading a chart
is just one GET request. Anything other than a 2xx answer is turned into
`ResourceUnavailable`; there is no retry, the caller decides what to do.
"""
from __future__ import annotations

import logging
from typing import List

import requests

from .config import DashboardConfig
from .errors import ResourceUnavailable
from .parser import Row, parse_csv

logger = logging.getLogger(__name__)


def load_csv_text(
    path: str,
    config: DashboardConfig | None = None,
    session: requests.Session | None = None,
) -> str:
    """Download the full text of one CSV resource."""
    config = config or DashboardConfig()
    url = config.resource_url(path)
    http = session or requests

    try:
        response = http.get(url, timeout=config.timeout)
    except requests.RequestException as exc:
        raise ResourceUnavailable(path, reason=str(exc)) from exc

    if not response.ok:
        raise ResourceUnavailable(path, status_code=response.status_code)

    logger.debug("Loaded %s (%d bytes)", url, len(response.content))
    return response.text


def load_csv(
    path: str,
    config: DashboardConfig | None = None,
    session: requests.Session | None = None,
) -> List[Row]:
    """Download a CSV resource and parse it into rows."""
    return parse_csv(load_csv_text(path, config=config, session=session))
