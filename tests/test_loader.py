"""Unit tests for fetching CSV resources over HTTP."""

from __future__ import annotations

import pytest
import requests

from streamdash.config import DashboardConfig
from streamdash.errors import ResourceUnavailable
from streamdash.loader import load_csv, load_csv_text

from .conftest import BASE_URL, FakeSession

pytestmark = pytest.mark.unit


def test_load_csv_text_returns_body(dashboard_config) -> None:
    """A 200 answer hands back the text untouched."""

    session = FakeSession({"data/streams_by_genre.csv": (200, "genre,total_streams\nPop,1\n")})

    text = load_csv_text("data/streams_by_genre.csv", config=dashboard_config, session=session)

    assert text == "genre,total_streams\nPop,1\n"
    assert session.calls == [(f"{BASE_URL}/data/streams_by_genre.csv", 5)]


def test_load_csv_parses_rows(dashboard_config) -> None:
    """`load_csv` is fetch plus parse."""

    session = FakeSession({"data/streams_by_genre.csv": (200, "genre,total_streams\nPop,1\n")})

    rows = load_csv("data/streams_by_genre.csv", config=dashboard_config, session=session)

    assert rows == [{"genre": "Pop", "total_streams": "1"}]


@pytest.mark.parametrize("status_code", [404, 500, 503])
def test_load_csv_text_bad_status_raises(dashboard_config, status_code: int) -> None:
    """Any non-2xx status is reported as ResourceUnavailable."""

    session = FakeSession({"data/streams_by_genre.csv": (status_code, "nope")})

    with pytest.raises(ResourceUnavailable) as excinfo:
        load_csv_text("data/streams_by_genre.csv", config=dashboard_config, session=session)

    assert excinfo.value.status_code == status_code
    assert excinfo.value.path == "data/streams_by_genre.csv"
    assert "Failed to load CSV: data/streams_by_genre.csv" in str(excinfo.value)


def test_load_csv_text_connection_error_raises(dashboard_config) -> None:
    """Transport failures are wrapped, with the original error kept as the cause."""

    error = requests.ConnectionError("connection refused")
    session = FakeSession({"data/streams_by_genre.csv": error})

    with pytest.raises(ResourceUnavailable) as excinfo:
        load_csv_text("data/streams_by_genre.csv", config=dashboard_config, session=session)

    assert excinfo.value.status_code is None
    assert excinfo.value.__cause__ is error
    assert "connection refused" in str(excinfo.value)


def test_load_csv_text_is_not_retried(dashboard_config) -> None:
    """One failed request, one call."""

    session = FakeSession({})

    with pytest.raises(ResourceUnavailable):
        load_csv_text("data/streams_by_genre.csv", config=dashboard_config, session=session)

    assert len(session.calls) == 1


def test_resource_url_joins_without_double_slashes() -> None:
    """Trailing and leading slashes are tidied when building the URL."""

    config = DashboardConfig(base_url="http://localhost:8000/")

    assert config.resource_url("/data/a.csv") == "http://localhost:8000/data/a.csv"
    assert config.resource_url("data/a.csv") == "http://localhost:8000/data/a.csv"
