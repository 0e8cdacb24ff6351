"""Pytest fixtures shared across the dashboard tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest
import requests

from streamdash import CHARTS, DashboardConfig

BASE_URL = "http://dashboard.test"

SAMPLE_CSV = {
    "data/streams_over_time.csv": "date,total_streams\n2024-01-01,100\n2024-01-02,150\n",
    "data/streams_by_genre.csv": "genre,total_streams\nPop,300\nRock,200\nJazz,50\n",
    "data/streams_by_device.csv": "device_type,total_streams\nMobile,700\nDesktop,250\n",
    "data/streams_by_artist.csv": "artist_name,total_streams\nSZA,90\nDrake,80\n",
    "data/durations_vs_streams.csv": "song_duration_s,total_streams\n180,4000\n240,2500\n",
}


def make_response(status_code: int, text: str = "", url: str = "") -> requests.Response:
    """Build a real `requests.Response` without touching the network."""

    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    response.url = url
    return response


class FakeSession:
    """Stands in for `requests.Session`, answering from a path -> reply table.

    A reply is either `(status_code, text)` or an exception instance to raise.
    Unknown paths answer 404.
    """

    def __init__(self, replies: dict[str, object], base_url: str = BASE_URL):
        self.base_url = base_url
        self.replies = replies
        self.calls: list[tuple[str, float | None]] = []

    def get(self, url: str, timeout: float | None = None) -> requests.Response:
        self.calls.append((url, timeout))
        path = url[len(self.base_url) + 1 :]
        reply = self.replies.get(path)
        if reply is None:
            return make_response(404, "Not found", url)
        if isinstance(reply, Exception):
            raise reply
        status_code, text = reply
        return make_response(status_code, text, url)


@pytest.fixture
def dashboard_config() -> DashboardConfig:
    """Config pointing at the fake backend used by `FakeSession`."""

    return DashboardConfig(base_url=BASE_URL, timeout=5)


@pytest.fixture
def healthy_replies() -> dict[str, object]:
    """A 200 reply with sample CSV text for each of the five charts."""

    assert {chart.resource_path for chart in CHARTS} == set(SAMPLE_CSV)
    return {path: (200, text) for path, text in SAMPLE_CSV.items()}


@pytest.fixture
def data_dir(tmp_path, settings):
    """Point the backend at an empty temporary data folder."""

    settings.STREAMS_DATA_DIR = tmp_path
    return tmp_path


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no Django requests or network access.
    - `integration`: tests going through Django views or the filesystem.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            invalid.append(item.nodeid)

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n" + joined
        )
