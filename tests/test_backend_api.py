"""Django integration tests for the CSV and summary endpoints."""

from __future__ import annotations

import pytest

from streams.datasets import DATASETS

pytestmark = pytest.mark.integration


def test_dataset_csv_is_served_as_text(client) -> None:
    """A known export comes back verbatim as text/csv."""

    response = client.get("/data/streams_over_time.csv")

    assert response.status_code == 200
    assert response["Content-Type"].startswith("text/csv")
    assert response.content.decode("utf-8").startswith("date,total_streams\n2024-01-01,")


@pytest.mark.parametrize("dataset", DATASETS, ids=lambda dataset: dataset.key)
def test_every_dataset_is_served(client, dataset) -> None:
    """All five bundled exports exist and start with the expected header."""

    response = client.get(f"/data/{dataset.filename}")

    assert response.status_code == 200
    header = response.content.decode("utf-8").splitlines()[0]
    assert header == f"{dataset.label_column},{dataset.value_column}"


def test_unknown_dataset_is_404(client) -> None:
    """Only the five known names are served."""

    response = client.get("/data/secrets.csv")

    assert response.status_code == 404
    assert response.json() == {"error": "Unknown dataset: secrets.csv"}


def test_missing_dataset_file_is_404(client, data_dir) -> None:
    """A known name whose file is gone answers 404 instead of crashing."""

    response = client.get("/data/streams_by_genre.csv")

    assert response.status_code == 404
    assert "missing" in response.json()["error"]


def test_non_utf8_dataset_file_is_json_error(client, data_dir) -> None:
    """An export in the wrong encoding answers a JSON error instead of a bare 500 page."""

    (data_dir / "streams_by_genre.csv").write_bytes(b"genre,total_streams\nPop\xff\xfe,100\n")

    response = client.get("/data/streams_by_genre.csv")

    assert response.status_code == 500
    assert response.json() == {"error": "Dataset file is not valid UTF-8: streams_by_genre.csv"}


def test_summary_lists_every_dataset(client) -> None:
    """The bundled exports summarize without errors."""

    response = client.get("/api/summary/")

    assert response.status_code == 200
    body = response.json()
    assert [entry["key"] for entry in body] == [dataset.key for dataset in DATASETS]
    assert all("error" not in entry for entry in body)

    genre = next(entry for entry in body if entry["key"] == "streams_by_genre")
    assert genre["row_count"] == 8
    assert genre["total_streams"] == 183945
    assert genre["top_label"] == "Pop"
    assert genre["malformed_count"] == 0


def test_summary_reports_bad_and_missing_files(client, data_dir) -> None:
    """Broken cells are counted and missing files become error entries."""

    (data_dir / "streams_by_genre.csv").write_text(
        "genre,total_streams\nPop,100\nRock,N/A\nJazz,\n", encoding="utf-8"
    )

    body = client.get("/api/summary/").json()

    genre = next(entry for entry in body if entry["key"] == "streams_by_genre")
    assert genre["row_count"] == 3
    assert genre["malformed_count"] == 1
    assert genre["total_streams"] == 100
    assert genre["top_label"] == "Pop"

    device = next(entry for entry in body if entry["key"] == "streams_by_device")
    assert device["error"] == "Dataset file not found."
    assert "row_count" not in device


def test_summary_pdf_download(client) -> None:
    """The PDF endpoint returns an attachment that really is a PDF."""

    response = client.get("/api/summary/pdf/")

    assert response.status_code == 200
    assert response["Content-Type"] == "application/pdf"
    assert response["Content-Disposition"].startswith('attachment; filename="Streaming_Summary_Report_')
    assert response.content.startswith(b"%PDF")
