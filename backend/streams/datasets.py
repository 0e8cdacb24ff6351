"""The five CSV exports the dashboards read, and where they live on disk."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from django.conf import settings


@dataclass(frozen=True)
class Dataset:
    key: str
    filename: str
    # Column that names each row (for the scatter export it is the x value).
    label_column: str
    value_column: str = "total_streams"

    @property
    def path(self) -> Path:
        return Path(settings.STREAMS_DATA_DIR) / self.filename

    @property
    def required_columns(self) -> set[str]:
        return {self.label_column, self.value_column}


DATASETS: tuple[Dataset, ...] = (
    Dataset(key="streams_over_time", filename="streams_over_time.csv", label_column="date"),
    Dataset(key="streams_by_genre", filename="streams_by_genre.csv", label_column="genre"),
    Dataset(key="streams_by_device", filename="streams_by_device.csv", label_column="device_type"),
    Dataset(key="streams_by_artist", filename="streams_by_artist.csv", label_column="artist_name"),
    Dataset(
        key="duration_vs_streams",
        filename="durations_vs_streams.csv",
        label_column="song_duration_s",
    ),
)

DATASETS_BY_FILENAME: dict[str, Dataset] = {dataset.filename: dataset for dataset in DATASETS}
