"""The five charts shown on the dashboard."""
from __future__ import annotations

from typing import Dict, Tuple

from .extract import ChartConfig, ChartKind

STREAMS_OVER_TIME = ChartConfig(
    key="streams_over_time",
    resource_path="data/streams_over_time.csv",
    kind=ChartKind.LINE,
    label_field="date",
    value_field="total_streams",
    dataset_label="Total Streams",
    title="Streams Over Time",
    x_title="Date",
)

STREAMS_BY_GENRE = ChartConfig(
    key="streams_by_genre",
    resource_path="data/streams_by_genre.csv",
    kind=ChartKind.BAR,
    label_field="genre",
    value_field="total_streams",
    dataset_label="Total Streams by Genre",
    title="Streams by Genre",
    x_title="Genre",
    show_legend=False,
)

STREAMS_BY_DEVICE = ChartConfig(
    key="streams_by_device",
    resource_path="data/streams_by_device.csv",
    kind=ChartKind.DONUT,
    label_field="device_type",
    value_field="total_streams",
    dataset_label="Streams by Device Type",
    title="Streams by Device",
    # A donut has no axes to title.
    y_title=None,
    legend_position="bottom",
)

STREAMS_BY_ARTIST = ChartConfig(
    key="streams_by_artist",
    resource_path="data/streams_by_artist.csv",
    kind=ChartKind.FILLED_LINE,
    label_field="artist_name",
    value_field="total_streams",
    dataset_label="Total Streams by Artist",
    title="Streams by Artist",
    x_title="Artist",
    show_legend=False,
)

DURATION_VS_STREAMS = ChartConfig(
    key="duration_vs_streams",
    resource_path="data/durations_vs_streams.csv",
    kind=ChartKind.SCATTER,
    label_field="song_duration_s",
    value_field="total_streams",
    dataset_label="Streams vs Song Duration",
    title="Song Duration vs Streams",
    x_title="Song Duration (seconds)",
)

CHARTS: Tuple[ChartConfig, ...] = (
    STREAMS_OVER_TIME,
    STREAMS_BY_GENRE,
    STREAMS_BY_DEVICE,
    STREAMS_BY_ARTIST,
    DURATION_VS_STREAMS,
)

CHARTS_BY_KEY: Dict[str, ChartConfig] = {chart.key: chart for chart in CHARTS}
