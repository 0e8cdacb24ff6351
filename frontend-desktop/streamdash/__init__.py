"""
Data side of the music streaming desktop dashboard.

Nothing in here imports Qt: the window in `main.py` only hosts the canvases
and calls `initialize()`.
"""
from .charts import CHARTS, CHARTS_BY_KEY
from .config import API_BASE_URL, DashboardConfig
from .errors import MalformedNumeric, ResourceUnavailable, StreamDashError
from .extract import ChartConfig, ChartKind, ChartPayload, Point, extract, to_number
from .loader import load_csv, load_csv_text
from .parser import Row, parse_csv
from .pipeline import PipelineOutcome, build_chart, initialize

__all__ = [
    "API_BASE_URL",
    "CHARTS",
    "CHARTS_BY_KEY",
    "ChartConfig",
    "ChartKind",
    "ChartPayload",
    "DashboardConfig",
    "MalformedNumeric",
    "PipelineOutcome",
    "Point",
    "ResourceUnavailable",
    "Row",
    "StreamDashError",
    "build_chart",
    "extract",
    "initialize",
    "load_csv",
    "load_csv_text",
    "parse_csv",
    "to_number",
]
