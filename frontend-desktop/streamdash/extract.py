"""
Turn parsed CSV rows into the data each chart needs.

Four of the five charts are "label + number" charts that only differ in the
column names and chart type, so they share `extract_series`. The scatter chart
needs (x, y) pairs and uses `extract_points`. Everything a chart needs to know
about its data lives in a `ChartConfig` (see `charts.py` for the five of them).
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Sequence

from .errors import MalformedNumeric
from .parser import Row

DECIMAL_NUMBER = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
PREFIXED_INTEGER = re.compile(r"0([xXoObB])([0-9a-fA-F]+)")
INTEGER_BASES = {"x": 16, "o": 8, "b": 2}


class ChartKind(str, Enum):
    LINE = "line"
    BAR = "bar"
    DONUT = "doughnut"
    FILLED_LINE = "filled-line"
    SCATTER = "scatter"


@dataclass(frozen=True)
class ChartConfig:
    """Data columns plus the few display options each chart uses."""

    key: str
    resource_path: str
    kind: ChartKind
    # For the scatter chart these are the x and y columns.
    label_field: str
    value_field: str
    dataset_label: str
    title: str
    x_title: str | None = None
    y_title: str | None = "Total Streams"
    show_legend: bool = True
    legend_position: str = "top"
    begin_at_zero: bool = True


class Point(NamedTuple):
    x: float
    y: float


@dataclass
class ChartPayload:
    """Everything the renderer needs to draw one chart."""

    config: ChartConfig
    labels: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)
    points: List[Point] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.values and not self.points

    @property
    def malformed_count(self) -> int:
        """How many numbers came out as NaN."""
        numbers = list(self.values)
        for point in self.points:
            numbers.extend(point)
        return sum(1 for number in numbers if math.isnan(number))


def to_number(text: str | None) -> float:
    """
    Cast a CSV cell to a float the forgiving way.

    - an empty cell counts as 0;
    - a missing column or text that is not a number gives NaN.

    Accepted spellings are the ones a browser's `Number()` accepts: plain
    decimals with an optional exponent, `Infinity`, and `0x`/`0o`/`0b`
    integers. Python-only forms such as `1_000`, `inf` or `nan` give NaN.

    NaN is passed on to the chart as is, the chart simply leaves a gap.
    """
    if text is None:
        return math.nan

    text = text.strip()
    if not text:
        return 0.0

    if DECIMAL_NUMBER.fullmatch(text):
        return float(text)

    prefixed = PREFIXED_INTEGER.fullmatch(text)
    if prefixed:
        try:
            return float(int(prefixed.group(2), INTEGER_BASES[prefixed.group(1).lower()]))
        except ValueError:
            # e.g. "0b12": digits outside the base
            return math.nan

    return math.nan


def _cell_number(row: Row, column: str, row_index: int, strict: bool) -> float:
    number = to_number(row.get(column))
    if strict and math.isnan(number):
        raise MalformedNumeric(column, row_index, row.get(column, ""))
    return number


def extract_series(rows: Sequence[Row], config: ChartConfig, strict: bool = False) -> ChartPayload:
    """Labels from `label_field`, numbers from `value_field`, in file order."""
    payload = ChartPayload(config=config)
    for index, row in enumerate(rows):
        payload.labels.append(row.get(config.label_field, ""))
        payload.values.append(_cell_number(row, config.value_field, index, strict))
    return payload


def extract_points(rows: Sequence[Row], config: ChartConfig, strict: bool = False) -> ChartPayload:
    """(x, y) pairs for the scatter chart: x from `label_field`, y from `value_field`."""
    payload = ChartPayload(config=config)
    for index, row in enumerate(rows):
        x = _cell_number(row, config.label_field, index, strict)
        y = _cell_number(row, config.value_field, index, strict)
        payload.points.append(Point(x, y))
    return payload


def extract(rows: Sequence[Row], config: ChartConfig, strict: bool = False) -> ChartPayload:
    """Pick the right extractor for the chart type."""
    if config.kind is ChartKind.SCATTER:
        return extract_points(rows, config, strict=strict)
    return extract_series(rows, config, strict=strict)
