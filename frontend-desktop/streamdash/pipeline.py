"""
Fetch -> parse -> extract -> render, once per chart.

`initialize()` is the single entry point the window calls once it is on
screen. Every chart runs in its own worker thread so a slow file only delays
its own chart, and a failing chart is logged without touching the others.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Callable, List, Sequence

import requests

from .charts import CHARTS
from .config import DashboardConfig
from .extract import ChartConfig, ChartKind, ChartPayload, extract
from .loader import load_csv

logger = logging.getLogger(__name__)

# Receives each finished payload; in the desktop client this is a Qt signal.
RenderCallback = Callable[[ChartPayload], None]


@dataclass
class PipelineOutcome:
    key: str
    payload: ChartPayload | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_chart(
    chart: ChartConfig,
    render: RenderCallback,
    config: DashboardConfig | None = None,
    session: requests.Session | None = None,
) -> ChartPayload:
    """Run the whole pipeline for one chart and hand the result to `render`."""
    config = config or DashboardConfig()
    rows = load_csv(chart.resource_path, config=config, session=session)

    if chart.kind is ChartKind.SCATTER:
        for index, row in enumerate(rows):
            logger.debug("%s row %d: %s", chart.key, index, row)

    payload = extract(rows, chart, strict=config.strict_numbers)
    if payload.malformed_count:
        logger.warning(
            "%s: %d value(s) in %s are not numbers and will be left out of the chart",
            chart.key,
            payload.malformed_count,
            chart.resource_path,
        )

    render(payload)
    return payload


def initialize(
    render: RenderCallback,
    charts: Sequence[ChartConfig] = CHARTS,
    config: DashboardConfig | None = None,
    session: requests.Session | None = None,
) -> List[PipelineOutcome]:
    """
    Build every chart concurrently and wait until all of them are done.

    Returns one outcome per chart, in the same order as `charts`. Errors are
    logged here and kept on the outcome; they are never re-raised.
    """
    config = config or DashboardConfig()
    if not charts:
        return []

    with ThreadPoolExecutor(max_workers=len(charts), thread_name_prefix="chart") as pool:
        futures = [
            pool.submit(build_chart, chart, render, config, session) for chart in charts
        ]
        wait(futures)

    outcomes: List[PipelineOutcome] = []
    for chart, future in zip(charts, futures):
        error = future.exception()
        if error is not None:
            logger.error("Error building %s chart: %s", chart.key, error, exc_info=error)
            outcomes.append(PipelineOutcome(key=chart.key, error=error))
        else:
            outcomes.append(PipelineOutcome(key=chart.key, payload=future.result()))

    failed = sum(1 for outcome in outcomes if not outcome.ok)
    logger.info("Dashboard initialized: %d chart(s) ready, %d failed", len(outcomes) - failed, failed)
    return outcomes
