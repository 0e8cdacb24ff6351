"""
Draw chart payloads with Matplotlib.

Only plain `Axes` calls are used here, so the same code draws into the Qt
canvas of the desktop window and into an off-screen `Figure` in the tests.
Colours follow the dark slate/teal look of the desktop client.
"""
from __future__ import annotations

import math
from typing import List

from matplotlib.axes import Axes

from .extract import ChartKind, ChartPayload

BACKGROUND = "#020617"  # slate‑900
ACCENT = "#0891b2"  # teal accent
TEXT = "white"
PALETTE = ["#0891b2", "#0f766e", "#f59e0b", "#e11d48", "#8b5cf6", "#22c55e", "#64748b"]

LEGEND_LOCATIONS = {
    "top": "upper left",
    "bottom": "lower center",
}


def draw_placeholder(ax: Axes, message: str = "No data yet", title: str | None = None) -> None:
    """Empty state used before data arrives and for charts that failed to load."""
    ax.clear()
    ax.set_facecolor(BACKGROUND)
    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title, color=TEXT)
    ax.text(
        0.5,
        0.5,
        message,
        ha="center",
        va="center",
        color=TEXT,
        fontsize=10,
        transform=ax.transAxes,
    )


def draw_chart(ax: Axes, payload: ChartPayload) -> None:
    """Draw one payload onto `ax`, replacing whatever was there."""
    config = payload.config
    if payload.is_empty:
        draw_placeholder(ax, "No data", title=config.title)
        return

    ax.clear()
    ax.set_facecolor(BACKGROUND)
    ax.set_title(config.title, color=TEXT)

    if config.kind is ChartKind.DONUT:
        _draw_donut(ax, payload)
        return

    if config.kind is ChartKind.SCATTER:
        xs = [point.x for point in payload.points]
        ys = [point.y for point in payload.points]
        ax.scatter(xs, ys, color=ACCENT, label=config.dataset_label)
    else:
        # Positions instead of raw labels so repeated labels keep their own slot.
        positions = list(range(len(payload.values)))
        if config.kind is ChartKind.BAR:
            ax.bar(positions, payload.values, color=ACCENT, label=config.dataset_label)
        else:
            ax.plot(positions, payload.values, color=ACCENT, marker="o", label=config.dataset_label)
            if config.kind is ChartKind.FILLED_LINE:
                ax.fill_between(positions, payload.values, color=ACCENT, alpha=0.3)
        ax.set_xticks(positions)
        ax.set_xticklabels(payload.labels)
        ax.tick_params(axis="x", labelrotation=30)

    ax.tick_params(axis="x", labelcolor=TEXT)
    ax.tick_params(axis="y", labelcolor=TEXT)
    if config.x_title:
        ax.set_xlabel(config.x_title, color=TEXT)
    if config.y_title:
        ax.set_ylabel(config.y_title, color=TEXT)

    if config.begin_at_zero:
        bottom, _ = ax.get_ylim()
        ax.set_ylim(bottom=min(bottom, 0))

    if config.show_legend:
        legend = ax.legend(loc=LEGEND_LOCATIONS.get(config.legend_position, "best"))
        _style_legend(legend)


def _draw_donut(ax: Axes, payload: ChartPayload) -> None:
    config = payload.config
    # A wedge cannot be NaN or negative; those slices are left out.
    sizes: List[float] = [
        value if not math.isnan(value) and value > 0 else 0.0 for value in payload.values
    ]
    if sum(sizes) == 0:
        draw_placeholder(ax, "No data", title=config.title)
        return

    colors = [PALETTE[index % len(PALETTE)] for index in range(len(sizes))]
    wedges, _ = ax.pie(
        sizes,
        colors=colors,
        startangle=90,
        counterclock=False,
        wedgeprops={"width": 0.4, "edgecolor": BACKGROUND},
    )
    ax.set_aspect("equal")

    if config.show_legend:
        legend = ax.legend(
            wedges,
            payload.labels,
            loc=LEGEND_LOCATIONS.get(config.legend_position, "best"),
            bbox_to_anchor=(0.5, -0.15) if config.legend_position == "bottom" else None,
            ncol=min(len(sizes), 3),
            frameon=False,
        )
        _style_legend(legend)


def _style_legend(legend) -> None:
    legend.get_frame().set_facecolor(BACKGROUND)
    for text in legend.get_texts():
        text.set_color(TEXT)
