"""
Summary statistics over the CSV exports.

Pandas does the heavy lifting here. The numbers follow the same rules as the
dashboards: an empty cell counts as 0 and text that is not a number is
skipped (and counted, so a broken export is easy to spot).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

import pandas as pd

from .datasets import DATASETS, Dataset

logger = logging.getLogger(__name__)


def summarize_dataset(dataset: Dataset) -> Dict[str, Any]:
    """Return a JSON-friendly summary of one export, or an `error` entry."""
    summary: Dict[str, Any] = {
        "key": dataset.key,
        "filename": dataset.filename,
        "label_column": dataset.label_column,
    }

    try:
        with open(dataset.path, encoding="utf-8") as f:
            width = len(f.readline().split(","))

        # Read every cell as text so we decide how numbers are cast. Values past
        # the last header column are dropped, like the dashboards do.
        df = pd.read_csv(
            dataset.path,
            dtype=str,
            keep_default_na=False,
            engine="python",
            on_bad_lines=lambda fields: fields[:width],
        )
    except FileNotFoundError:
        logger.error("Dataset file not found: %s", dataset.path)
        summary["error"] = "Dataset file not found."
        return summary
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as exc:
        logger.error("Could not read %s: %s", dataset.path, exc)
        summary["error"] = f"Could not read CSV: {exc}"
        return summary

    # Short lines come back with missing cells; treat them as empty text.
    df = df.fillna("")

    # Exports saved from Excel can carry a BOM and stray spaces in the header.
    df.columns = [str(col).strip().lstrip("\ufeff") for col in df.columns]

    missing_columns = dataset.required_columns.difference(df.columns)
    if missing_columns:
        summary["error"] = "CSV is missing required column(s): " + ", ".join(sorted(missing_columns))
        return summary

    labels = df[dataset.label_column].str.strip()
    raw_values = df[dataset.value_column].str.strip().replace("", "0")
    values = pd.to_numeric(raw_values, errors="coerce")

    row_count = int(len(df))
    malformed_count = int(values.isna().sum())
    total_streams = float(values.sum()) if row_count > 0 else 0.0

    top_label = None
    if values.notna().any():
        top_label = str(labels[values.idxmax()])

    if malformed_count:
        logger.warning("%s has %d non-numeric value(s)", dataset.filename, malformed_count)

    summary.update(
        {
            "row_count": row_count,
            "total_streams": total_streams,
            "malformed_count": malformed_count,
            "top_label": top_label,
        }
    )
    return summary


def summarize_all() -> List[Dict[str, Any]]:
    return [summarize_dataset(dataset) for dataset in DATASETS]
