"""
Tiny CSV parser used by the dashboard.

The data files are exported by our own SQL queries, so they never contain
quoted fields. That is why a plain "split on newlines, then on commas" is
enough here, and why I did not reach for the `csv` module or Pandas: the
dashboard should show exactly what is in the file, with every cell kept as
text until a chart decides how to read it.

Known limitations:
- a comma inside a value splits that value in two;
- duplicate header names are not renamed, the later column wins.
"""
from __future__ import annotations

from typing import Dict, List

# One parsed line of a CSV file, keyed by the header names.
Row = Dict[str, str]


def parse_csv(csv_text: str) -> List[Row]:
    """
    Turn raw CSV text into a list of rows.

    The first line is the header. Every following line becomes one row with
    exactly the header's keys: missing trailing values are filled with an
    empty string and extra values are dropped.
    """
    lines = csv_text.strip().split("\n")
    headers = [header.strip() for header in lines[0].split(",")]

    rows: List[Row] = []
    for line in lines[1:]:
        values = line.split(",")
        row: Row = {}
        for index, header in enumerate(headers):
            row[header] = values[index].strip() if index < len(values) else ""
        rows.append(row)

    return rows
