"""
Printable PDF summary built with ReportLab.

No charts in here: the dashboards draw those. This is a one-page text
summary of every export that someone can save or share.
"""
from __future__ import annotations

from datetime import datetime
from io import BytesIO
from typing import Any, Dict, List

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas


def build_summary_pdf(summaries: List[Dict[str, Any]]) -> bytes:
    """Render the dataset summaries and return the PDF as bytes."""
    buffer = BytesIO()
    pdf_canvas = canvas.Canvas(buffer, pagesize=A4)
    pdf_canvas.setTitle("Music Streaming Summary Report")
    _, height = A4

    y = height - 50  # start a little below the top edge

    pdf_canvas.setFont("Helvetica-Bold", 14)
    pdf_canvas.drawString(40, y, "Music Streaming Summary Report")
    y -= 20

    pdf_canvas.setFont("Helvetica", 10)
    pdf_canvas.drawString(40, y, f"Generated at: {datetime.now():%Y-%m-%d %H:%M:%S}")
    y -= 30

    for summary in summaries:
        # Each dataset takes at most five lines; start a new page if needed.
        if y < 120:
            pdf_canvas.showPage()
            y = height - 50

        pdf_canvas.setFont("Helvetica-Bold", 12)
        pdf_canvas.drawString(40, y, summary["filename"])
        y -= 18

        pdf_canvas.setFont("Helvetica", 10)
        if summary.get("error"):
            pdf_canvas.drawString(60, y, f"Error: {summary['error']}")
            y -= 25
            continue

        lines = [
            f"Rows: {summary['row_count']}",
            f"Total streams: {summary['total_streams']:,.0f}",
            f"Top {summary['label_column']}: {summary['top_label'] or '-'}",
        ]
        if summary["malformed_count"]:
            lines.append(f"Non-numeric values skipped: {summary['malformed_count']}")

        for line in lines:
            pdf_canvas.drawString(60, y, line)
            y -= 15
        y -= 10

    pdf_canvas.showPage()
    pdf_canvas.save()
    return buffer.getvalue()
