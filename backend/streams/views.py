"""
Views for the `streams` app.

The idea is:
- hand the CSV exports to the dashboards exactly as they are on disk,
- let Pandas compute a few totals over the same files,
- offer those totals as a short PDF that can be downloaded.
"""
from __future__ import annotations

import logging

from django.http import HttpResponse, JsonResponse
from django.utils.timezone import now
from django.views import View
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .datasets import DATASETS_BY_FILENAME
from .reports import build_summary_pdf
from .serializers import DatasetSummarySerializer
from .statistics import summarize_all

logger = logging.getLogger(__name__)


class DatasetCsvView(View):
    """
    Serve one of the known CSV exports as plain `text/csv`.

    A plain Django view instead of an APIView: the body is the file itself, so
    there is nothing for DRF's renderers to do. Only the five known file names
    are served; anything else is a 404.
    """

    def get(self, request, filename: str, *args, **kwargs):
        dataset = DATASETS_BY_FILENAME.get(filename)
        if dataset is None:
            return JsonResponse({"error": f"Unknown dataset: {filename}"}, status=404)

        try:
            csv_text = dataset.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.error("Dataset file not found: %s", dataset.path)
            return JsonResponse({"error": f"Dataset file is missing: {filename}"}, status=404)
        except UnicodeDecodeError as exc:
            logger.error("Dataset file is not UTF-8: %s (%s)", dataset.path, exc)
            return JsonResponse({"error": f"Dataset file is not valid UTF-8: {filename}"}, status=500)

        return HttpResponse(csv_text, content_type="text/csv; charset=utf-8")


class SummaryView(APIView):
    """Totals per export, newest numbers every time (nothing is cached)."""

    def get(self, request, *args, **kwargs):
        serializer = DatasetSummarySerializer(summarize_all(), many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)


class SummaryPdfView(APIView):
    """The same totals as `SummaryView`, as a downloadable PDF."""

    def get(self, request, *args, **kwargs):
        pdf_bytes = build_summary_pdf(summarize_all())

        # Natural‑looking name with a timestamp so repeated downloads do not clash.
        filename = f"Streaming_Summary_Report_{now():%Y%m%d_%H%M%S}.pdf"
        response = HttpResponse(pdf_bytes, content_type="application/pdf")
        response["Content-Disposition"] = f'attachment; filename="{filename}"'
        return response
