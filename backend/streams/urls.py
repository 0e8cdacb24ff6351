"""
URL patterns for the `streams` app.

The CSV files keep the `data/<name>.csv` paths the dashboards were built
against; the statistics live under `api/`.
"""
from django.urls import path

from .views import DatasetCsvView, SummaryPdfView, SummaryView

urlpatterns = [
    path("data/<str:filename>", DatasetCsvView.as_view(), name="dataset-csv"),
    path("api/summary/", SummaryView.as_view(), name="summary"),
    path("api/summary/pdf/", SummaryPdfView.as_view(), name="summary-pdf"),
]
