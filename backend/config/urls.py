"""
Root URL configuration for the backend project.

We keep it short and simply include the URLs from the `streams` app.
"""
from django.urls import path, include

urlpatterns = [
    # CSV exports under /data/, statistics under /api/
    path("", include("streams.urls")),
]
