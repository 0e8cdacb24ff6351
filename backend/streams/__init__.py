"""
Streams application for the Music Streaming Dashboard.

This app contains:
- The five CSV exports (in `data/`) and a view that serves them.
- API views for summary statistics and a PDF summary report.
"""
