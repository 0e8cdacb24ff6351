"""
WSGI config for the backend project.

Mostly boilerplate: it lets a WSGI server (gunicorn, mod_wsgi) pick up the
dashboard backend as `application`.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

