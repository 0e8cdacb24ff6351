"""
Basic Django settings for the Music Streaming Dashboard backend.

The backend has two jobs: hand out the five CSV exports the dashboards chart,
and compute a small statistics summary (JSON + PDF) over the same files.
Nothing is uploaded or stored, so the settings stay short.
"""
from pathlib import Path

# Base directory for the backend project (../backend)
BASE_DIR = Path(__file__).resolve().parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
# For local development this hardcoded key is acceptable.
SECRET_KEY = "dev-secret-key-for-streaming-dashboard-only"

# In development we usually keep debug on.
DEBUG = True

# Allow all hosts during development so we do not fight with host errors.
ALLOWED_HOSTS: list[str] = ["*"]

# Applications that are active for this project.
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",

    # Third‑party apps
    "rest_framework",          # Django REST Framework for the summary API
    "corsheaders",             # So a browser dashboard on another port can fetch the CSVs

    # Local apps
    "streams",                 # CSV exports + statistics
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    # CORS middleware should come before CommonMiddleware
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"

# Nothing is written to the database; auth/contenttypes still expect one.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "static"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Folder holding the five CSV exports served under /data/.
STREAMS_DATA_DIR = BASE_DIR / "streams" / "data"

# Allow all origins during development – in a real project we would lock this down.
CORS_ALLOW_ALL_ORIGINS = True

# DRF configuration – the data is public, so no authentication at all.
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
}

# Log to the console; the `streams` logger is the one worth watching.
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{asctime} {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "streams": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
    },
}
