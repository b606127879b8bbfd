"""Minimal project settings for running the dashboard grid app."""

from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent

env = environ.Env(
    DEBUG=(bool, False),
    DASHGRID_COLUMNS=(int, 12),
    LOG_LEVEL=(str, "INFO"),
)
environ.Env.read_env(BASE_DIR / ".env")

SECRET_KEY = env("SECRET_KEY", default="dashgrid-insecure-key")
DEBUG = env("DEBUG")
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=[])

INSTALLED_APPS = [
    "django_dashgrid",
]

DATABASES = {}
MIDDLEWARE = []
TEMPLATES = []
USE_TZ = True
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Dashboard grid
DASHGRID_COLUMNS = env("DASHGRID_COLUMNS")
DASHGRID_CHART_SIZES = env.json("DASHGRID_CHART_SIZES", default={})

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "django_dashgrid": {
            "handlers": ["console"],
            "level": env("LOG_LEVEL"),
        },
    },
}
