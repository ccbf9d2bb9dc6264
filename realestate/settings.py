"""
Django settings for the brokerage site backend.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-development-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")

ALLOWED_HOSTS = [host for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if host]

INSTALLED_APPS = [
    "api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "realestate.urls"

WSGI_APPLICATION = "realestate.wsgi.application"

DATABASES = {}

USE_TZ = True

LISTINGS_FILE_PATH = Path(
    os.environ.get("LISTINGS_FILE_PATH", BASE_DIR / "property_filters" / "data" / "listings.json")
)

# Page the hero search form redirects to; the encoded facets are appended as its query string.
PROPERTIES_PAGE_URL = os.environ.get("PROPERTIES_PAGE_URL", "/properties/")

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
        "property_filters": {"handlers": ["console"], "level": os.environ.get("PROPERTY_FILTERS_LOG_LEVEL", "INFO")},
        "api": {"handlers": ["console"], "level": "INFO"},
    },
}
