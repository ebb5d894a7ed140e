"""
Django settings for newsfeed project.

Values can be overridden through NEWSFEED_* environment variables.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("NEWSFEED_SECRET_KEY", "django-insecure-newsfeed-dev-key")

DEBUG = os.environ.get("NEWSFEED_DEBUG", "false").lower() in ("1", "true", "yes")

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("NEWSFEED_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.syndication",
    "core",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "newsfeed.urls"

# No models; in-memory database only
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Expanded articles are cached per article id
CACHES = {
    "default": {
        "BACKEND": os.environ.get(
            "NEWSFEED_CACHE_BACKEND", "django.core.cache.backends.locmem.LocMemCache"
        ),
        "LOCATION": os.environ.get("NEWSFEED_CACHE_LOCATION", "newsfeed-articles"),
        "TIMEOUT": int(os.environ.get("NEWSFEED_CACHE_TIMEOUT", "3600")),
        "OPTIONS": {"MAX_ENTRIES": 5000},
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ==================== Aggregators ====================

NEWSFEED_HTTP_TIMEOUT = int(os.environ.get("NEWSFEED_HTTP_TIMEOUT", "30"))

if os.environ.get("NEWSFEED_USER_AGENT"):
    NEWSFEED_USER_AGENT = os.environ["NEWSFEED_USER_AGENT"]

if os.environ.get("NEWSFEED_THAIRATH_ITEM_CAP"):
    NEWSFEED_THAIRATH_ITEM_CAP = int(os.environ["NEWSFEED_THAIRATH_ITEM_CAP"])

# ==================== Logging ====================

LOG_LEVEL = os.environ.get("NEWSFEED_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "core": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "aggregator": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}
