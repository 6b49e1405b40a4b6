"""Django settings for the box installer project."""
import os
import sys
from os.path import abspath
from os.path import dirname

import dj_database_url

from common.util import is_truthy

# Name of the deployment environment (dev/test/production)
ENV = os.environ.get("ENV", "dev")

# -- Paths

# Name of the project
PROJECT_NAME = "boxinstaller"

# Absolute path of project Django directory
BASE_DIR = dirname(dirname(abspath(__file__)))

# -- Application

DJANGO_CORE_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
]

THIRD_PARTY_APPS = [
    "rest_framework",
]

DOMAIN_APPS = [
    "common",
    "packages.apps.PackagesConfig",
    "pages.apps.PagesConfig",
    "boxes.apps.BoxesConfig",
]

INSTALLER_APPS = [
    "importer.apps.ImporterConfig",
]

INSTALLED_APPS = [
    *DJANGO_CORE_APPS,
    *THIRD_PARTY_APPS,
    *INSTALLER_APPS,
    *DOMAIN_APPS,
]

# -- Security
SECRET_KEY = os.environ.get("SECRET_KEY", "@@i$w*ct^hfihgh21@^8n+&ba@_l3x")

# -- Debug

# Activates debugging
DEBUG = is_truthy(os.environ.get("DEBUG", False))

# -- Database

DB_URL = os.environ.get("DATABASE_URL", "postgres://localhost:5432/boxinstaller")

DATABASES = {
    "default": dj_database_url.parse(DB_URL),
}

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

# -- Internationalization

# Enable Django translation system
USE_I18N = False

# Language used when a manifest value has no language of its own
LANGUAGE_CODE = os.environ.get("LANGUAGE_CODE", "en")

# Languages that localised manifest values are spread over
LANGUAGES = [
    ("en", "English"),
    ("de", "German"),
]

# Make Django use timezone-aware datetimes internally
USE_TZ = True

# Time zone
TIME_ZONE = "Europe/London"

# -- Logging
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {"format": "%(asctime)s %(name)s %(levelname)s %(message)s"},
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "loggers": {
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
        "importer": {
            "handlers": ["console"],
            "level": os.environ.get("LOG_LEVEL", "DEBUG"),
            "propagate": False,
        },
        "boxes": {
            "handlers": ["console"],
            "level": os.environ.get("LOG_LEVEL", "DEBUG"),
            "propagate": False,
        },
        "common": {
            "handlers": ["console"],
            "level": os.environ.get("LOG_LEVEL", "DEBUG"),
            "propagate": False,
        },
    },
}

# -- Sentry error tracking

SENTRY_ENABLED = is_truthy(os.environ.get("SENTRY_DSN", "False"))

if SENTRY_ENABLED:
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration

    sentry_kwargs = {
        "dsn": os.environ["SENTRY_DSN"],
        "environment": ENV,
        "integrations": [DjangoIntegration()],
    }
    if "shell" in sys.argv:
        sentry_kwargs["before_send"] = lambda event, hint: None

    if os.getenv("GIT_COMMIT"):
        sentry_kwargs["release"] = os.getenv("GIT_COMMIT")

    sentry_sdk.init(**sentry_kwargs)
