"""
Development settings – debug-friendly overrides over base settings.
Set ``USE_SQLITE=true`` to run without a PostgreSQL server.
"""
import structlog
from decouple import config

from .base import *  # noqa: F401, F403

DEBUG = config("DEBUG", default=True, cast=bool)

if DEBUG:
    ALLOWED_HOSTS = ["*"]

SECURE_SSL_REDIRECT = False
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

if config("USE_SQLITE", default=False, cast=bool):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",  # noqa: F405
        }
    }

# Human-readable console logs instead of JSON lines
LOGGING["formatters"]["json_formatter"]["processor"] = structlog.dev.ConsoleRenderer()  # noqa: F405
LOGGING["root"]["level"] = "DEBUG"  # noqa: F405

REST_FRAMEWORK["DEFAULT_RENDERER_CLASSES"] = [  # noqa: F405
    "rest_framework.renderers.JSONRenderer",
    "rest_framework.renderers.BrowsableAPIRenderer",
]
