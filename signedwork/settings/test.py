"""
Test settings: in-memory SQLite, fast hashing, no log files.

Usage:
    pytest
    python manage.py test --settings=signedwork.settings.test
"""

from .base import *  # noqa: F401, F403

DEBUG = False
TESTING = True

SECRET_KEY = "test-secret-key-not-for-production"

ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

CORS_ALLOWED_ORIGINS = ["http://localhost:5173"]

SIMPLE_JWT["AUTH_COOKIE_SECURE"] = False  # noqa: F405

# Keep console output, drop the rotating files
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {
            "level": "WARNING",
            "class": "logging.StreamHandler",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
}
