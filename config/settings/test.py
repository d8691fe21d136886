# config/settings/test.py
from .base import *  # noqa

SECRET_KEY = "test-only-key"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

HOSPITAL_LEDGER = {
    "ENFORCE_CAPABILITY": True,
    "ID_GENERATOR": "hospital_core.common.context.UUIDGenerator",
}

LOGGING["loggers"]["hospital_core"]["level"] = "WARNING"
