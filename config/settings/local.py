# config/settings/local.py
from .base import *  # noqa

DEBUG = True

# Local development defaults to a file database unless DB_ENGINE says otherwise.
if not os.getenv("DB_ENGINE"):
    DATABASES["default"] = {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }

LOGGING["loggers"]["hospital_core"]["level"] = os.getenv("DJANGO_LOG_LEVEL", "DEBUG")
