# config/settings/base.py
from pathlib import Path
import os
from dotenv import load_dotenv


BASE_DIR = Path(__file__).resolve().parent.parent.parent
load_dotenv(BASE_DIR / ".env")

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "unsafe-dev-key")
DEBUG = os.getenv("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    # Django
    "django.contrib.contenttypes",

    # Domain apps
    "hospital_core.common.apps.CommonConfig",
    "hospital_core.audit.apps.AuditConfig",
    "hospital_core.hospitals.apps.HospitalsConfig",
    "hospital_core.staff.apps.StaffConfig",
    "hospital_core.patients.apps.PatientsConfig",
    "hospital_core.appointments.apps.AppointmentsConfig",
    "hospital_core.inventory.apps.InventoryConfig",
]

DATABASES = {
    "default": {
        "ENGINE": os.getenv("DB_ENGINE", "django.db.backends.postgresql"),
        "NAME": os.getenv("DB_NAME", "hospital"),
        "USER": os.getenv("DB_USER", "hospital"),
        "PASSWORD": os.getenv("DB_PASSWORD", "hospital"),
        "HOST": os.getenv("DB_HOST", "127.0.0.1"),
        "PORT": os.getenv("DB_PORT", "5432"),
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

HOSPITAL_LEDGER = {
    # Re-check the HospitalCap on every hospital-scoped mutation.
    # False restores the trust-the-reference-holder model.
    "ENFORCE_CAPABILITY": os.getenv("HOSPITAL_ENFORCE_CAPABILITY", "1") == "1",
    "ID_GENERATOR": os.getenv(
        "HOSPITAL_ID_GENERATOR",
        "hospital_core.common.context.UUIDGenerator",
    ),
}

LOG_LEVEL = os.getenv("DJANGO_LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "hospital_core": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
