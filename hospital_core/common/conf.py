# hospital_core/common/conf.py
from __future__ import annotations

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    "ENFORCE_CAPABILITY": True,
    "ID_GENERATOR": "hospital_core.common.context.UUIDGenerator",
}


def ledger_setting(name: str) -> Any:
    """
    Read one key of settings.HOSPITAL_LEDGER, falling back to DEFAULTS.
    Looked up on every call so tests can override settings per case.
    """
    configured = getattr(settings, "HOSPITAL_LEDGER", None) or {}
    if name in configured:
        return configured[name]
    return DEFAULTS[name]
