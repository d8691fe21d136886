# hospital_core/common/dates.py
from __future__ import annotations

import datetime

from django.utils.dateparse import parse_date, parse_time
from rest_framework.exceptions import ValidationError


def as_date(value, *, field: str) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value

    try:
        parsed = parse_date(str(value or "").strip())
    except ValueError:
        parsed = None
    if parsed is None:
        raise ValidationError({field: "Enter a valid date (YYYY-MM-DD)."})
    return parsed


def as_time(value, *, field: str) -> datetime.time:
    if isinstance(value, datetime.time):
        return value

    try:
        parsed = parse_time(str(value or "").strip())
    except ValueError:
        parsed = None
    if parsed is None:
        raise ValidationError({field: "Enter a valid time (HH:MM)."})
    return parsed
