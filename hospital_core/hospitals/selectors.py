# hospital_core/hospitals/selectors.py
from __future__ import annotations

from uuid import UUID

from hospital_core.common.exceptions import NotFound
from hospital_core.hospitals.models import Hospital, HospitalCap


def get_hospital(*, hospital_id: UUID) -> Hospital:
    try:
        return Hospital.objects.get(id=hospital_id)
    except Hospital.DoesNotExist:
        raise NotFound(f"Hospital {hospital_id} not found.")


def get_hospital_cap(*, hospital_id: UUID) -> HospitalCap:
    return HospitalCap.objects.get(hospital_id=hospital_id)


def hospital_balance(*, hospital_id: UUID) -> int:
    return int(get_hospital(hospital_id=hospital_id).balance)
