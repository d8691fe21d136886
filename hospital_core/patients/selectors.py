# hospital_core/patients/selectors.py
from __future__ import annotations

from uuid import UUID

from django.db.models import Q, QuerySet

from hospital_core.common.exceptions import NotFound
from hospital_core.patients.models import Patient


def get_patient(*, patient_id: UUID) -> Patient:
    try:
        return Patient.objects.get(id=patient_id)
    except Patient.DoesNotExist:
        raise NotFound(f"Patient {patient_id} not found.")


def search_patients(
    *,
    hospital_id: UUID,
    q: str | None = None,
) -> QuerySet[Patient]:
    qs = Patient.objects.filter(hospital_id=hospital_id)

    qv = (q or "").strip()
    if qv:
        qs = qs.filter(Q(name__icontains=qv) | Q(address__icontains=qv))

    return qs.order_by("-created_at")
