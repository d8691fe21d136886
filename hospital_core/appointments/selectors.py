# hospital_core/appointments/selectors.py
from __future__ import annotations

from uuid import UUID

from django.db.models import QuerySet

from hospital_core.appointments.models import Appointment


def list_appointments(
    *,
    hospital_id: UUID,
    patient_principal: str | None = None,
    doctor_principal: str | None = None,
) -> QuerySet[Appointment]:
    qs = Appointment.objects.filter(hospital_id=hospital_id)

    if patient_principal:
        qs = qs.filter(patient_principal=patient_principal)
    if doctor_principal:
        qs = qs.filter(doctor_principal=doctor_principal)

    return qs.order_by("date", "time")
