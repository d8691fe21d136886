# hospital_core/appointments/services.py
from __future__ import annotations

from uuid import UUID

from django.db import transaction

from hospital_core.appointments.models import Appointment
from hospital_core.audit.services import AuditService
from hospital_core.common.context import TxContext
from hospital_core.common.dates import as_date, as_time
from hospital_core.common.store import insert, remove
from hospital_core.hospitals.services import HospitalService
from hospital_core.patients.selectors import get_patient
from hospital_core.staff.selectors import get_staff


class AppointmentService:
    @staticmethod
    @transaction.atomic
    def add_appointment_info(
        *,
        ctx: TxContext,
        hospital_id: UUID,
        cap_id: UUID | None,
        patient_id: UUID,
        doctor_id: UUID,
        date,
        time,
        description: str = "",
    ) -> Appointment:
        hospital = HospitalService.acquire(hospital_id=hospital_id, cap_id=cap_id)

        patient = get_patient(patient_id=patient_id)
        doctor = get_staff(staff_id=doctor_id)

        appointment = insert(
            Appointment(
                id=ctx.fresh_id(),
                patient_principal=patient.principal,
                doctor_principal=doctor.principal,
                date=as_date(date, field="date"),
                time=as_time(time, field="time"),
                description=description or "",
            ),
            hospital=hospital,
        )

        AuditService.log(
            event_code="appointment.created",
            entity_type="Appointment",
            entity_id=appointment.id,
            hospital_id=hospital.id,
            actor=ctx.sender,
            metadata={"patient_id": str(patient.id), "doctor_id": str(doctor.id)},
        )
        return appointment

    @staticmethod
    @transaction.atomic
    def cancel_appointment(
        *,
        ctx: TxContext,
        hospital_id: UUID,
        cap_id: UUID | None,
        appointment_id: UUID,
    ) -> None:
        """
        Cancelling deletes the appointment outright; there is no cancelled state.
        """
        hospital = HospitalService.acquire(hospital_id=hospital_id, cap_id=cap_id)
        appointment = remove(Appointment, appointment_id, hospital_id=hospital.id)

        AuditService.log(
            event_code="appointment.cancelled",
            entity_type="Appointment",
            entity_id=appointment.id,
            hospital_id=hospital.id,
            actor=ctx.sender,
        )
