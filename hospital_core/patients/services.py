# hospital_core/patients/services.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from django.db import transaction
from rest_framework.exceptions import ValidationError

from hospital_core.audit.services import AuditService
from hospital_core.common.context import TxContext
from hospital_core.common.permissions import require_principal
from hospital_core.common.store import create, get_for_update, insert, remove
from hospital_core.hospitals.services import HospitalService
from hospital_core.patients.models import Patient

MAX_AGE = 255


@dataclass(frozen=True)
class PatientUpdate:
    name: Optional[str] = None
    age: Optional[int] = None
    address: Optional[str] = None
    medical_history: Optional[str] = None


def _validate_age(age) -> int:
    if isinstance(age, bool) or not isinstance(age, int) or not 0 <= age <= MAX_AGE:
        raise ValidationError({"age": f"Age must be an integer between 0 and {MAX_AGE}."})
    return age


class PatientService:
    @staticmethod
    @transaction.atomic
    def add_patient_info(
        *,
        ctx: TxContext,
        name: str,
        age: int,
        address: str = "",
        medical_history: str = "",
    ) -> Patient:
        patient = create(
            Patient,
            ctx=ctx,
            name=name,
            age=_validate_age(age),
            address=address or "",
            medical_history=medical_history or "",
            principal=ctx.sender,
        )

        AuditService.log(
            event_code="patient.created",
            entity_type="Patient",
            entity_id=patient.id,
            actor=ctx.sender,
        )
        return patient

    @staticmethod
    @transaction.atomic
    def update_patient_info(
        *,
        ctx: TxContext,
        patient_id: UUID,
        patch: PatientUpdate,
    ) -> Patient:
        patient = get_for_update(Patient, patient_id)
        require_principal(record=patient, ctx=ctx)

        mapping = {
            "name": patch.name,
            "age": None if patch.age is None else _validate_age(patch.age),
            "address": patch.address,
            "medical_history": patch.medical_history,
        }
        updated = sorted(k for k, v in mapping.items() if v is not None)
        for field, value in mapping.items():
            if value is not None:
                setattr(patient, field, value)

        patient.save(update_fields=[*updated, "updated_at"])

        AuditService.log(
            event_code="patient.updated",
            entity_type="Patient",
            entity_id=patient.id,
            hospital_id=patient.hospital_id,
            actor=ctx.sender,
            metadata={"updated_fields": updated},
        )
        return patient

    @staticmethod
    @transaction.atomic
    def admit_patient(
        *,
        ctx: TxContext,
        hospital_id: UUID,
        cap_id: UUID | None,
        patient_id: UUID,
    ) -> Patient:
        hospital = HospitalService.acquire(hospital_id=hospital_id, cap_id=cap_id)
        patient = insert(get_for_update(Patient, patient_id), hospital=hospital)

        AuditService.log(
            event_code="patient.admitted",
            entity_type="Patient",
            entity_id=patient.id,
            hospital_id=hospital.id,
            actor=ctx.sender,
        )
        return patient

    @staticmethod
    @transaction.atomic
    def discharge_patient(
        *,
        ctx: TxContext,
        hospital_id: UUID,
        cap_id: UUID | None,
        patient_id: UUID,
    ) -> None:
        """
        Remove the patient from the hospital's collection and destroy the record.
        Appointments keep their principal snapshot.
        """
        hospital = HospitalService.acquire(hospital_id=hospital_id, cap_id=cap_id)
        patient = remove(Patient, patient_id, hospital_id=hospital.id)

        AuditService.log(
            event_code="patient.discharged",
            entity_type="Patient",
            entity_id=patient.id,
            hospital_id=hospital.id,
            actor=ctx.sender,
        )
