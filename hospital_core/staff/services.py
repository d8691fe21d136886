# hospital_core/staff/services.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from django.db import transaction

from hospital_core.audit.services import AuditService
from hospital_core.common.context import TxContext
from hospital_core.common.dates import as_date
from hospital_core.common.permissions import require_principal
from hospital_core.common.store import create, get_for_update, insert
from hospital_core.hospitals.services import HospitalService
from hospital_core.staff.models import Staff


@dataclass(frozen=True)
class StaffUpdate:
    name: Optional[str] = None
    role: Optional[str] = None
    department: Optional[str] = None
    hire_date: Optional[object] = None


class StaffService:
    @staticmethod
    @transaction.atomic
    def add_staff_info(
        *,
        ctx: TxContext,
        name: str,
        role: str,
        department: str = "",
        hire_date,
    ) -> Staff:
        staff = create(
            Staff,
            ctx=ctx,
            name=name,
            role=role,
            department=department or "",
            hire_date=as_date(hire_date, field="hire_date"),
            principal=ctx.sender,
            balance=0,
        )

        AuditService.log(
            event_code="staff.created",
            entity_type="Staff",
            entity_id=staff.id,
            actor=ctx.sender,
            metadata={"role": role},
        )
        return staff

    @staticmethod
    @transaction.atomic
    def update_staff_info(
        *,
        ctx: TxContext,
        staff_id: UUID,
        patch: StaffUpdate,
    ) -> Staff:
        staff = get_for_update(Staff, staff_id)
        require_principal(record=staff, ctx=ctx)

        mapping = {
            "name": patch.name,
            "role": patch.role,
            "department": patch.department,
            "hire_date": None if patch.hire_date is None else as_date(patch.hire_date, field="hire_date"),
        }
        updated = sorted(k for k, v in mapping.items() if v is not None)
        for field, value in mapping.items():
            if value is not None:
                setattr(staff, field, value)

        staff.save(update_fields=[*updated, "updated_at"])

        AuditService.log(
            event_code="staff.updated",
            entity_type="Staff",
            entity_id=staff.id,
            hospital_id=staff.hospital_id,
            actor=ctx.sender,
            metadata={"updated_fields": updated},
        )
        return staff

    @staticmethod
    @transaction.atomic
    def hire_staff(
        *,
        ctx: TxContext,
        hospital_id: UUID,
        cap_id: UUID | None,
        staff_id: UUID,
    ) -> Staff:
        """
        Put a detached staff record into the hospital's staff collection.
        """
        hospital = HospitalService.acquire(hospital_id=hospital_id, cap_id=cap_id)
        staff = insert(get_for_update(Staff, staff_id), hospital=hospital)

        AuditService.log(
            event_code="staff.hired",
            entity_type="Staff",
            entity_id=staff.id,
            hospital_id=hospital.id,
            actor=ctx.sender,
        )
        return staff
