# hospital_core/staff/selectors.py
from __future__ import annotations

from uuid import UUID

from django.db.models import QuerySet

from hospital_core.common.exceptions import NotFound
from hospital_core.staff.models import Staff


def get_staff(*, staff_id: UUID) -> Staff:
    try:
        return Staff.objects.get(id=staff_id)
    except Staff.DoesNotExist:
        raise NotFound(f"Staff member {staff_id} not found.")


def list_staff(*, hospital_id: UUID, department: str | None = None) -> QuerySet[Staff]:
    qs = Staff.objects.filter(hospital_id=hospital_id)
    if department:
        qs = qs.filter(department=department)
    return qs.order_by("name")


def staff_balance(*, staff_id: UUID) -> int:
    return int(get_staff(staff_id=staff_id).balance)
