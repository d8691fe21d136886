# hospital_core/common/permissions.py
from __future__ import annotations

from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError

from hospital_core.common.conf import ledger_setting
from hospital_core.common.context import TxContext
from hospital_core.common.exceptions import NotAuthorized
from hospital_core.hospitals.models import Hospital, HospitalCap


def capability_enforced() -> bool:
    return bool(ledger_setting("ENFORCE_CAPABILITY"))


def require_capability(*, hospital: Hospital, cap_id: UUID | None) -> None:
    """
    Hospital-scoped mutations: the presented cap must be the one minted
    together with this hospital.

    With ENFORCE_CAPABILITY off, holding the hospital id is enough and the
    cap is not looked at.
    """
    if not capability_enforced():
        return

    if cap_id is None:
        raise NotAuthorized("A HospitalCap is required for this operation.")

    try:
        granted = HospitalCap.objects.filter(id=cap_id, hospital_id=hospital.id).exists()
    except DjangoValidationError:
        granted = False
    if not granted:
        raise NotAuthorized("HospitalCap does not grant access to this hospital.")


def require_principal(*, record, ctx: TxContext) -> None:
    """
    Self-record mutations (Staff, Patient): caller must be the owning principal.
    """
    if ctx.sender != record.principal:
        raise NotAuthorized(
            f"{record._meta.verbose_name.capitalize()} {record.id} is owned by another principal."
        )
