# hospital_core/hospitals/services.py
from __future__ import annotations

import logging
from uuid import UUID

from django.db import transaction

from hospital_core.audit.services import AuditService
from hospital_core.common.context import TxContext
from hospital_core.common.permissions import require_capability
from hospital_core.common.store import create, get_for_update
from hospital_core.hospitals.models import Hospital, HospitalCap

logger = logging.getLogger(__name__)


class HospitalService:
    @staticmethod
    @transaction.atomic
    def create_hospital(
        *,
        ctx: TxContext,
        name: str,
        address: str = "",
    ) -> tuple[Hospital, HospitalCap]:
        """
        Mint a Hospital with zero balance and empty collections, and the one
        HospitalCap bound to it. Both belong to the caller.
        """
        hospital = create(
            Hospital,
            ctx=ctx,
            name=name,
            address=address or "",
            principal=ctx.sender,
            balance=0,
        )
        cap = create(
            HospitalCap,
            ctx=ctx,
            hospital=hospital,
            holder=ctx.sender,
        )

        AuditService.log(
            event_code="hospital.created",
            entity_type="Hospital",
            entity_id=hospital.id,
            hospital_id=hospital.id,
            actor=ctx.sender,
            metadata={"cap_id": str(cap.id)},
        )
        logger.info("hospital %s created by %s", hospital.id, ctx.sender)
        return hospital, cap

    @staticmethod
    def acquire(*, hospital_id: UUID, cap_id: UUID | None) -> Hospital:
        """
        Lock the hospital row for the rest of the enclosing transaction and
        check the capability. Every hospital-scoped mutation starts here.
        """
        hospital = get_for_update(Hospital, hospital_id)
        require_capability(hospital=hospital, cap_id=cap_id)
        return hospital
