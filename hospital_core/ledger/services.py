# hospital_core/ledger/services.py
from __future__ import annotations

import logging
from uuid import UUID

from django.db import transaction

from hospital_core.audit.services import AuditService
from hospital_core.common.context import TxContext
from hospital_core.common.store import get_for_update
from hospital_core.hospitals.services import HospitalService
from hospital_core.ledger.values import Funds, as_amount, credit, debit
from hospital_core.staff.models import Staff

logger = logging.getLogger(__name__)


class LedgerService:
    """
    Balance movements on a Hospital (and its staff).

    Notes:
    - Each call is one transaction; the hospital row is locked first, then
      the staff row, for the whole call.
    - Sufficiency is checked before any write. A failed call leaves both
      balances exactly as they were.
    """

    @staticmethod
    @transaction.atomic
    def deposit(
        *,
        ctx: TxContext,
        hospital_id: UUID,
        cap_id: UUID | None,
        funds: Funds,
    ) -> None:
        hospital = HospitalService.acquire(hospital_id=hospital_id, cap_id=cap_id)
        amount = funds.value()

        hospital.balance = credit(hospital.balance, amount)
        hospital.save(update_fields=["balance", "updated_at"])

        AuditService.log(
            event_code="ledger.deposited",
            entity_type="Hospital",
            entity_id=hospital.id,
            hospital_id=hospital.id,
            actor=ctx.sender,
            metadata={"amount": str(amount), "balance": str(hospital.balance)},
        )
        logger.info("hospital %s deposit %s -> balance %s", hospital.id, amount, hospital.balance)

    @staticmethod
    @transaction.atomic
    def pay_staff(
        *,
        ctx: TxContext,
        hospital_id: UUID,
        cap_id: UUID | None,
        staff_id: UUID,
        amount: int,
    ) -> None:
        hospital = HospitalService.acquire(hospital_id=hospital_id, cap_id=cap_id)
        amount = as_amount(amount)
        staff = get_for_update(Staff, staff_id)

        hospital_balance = debit(hospital.balance, amount)
        staff_balance = credit(staff.balance, amount)

        hospital.balance = hospital_balance
        staff.balance = staff_balance
        hospital.save(update_fields=["balance", "updated_at"])
        staff.save(update_fields=["balance", "updated_at"])

        AuditService.log(
            event_code="ledger.staff_paid",
            entity_type="Staff",
            entity_id=staff.id,
            hospital_id=hospital.id,
            actor=ctx.sender,
            metadata={"amount": str(amount), "balance": str(hospital.balance)},
        )
        logger.info("hospital %s paid staff %s amount %s", hospital.id, staff.id, amount)

    @staticmethod
    @transaction.atomic
    def pay_expense(
        *,
        ctx: TxContext,
        hospital_id: UUID,
        cap_id: UUID | None,
        amount: int,
    ) -> Funds:
        """
        Debit the hospital and return the withdrawn amount as detached Funds.
        """
        hospital = HospitalService.acquire(hospital_id=hospital_id, cap_id=cap_id)
        amount = as_amount(amount)

        hospital.balance = debit(hospital.balance, amount)
        hospital.save(update_fields=["balance", "updated_at"])

        AuditService.log(
            event_code="ledger.expense_paid",
            entity_type="Hospital",
            entity_id=hospital.id,
            hospital_id=hospital.id,
            actor=ctx.sender,
            metadata={"amount": str(amount), "balance": str(hospital.balance)},
        )
        logger.info("hospital %s expense %s -> balance %s", hospital.id, amount, hospital.balance)
        return Funds(amount)
