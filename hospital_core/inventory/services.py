# hospital_core/inventory/services.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from django.db import transaction
from rest_framework.exceptions import ValidationError

from hospital_core.audit.services import AuditService
from hospital_core.common.context import TxContext
from hospital_core.common.store import get_for_update, insert, remove
from hospital_core.hospitals.services import HospitalService
from hospital_core.inventory.models import InventoryItem
from hospital_core.ledger.values import as_amount

MAX_QUANTITY = 2**63 - 1


@dataclass(frozen=True)
class InventoryItemUpdate:
    name: Optional[str] = None
    quantity: Optional[int] = None
    unit_price: Optional[int] = None


def _as_quantity(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_QUANTITY:
        raise ValidationError({"quantity": "Quantity must be a non-negative integer."})
    return value


class InventoryService:
    @staticmethod
    @transaction.atomic
    def add_inventory_item(
        *,
        ctx: TxContext,
        hospital_id: UUID,
        cap_id: UUID | None,
        name: str,
        quantity: int,
        unit_price: int,
    ) -> InventoryItem:
        hospital = HospitalService.acquire(hospital_id=hospital_id, cap_id=cap_id)

        item = insert(
            InventoryItem(
                id=ctx.fresh_id(),
                name=name,
                quantity=_as_quantity(quantity),
                unit_price=as_amount(unit_price, field="unit_price"),
            ),
            hospital=hospital,
        )

        AuditService.log(
            event_code="inventory.item_added",
            entity_type="InventoryItem",
            entity_id=item.id,
            hospital_id=hospital.id,
            actor=ctx.sender,
            metadata={"quantity": item.quantity, "unit_price": str(item.unit_price)},
        )
        return item

    @staticmethod
    @transaction.atomic
    def update_inventory_item(
        *,
        ctx: TxContext,
        hospital_id: UUID,
        cap_id: UUID | None,
        item_id: UUID,
        patch: InventoryItemUpdate,
    ) -> InventoryItem:
        hospital = HospitalService.acquire(hospital_id=hospital_id, cap_id=cap_id)
        item = get_for_update(InventoryItem, item_id, hospital_id=hospital.id)

        mapping = {
            "name": patch.name,
            "quantity": None if patch.quantity is None else _as_quantity(patch.quantity),
            "unit_price": None if patch.unit_price is None else as_amount(patch.unit_price, field="unit_price"),
        }
        updated = sorted(k for k, v in mapping.items() if v is not None)
        for field, value in mapping.items():
            if value is not None:
                setattr(item, field, value)

        item.save(update_fields=[*updated, "updated_at"])

        AuditService.log(
            event_code="inventory.item_updated",
            entity_type="InventoryItem",
            entity_id=item.id,
            hospital_id=hospital.id,
            actor=ctx.sender,
            metadata={"updated_fields": updated},
        )
        return item

    @staticmethod
    @transaction.atomic
    def remove_inventory_item(
        *,
        ctx: TxContext,
        hospital_id: UUID,
        cap_id: UUID | None,
        item_id: UUID,
    ) -> None:
        hospital = HospitalService.acquire(hospital_id=hospital_id, cap_id=cap_id)
        item = remove(InventoryItem, item_id, hospital_id=hospital.id)

        AuditService.log(
            event_code="inventory.item_removed",
            entity_type="InventoryItem",
            entity_id=item.id,
            hospital_id=hospital.id,
            actor=ctx.sender,
        )
