# hospital_core/inventory/selectors.py
from __future__ import annotations

from uuid import UUID

from django.db.models import QuerySet

from hospital_core.common.exceptions import NotFound
from hospital_core.inventory.models import InventoryItem


def get_inventory_item(*, hospital_id: UUID, item_id: UUID) -> InventoryItem:
    try:
        return InventoryItem.objects.get(id=item_id, hospital_id=hospital_id)
    except InventoryItem.DoesNotExist:
        raise NotFound(f"Inventory item {item_id} not found.")


def list_inventory(*, hospital_id: UUID) -> QuerySet[InventoryItem]:
    return InventoryItem.objects.filter(hospital_id=hospital_id).order_by("name")
