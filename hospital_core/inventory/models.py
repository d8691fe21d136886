# hospital_core/inventory/models.py
from django.db import models

from hospital_core.common.models import AmountField, EntityModel


class InventoryItem(EntityModel):
    hospital = models.ForeignKey(
        "hospitals.Hospital",
        on_delete=models.PROTECT,
        related_name="inventory_items",
    )

    name = models.CharField(max_length=255)
    quantity = models.PositiveBigIntegerField(default=0)
    unit_price = AmountField()  # smallest currency unit

    class Meta:
        db_table = "inventory_inventory_item"
        indexes = [
            models.Index(fields=["hospital", "name"]),
        ]

    def __str__(self) -> str:
        return f"{self.name} x{self.quantity}"
