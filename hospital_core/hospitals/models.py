# hospital_core/hospitals/models.py
from __future__ import annotations

from django.db import models
from django.db.models import Q

from hospital_core.common.models import AmountField, EntityModel


class Hospital(EntityModel):
    """
    Aggregate root.

    Owns the shared balance and four collections, reached through reverse
    relations: staff_members, patients, appointments, inventory_items.
    Never deleted.
    """
    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255, blank=True, default="")

    # principal that created the hospital
    principal = models.CharField(max_length=128, db_index=True)

    balance = AmountField()

    class Meta:
        db_table = "hospitals_hospital"
        constraints = [
            models.CheckConstraint(condition=Q(balance__gte=0), name="ck_hospital_balance_non_negative"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


class HospitalCap(EntityModel):
    """
    Capability token minted together with exactly one Hospital.
    Presenting its id proves the right to run hospital-scoped operations.
    """
    hospital = models.OneToOneField(Hospital, on_delete=models.PROTECT, related_name="cap")
    holder = models.CharField(max_length=128, db_index=True)

    class Meta:
        db_table = "hospitals_hospital_cap"

    def __str__(self) -> str:
        return f"HospitalCap({self.hospital_id})"
