# hospital_core/common/models.py
from __future__ import annotations

import uuid

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

# Widest amount the ledger accepts: unsigned 64-bit.
MAX_AMOUNT = 2**64 - 1


class TimeStampedModel(models.Model):
    """
    Standard timestamps for all entities.
    """
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class EntityModel(TimeStampedModel):
    """
    Base for every ledger entity.

    Services always assign `id` from TxContext.fresh_id(); the default only
    covers rows created outside a service (fixtures, shell).
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class Meta:
        abstract = True


class AmountField(models.DecimalField):
    """
    Unsigned integer amount in the smallest currency unit.
    20 digits holds the full unsigned 64-bit range.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("max_digits", 20)
        kwargs.setdefault("decimal_places", 0)
        kwargs.setdefault("default", 0)
        kwargs.setdefault("validators", [MinValueValidator(0), MaxValueValidator(MAX_AMOUNT)])
        super().__init__(*args, **kwargs)


class RetiredIdentifier(TimeStampedModel):
    """
    Tombstone for an identifier released by a removal.
    A retired id can never be inserted into any collection again.
    """
    id = models.UUIDField(primary_key=True, editable=False)
    entity_type = models.CharField(max_length=64, db_index=True)  # e.g. "appointments.Appointment"
    hospital_id = models.UUIDField(null=True, blank=True, db_index=True)

    class Meta:
        db_table = "common_retired_identifier"

    def __str__(self) -> str:
        return f"{self.entity_type} {self.id}"
