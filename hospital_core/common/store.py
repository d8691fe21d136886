# hospital_core/common/store.py
"""
Keyed collections owned by a Hospital.

Staff, Patient, Appointment and InventoryItem rows carry a `hospital` foreign
key; the set of rows pointing at a hospital is that hospital's collection.
A null `hospital` means the record is detached.
"""
from __future__ import annotations

from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, models, transaction

from hospital_core.common.exceptions import DuplicateKey, NotFound
from hospital_core.common.models import RetiredIdentifier


def _label(model) -> str:
    return model._meta.verbose_name.capitalize()


def create(model, *, ctx, **fields) -> models.Model:
    """
    Allocate a fresh id from `ctx` and persist a new `model` row under it.
    Raises DuplicateKey if the generator hands back a retired or live id.
    """
    key = ctx.fresh_id()
    label = _label(model)

    if RetiredIdentifier.objects.filter(id=key).exists():
        raise DuplicateKey(f"{label} id {key} has been retired.")

    try:
        with transaction.atomic():
            return model.objects.create(id=key, **fields)
    except IntegrityError:
        raise DuplicateKey(f"{label} {key} already exists.")


def insert(item: models.Model, *, hospital) -> models.Model:
    """
    Put `item` into `hospital`'s collection under its own id.
    Raises DuplicateKey if the id is already held by a collection,
    belongs to another row, or has been retired.
    """
    label = _label(type(item))

    if item.hospital_id is not None:
        raise DuplicateKey(f"{label} {item.id} is already held by hospital {item.hospital_id}.")

    if RetiredIdentifier.objects.filter(id=item.id).exists():
        raise DuplicateKey(f"{label} id {item.id} has been retired.")

    item.hospital = hospital
    try:
        # savepoint: a failed INSERT must not poison the outer transaction
        with transaction.atomic():
            item.save()
    except IntegrityError:
        item.hospital = None
        raise DuplicateKey(f"{label} {item.id} already exists.")
    return item


def get_for_update(model, key: UUID, **scope) -> models.Model:
    """
    Locked point lookup. `scope` narrows the search (e.g. hospital_id=...).
    """
    try:
        return model.objects.select_for_update().get(id=key, **scope)
    except (model.DoesNotExist, DjangoValidationError):
        raise NotFound(f"{_label(model)} {key} not found.")


def remove(model, key: UUID, *, hospital_id: UUID) -> models.Model:
    """
    Take the row out of the hospital's collection and destroy it.
    The identifier is retired, so nothing can come back under it.
    """
    item = get_for_update(model, key, hospital_id=hospital_id)
    item_id = item.id

    item.delete()
    RetiredIdentifier.objects.create(
        id=item_id,
        entity_type=model._meta.label,
        hospital_id=hospital_id,
    )

    item.id = item_id
    return item
