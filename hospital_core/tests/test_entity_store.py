import uuid

import pytest

from hospital_core.common.context import SequentialIdGenerator, TxContext
from hospital_core.common.exceptions import DuplicateKey, NotAuthorized, NotFound
from hospital_core.common.permissions import require_principal
from hospital_core.common.store import get_for_update, insert, remove
from hospital_core.inventory.models import InventoryItem
from hospital_core.inventory.services import InventoryService
from hospital_core.patients.models import Patient
from hospital_core.patients.services import PatientService
from hospital_core.staff.models import Staff
from hospital_core.staff.services import StaffService

pytestmark = pytest.mark.django_db


class _FixedIds:
    def __init__(self, value):
        self.value = value

    def new_id(self):
        return self.value


def test_insert_duplicate_id_is_rejected(hospital, cap):
    ctx = TxContext(sender="0x1", ids=_FixedIds(uuid.uuid4()))

    InventoryService.add_inventory_item(
        ctx=ctx, hospital_id=hospital.id, cap_id=cap.id, name="Mask", quantity=1, unit_price=1
    )
    with pytest.raises(DuplicateKey):
        InventoryService.add_inventory_item(
            ctx=ctx, hospital_id=hospital.id, cap_id=cap.id, name="Mask", quantity=2, unit_price=1
        )

    assert InventoryItem.objects.filter(hospital=hospital).count() == 1


def test_get_for_update_and_remove_unknown_key(hospital):
    with pytest.raises(NotFound):
        get_for_update(InventoryItem, uuid.uuid4(), hospital_id=hospital.id)
    with pytest.raises(NotFound):
        get_for_update(InventoryItem, "not-a-uuid")
    with pytest.raises(NotFound):
        remove(InventoryItem, uuid.uuid4(), hospital_id=hospital.id)


def test_remove_returns_finalized_item(hospital):
    item = insert(InventoryItem(id=uuid.uuid4(), name="Saline", quantity=3, unit_price=9), hospital=hospital)

    removed = remove(InventoryItem, item.id, hospital_id=hospital.id)

    assert removed.id == item.id
    assert not InventoryItem.objects.filter(id=item.id).exists()


def test_require_principal(staff, doctor_ctx, stranger_ctx):
    require_principal(record=staff, ctx=doctor_ctx)

    with pytest.raises(NotAuthorized):
        require_principal(record=staff, ctx=stranger_ctx)


def test_retired_id_is_not_reissued_to_a_new_patient(hospital, cap, owner_ctx):
    patient_ctx = TxContext(sender="0x9", ids=SequentialIdGenerator(start=10))
    patient = PatientService.add_patient_info(ctx=patient_ctx, name="First", age=30)
    PatientService.admit_patient(ctx=owner_ctx, hospital_id=hospital.id, cap_id=cap.id, patient_id=patient.id)
    PatientService.discharge_patient(ctx=owner_ctx, hospital_id=hospital.id, cap_id=cap.id, patient_id=patient.id)

    reissuing_ctx = TxContext(sender="0x9", ids=SequentialIdGenerator(start=10))
    with pytest.raises(DuplicateKey):
        PatientService.add_patient_info(ctx=reissuing_ctx, name="Second", age=31)

    assert not Patient.objects.filter(id=patient.id).exists()


def test_live_id_reissued_by_generator_is_duplicate():
    first = TxContext(sender="0x1", ids=SequentialIdGenerator(start=500))
    second = TxContext(sender="0x2", ids=SequentialIdGenerator(start=500))

    staff = StaffService.add_staff_info(ctx=first, name="A", role="nurse", hire_date="2024-01-01")
    with pytest.raises(DuplicateKey):
        StaffService.add_staff_info(ctx=second, name="B", role="nurse", hire_date="2024-01-01")

    assert list(Staff.objects.values_list("id", flat=True)) == [staff.id]
