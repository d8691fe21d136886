import pytest

from hospital_core.audit.selectors import list_audit_events
from hospital_core.common.context import SequentialIdGenerator, TxContext
from hospital_core.hospitals.models import Hospital, HospitalCap
from hospital_core.hospitals.selectors import get_hospital_cap, hospital_balance
from hospital_core.hospitals.services import HospitalService

pytestmark = pytest.mark.django_db


def test_create_hospital_starts_empty_with_zero_balance(owner_ctx):
    hospital, cap = HospitalService.create_hospital(ctx=owner_ctx, name="St. Mary", address="2 Oak Ave")

    hospital.refresh_from_db()
    assert hospital.name == "St. Mary"
    assert hospital.address == "2 Oak Ave"
    assert hospital.principal == owner_ctx.sender
    assert hospital.balance == 0
    assert hospital_balance(hospital_id=hospital.id) == 0

    assert hospital.staff_members.count() == 0
    assert hospital.patients.count() == 0
    assert hospital.appointments.count() == 0
    assert hospital.inventory_items.count() == 0


def test_cap_is_bound_one_to_one(owner_ctx):
    hospital, cap = HospitalService.create_hospital(ctx=owner_ctx, name="A")
    other, other_cap = HospitalService.create_hospital(ctx=owner_ctx, name="B")

    assert cap.hospital_id == hospital.id
    assert cap.holder == owner_ctx.sender
    assert other_cap.hospital_id == other.id
    assert cap.id != other_cap.id
    assert get_hospital_cap(hospital_id=hospital.id).id == cap.id
    assert HospitalCap.objects.filter(hospital=hospital).count() == 1


def test_ids_come_from_injected_generator():
    ctx = TxContext(sender="0x1", ids=SequentialIdGenerator(start=100))

    hospital, cap = HospitalService.create_hospital(ctx=ctx, name="Seq")

    assert hospital.id.int == 100
    assert cap.id.int == 101
    assert Hospital.objects.filter(id=hospital.id).exists()


def test_creation_is_audited(owner_ctx):
    hospital, cap = HospitalService.create_hospital(ctx=owner_ctx, name="Audited")

    events = list(list_audit_events(hospital_id=hospital.id, event_code="hospital.created"))
    assert len(events) == 1
    assert events[0].actor == owner_ctx.sender
    assert events[0].metadata["cap_id"] == str(cap.id)


def test_configured_generator_is_shared_across_contexts(settings):
    settings.HOSPITAL_LEDGER = {"ID_GENERATOR": "hospital_core.common.context.SequentialIdGenerator"}

    first, first_cap = HospitalService.create_hospital(ctx=TxContext(sender="0xa"), name="A")
    second, second_cap = HospitalService.create_hospital(ctx=TxContext(sender="0xb"), name="B")

    assert len({first.id, first_cap.id, second.id, second_cap.id}) == 4
    assert first.id.int < second.id.int
    assert Hospital.objects.filter(id__in=[first.id, second.id]).count() == 2
