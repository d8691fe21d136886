import uuid

import pytest
from rest_framework.exceptions import ValidationError

from hospital_core.common.exceptions import DuplicateKey, NotAuthorized, NotFound
from hospital_core.common.models import RetiredIdentifier
from hospital_core.patients.models import Patient
from hospital_core.patients.selectors import search_patients
from hospital_core.patients.services import PatientService, PatientUpdate

pytestmark = pytest.mark.django_db


def test_add_patient_info_stamps_caller(patient, patient_ctx):
    patient.refresh_from_db()
    assert patient.principal == patient_ctx.sender
    assert patient.age == 42
    assert patient.hospital_id is None


def test_owner_updates_patient_info(patient, patient_ctx):
    PatientService.update_patient_info(
        ctx=patient_ctx,
        patient_id=patient.id,
        patch=PatientUpdate(name="Patricia Doe", age=43, address="10 Elm St", medical_history="asthma"),
    )

    patient.refresh_from_db()
    assert patient.name == "Patricia Doe"
    assert patient.age == 43
    assert patient.address == "10 Elm St"
    assert patient.medical_history == "asthma"


def test_non_owner_cannot_update_patient(patient, doctor_ctx):
    with pytest.raises(NotAuthorized):
        PatientService.update_patient_info(
            ctx=doctor_ctx, patient_id=patient.id, patch=PatientUpdate(medical_history="tampered")
        )

    patient.refresh_from_db()
    assert patient.medical_history == "none"


@pytest.mark.parametrize("age", [-1, 256, "42"])
def test_age_must_be_small_unsigned_int(patient_ctx, age):
    with pytest.raises(ValidationError):
        PatientService.add_patient_info(ctx=patient_ctx, name="Bad Age", age=age)


def test_admit_then_discharge_destroys_record(hospital, cap, patient, owner_ctx):
    PatientService.admit_patient(ctx=owner_ctx, hospital_id=hospital.id, cap_id=cap.id, patient_id=patient.id)
    assert list(search_patients(hospital_id=hospital.id, q="pat")) == [patient]

    PatientService.discharge_patient(ctx=owner_ctx, hospital_id=hospital.id, cap_id=cap.id, patient_id=patient.id)

    assert not Patient.objects.filter(id=patient.id).exists()
    assert RetiredIdentifier.objects.filter(id=patient.id, hospital_id=hospital.id).exists()

    with pytest.raises(NotFound):
        PatientService.discharge_patient(
            ctx=owner_ctx, hospital_id=hospital.id, cap_id=cap.id, patient_id=patient.id
        )


def test_discharge_detached_patient_is_not_found(hospital, cap, patient, owner_ctx):
    with pytest.raises(NotFound):
        PatientService.discharge_patient(
            ctx=owner_ctx, hospital_id=hospital.id, cap_id=cap.id, patient_id=patient.id
        )

    assert Patient.objects.filter(id=patient.id).exists()


def test_discharge_unknown_patient_is_not_found(hospital, cap, owner_ctx):
    with pytest.raises(NotFound):
        PatientService.discharge_patient(
            ctx=owner_ctx, hospital_id=hospital.id, cap_id=cap.id, patient_id=uuid.uuid4()
        )


def test_admit_twice_is_duplicate(hospital, cap, patient, owner_ctx):
    PatientService.admit_patient(ctx=owner_ctx, hospital_id=hospital.id, cap_id=cap.id, patient_id=patient.id)

    with pytest.raises(DuplicateKey):
        PatientService.admit_patient(ctx=owner_ctx, hospital_id=hospital.id, cap_id=cap.id, patient_id=patient.id)
