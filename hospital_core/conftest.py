# hospital_core/conftest.py
import pytest

from hospital_core.common.context import TxContext
from hospital_core.hospitals.services import HospitalService
from hospital_core.ledger.services import LedgerService
from hospital_core.ledger.values import Funds
from hospital_core.patients.services import PatientService
from hospital_core.staff.services import StaffService

OWNER = "0x0a11ce"
DOCTOR = "0x0d0c"
PATIENT = "0x0ba7"
STRANGER = "0x0bad"


@pytest.fixture
def owner_ctx():
    return TxContext(sender=OWNER)


@pytest.fixture
def doctor_ctx():
    return TxContext(sender=DOCTOR)


@pytest.fixture
def patient_ctx():
    return TxContext(sender=PATIENT)


@pytest.fixture
def stranger_ctx():
    return TxContext(sender=STRANGER)


@pytest.fixture
def hospital_and_cap(db, owner_ctx):
    return HospitalService.create_hospital(ctx=owner_ctx, name="City General", address="1 Main St")


@pytest.fixture
def hospital(hospital_and_cap):
    return hospital_and_cap[0]


@pytest.fixture
def cap(hospital_and_cap):
    return hospital_and_cap[1]


@pytest.fixture
def staff(db, doctor_ctx):
    """
    Detached staff record owned by DOCTOR.
    """
    return StaffService.add_staff_info(
        ctx=doctor_ctx,
        name="Dr. Grey",
        role="doctor",
        department="surgery",
        hire_date="2023-06-01",
    )


@pytest.fixture
def patient(db, patient_ctx):
    """
    Detached patient record owned by PATIENT.
    """
    return PatientService.add_patient_info(
        ctx=patient_ctx,
        name="Pat Doe",
        age=42,
        address="9 Elm St",
        medical_history="none",
    )


@pytest.fixture
def funded_hospital(hospital, cap, owner_ctx):
    LedgerService.deposit(ctx=owner_ctx, hospital_id=hospital.id, cap_id=cap.id, funds=Funds(500))
    hospital.refresh_from_db()
    return hospital
