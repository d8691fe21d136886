# hospital_core/appointments/models.py
from django.db import models

from hospital_core.common.models import EntityModel


class Appointment(EntityModel):
    """
    Lives only in a hospital's appointment collection.

    Patient and doctor are principal snapshots taken at booking time, not
    foreign keys: later changes to (or removal of) the Patient/Staff rows
    do not reach the appointment.
    """
    hospital = models.ForeignKey(
        "hospitals.Hospital",
        on_delete=models.PROTECT,
        related_name="appointments",
    )

    patient_principal = models.CharField(max_length=128, db_index=True)
    doctor_principal = models.CharField(max_length=128, db_index=True)

    date = models.DateField()
    time = models.TimeField()
    description = models.TextField(blank=True, default="")

    class Meta:
        db_table = "appointments_appointment"
        indexes = [
            models.Index(fields=["hospital", "date", "time"]),
        ]

    def __str__(self) -> str:
        return f"{self.date} {self.time} ({self.id})"
