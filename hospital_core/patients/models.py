# hospital_core/patients/models.py
from django.db import models

from hospital_core.common.models import EntityModel


class Patient(EntityModel):
    """
    Patient record. Exists detached until admitted into a hospital's
    patient collection; discharge destroys it.
    """
    name = models.CharField(max_length=255)
    age = models.PositiveSmallIntegerField()
    address = models.CharField(max_length=255, blank=True, default="")
    medical_history = models.TextField(blank=True, default="")

    # set once at creation, never patched
    principal = models.CharField(max_length=128, db_index=True)

    hospital = models.ForeignKey(
        "hospitals.Hospital",
        on_delete=models.PROTECT,
        related_name="patients",
        null=True,
        blank=True,
    )

    class Meta:
        db_table = "patients_patient"
        indexes = [
            models.Index(fields=["hospital", "name"]),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
