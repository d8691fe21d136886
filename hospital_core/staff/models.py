# hospital_core/staff/models.py
from django.db import models
from django.db.models import Q

from hospital_core.common.models import AmountField, EntityModel


class Staff(EntityModel):
    """
    Staff member. Created detached (hospital is null); hire_staff puts the
    record into a hospital's staff collection.

    Only the owning principal may change name/role/department/hire_date.
    """
    name = models.CharField(max_length=255)
    role = models.CharField(max_length=128)
    department = models.CharField(max_length=128, blank=True, default="")
    hire_date = models.DateField()

    # set once at creation, never patched
    principal = models.CharField(max_length=128, db_index=True)

    balance = AmountField()

    hospital = models.ForeignKey(
        "hospitals.Hospital",
        on_delete=models.PROTECT,
        related_name="staff_members",
        null=True,
        blank=True,
    )

    class Meta:
        db_table = "staff_staff"
        verbose_name = "staff member"
        verbose_name_plural = "staff members"
        constraints = [
            models.CheckConstraint(condition=Q(balance__gte=0), name="ck_staff_balance_non_negative"),
        ]
        indexes = [
            models.Index(fields=["hospital", "department"]),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.role})"
