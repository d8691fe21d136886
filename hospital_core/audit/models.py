# hospital_core/audit/models.py
import uuid

from django.db import models


class AuditEvent(models.Model):
    """
    Immutable audit record of a successful mutation.
    Written inside the mutating transaction, so failed operations leave no trace.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    event_code = models.CharField(max_length=128, db_index=True)  # e.g. "ledger.staff_paid"
    entity_type = models.CharField(max_length=128, db_index=True)  # e.g. "Staff"
    entity_id = models.UUIDField(db_index=True)
    hospital_id = models.UUIDField(null=True, blank=True, db_index=True)

    actor = models.CharField(max_length=128, db_index=True)  # calling principal

    occurred_at = models.DateTimeField(auto_now_add=True, db_index=True)
    metadata = models.JSONField(default=dict)

    class Meta:
        db_table = "audit_audit_event"
        indexes = [
            models.Index(fields=["hospital_id", "occurred_at"]),
            models.Index(fields=["entity_type", "entity_id"]),
        ]
