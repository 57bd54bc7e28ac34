"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Subscription(models.Model):
    """Persisted snapshot of a marketplace subscription."""

    class Status(models.TextChoices):
        PENDING_ACTIVATION = "PendingActivation"
        ACTIVE = "Active"
        SUSPENDED = "Suspended"
        CANCELLED = "Cancelled"

    subscription_id = models.CharField(primary_key=True, max_length=128)
    subscription_name = models.CharField(max_length=255)
    offer_id = models.CharField(max_length=255)
    plan_id = models.CharField(max_length=255)
    seat_quantity = models.PositiveIntegerField(default=0)
    is_free_trial = models.BooleanField(default=False)
    is_test = models.BooleanField(default=False)
    status = models.CharField(max_length=32, choices=Status.choices)

    purchaser_aad_tenant_id = models.CharField(max_length=255, blank=True)
    purchaser_aad_object_id = models.CharField(max_length=255, blank=True)
    purchaser_user_id = models.CharField(max_length=255, blank=True)
    purchaser_email = models.EmailField(max_length=254, blank=True)

    beneficiary_aad_tenant_id = models.CharField(max_length=255, blank=True)
    beneficiary_aad_object_id = models.CharField(max_length=255, blank=True)
    beneficiary_user_id = models.CharField(max_length=255, blank=True)
    beneficiary_email = models.EmailField(max_length=254, blank=True)

    term_start_date = models.DateTimeField(blank=True, null=True)
    term_end_date = models.DateTimeField(blank=True, null=True)
    term_unit = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="fulfillment_sub_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.subscription_name} ({self.subscription_id})"
