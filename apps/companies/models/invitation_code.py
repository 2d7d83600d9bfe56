import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone


class InvitationCode(models.Model):
    """Single-use, short-lived code an employee enters to join a company."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey(
        "companies.Company",
        on_delete=models.CASCADE,
        related_name="invitation_codes",
    )
    code = models.CharField(max_length=16, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    expires_at = models.DateTimeField()
    used_at = models.DateTimeField(null=True, blank=True)
    used_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="used_invitation_codes",
    )

    class Meta:
        db_table = "companies_invitation_code"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.code} ({self.company})"

    @property
    def is_used(self):
        return self.used_at is not None

    @property
    def is_expired(self):
        return timezone.now() >= self.expires_at

    @property
    def is_redeemable(self):
        return not self.is_used and not self.is_expired
