import uuid

from django.conf import settings
from django.db import models
from simple_history.models import HistoricalRecords

from apps.companies.enums import CompanySize, RegistrationType, VerificationStatus


class Company(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    account = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="company",
    )
    name = models.CharField(max_length=255)
    address = models.TextField()
    pincode = models.CharField(max_length=10)
    registration_type = models.CharField(
        max_length=3, choices=RegistrationType.choices
    )
    registration_number = models.CharField(max_length=21)
    size = models.CharField(max_length=20, choices=CompanySize.choices, blank=True)
    establishment_year = models.PositiveIntegerField(null=True, blank=True)
    industry = models.CharField(max_length=100, blank=True)
    website = models.URLField(blank=True)
    description = models.TextField(blank=True)

    verification_status = models.CharField(
        max_length=20,
        choices=VerificationStatus.choices,
        default=VerificationStatus.UNVERIFIED,
    )
    verification_notes = models.TextField(blank=True)
    rejection_reason = models.TextField(blank=True)
    verified_at = models.DateTimeField(null=True, blank=True)
    verified_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="verified_companies",
    )

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    history = HistoricalRecords()

    class Meta:
        db_table = "companies_company"
        ordering = ["name"]
        verbose_name_plural = "Companies"

    def __str__(self):
        return self.name

    @property
    def is_verified(self):
        return self.verification_status == VerificationStatus.VERIFIED
