import uuid
from decimal import Decimal

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from simple_history.models import HistoricalRecords

from apps.workdiary.enums import ApprovalStatus, WorkEntryEventType, WorkPriority


class WorkEntry(models.Model):
    """
    A piece of work an employee logs against a company.

    Approved entries are locked: the service layer refuses edits and deletes.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    employee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="work_entries",
    )
    company = models.ForeignKey(
        "companies.Company", on_delete=models.CASCADE, related_name="work_entries"
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    start_date = models.DateField()
    end_date = models.DateField(null=True, blank=True)
    priority = models.CharField(
        max_length=10, choices=WorkPriority.choices, default=WorkPriority.MEDIUM
    )
    hours = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    billable = models.BooleanField(default=True)

    status = models.CharField(
        max_length=20,
        choices=ApprovalStatus.choices,
        default=ApprovalStatus.PENDING_REVIEW,
    )
    company_feedback = models.TextField(blank=True)
    rating = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reviewed_work_entries",
    )
    reviewed_at = models.DateTimeField(null=True, blank=True)
    approved_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    history = HistoricalRecords()

    class Meta:
        db_table = "workdiary_work_entry"
        ordering = ["-start_date", "-created_at"]
        verbose_name_plural = "Work entries"
        indexes = [
            models.Index(
                fields=["company", "status"], name="work_entry_company_status_idx"
            ),
            models.Index(
                fields=["employee", "start_date"], name="work_entry_employee_start_idx"
            ),
        ]

    def __str__(self):
        return f"{self.title} ({self.employee}, {self.start_date})"

    @property
    def is_locked(self):
        return self.status == ApprovalStatus.APPROVED

    @property
    def days_spanned(self):
        end = self.end_date or self.start_date
        return (end - self.start_date).days + 1


class WorkEntryEvent(models.Model):
    """One row per state change of a work entry."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    entry = models.ForeignKey(
        WorkEntry, on_delete=models.CASCADE, related_name="events"
    )
    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="work_entry_events",
    )
    event_type = models.CharField(max_length=30, choices=WorkEntryEventType.choices)
    from_status = models.CharField(max_length=20, blank=True)
    to_status = models.CharField(max_length=20)
    note = models.TextField(blank=True)
    timestamp = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "workdiary_work_entry_event"
        ordering = ["timestamp"]

    def __str__(self):
        return f"{self.event_type} on {self.entry_id} at {self.timestamp}"
