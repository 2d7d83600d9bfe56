from django.db import models


class ApprovalStatus(models.TextChoices):
    PENDING_REVIEW = "pending_review", "Pending Review"
    APPROVED = "approved", "Approved"
    NEEDS_CHANGES = "needs_changes", "Needs Changes"


class WorkPriority(models.TextChoices):
    LOW = "low", "Low"
    MEDIUM = "medium", "Medium"
    HIGH = "high", "High"
    URGENT = "urgent", "Urgent"


class WorkEntryEventType(models.TextChoices):
    SUBMITTED = "submitted", "Submitted"
    UPDATED = "updated", "Updated"
    APPROVED = "approved", "Approved"
    CHANGES_REQUESTED = "changes_requested", "Changes Requested"
