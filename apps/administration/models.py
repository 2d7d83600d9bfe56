import uuid

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.administration.enums import (
    FeedbackCategory,
    FeedbackPriority,
    FeedbackStatus,
    FeedbackType,
)


class Feedback(models.Model):
    """Feedback left by visitors or signed-in accounts."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    account = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="feedback",
    )
    feedback_type = models.CharField(
        max_length=20, choices=FeedbackType.choices, default=FeedbackType.GENERAL
    )
    category = models.CharField(
        max_length=20, choices=FeedbackCategory.choices, default=FeedbackCategory.OTHER
    )
    title = models.CharField(max_length=200)
    description = models.TextField()
    priority = models.CharField(
        max_length=10, choices=FeedbackPriority.choices, default=FeedbackPriority.MEDIUM
    )
    status = models.CharField(
        max_length=20, choices=FeedbackStatus.choices, default=FeedbackStatus.NEW
    )
    page_url = models.URLField(max_length=500, blank=True)
    browser_info = models.CharField(max_length=500, blank=True)
    rating = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    admin_response = models.TextField(blank=True)
    responded_at = models.DateTimeField(null=True, blank=True)
    responded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "administration_feedback"
        ordering = ["-created_at"]
        verbose_name_plural = "Feedback"

    def __str__(self):
        return f"[{self.feedback_type}] {self.title}"
