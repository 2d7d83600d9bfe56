import uuid

from django.db import models


class AppError(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    timestamp = models.DateTimeField(auto_now_add=True)
    message = models.TextField()
    data = models.JSONField(blank=True, null=True)
    path = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = "workflow_app_error"
        ordering = ["-timestamp"]
        verbose_name = "Application Error"
        verbose_name_plural = "Application Errors"

    def __str__(self):
        return f"{self.timestamp:%Y-%m-%d %H:%M} {self.message[:60]}"
