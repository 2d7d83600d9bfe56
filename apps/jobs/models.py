import uuid

from django.conf import settings
from django.db import models
from django.db.models import F, Q
from simple_history.models import HistoricalRecords

from apps.jobs.enums import (
    AlertFrequency,
    ApplicationStatus,
    EmploymentType,
    ExperienceLevel,
    JobStatus,
    PipelineStage,
    RemoteType,
)


class JobListing(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey(
        "companies.Company", on_delete=models.CASCADE, related_name="job_listings"
    )
    title = models.CharField(max_length=200)
    description = models.TextField()
    requirements = models.TextField(blank=True)
    location = models.CharField(max_length=200, blank=True)
    employment_type = models.CharField(
        max_length=20,
        choices=EmploymentType.choices,
        default=EmploymentType.FULL_TIME,
    )
    experience_level = models.CharField(
        max_length=20, choices=ExperienceLevel.choices, default=ExperienceLevel.MID
    )
    remote_type = models.CharField(
        max_length=10, choices=RemoteType.choices, default=RemoteType.ONSITE
    )
    salary_min = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    salary_max = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    salary_currency = models.CharField(max_length=3, default="USD")
    skills = models.JSONField(default=list, blank=True)
    application_deadline = models.DateField(null=True, blank=True)
    status = models.CharField(
        max_length=10, choices=JobStatus.choices, default=JobStatus.ACTIVE
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "jobs_listing"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                check=Q(salary_min__isnull=True)
                | Q(salary_max__isnull=True)
                | Q(salary_min__lte=F("salary_max")),
                name="job_salary_min_lte_max",
            )
        ]

    def __str__(self):
        return f"{self.title} ({self.company})"


class JobApplication(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    job = models.ForeignKey(
        JobListing, on_delete=models.CASCADE, related_name="applications"
    )
    employee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="job_applications",
    )
    cover_letter = models.TextField(blank=True)
    include_profile = models.BooleanField(default=True)
    include_work_diary = models.BooleanField(default=False)
    status = models.CharField(
        max_length=20,
        choices=ApplicationStatus.choices,
        default=ApplicationStatus.APPLIED,
    )
    company_notes = models.TextField(blank=True)
    interview_notes = models.TextField(blank=True)
    rejection_reason = models.TextField(blank=True)
    applied_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    history = HistoricalRecords()

    class Meta:
        db_table = "jobs_application"
        ordering = ["-applied_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["job", "employee"], name="unique_job_application"
            )
        ]

    def __str__(self):
        return f"{self.employee} -> {self.job.title} ({self.status})"


class SavedJob(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    employee = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="saved_jobs"
    )
    job = models.ForeignKey(JobListing, on_delete=models.CASCADE, related_name="saves")
    notes = models.TextField(blank=True)
    saved_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "jobs_saved_job"
        ordering = ["-saved_at"]
        constraints = [
            models.UniqueConstraint(fields=["employee", "job"], name="unique_saved_job")
        ]


class JobAlert(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    employee = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="job_alerts"
    )
    name = models.CharField(max_length=100)
    keywords = models.CharField(max_length=255, blank=True)
    location = models.CharField(max_length=200, blank=True)
    employment_types = models.JSONField(default=list, blank=True)
    experience_levels = models.JSONField(default=list, blank=True)
    remote_types = models.JSONField(default=list, blank=True)
    salary_min = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    frequency = models.CharField(
        max_length=10, choices=AlertFrequency.choices, default=AlertFrequency.DAILY
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "jobs_alert"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name


class PipelineCandidate(models.Model):
    """A candidate a recruiter has bookmarked against one of the company's jobs."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey(
        "companies.Company", on_delete=models.CASCADE, related_name="pipeline"
    )
    job = models.ForeignKey(
        JobListing, on_delete=models.CASCADE, related_name="pipeline_candidates"
    )
    employee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="pipeline_entries",
    )
    stage = models.CharField(
        max_length=20, choices=PipelineStage.choices, default=PipelineStage.SOURCED
    )
    notes = models.TextField(blank=True)
    added_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "jobs_pipeline_candidate"
        ordering = ["stage", "-updated_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["job", "employee"], name="unique_pipeline_candidate"
            )
        ]

    def __str__(self):
        return f"{self.employee} in {self.job.title} ({self.stage})"
