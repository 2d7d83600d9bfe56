import uuid

from django.conf import settings
from django.db import models


class ProfileItem(models.Model):
    """Common columns of every section of an employee's professional profile."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    employee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="%(class)ss",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Experience(ProfileItem):
    title = models.CharField(max_length=150)
    company_name = models.CharField(max_length=200)
    location = models.CharField(max_length=150, blank=True)
    start_date = models.DateField()
    end_date = models.DateField(null=True, blank=True)
    is_current = models.BooleanField(default=False)
    description = models.TextField(blank=True)

    class Meta:
        db_table = "profiles_experience"
        ordering = ["-start_date"]

    def __str__(self):
        return f"{self.title} at {self.company_name}"


class Education(ProfileItem):
    institution = models.CharField(max_length=200)
    degree = models.CharField(max_length=150)
    field_of_study = models.CharField(max_length=150, blank=True)
    start_year = models.PositiveIntegerField(null=True, blank=True)
    end_year = models.PositiveIntegerField(null=True, blank=True)
    grade = models.CharField(max_length=50, blank=True)

    class Meta:
        db_table = "profiles_education"
        ordering = ["-end_year", "-start_year"]

    def __str__(self):
        return f"{self.degree}, {self.institution}"


class Certification(ProfileItem):
    name = models.CharField(max_length=200)
    issuer = models.CharField(max_length=200)
    issue_date = models.DateField(null=True, blank=True)
    expiry_date = models.DateField(null=True, blank=True)
    credential_id = models.CharField(max_length=100, blank=True)
    credential_url = models.URLField(blank=True)

    class Meta:
        db_table = "profiles_certification"
        ordering = ["-issue_date"]

    def __str__(self):
        return f"{self.name} ({self.issuer})"


class Project(ProfileItem):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    url = models.URLField(blank=True)
    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    technologies = models.JSONField(default=list, blank=True)

    class Meta:
        db_table = "profiles_project"
        ordering = ["-start_date", "name"]

    def __str__(self):
        return self.name


class Endorsement(ProfileItem):
    endorser_name = models.CharField(max_length=150)
    endorser_email = models.EmailField(blank=True)
    relationship = models.CharField(max_length=100, blank=True)
    message = models.TextField()

    class Meta:
        db_table = "profiles_endorsement"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Endorsement from {self.endorser_name}"
