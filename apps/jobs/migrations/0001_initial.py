import uuid

import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models

APPLICATION_STATUS_CHOICES = [
    ("applied", "Applied"),
    ("viewed", "Viewed"),
    ("shortlisted", "Shortlisted"),
    ("interviewed", "Interviewed"),
    ("offered", "Offered"),
    ("hired", "Hired"),
    ("rejected", "Rejected"),
    ("withdrawn", "Withdrawn"),
]


def uuid_pk():
    return models.UUIDField(
        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
    )


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("companies", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="JobListing",
            fields=[
                ("id", uuid_pk()),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField()),
                ("requirements", models.TextField(blank=True)),
                ("location", models.CharField(blank=True, max_length=200)),
                (
                    "employment_type",
                    models.CharField(
                        choices=[
                            ("full_time", "Full Time"),
                            ("part_time", "Part Time"),
                            ("contract", "Contract"),
                            ("freelance", "Freelance"),
                            ("internship", "Internship"),
                        ],
                        default="full_time",
                        max_length=20,
                    ),
                ),
                (
                    "experience_level",
                    models.CharField(
                        choices=[
                            ("entry", "Entry Level"),
                            ("mid", "Mid Level"),
                            ("senior", "Senior Level"),
                            ("lead", "Lead"),
                            ("executive", "Executive"),
                        ],
                        default="mid",
                        max_length=20,
                    ),
                ),
                (
                    "remote_type",
                    models.CharField(
                        choices=[
                            ("onsite", "On-site"),
                            ("remote", "Remote"),
                            ("hybrid", "Hybrid"),
                        ],
                        default="onsite",
                        max_length=10,
                    ),
                ),
                (
                    "salary_min",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=12, null=True
                    ),
                ),
                (
                    "salary_max",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=12, null=True
                    ),
                ),
                ("salary_currency", models.CharField(default="USD", max_length=3)),
                ("skills", models.JSONField(blank=True, default=list)),
                ("application_deadline", models.DateField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("draft", "Draft"),
                            ("active", "Active"),
                            ("closed", "Closed"),
                        ],
                        default="active",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "company",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="job_listings",
                        to="companies.company",
                    ),
                ),
            ],
            options={
                "db_table": "jobs_listing",
                "ordering": ["-created_at"],
                "constraints": [
                    models.CheckConstraint(
                        check=models.Q(
                            ("salary_min__isnull", True),
                            ("salary_max__isnull", True),
                            ("salary_min__lte", models.F("salary_max")),
                            _connector="OR",
                        ),
                        name="job_salary_min_lte_max",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="JobApplication",
            fields=[
                ("id", uuid_pk()),
                ("cover_letter", models.TextField(blank=True)),
                ("include_profile", models.BooleanField(default=True)),
                ("include_work_diary", models.BooleanField(default=False)),
                (
                    "status",
                    models.CharField(
                        choices=APPLICATION_STATUS_CHOICES,
                        default="applied",
                        max_length=20,
                    ),
                ),
                ("company_notes", models.TextField(blank=True)),
                ("interview_notes", models.TextField(blank=True)),
                ("rejection_reason", models.TextField(blank=True)),
                ("applied_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "employee",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="job_applications",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "job",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="applications",
                        to="jobs.joblisting",
                    ),
                ),
            ],
            options={
                "db_table": "jobs_application",
                "ordering": ["-applied_at"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("job", "employee"), name="unique_job_application"
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="HistoricalJobApplication",
            fields=[
                (
                    "id",
                    models.UUIDField(db_index=True, default=uuid.uuid4, editable=False),
                ),
                ("cover_letter", models.TextField(blank=True)),
                ("include_profile", models.BooleanField(default=True)),
                ("include_work_diary", models.BooleanField(default=False)),
                (
                    "status",
                    models.CharField(
                        choices=APPLICATION_STATUS_CHOICES,
                        default="applied",
                        max_length=20,
                    ),
                ),
                ("company_notes", models.TextField(blank=True)),
                ("interview_notes", models.TextField(blank=True)),
                ("rejection_reason", models.TextField(blank=True)),
                ("applied_at", models.DateTimeField(blank=True, editable=False)),
                ("updated_at", models.DateTimeField(blank=True, editable=False)),
                (
                    "employee",
                    models.ForeignKey(
                        blank=True,
                        db_constraint=False,
                        null=True,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "job",
                    models.ForeignKey(
                        blank=True,
                        db_constraint=False,
                        null=True,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="+",
                        to="jobs.joblisting",
                    ),
                ),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                (
                    "history_type",
                    models.CharField(
                        choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")],
                        max_length=1,
                    ),
                ),
                (
                    "history_user",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "historical job application",
                "verbose_name_plural": "historical job applications",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name="SavedJob",
            fields=[
                ("id", uuid_pk()),
                ("notes", models.TextField(blank=True)),
                ("saved_at", models.DateTimeField(auto_now_add=True)),
                (
                    "employee",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="saved_jobs",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "job",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="saves",
                        to="jobs.joblisting",
                    ),
                ),
            ],
            options={
                "db_table": "jobs_saved_job",
                "ordering": ["-saved_at"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("employee", "job"), name="unique_saved_job"
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="JobAlert",
            fields=[
                ("id", uuid_pk()),
                ("name", models.CharField(max_length=100)),
                ("keywords", models.CharField(blank=True, max_length=255)),
                ("location", models.CharField(blank=True, max_length=200)),
                ("employment_types", models.JSONField(blank=True, default=list)),
                ("experience_levels", models.JSONField(blank=True, default=list)),
                ("remote_types", models.JSONField(blank=True, default=list)),
                (
                    "salary_min",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=12, null=True
                    ),
                ),
                (
                    "frequency",
                    models.CharField(
                        choices=[("daily", "Daily"), ("weekly", "Weekly")],
                        default="daily",
                        max_length=10,
                    ),
                ),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "employee",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="job_alerts",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "jobs_alert",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="PipelineCandidate",
            fields=[
                ("id", uuid_pk()),
                (
                    "stage",
                    models.CharField(
                        choices=[
                            ("sourced", "Sourced"),
                            ("contacted", "Contacted"),
                            ("screening", "Screening"),
                            ("interview", "Interview"),
                            ("offer", "Offer"),
                            ("hired", "Hired"),
                            ("archived", "Archived"),
                        ],
                        default="sourced",
                        max_length=20,
                    ),
                ),
                ("notes", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "added_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "company",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="pipeline",
                        to="companies.company",
                    ),
                ),
                (
                    "employee",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="pipeline_entries",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "job",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="pipeline_candidates",
                        to="jobs.joblisting",
                    ),
                ),
            ],
            options={
                "db_table": "jobs_pipeline_candidate",
                "ordering": ["stage", "-updated_at"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("job", "employee"), name="unique_pipeline_candidate"
                    )
                ],
            },
        ),
    ]
