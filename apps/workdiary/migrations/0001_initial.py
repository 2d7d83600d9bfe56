import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models

PRIORITY_CHOICES = [
    ("low", "Low"),
    ("medium", "Medium"),
    ("high", "High"),
    ("urgent", "Urgent"),
]
APPROVAL_STATUS_CHOICES = [
    ("pending_review", "Pending Review"),
    ("approved", "Approved"),
    ("needs_changes", "Needs Changes"),
]


def work_entry_fields(historical=False):
    """Columns shared by WorkEntry and its history table."""
    return [
        ("title", models.CharField(max_length=255)),
        ("description", models.TextField(blank=True)),
        ("start_date", models.DateField()),
        ("end_date", models.DateField(blank=True, null=True)),
        (
            "priority",
            models.CharField(
                choices=PRIORITY_CHOICES, default="medium", max_length=10
            ),
        ),
        (
            "hours",
            models.DecimalField(
                decimal_places=2,
                max_digits=6,
                validators=[
                    django.core.validators.MinValueValidator(Decimal("0.01"))
                ],
            ),
        ),
        ("billable", models.BooleanField(default=True)),
        (
            "status",
            models.CharField(
                choices=APPROVAL_STATUS_CHOICES,
                default="pending_review",
                max_length=20,
            ),
        ),
        ("company_feedback", models.TextField(blank=True)),
        (
            "rating",
            models.PositiveSmallIntegerField(
                blank=True,
                null=True,
                validators=[
                    django.core.validators.MinValueValidator(1),
                    django.core.validators.MaxValueValidator(5),
                ],
            ),
        ),
        ("reviewed_at", models.DateTimeField(blank=True, null=True)),
        ("approved_at", models.DateTimeField(blank=True, null=True)),
        (
            "created_at",
            models.DateTimeField(blank=True, editable=False)
            if historical
            else models.DateTimeField(auto_now_add=True),
        ),
        (
            "updated_at",
            models.DateTimeField(blank=True, editable=False)
            if historical
            else models.DateTimeField(auto_now=True),
        ),
    ]


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("companies", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="WorkEntry",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                *work_entry_fields(),
                (
                    "company",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="work_entries",
                        to="companies.company",
                    ),
                ),
                (
                    "employee",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="work_entries",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "reviewed_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="reviewed_work_entries",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "Work entries",
                "db_table": "workdiary_work_entry",
                "ordering": ["-start_date", "-created_at"],
                "indexes": [
                    models.Index(
                        fields=["company", "status"],
                        name="work_entry_company_status_idx",
                    ),
                    models.Index(
                        fields=["employee", "start_date"],
                        name="work_entry_employee_start_idx",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="HistoricalWorkEntry",
            fields=[
                (
                    "id",
                    models.UUIDField(db_index=True, default=uuid.uuid4, editable=False),
                ),
                *work_entry_fields(historical=True),
                (
                    "company",
                    models.ForeignKey(
                        blank=True,
                        db_constraint=False,
                        null=True,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="+",
                        to="companies.company",
                    ),
                ),
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
                    "reviewed_by",
                    models.ForeignKey(
                        blank=True,
                        db_constraint=False,
                        null=True,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
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
                "verbose_name": "historical work entry",
                "verbose_name_plural": "historical Work entries",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name="WorkEntryEvent",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "event_type",
                    models.CharField(
                        choices=[
                            ("submitted", "Submitted"),
                            ("updated", "Updated"),
                            ("approved", "Approved"),
                            ("changes_requested", "Changes Requested"),
                        ],
                        max_length=30,
                    ),
                ),
                ("from_status", models.CharField(blank=True, max_length=20)),
                ("to_status", models.CharField(max_length=20)),
                ("note", models.TextField(blank=True)),
                ("timestamp", models.DateTimeField(auto_now_add=True)),
                (
                    "actor",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="work_entry_events",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "entry",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="events",
                        to="workdiary.workentry",
                    ),
                ),
            ],
            options={
                "db_table": "workdiary_work_entry_event",
                "ordering": ["timestamp"],
            },
        ),
    ]
