import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


def item_fields(related_name):
    """Columns every profile section carries."""
    return [
        (
            "id",
            models.UUIDField(
                default=uuid.uuid4, editable=False, primary_key=True, serialize=False
            ),
        ),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
        (
            "employee",
            models.ForeignKey(
                on_delete=django.db.models.deletion.CASCADE,
                related_name=related_name,
                to=settings.AUTH_USER_MODEL,
            ),
        ),
    ]


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Experience",
            fields=[
                *item_fields("experiences"),
                ("title", models.CharField(max_length=150)),
                ("company_name", models.CharField(max_length=200)),
                ("location", models.CharField(blank=True, max_length=150)),
                ("start_date", models.DateField()),
                ("end_date", models.DateField(blank=True, null=True)),
                ("is_current", models.BooleanField(default=False)),
                ("description", models.TextField(blank=True)),
            ],
            options={"db_table": "profiles_experience", "ordering": ["-start_date"]},
        ),
        migrations.CreateModel(
            name="Education",
            fields=[
                *item_fields("educations"),
                ("institution", models.CharField(max_length=200)),
                ("degree", models.CharField(max_length=150)),
                ("field_of_study", models.CharField(blank=True, max_length=150)),
                ("start_year", models.PositiveIntegerField(blank=True, null=True)),
                ("end_year", models.PositiveIntegerField(blank=True, null=True)),
                ("grade", models.CharField(blank=True, max_length=50)),
            ],
            options={
                "db_table": "profiles_education",
                "ordering": ["-end_year", "-start_year"],
            },
        ),
        migrations.CreateModel(
            name="Certification",
            fields=[
                *item_fields("certifications"),
                ("name", models.CharField(max_length=200)),
                ("issuer", models.CharField(max_length=200)),
                ("issue_date", models.DateField(blank=True, null=True)),
                ("expiry_date", models.DateField(blank=True, null=True)),
                ("credential_id", models.CharField(blank=True, max_length=100)),
                ("credential_url", models.URLField(blank=True)),
            ],
            options={
                "db_table": "profiles_certification",
                "ordering": ["-issue_date"],
            },
        ),
        migrations.CreateModel(
            name="Project",
            fields=[
                *item_fields("projects"),
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("url", models.URLField(blank=True)),
                ("start_date", models.DateField(blank=True, null=True)),
                ("end_date", models.DateField(blank=True, null=True)),
                ("technologies", models.JSONField(blank=True, default=list)),
            ],
            options={
                "db_table": "profiles_project",
                "ordering": ["-start_date", "name"],
            },
        ),
        migrations.CreateModel(
            name="Endorsement",
            fields=[
                *item_fields("endorsements"),
                ("endorser_name", models.CharField(max_length=150)),
                ("endorser_email", models.EmailField(blank=True, max_length=254)),
                ("relationship", models.CharField(blank=True, max_length=100)),
                ("message", models.TextField()),
            ],
            options={
                "db_table": "profiles_endorsement",
                "ordering": ["-created_at"],
            },
        ),
    ]
