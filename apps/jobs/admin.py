from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from apps.jobs.models import (
    JobAlert,
    JobApplication,
    JobListing,
    PipelineCandidate,
    SavedJob,
)


@admin.register(JobListing)
class JobListingAdmin(admin.ModelAdmin):
    list_display = ("title", "company", "employment_type", "status", "application_deadline")
    list_filter = ("status", "employment_type", "experience_level", "remote_type")
    search_fields = ("title", "company__name")


@admin.register(JobApplication)
class JobApplicationAdmin(SimpleHistoryAdmin):
    list_display = ("job", "employee", "status", "applied_at")
    list_filter = ("status",)
    search_fields = ("job__title", "employee__email")
    raw_id_fields = ("job", "employee")


@admin.register(SavedJob)
class SavedJobAdmin(admin.ModelAdmin):
    list_display = ("job", "employee", "saved_at")
    raw_id_fields = ("job", "employee")


@admin.register(JobAlert)
class JobAlertAdmin(admin.ModelAdmin):
    list_display = ("name", "employee", "frequency", "is_active")
    list_filter = ("frequency", "is_active")


@admin.register(PipelineCandidate)
class PipelineCandidateAdmin(admin.ModelAdmin):
    list_display = ("employee", "job", "company", "stage", "updated_at")
    list_filter = ("stage",)
    raw_id_fields = ("job", "employee", "company", "added_by")
