from django.contrib import admin

from apps.profiles.models import (
    Certification,
    Education,
    Endorsement,
    Experience,
    Project,
)


@admin.register(Experience)
class ExperienceAdmin(admin.ModelAdmin):
    list_display = ("title", "company_name", "employee", "start_date", "is_current")
    search_fields = ("title", "company_name", "employee__email")


@admin.register(Education)
class EducationAdmin(admin.ModelAdmin):
    list_display = ("degree", "institution", "employee", "end_year")
    search_fields = ("institution", "employee__email")


@admin.register(Certification)
class CertificationAdmin(admin.ModelAdmin):
    list_display = ("name", "issuer", "employee", "issue_date", "expiry_date")
    search_fields = ("name", "issuer", "employee__email")


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("name", "employee", "start_date")
    search_fields = ("name", "employee__email")


@admin.register(Endorsement)
class EndorsementAdmin(admin.ModelAdmin):
    list_display = ("endorser_name", "employee", "relationship", "created_at")
    search_fields = ("endorser_name", "employee__email")
