from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from apps.companies.models import Company, CompanyMembership, InvitationCode


@admin.register(Company)
class CompanyAdmin(SimpleHistoryAdmin):
    list_display = (
        "name",
        "registration_type",
        "registration_number",
        "verification_status",
        "is_active",
    )
    list_filter = ("verification_status", "registration_type", "is_active")
    search_fields = ("name", "registration_number", "account__email")
    readonly_fields = ("created_at", "updated_at", "verified_at")


@admin.register(CompanyMembership)
class CompanyMembershipAdmin(admin.ModelAdmin):
    list_display = ("employee", "company", "role", "status", "joined_at")
    list_filter = ("role", "status")
    search_fields = ("employee__email", "company__name")
    raw_id_fields = ("employee", "company", "manager")


@admin.register(InvitationCode)
class InvitationCodeAdmin(admin.ModelAdmin):
    list_display = ("code", "company", "expires_at", "used_at", "used_by")
    search_fields = ("code", "company__name")
    readonly_fields = ("created_at",)
