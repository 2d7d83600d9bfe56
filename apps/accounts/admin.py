from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from simple_history.admin import SimpleHistoryAdmin

from apps.accounts.forms import AccountChangeForm, AccountCreationForm
from apps.accounts.models import Account


@admin.register(Account)
class AccountAdmin(UserAdmin, SimpleHistoryAdmin):
    add_form = AccountCreationForm
    form = AccountChangeForm
    model = Account

    list_display = (
        "email",
        "first_name",
        "last_name",
        "account_type",
        "employee_code",
        "is_active",
    )
    list_filter = (
        "account_type",
        "is_staff",
        "is_active",
    )
    fieldsets = (
        (None, {"fields": ("email", "password", "account_type", "employee_code")}),
        (
            "Personal Info",
            {
                "fields": (
                    "first_name",
                    "last_name",
                    "country_code",
                    "phone",
                    "address",
                    "date_of_birth",
                )
            },
        ),
        (
            "Professional Profile",
            {
                "fields": (
                    "headline",
                    "current_position",
                    "industry",
                    "summary",
                    "skills",
                    "languages",
                    "website",
                    "portfolio_url",
                    "github_url",
                    "linkedin_url",
                ),
            },
        ),
        (
            "Permissions",
            {
                "fields": (
                    "is_staff",
                    "is_active",
                    "is_superuser",
                    "password_needs_reset",
                    "groups",
                    "user_permissions",
                )
            },
        ),
        ("Important dates", {"fields": ("last_login", "date_joined")}),
    )
    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": (
                    "email",
                    "first_name",
                    "last_name",
                    "account_type",
                    "password1",
                    "password2",
                    "is_staff",
                    "is_active",
                ),
            },
        ),
    )
    search_fields = ("email", "first_name", "last_name", "employee_code")
    ordering = ("email",)
