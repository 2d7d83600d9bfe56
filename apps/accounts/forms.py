from django.contrib.auth.forms import UserChangeForm, UserCreationForm

from apps.accounts.models import Account


class AccountCreationForm(UserCreationForm):
    """
    Admin form for creating accounts.
    Password rules come from AUTH_PASSWORD_VALIDATORS.
    """

    class Meta:
        model = Account
        fields = (
            "email",
            "first_name",
            "last_name",
            "account_type",
            "is_staff",
            "is_active",
        )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["password1"].help_text = (
            "At least 8 characters with one uppercase letter and one number."
        )


class AccountChangeForm(UserChangeForm):
    class Meta:
        model = Account
        fields = (
            "email",
            "first_name",
            "last_name",
            "phone",
            "account_type",
            "employee_code",
            "is_staff",
            "is_active",
            "is_superuser",
            "groups",
            "user_permissions",
        )
