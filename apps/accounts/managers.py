from __future__ import annotations

from django.contrib.auth.base_user import BaseUserManager
from typing import cast, TYPE_CHECKING, Any, Optional

from apps.accounts.enums import AccountType

if TYPE_CHECKING:
    from apps.accounts.models import Account


class AccountManager(BaseUserManager):
    """
    Manager for the Account user model.
    Superusers are always platform admin accounts.
    """

    def create_user(
        self, email: str, password: Optional[str] = None, **extra_fields: Any
    ) -> "Account":
        if not email:
            raise ValueError("The Email field must be set")

        email = self.normalize_email(email).lower()
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return cast("Account", user)

    def create_superuser(
        self, email: str, password: str, **extra_fields: Any
    ) -> "Account":
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_active", True)
        extra_fields.setdefault("account_type", AccountType.ADMIN)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self.create_user(email, password, **extra_fields)

    def employees(self):
        return self.filter(account_type=AccountType.EMPLOYEE)

    def companies(self):
        return self.filter(account_type=AccountType.COMPANY)

    def admins(self):
        return self.filter(account_type=AccountType.ADMIN)
