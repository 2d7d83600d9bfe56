from datetime import datetime, date
import uuid

from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models
from django.utils import timezone
from django.utils.timezone import now as timezone_now
from simple_history.models import HistoricalRecords
from typing import Optional, List, ClassVar

from apps.accounts.enums import AccountType
from apps.accounts.managers import AccountManager


class Account(AbstractBaseUser, PermissionsMixin):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email: str = models.EmailField(unique=True)
    first_name: str = models.CharField(max_length=50)
    last_name: str = models.CharField(max_length=50, blank=True)
    phone: str = models.CharField(max_length=20, blank=True)
    country_code: str = models.CharField(max_length=5, default="+1")
    account_type: str = models.CharField(
        max_length=20, choices=AccountType.choices, default=AccountType.EMPLOYEE
    )
    # Short public identifier shown to companies, e.g. EMP-ABC123
    employee_code: Optional[str] = models.CharField(
        max_length=10, unique=True, null=True, blank=True
    )
    password_needs_reset: bool = models.BooleanField(default=False)
    is_active: bool = models.BooleanField(default=True)
    is_staff: bool = models.BooleanField(default=False)
    date_joined: datetime = models.DateTimeField(default=timezone.now)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    # Professional profile (employees)
    headline = models.CharField(max_length=200, blank=True)
    summary = models.TextField(blank=True)
    current_position = models.CharField(max_length=150, blank=True)
    industry = models.CharField(max_length=100, blank=True)
    skills = models.JSONField(default=list, blank=True)
    languages = models.JSONField(default=list, blank=True)
    website = models.URLField(blank=True)
    portfolio_url = models.URLField(blank=True)
    github_url = models.URLField(blank=True)
    linkedin_url = models.URLField(blank=True)

    # Private details, never shown to companies
    address = models.TextField(blank=True)
    date_of_birth: Optional[date] = models.DateField(null=True, blank=True)

    history: HistoricalRecords = HistoricalRecords(
        excluded_fields=["password", "last_login"]
    )

    objects = AccountManager()

    USERNAME_FIELD: str = "email"
    REQUIRED_FIELDS: ClassVar[List[str]] = [
        "first_name",
    ]

    class Meta:
        ordering = ["last_name", "first_name"]
        db_table = "accounts_account"
        verbose_name = "Account"
        verbose_name_plural = "Accounts"

    def save(self, *args, **kwargs):
        self.updated_at = timezone_now()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.get_full_name()} <{self.email}>"

    def get_full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def get_short_name(self) -> str:
        return self.first_name

    @property
    def is_employee(self) -> bool:
        return self.account_type == AccountType.EMPLOYEE

    @property
    def is_company(self) -> bool:
        return self.account_type == AccountType.COMPANY

    @property
    def is_platform_admin(self) -> bool:
        return self.account_type == AccountType.ADMIN
