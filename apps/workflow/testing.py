"""
Shared fixtures for the test suites of every app.
"""

from datetime import date
from decimal import Decimal

from django.utils import timezone

from apps.accounts.enums import AccountType
from apps.accounts.models import Account
from apps.accounts.utils import generate_unique_employee_code
from apps.companies.enums import MembershipRole, RegistrationType, VerificationStatus
from apps.companies.models import Company, CompanyMembership
from apps.jobs.models import JobListing
from apps.workdiary.enums import ApprovalStatus
from apps.workdiary.models import WorkEntry

DEFAULT_PASSWORD = "Password123"


def make_employee(email="employee@example.com", first_name="Asha", **extra):
    extra.setdefault("last_name", "Rao")
    extra.setdefault("employee_code", generate_unique_employee_code())
    return Account.objects.create_user(
        email=email,
        password=DEFAULT_PASSWORD,
        first_name=first_name,
        account_type=AccountType.EMPLOYEE,
        **extra,
    )


def make_company(email="company@example.com", name="Acme Works", **extra):
    account = Account.objects.create_user(
        email=email,
        password=DEFAULT_PASSWORD,
        first_name=name,
        account_type=AccountType.COMPANY,
    )
    extra.setdefault("address", "12 Industrial Estate")
    extra.setdefault("pincode", "560001")
    extra.setdefault("registration_type", RegistrationType.PAN)
    extra.setdefault("registration_number", "ABCDE1234F")
    extra.setdefault("verification_status", VerificationStatus.VERIFIED)
    return Company.objects.create(account=account, name=name, **extra)


def make_admin(email="admin@example.com"):
    return Account.objects.create_superuser(
        email=email, password=DEFAULT_PASSWORD, first_name="Admin"
    )


def add_member(company, employee, role=MembershipRole.EMPLOYEE, manager=None, **extra):
    return CompanyMembership.objects.create(
        company=company, employee=employee, role=role, manager=manager, **extra
    )


def make_work_entry(employee, company, status=ApprovalStatus.PENDING_REVIEW, **extra):
    extra.setdefault("title", "Wired the east wing")
    extra.setdefault("start_date", date(2024, 3, 4))
    extra.setdefault("hours", Decimal("6.50"))
    if status == ApprovalStatus.APPROVED:
        extra.setdefault("approved_at", timezone.now())
    return WorkEntry.objects.create(
        employee=employee, company=company, status=status, **extra
    )


def make_job(company, **extra):
    extra.setdefault("title", "Site Electrician")
    extra.setdefault("description", "Wire commercial buildings")
    extra.setdefault("location", "Pune")
    return JobListing.objects.create(company=company, **extra)
