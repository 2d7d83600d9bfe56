"""
Platform administration: bootstrap, oversight statistics, account
activation and company verification review.
"""

import logging
from typing import Any, Dict

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Count, Q
from django.shortcuts import get_object_or_404
from django.utils import timezone

from apps.accounts.enums import AccountType
from apps.accounts.services.account_service import AccountService
from apps.companies.enums import VerificationStatus
from apps.companies.models import Company
from apps.jobs.enums import JobStatus
from apps.jobs.models import JobListing
from apps.workdiary.models import WorkEntry
from apps.workflow.exceptions import ConflictError, InvalidTransitionError

logger = logging.getLogger(__name__)


class AdminService:
    @staticmethod
    def create_first_admin(data: Dict[str, Any]):
        """
        Bootstrap the platform's first admin account.

        Raises:
            ConflictError: an admin account already exists
            ValueError: invalid email or password
        """
        Account = get_user_model()
        if Account.objects.admins().exists():
            logger.warning("Rejected attempt to create a second bootstrap admin")
            raise ConflictError("Admin already exists")

        email = AccountService.clean_email(data.get("email"))
        password = data.get("password")
        AccountService.check_password_policy(password)

        admin = Account.objects.create_superuser(
            email=email,
            password=password,
            first_name=(data.get("first_name") or "Admin").strip(),
            last_name=(data.get("last_name") or "").strip(),
        )
        logger.info(f"Created first platform admin {admin.email}")
        return admin

    @staticmethod
    def stats() -> Dict[str, int]:
        Account = get_user_model()
        jobs = JobListing.objects.aggregate(
            total=Count("id"), active=Count("id", filter=Q(status=JobStatus.ACTIVE))
        )
        return {
            "employees": Account.objects.employees().count(),
            "companies": Company.objects.count(),
            "total_jobs": jobs["total"],
            "active_jobs": jobs["active"],
            "work_entries": WorkEntry.objects.count(),
            "pending_verifications": Company.objects.filter(
                verification_status=VerificationStatus.PENDING
            ).count(),
        }

    @staticmethod
    def list_employees(search=None):
        Account = get_user_model()
        employees = Account.objects.employees().annotate(
            work_entry_count=Count("work_entries")
        )
        if search:
            employees = employees.filter(
                Q(email__icontains=search)
                | Q(first_name__icontains=search)
                | Q(last_name__icontains=search)
                | Q(employee_code__icontains=search)
            )
        return employees.order_by("-date_joined")

    @staticmethod
    def list_companies(search=None, verification_status=None):
        companies = Company.objects.select_related("account").annotate(
            job_count=Count("job_listings", distinct=True),
            member_count=Count("memberships", distinct=True),
        )
        if search:
            companies = companies.filter(
                Q(name__icontains=search) | Q(registration_number__icontains=search)
            )
        if verification_status:
            companies = companies.filter(verification_status=verification_status)
        return companies.order_by("-created_at")

    @staticmethod
    def set_employee_active(admin, employee_id, is_active: bool):
        Account = get_user_model()
        employee = get_object_or_404(
            Account, id=employee_id, account_type=AccountType.EMPLOYEE
        )
        employee.is_active = is_active
        employee.save(update_fields=["is_active", "updated_at"])
        logger.info(
            f"{admin.email} set employee {employee.id} active={is_active}"
        )
        return employee

    @staticmethod
    def set_company_active(admin, company_id, is_active: bool) -> Company:
        """The company's login follows the company's flag."""
        company = get_object_or_404(Company.objects.select_related("account"), id=company_id)
        with transaction.atomic():
            company.is_active = is_active
            company.save(update_fields=["is_active", "updated_at"])
            company.account.is_active = is_active
            company.account.save(update_fields=["is_active", "updated_at"])
        logger.info(f"{admin.email} set company {company.id} active={is_active}")
        return company

    @staticmethod
    def pending_verifications():
        return (
            Company.objects.filter(verification_status=VerificationStatus.PENDING)
            .select_related("account")
            .order_by("updated_at")
        )

    @staticmethod
    def review_verification(
        admin, company_id, status: str, notes: str = "", rejection_reason: str = ""
    ) -> Company:
        """
        Raises:
            Http404: unknown company
            InvalidTransitionError: company is not awaiting review
            ValueError: rejecting without a reason
        """
        company = get_object_or_404(Company, id=company_id)
        if company.verification_status != VerificationStatus.PENDING:
            raise InvalidTransitionError(
                "company verification", company.verification_status, status
            )

        if status == VerificationStatus.REJECTED and not (rejection_reason or "").strip():
            raise ValueError("Rejection reason is required")

        company.verification_status = status
        company.verification_notes = notes or ""
        if status == VerificationStatus.VERIFIED:
            company.verified_at = timezone.now()
            company.verified_by = admin
            company.rejection_reason = ""
        else:
            company.verified_at = None
            company.verified_by = None
            company.rejection_reason = rejection_reason.strip()
        company.save()

        logger.info(f"{admin.email} marked company {company.id} as {status}")
        return company
