"""
Company service layer.

Company creation, role resolution for the acting account, settings and
verification requests.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from django.db import transaction

from apps.accounts.enums import AccountType
from apps.companies.enums import CompanyRole, MembershipStatus, VerificationStatus
from apps.companies.models import Company, CompanyMembership
from apps.companies.roles import (
    SETTINGS_READ,
    SETTINGS_WRITE,
    get_company_permissions,
    has_company_permission,
)
from apps.companies.validation import clean_company_details
from apps.workflow.exceptions import InvalidTransitionError
from apps.workflow.helpers import parse_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompanyContext:
    """The company an actor is working in and the role they hold there."""

    actor: Any
    company: Company
    role: str
    membership: Optional[CompanyMembership] = None

    @property
    def is_company_admin(self) -> bool:
        return self.role == CompanyRole.COMPANY_ADMIN

    def has_permission(self, permission: str) -> bool:
        return has_company_permission(self.role, permission)

    @property
    def permissions(self):
        return sorted(get_company_permissions(self.role))


class CompanyService:
    @staticmethod
    def create_company(account, data: Dict[str, Any]) -> Company:
        """
        Raises:
            ValueError: invalid company details
        """
        cleaned = clean_company_details(data)
        company = Company.objects.create(account=account, **cleaned)
        logger.info(f"Created company {company.id} ({company.name})")
        return company

    @staticmethod
    def resolve_company_role(account, company: Company) -> Optional[str]:
        """
        COMPANY_ADMIN for the owning company account, the membership role for
        an active manager or branch admin, otherwise None.
        """
        if account is None or not account.is_authenticated:
            return None

        if account.account_type == AccountType.COMPANY:
            owns = getattr(account, "company", None)
            if owns is not None and owns.pk == company.pk:
                return CompanyRole.COMPANY_ADMIN
            return None

        if account.account_type != AccountType.EMPLOYEE:
            return None

        membership = CompanyMembership.objects.filter(
            company=company, employee=account, status=MembershipStatus.ACTIVE
        ).first()
        if membership and membership.is_manager:
            return membership.role
        return None

    @staticmethod
    def get_context(actor, company_id=None) -> CompanyContext:
        """
        Work out which company the actor acts for.

        Company accounts always act for their own company. Employees act
        through an active manager or branch admin membership; ``company_id``
        picks one when they hold several.

        Raises:
            PermissionError: the actor holds no company role
            ValueError: ambiguous company for a multi-company manager
        """
        if company_id:
            company_id = parse_uuid(company_id, "company_id")

        if actor.account_type == AccountType.COMPANY:
            company = getattr(actor, "company", None)
            if company is None:
                raise PermissionError("Company profile not found")
            if company_id and str(company.pk) != str(company_id):
                raise PermissionError("Access denied to this company")
            if not company.is_active:
                raise PermissionError("Company account is deactivated")
            return CompanyContext(actor, company, CompanyRole.COMPANY_ADMIN)

        if actor.account_type == AccountType.EMPLOYEE:
            from apps.companies.services.membership_service import MembershipService

            memberships = MembershipService.managed_memberships(actor).select_related(
                "company"
            )
            if company_id:
                memberships = memberships.filter(company_id=company_id)
            memberships = list(memberships)
            if len(memberships) > 1:
                raise ValueError("company_id is required")
            if memberships:
                membership = memberships[0]
                return CompanyContext(
                    actor, membership.company, membership.role, membership
                )

        raise PermissionError("Company access required")

    @staticmethod
    def require_permission(context: CompanyContext, permission: str) -> None:
        if not context.has_permission(permission):
            logger.warning(
                f"{context.actor.email} ({context.role}) lacks {permission} "
                f"at company {context.company.id}"
            )
            raise PermissionError("You do not have permission to perform this action")

    @staticmethod
    def get_settings(context: CompanyContext) -> Company:
        CompanyService.require_permission(context, SETTINGS_READ)
        return context.company

    @staticmethod
    def update_settings(context: CompanyContext, data: Dict[str, Any]) -> Company:
        """
        Changing the registration details revalidates them and sends a
        verified company back to review.

        Raises:
            PermissionError: missing settings.write
            ValueError: invalid details
        """
        CompanyService.require_permission(context, SETTINGS_WRITE)
        company = context.company

        cleaned = clean_company_details(data, partial=True, current=company)
        registration_changed = (
            cleaned.get("registration_type", company.registration_type)
            != company.registration_type
            or cleaned.get("registration_number", company.registration_number)
            != company.registration_number
        )

        with transaction.atomic():
            for field, value in cleaned.items():
                setattr(company, field, value)

            if registration_changed and company.verification_status in (
                VerificationStatus.VERIFIED,
                VerificationStatus.PENDING,
            ):
                company.verification_status = VerificationStatus.PENDING
                company.verified_at = None
                company.verified_by = None
                logger.info(
                    f"Company {company.id} registration changed, back to pending review"
                )

            company.save()

        logger.info(f"Company {company.id} settings updated by {context.actor.email}")
        return company

    @staticmethod
    def request_verification(context: CompanyContext) -> Company:
        """
        Raises:
            PermissionError: not the company admin
            InvalidTransitionError: already pending or verified
        """
        CompanyService.require_permission(context, SETTINGS_WRITE)
        company = context.company

        if company.verification_status not in (
            VerificationStatus.UNVERIFIED,
            VerificationStatus.REJECTED,
        ):
            raise InvalidTransitionError(
                "company verification",
                company.verification_status,
                VerificationStatus.PENDING,
            )

        company.verification_status = VerificationStatus.PENDING
        company.rejection_reason = ""
        company.save()
        logger.info(f"Company {company.id} requested verification")
        return company
