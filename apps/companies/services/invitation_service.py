import logging
import secrets
import string
from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.companies.enums import MembershipRole, MembershipStatus
from apps.companies.models import CompanyMembership, InvitationCode
from apps.companies.roles import EMPLOYEE_MANAGE
from apps.companies.services.company_service import CompanyService
from apps.workflow.exceptions import InvitationCodeError

logger = logging.getLogger(__name__)

CODE_ALPHABET = string.ascii_uppercase + string.digits


class InvitationService:
    @staticmethod
    def _new_code() -> str:
        length = settings.INVITATION_CODE_LENGTH
        while True:
            code = "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))
            if not InvitationCode.objects.filter(code=code).exists():
                return code

    @staticmethod
    def generate_code(context) -> InvitationCode:
        """
        Raises:
            PermissionError: actor may not manage employees
        """
        CompanyService.require_permission(context, EMPLOYEE_MANAGE)
        invitation = InvitationCode.objects.create(
            company=context.company,
            code=InvitationService._new_code(),
            expires_at=timezone.now()
            + timedelta(minutes=settings.INVITATION_CODE_TTL_MINUTES),
        )
        logger.info(
            f"Invitation code generated for company {context.company.id}, "
            f"expires {invitation.expires_at.isoformat()}"
        )
        return invitation

    @staticmethod
    def join_company(employee, code) -> CompanyMembership:
        """
        Redeem an invitation code.

        Raises:
            ValueError: no code supplied, or already an active member
            InvitationCodeError: unknown, used or expired code
        """
        code = (code or "").strip().upper()
        if not code:
            raise ValueError("Invitation code is required")

        with transaction.atomic():
            invitation = (
                InvitationCode.objects.select_for_update()
                .select_related("company")
                .filter(code=code)
                .first()
            )
            if invitation is None or not invitation.is_redeemable:
                logger.warning(f"{employee.email} used an invalid invitation code")
                raise InvitationCodeError()

            company = invitation.company
            if not company.is_active:
                raise InvitationCodeError()

            if CompanyMembership.objects.filter(
                company=company, employee=employee, status=MembershipStatus.ACTIVE
            ).exists():
                raise ValueError("You are already a member of this company")

            invitation.used_at = timezone.now()
            invitation.used_by = employee
            invitation.save(update_fields=["used_at", "used_by"])

            membership = (
                CompanyMembership.objects.filter(company=company, employee=employee)
                .order_by("-joined_at")
                .first()
            )
            if membership is not None:
                membership.status = MembershipStatus.ACTIVE
                membership.role = MembershipRole.EMPLOYEE
                membership.left_at = None
                membership.manager = None
                membership.save()
            else:
                membership = CompanyMembership.objects.create(
                    company=company, employee=employee
                )

        logger.info(f"{employee.email} joined company {company.id}")
        return membership
