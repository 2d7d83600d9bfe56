"""
Membership service layer.

Joining and leaving companies, manager assignment and the direct-report
hierarchy that scopes what managers can see and approve.
"""

import logging
from typing import Iterable, List, Set

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import QuerySet
from django.shortcuts import get_object_or_404
from django.utils import timezone

from apps.companies.enums import CompanyRole, MembershipRole, MembershipStatus
from apps.companies.models import Company, CompanyMembership
from apps.companies.roles import MANAGER_MANAGE
from apps.companies.services.company_service import CompanyService

logger = logging.getLogger(__name__)

MANAGER_ROLES = (MembershipRole.MANAGER, MembershipRole.BRANCH_ADMIN)


class MembershipService:
    @staticmethod
    def managed_memberships(employee) -> QuerySet:
        """Active memberships in which the employee holds a management role."""
        return CompanyMembership.objects.filter(
            employee=employee,
            status=MembershipStatus.ACTIVE,
            role__in=MANAGER_ROLES,
        )

    @staticmethod
    def list_employee_companies(employee) -> QuerySet:
        return (
            CompanyMembership.objects.filter(employee=employee)
            .select_related("company", "manager__employee")
            .order_by("status", "-joined_at")
        )

    @staticmethod
    def list_company_employees(company: Company, include_left: bool = False) -> QuerySet:
        memberships = CompanyMembership.objects.filter(company=company).select_related(
            "employee", "manager__employee"
        )
        if not include_left:
            memberships = memberships.filter(status=MembershipStatus.ACTIVE)
        return memberships.order_by("employee__first_name", "employee__last_name")

    @staticmethod
    def leave_company(employee, membership_id) -> CompanyMembership:
        """
        End the employee's membership. Work entries stay with the company.

        Raises:
            Http404: membership not found for this employee
            ValueError: membership already ended
        """
        membership = get_object_or_404(
            CompanyMembership, id=membership_id, employee=employee
        )
        if membership.status == MembershipStatus.LEFT:
            raise ValueError("You have already left this company")

        with transaction.atomic():
            membership.status = MembershipStatus.LEFT
            membership.left_at = timezone.now()
            membership.manager = None
            membership.save()
            detached = membership.direct_reports.update(manager=None)

        logger.info(
            f"{employee.email} left company {membership.company_id} "
            f"({detached} reports detached)"
        )
        return membership

    @staticmethod
    def direct_report_ids(context) -> Set:
        """Employee ids of the active direct reports of the context's membership."""
        if context.membership is None:
            return set()
        return set(
            CompanyMembership.objects.filter(
                manager=context.membership, status=MembershipStatus.ACTIVE
            ).values_list("employee_id", flat=True)
        )

    @staticmethod
    def is_direct_report(context, employee_id) -> bool:
        if context.membership is None:
            return False
        return CompanyMembership.objects.filter(
            manager=context.membership,
            employee_id=employee_id,
            status=MembershipStatus.ACTIVE,
        ).exists()

    @staticmethod
    def visible_employee_ids(context):
        """
        None for the company admin (whole company), otherwise the set of
        direct-report employee ids.
        """
        if context.role == CompanyRole.COMPANY_ADMIN:
            return None
        return MembershipService.direct_report_ids(context)

    @staticmethod
    def has_membership_history(company: Company, employee_id) -> bool:
        """True when the employee is, or was, a member of the company."""
        return CompanyMembership.objects.filter(
            company=company, employee_id=employee_id
        ).exists()

    @staticmethod
    def get_member_employee(company: Company, employee_id):
        """
        Raises:
            Http404: unknown employee
            PermissionError: no membership with this company, ever
        """
        Account = get_user_model()
        employee = get_object_or_404(Account, id=employee_id)
        if not MembershipService.has_membership_history(company, employee.id):
            logger.warning(
                f"Company {company.id} denied access to non-member {employee.id}"
            )
            raise PermissionError("Employee is not associated with your company")
        return employee

    # Manager management

    @staticmethod
    def _require_manager_manage(context) -> None:
        CompanyService.require_permission(context, MANAGER_MANAGE)

    @staticmethod
    def _active_membership(company: Company, membership_id) -> CompanyMembership:
        return get_object_or_404(
            CompanyMembership,
            id=membership_id,
            company=company,
            status=MembershipStatus.ACTIVE,
        )

    @staticmethod
    def list_managers(context) -> QuerySet:
        MembershipService._require_manager_manage(context)
        return (
            CompanyMembership.objects.filter(
                company=context.company,
                status=MembershipStatus.ACTIVE,
                role__in=MANAGER_ROLES,
            )
            .select_related("employee")
            .order_by("employee__first_name")
        )

    @staticmethod
    def available_for_manager(context) -> QuerySet:
        MembershipService._require_manager_manage(context)
        return (
            CompanyMembership.objects.filter(
                company=context.company,
                status=MembershipStatus.ACTIVE,
                role=MembershipRole.EMPLOYEE,
            )
            .select_related("employee")
            .order_by("employee__first_name")
        )

    @staticmethod
    def assign_manager(context, membership_id, role: str) -> CompanyMembership:
        """
        Raises:
            ValueError: role is not a management role
        """
        MembershipService._require_manager_manage(context)
        if role not in MANAGER_ROLES:
            raise ValueError("Role must be MANAGER or BRANCH_ADMIN")

        membership = MembershipService._active_membership(
            context.company, membership_id
        )
        membership.role = role
        membership.save(update_fields=["role"])
        logger.info(
            f"{context.actor.email} made membership {membership.id} a {role}"
        )
        return membership

    @staticmethod
    def remove_manager(context, membership_id) -> CompanyMembership:
        """Demote to EMPLOYEE and detach every direct report."""
        MembershipService._require_manager_manage(context)
        membership = MembershipService._active_membership(
            context.company, membership_id
        )
        if membership.role not in MANAGER_ROLES:
            raise ValueError("This employee is not a manager")

        with transaction.atomic():
            membership.role = MembershipRole.EMPLOYEE
            membership.save()
            detached = membership.direct_reports.update(manager=None)

        logger.info(
            f"{context.actor.email} removed manager role from {membership.id} "
            f"({detached} reports detached)"
        )
        return membership

    @staticmethod
    def assign_reports(
        context, manager_membership_id, membership_ids: Iterable
    ) -> List[CompanyMembership]:
        """
        Point each listed membership at the given manager.

        Raises:
            ValueError: empty list, self-assignment, a reporting loop, or a
                target not manager-capable
            Http404: unknown or inactive membership
        """
        MembershipService._require_manager_manage(context)
        membership_ids = [str(mid) for mid in (membership_ids or [])]
        if not membership_ids:
            raise ValueError("membership_ids is required")

        manager = MembershipService._active_membership(
            context.company, manager_membership_id
        )
        if manager.role not in MANAGER_ROLES:
            raise ValueError("Selected membership is not a manager")
        if str(manager.id) in membership_ids:
            raise ValueError("A manager cannot report to themselves")

        # Nobody above the manager in the chain may become its report
        seen = {manager.id}
        above = manager.manager
        while above is not None and above.id not in seen:
            if str(above.id) in membership_ids:
                raise ValueError(
                    "Reporting lines cannot loop back to the selected manager"
                )
            seen.add(above.id)
            above = above.manager

        reports = list(
            CompanyMembership.objects.filter(
                company=context.company,
                status=MembershipStatus.ACTIVE,
                id__in=membership_ids,
            )
        )
        if len(reports) != len(set(membership_ids)):
            raise ValueError("One or more memberships were not found in your company")

        with transaction.atomic():
            for report in reports:
                report.manager = manager
                report.save(update_fields=["manager"])

        logger.info(
            f"{context.actor.email} assigned {len(reports)} reports to {manager.id}"
        )
        return reports
