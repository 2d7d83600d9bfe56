"""
Professional profile service layer.

Employees maintain their own profile sections; companies read them for
current and former members, and for applicants who shared their profile.
"""

import logging
from typing import Any, Dict

from django.contrib.auth import get_user_model
from django.db import transaction
from django.shortcuts import get_object_or_404

from apps.accounts.enums import AccountType
from apps.accounts.serializers import (
    AccountSerializer,
    EmployeePublicSerializer,
    ProfileUpdateSerializer,
)
from apps.companies.services.membership_service import MembershipService
from apps.profiles.models import (
    Certification,
    Education,
    Endorsement,
    Experience,
    Project,
)
from apps.profiles.serializers import (
    CertificationSerializer,
    EducationSerializer,
    EndorsementSerializer,
    ExperienceSerializer,
    ProjectSerializer,
)

logger = logging.getLogger(__name__)

SECTIONS = {
    "experience": (Experience, ExperienceSerializer),
    "education": (Education, EducationSerializer),
    "certification": (Certification, CertificationSerializer),
    "project": (Project, ProjectSerializer),
    "endorsement": (Endorsement, EndorsementSerializer),
}

# Response keys of each section
SECTION_KEYS = {
    "experience": "experiences",
    "education": "educations",
    "certification": "certifications",
    "project": "projects",
    "endorsement": "endorsements",
}


class ProfileService:
    @staticmethod
    def _section(kind: str):
        try:
            return SECTIONS[kind]
        except KeyError:
            raise ValueError(f"Unknown profile section: {kind}")

    @staticmethod
    def get_employee(employee_id):
        Account = get_user_model()
        return get_object_or_404(
            Account, id=employee_id, account_type=AccountType.EMPLOYEE
        )

    @staticmethod
    def company_can_view(company, employee) -> bool:
        if MembershipService.has_membership_history(company, employee.id):
            return True

        from apps.jobs.models import JobApplication

        return JobApplication.objects.filter(
            job__company=company, employee=employee, include_profile=True
        ).exists()

    @staticmethod
    def can_view(actor, employee) -> bool:
        if actor.id == employee.id or actor.account_type == AccountType.ADMIN:
            return True
        if actor.account_type == AccountType.COMPANY:
            company = getattr(actor, "company", None)
            return company is not None and ProfileService.company_can_view(
                company, employee
            )
        if actor.account_type == AccountType.EMPLOYEE:
            return any(
                ProfileService.company_can_view(membership.company, employee)
                for membership in MembershipService.managed_memberships(
                    actor
                ).select_related("company")
            )
        return False

    @staticmethod
    def sections(employee) -> Dict[str, Any]:
        data = {}
        for kind, (model, serializer_class) in SECTIONS.items():
            items = model.objects.filter(employee=employee)
            data[SECTION_KEYS[kind]] = serializer_class(items, many=True).data
        return data

    @staticmethod
    def get_profile(actor, employee_id) -> Dict[str, Any]:
        """
        Raises:
            Http404: unknown employee
            PermissionError: actor may not see this profile
        """
        employee = ProfileService.get_employee(employee_id)
        if not ProfileService.can_view(actor, employee):
            logger.warning(f"{actor.email} denied profile of {employee.id}")
            raise PermissionError("You do not have access to this profile")

        serializer_class = (
            AccountSerializer if actor.id == employee.id else EmployeePublicSerializer
        )
        return {
            "employee": serializer_class(employee).data,
            **ProfileService.sections(employee),
        }

    @staticmethod
    def update_own_profile(employee, data: Dict[str, Any]):
        """Account identity fields are not part of the serializer and stay untouched."""
        serializer = ProfileUpdateSerializer(employee, data=data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info(f"{employee.email} updated profile fields {sorted(serializer.validated_data)}")
        return employee

    @staticmethod
    def create_item(employee, kind: str, data: Dict[str, Any]):
        _, serializer_class = ProfileService._section(kind)
        serializer = serializer_class(data=data)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            item = serializer.save(employee=employee)
        logger.info(f"{employee.email} added {kind} {item.id}")
        return item

    @staticmethod
    def _get_own_item(employee, kind: str, item_id):
        model, _ = ProfileService._section(kind)
        item = get_object_or_404(model, id=item_id)
        if item.employee_id != employee.id:
            logger.warning(f"{employee.email} tried to modify {kind} {item_id}")
            raise PermissionError("You can only modify your own profile")
        return item

    @staticmethod
    def update_item(employee, kind: str, item_id, data: Dict[str, Any]):
        item = ProfileService._get_own_item(employee, kind, item_id)
        _, serializer_class = ProfileService._section(kind)
        serializer = serializer_class(item, data=data, partial=True)
        serializer.is_valid(raise_exception=True)
        item = serializer.save()
        logger.info(f"{employee.email} updated {kind} {item.id}")
        return item

    @staticmethod
    def delete_item(employee, kind: str, item_id) -> None:
        item = ProfileService._get_own_item(employee, kind, item_id)
        item.delete()
        logger.info(f"{employee.email} deleted {kind} {item_id}")

    @staticmethod
    def serialize_item(kind: str, item):
        _, serializer_class = ProfileService._section(kind)
        return serializer_class(item).data

    @staticmethod
    def company_section(context, employee_id, kind: str):
        """
        One profile section of a member employee, for the company.

        Raises:
            PermissionError: employee never belonged to the company
        """
        employee = MembershipService.get_member_employee(context.company, employee_id)
        model, serializer_class = ProfileService._section(kind)
        return serializer_class(model.objects.filter(employee=employee), many=True).data

    @staticmethod
    def company_profile(context, employee_id) -> Dict[str, Any]:
        employee = MembershipService.get_member_employee(context.company, employee_id)
        return {
            "employee": EmployeePublicSerializer(employee).data,
            **ProfileService.sections(employee),
        }
