import logging

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response

from apps.accounts.permissions import IsCompanyMember, IsEmployee
from apps.companies.serializers import (
    AssignManagerSerializer,
    AssignReportsSerializer,
    CompanyMembershipSerializer,
    InvitationCodeSerializer,
)
from apps.companies.services.invitation_service import InvitationService
from apps.companies.services.membership_service import MembershipService
from apps.companies.views.mixins import CompanyContextMixin
from apps.workflow.views import BaseRestView

logger = logging.getLogger(__name__)


class GenerateInvitationCodeView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]

    def post(self, request):
        try:
            context = self.get_company_context(request)
            invitation = InvitationService.generate_code(context)
            data = InvitationCodeSerializer(invitation).data
            data["message"] = (
                "Invitation code generated. It expires in "
                f"{settings.INVITATION_CODE_TTL_MINUTES} minutes."
            )
            return Response(data, status=status.HTTP_201_CREATED)
        except Exception as e:
            return self.handle_service_error(e)


class JoinCompanyView(BaseRestView):
    permission_classes = [IsEmployee]

    def post(self, request):
        try:
            membership = InvitationService.join_company(
                request.user, request.data.get("code")
            )
            return Response(
                {
                    "message": f"Joined {membership.company.name}",
                    "membership": CompanyMembershipSerializer(membership).data,
                },
                status=status.HTTP_201_CREATED,
            )
        except Exception as e:
            return self.handle_service_error(e)


class LeaveCompanyView(BaseRestView):
    permission_classes = [IsEmployee]

    def post(self, request, membership_id):
        try:
            membership = MembershipService.leave_company(request.user, membership_id)
            return Response(
                {
                    "message": f"You have left {membership.company.name}",
                    "membership": CompanyMembershipSerializer(membership).data,
                }
            )
        except Exception as e:
            return self.handle_service_error(e)


class EmployeeCompaniesView(BaseRestView):
    permission_classes = [IsEmployee]

    def get(self, request):
        memberships = MembershipService.list_employee_companies(request.user)
        return Response(CompanyMembershipSerializer(memberships, many=True).data)


class CompanyEmployeesView(CompanyContextMixin, BaseRestView):
    """Company admins see everyone; managers see their direct reports."""

    permission_classes = [IsCompanyMember]

    def get(self, request):
        try:
            context = self.get_company_context(request)
            include_left = request.query_params.get("include_left") == "true"
            memberships = MembershipService.list_company_employees(
                context.company, include_left=include_left
            )
            visible = MembershipService.visible_employee_ids(context)
            if visible is not None:
                memberships = memberships.filter(employee_id__in=visible)
            return Response(CompanyMembershipSerializer(memberships, many=True).data)
        except Exception as e:
            return self.handle_service_error(e)


class ManagerListView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]

    def get(self, request):
        try:
            context = self.get_company_context(request)
            managers = MembershipService.list_managers(context)
            return Response(CompanyMembershipSerializer(managers, many=True).data)
        except Exception as e:
            return self.handle_service_error(e)


class ManagerDetailView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]

    def delete(self, request, membership_id):
        try:
            context = self.get_company_context(request)
            membership = MembershipService.remove_manager(context, membership_id)
            return Response(
                {
                    "message": "Manager role removed",
                    "membership": CompanyMembershipSerializer(membership).data,
                }
            )
        except Exception as e:
            return self.handle_service_error(e)


class AvailableForManagerView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]

    def get(self, request):
        try:
            context = self.get_company_context(request)
            memberships = MembershipService.available_for_manager(context)
            return Response(CompanyMembershipSerializer(memberships, many=True).data)
        except Exception as e:
            return self.handle_service_error(e)


class AssignManagerView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]

    def post(self, request):
        serializer = AssignManagerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            context = self.get_company_context(request)
            membership = MembershipService.assign_manager(
                context,
                serializer.validated_data["membership_id"],
                serializer.validated_data["role"],
            )
            return Response(
                {
                    "message": "Manager assigned",
                    "membership": CompanyMembershipSerializer(membership).data,
                }
            )
        except Exception as e:
            return self.handle_service_error(e)


class AssignReportsView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]

    def post(self, request):
        serializer = AssignReportsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            context = self.get_company_context(request)
            reports = MembershipService.assign_reports(
                context,
                serializer.validated_data["manager_membership_id"],
                serializer.validated_data["membership_ids"],
            )
            return Response(
                {
                    "message": f"{len(reports)} reports assigned",
                    "memberships": CompanyMembershipSerializer(reports, many=True).data,
                }
            )
        except Exception as e:
            return self.handle_service_error(e)
