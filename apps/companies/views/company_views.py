"""
Company REST views: context, settings, verification requests and the
employee privacy view.
"""

import logging

from rest_framework.response import Response

from apps.accounts.permissions import IsCompanyMember
from apps.accounts.serializers import EmployeePublicSerializer
from apps.companies.roles import ROUTE_ROLES, can_access_route
from apps.companies.serializers import CompanySerializer
from apps.companies.services.company_service import CompanyService
from apps.companies.services.membership_service import MembershipService
from apps.companies.views.mixins import CompanyContextMixin
from apps.workflow.views import BaseRestView

logger = logging.getLogger(__name__)


class CompanyContextView(CompanyContextMixin, BaseRestView):
    """Role, permissions and console sections for the signed-in account."""

    permission_classes = [IsCompanyMember]

    def get(self, request):
        try:
            context = self.get_company_context(request)
            return Response(
                {
                    "company": CompanySerializer(context.company).data,
                    "role": context.role,
                    "permissions": context.permissions,
                    "routes": [
                        prefix
                        for prefix, _ in ROUTE_ROLES
                        if can_access_route(context.role, prefix)
                    ],
                }
            )
        except Exception as e:
            return self.handle_service_error(e)


class CompanySettingsView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]

    def get(self, request):
        try:
            context = self.get_company_context(request)
            company = CompanyService.get_settings(context)
            return Response(CompanySerializer(company).data)
        except Exception as e:
            return self.handle_service_error(e)

    def patch(self, request):
        try:
            context = self.get_company_context(request)
            company = CompanyService.update_settings(context, request.data)
            return Response(
                {
                    "message": "Company settings updated",
                    "company": CompanySerializer(company).data,
                }
            )
        except Exception as e:
            return self.handle_service_error(e)


class RequestVerificationView(CompanyContextMixin, BaseRestView):
    permission_classes = [IsCompanyMember]

    def post(self, request):
        try:
            context = self.get_company_context(request)
            company = CompanyService.request_verification(context)
            return Response(
                {
                    "message": "Verification requested",
                    "verification_status": company.verification_status,
                }
            )
        except Exception as e:
            return self.handle_service_error(e)


class CompanyEmployeeDetailView(CompanyContextMixin, BaseRestView):
    """Professional details only; contact and personal fields stay private."""

    permission_classes = [IsCompanyMember]

    def get(self, request, employee_id):
        try:
            context = self.get_company_context(request)
            employee = MembershipService.get_member_employee(
                context.company, employee_id
            )
            return Response(EmployeePublicSerializer(employee).data)
        except Exception as e:
            return self.handle_service_error(e)
