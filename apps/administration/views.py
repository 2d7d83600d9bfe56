"""
Platform admin console views and the public feedback endpoint.
"""

import logging

from django.conf import settings
from django.contrib.auth import login
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.accounts.enums import AccountType
from apps.accounts.permissions import IsPlatformAdmin
from apps.accounts.serializers import AccountSerializer
from apps.accounts.services.account_service import AccountService
from apps.accounts.views.token_view import set_cookies_for_account
from apps.administration.serializers import (
    AdminCompanySerializer,
    AdminEmployeeSerializer,
    FeedbackSerializer,
    FeedbackUpdateSerializer,
    ToggleStatusSerializer,
    VerificationReviewSerializer,
)
from apps.administration.services.admin_service import AdminService
from apps.administration.services.feedback_service import FeedbackService
from apps.companies.serializers import CompanySerializer
from apps.workflow.views import BaseRestView

logger = logging.getLogger(__name__)


class CreateFirstAdminView(BaseRestView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        try:
            admin = AdminService.create_first_admin(request.data)
            return Response(
                {
                    "message": "Admin account created",
                    "admin": AccountSerializer(admin).data,
                },
                status=status.HTTP_201_CREATED,
            )
        except Exception as e:
            return self.handle_service_error(e)


class AdminLoginView(BaseRestView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        admin = AccountService.authenticate_account(
            request,
            request.data.get("email"),
            request.data.get("password"),
            AccountType.ADMIN,
        )
        if admin is None:
            return Response(
                {"error": "Invalid email or password"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        login(request, admin)
        logger.info(f"Platform admin {admin.email} logged in")
        response = Response(
            {
                "message": "Login successful",
                "user": AccountSerializer(admin).data,
                "account_type": admin.account_type,
            }
        )
        if getattr(settings, "ENABLE_JWT_AUTH", False):
            set_cookies_for_account(response, admin)
        return response


class AdminStatsView(BaseRestView):
    permission_classes = [IsPlatformAdmin]

    def get(self, request):
        return Response(AdminService.stats())


class AdminEmployeeListView(BaseRestView):
    permission_classes = [IsPlatformAdmin]

    def get(self, request):
        employees = AdminService.list_employees(search=request.query_params.get("search"))
        return Response(AdminEmployeeSerializer(employees, many=True).data)


class AdminCompanyListView(BaseRestView):
    permission_classes = [IsPlatformAdmin]

    def get(self, request):
        companies = AdminService.list_companies(
            search=request.query_params.get("search"),
            verification_status=request.query_params.get("verification_status"),
        )
        return Response(AdminCompanySerializer(companies, many=True).data)


class ToggleEmployeeStatusView(BaseRestView):
    permission_classes = [IsPlatformAdmin]

    def patch(self, request, employee_id):
        serializer = ToggleStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            employee = AdminService.set_employee_active(
                request.user, employee_id, serializer.validated_data["is_active"]
            )
            return Response(
                {"id": str(employee.id), "is_active": employee.is_active}
            )
        except Exception as e:
            return self.handle_service_error(e)


class ToggleCompanyStatusView(BaseRestView):
    permission_classes = [IsPlatformAdmin]

    def patch(self, request, company_id):
        serializer = ToggleStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            company = AdminService.set_company_active(
                request.user, company_id, serializer.validated_data["is_active"]
            )
            return Response({"id": str(company.id), "is_active": company.is_active})
        except Exception as e:
            return self.handle_service_error(e)


class PendingVerificationsView(BaseRestView):
    permission_classes = [IsPlatformAdmin]

    def get(self, request):
        companies = AdminService.pending_verifications()
        return Response(CompanySerializer(companies, many=True).data)


class CompanyVerificationView(BaseRestView):
    permission_classes = [IsPlatformAdmin]

    def patch(self, request, company_id):
        serializer = VerificationReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            company = AdminService.review_verification(
                request.user,
                company_id,
                serializer.validated_data["status"],
                notes=serializer.validated_data["notes"],
                rejection_reason=serializer.validated_data["rejection_reason"],
            )
            return Response(CompanySerializer(company).data)
        except Exception as e:
            return self.handle_service_error(e)


class FeedbackCreateView(BaseRestView):
    """Open to visitors; signed-in accounts are attached to their feedback."""

    permission_classes = [AllowAny]

    def post(self, request):
        try:
            feedback = FeedbackService.submit(request.user, request.data)
            return Response(
                {
                    "message": "Thank you for your feedback",
                    "feedback": FeedbackSerializer(feedback).data,
                },
                status=status.HTTP_201_CREATED,
            )
        except Exception as e:
            return self.handle_service_error(e)


class AdminFeedbackListView(BaseRestView):
    permission_classes = [IsPlatformAdmin]

    def get(self, request):
        try:
            feedback = FeedbackService.list_feedback(
                status=request.query_params.get("status"),
                feedback_type=request.query_params.get("feedback_type"),
            )
            return Response(FeedbackSerializer(feedback, many=True).data)
        except Exception as e:
            return self.handle_service_error(e)


class AdminFeedbackStatsView(BaseRestView):
    permission_classes = [IsPlatformAdmin]

    def get(self, request):
        return Response(FeedbackService.stats())


class AdminFeedbackDetailView(BaseRestView):
    permission_classes = [IsPlatformAdmin]

    def patch(self, request, feedback_id):
        serializer = FeedbackUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            feedback = FeedbackService.respond(
                request.user, feedback_id, serializer.validated_data
            )
            return Response(FeedbackSerializer(feedback).data)
        except Exception as e:
            return self.handle_service_error(e)
