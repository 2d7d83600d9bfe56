"""
Authentication REST views: registration, session login/logout,
current account and password change.
"""

import logging

from django.conf import settings
from django.contrib.auth import login, logout, update_session_auth_hash
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from apps.accounts.enums import AccountType
from apps.accounts.serializers import AccountSerializer, ChangePasswordSerializer
from apps.accounts.services.account_service import AccountService
from apps.accounts.views.token_view import clear_jwt_cookies, set_cookies_for_account
from apps.workflow.views import BaseRestView

logger = logging.getLogger(__name__)


class RegisterEmployeeView(BaseRestView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        try:
            account = AccountService.register_employee(request.data)
            return Response(
                {
                    "message": "Employee account created successfully",
                    "account": AccountSerializer(account).data,
                },
                status=status.HTTP_201_CREATED,
            )
        except Exception as e:
            return self.handle_service_error(e)


class RegisterCompanyView(BaseRestView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        from apps.companies.serializers import CompanySerializer

        try:
            account, company = AccountService.register_company(request.data)
            return Response(
                {
                    "message": "Company account created successfully",
                    "account": AccountSerializer(account).data,
                    "company": CompanySerializer(company).data,
                },
                status=status.HTTP_201_CREATED,
            )
        except Exception as e:
            return self.handle_service_error(e)


class LoginView(BaseRestView):
    """
    Session login for one account type.
    JWT cookies are issued alongside the session when JWT auth is enabled.
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        account_type = request.data.get("account_type") or AccountType.EMPLOYEE
        if account_type not in AccountType.values:
            return Response(
                {"error": "Invalid account type"}, status=status.HTTP_400_BAD_REQUEST
            )

        account = AccountService.authenticate_account(
            request,
            request.data.get("email"),
            request.data.get("password"),
            account_type,
        )
        if account is None:
            return Response(
                {"error": "Invalid email or password"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        login(request, account)
        logger.info(f"{account.account_type} {account.email} logged in")

        response = Response(
            {
                "message": "Login successful",
                "user": AccountSerializer(account).data,
                "account_type": account.account_type,
            }
        )
        if getattr(settings, "ENABLE_JWT_AUTH", False):
            set_cookies_for_account(response, account)
        return response


class LogoutView(BaseRestView):
    permission_classes = [AllowAny]

    def post(self, request):
        if request.user.is_authenticated:
            logger.info(f"{request.user.email} logged out")
        logout(request._request)
        response = Response({"success": True, "message": "Successfully logged out"})
        clear_jwt_cookies(response)
        return response


class CurrentUserView(BaseRestView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(
            {
                "user": AccountSerializer(request.user).data,
                "account_type": request.user.account_type,
            }
        )


class ChangePasswordView(BaseRestView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = ChangePasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            AccountService.change_password(
                request.user,
                serializer.validated_data["old_password"],
                serializer.validated_data["new_password"],
            )
        except Exception as e:
            return self.handle_service_error(e)

        # Keep the current session valid after the hash changes
        update_session_auth_hash(request._request, request.user)
        return Response({"message": "Password changed successfully"})
