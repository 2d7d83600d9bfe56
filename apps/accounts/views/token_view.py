import logging
import os

from django.conf import settings
from django.urls import reverse
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from apps.accounts.serializers import CustomTokenObtainPairSerializer

logger = logging.getLogger(__name__)


def _cookie_samesite(simple_jwt_settings: dict) -> str:
    env_samesite = os.getenv("COOKIE_SAMESITE")
    if env_samesite:
        return env_samesite.capitalize()
    return simple_jwt_settings.get("AUTH_COOKIE_SAMESITE", "Lax")


def set_jwt_cookies(response: Response, data: dict) -> None:
    """
    Move ``access``/``refresh`` out of the body and into httpOnly cookies.
    """
    simple_jwt_settings = getattr(settings, "SIMPLE_JWT", {})
    samesite_value = _cookie_samesite(simple_jwt_settings)

    if "access" in data:
        response.set_cookie(
            simple_jwt_settings.get("AUTH_COOKIE", "access_token"),
            data["access"],
            max_age=simple_jwt_settings.get("ACCESS_TOKEN_LIFETIME").total_seconds(),
            httponly=simple_jwt_settings.get("AUTH_COOKIE_HTTP_ONLY", True),
            secure=simple_jwt_settings.get("AUTH_COOKIE_SECURE", True),
            samesite=samesite_value,
            domain=simple_jwt_settings.get("AUTH_COOKIE_DOMAIN"),
        )
        del data["access"]

    if "refresh" in data:
        response.set_cookie(
            simple_jwt_settings.get("REFRESH_COOKIE", "refresh_token"),
            data["refresh"],
            max_age=simple_jwt_settings.get("REFRESH_TOKEN_LIFETIME").total_seconds(),
            httponly=simple_jwt_settings.get("AUTH_COOKIE_HTTP_ONLY", True),
            secure=simple_jwt_settings.get("AUTH_COOKIE_SECURE", True),
            samesite=samesite_value,
            domain=simple_jwt_settings.get("AUTH_COOKIE_DOMAIN"),
        )
        del data["refresh"]


def set_cookies_for_account(response: Response, account) -> None:
    refresh = RefreshToken.for_user(account)
    set_jwt_cookies(
        response, {"access": str(refresh.access_token), "refresh": str(refresh)}
    )


def clear_jwt_cookies(response: Response) -> None:
    simple_jwt_settings = getattr(settings, "SIMPLE_JWT", {})
    for cookie_name in (
        simple_jwt_settings.get("AUTH_COOKIE", "access_token"),
        simple_jwt_settings.get("REFRESH_COOKIE", "refresh_token"),
    ):
        response.delete_cookie(
            cookie_name,
            domain=simple_jwt_settings.get("AUTH_COOKIE_DOMAIN"),
            samesite=simple_jwt_settings.get("AUTH_COOKIE_SAMESITE", "Lax"),
        )


class CustomTokenObtainPairView(TokenObtainPairView):
    """
    Token obtain view that flags accounts needing a password reset
    and sets JWT tokens as httpOnly cookies
    """

    serializer_class = CustomTokenObtainPairSerializer
    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        username = request.data.get("username")
        logger.info(f"Token requested for {username}")

        serializer = self.get_serializer(data=request.data)
        try:
            serializer.is_valid(raise_exception=True)
        except TokenError as e:
            raise InvalidToken(e.args[0])

        data = dict(serializer.validated_data)
        account = serializer.user
        if account.password_needs_reset:
            logger.info(f"Account {account.email} needs password reset")
            data["password_needs_reset"] = True
            data["password_reset_url"] = request.build_absolute_uri(
                reverse("accounts:change_password")
            )

        response = Response(data, status=status.HTTP_200_OK)
        if getattr(settings, "ENABLE_JWT_AUTH", False):
            set_jwt_cookies(response, response.data)

        return response


class CustomTokenRefreshView(TokenRefreshView):
    """
    Token refresh view that reads the refresh token from its httpOnly cookie
    """

    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        simple_jwt_settings = getattr(settings, "SIMPLE_JWT", {})
        refresh_cookie_name = simple_jwt_settings.get("REFRESH_COOKIE", "refresh_token")

        if "refresh" not in request.data and refresh_cookie_name in request.COOKIES:
            request_data = request.data.copy()
            request_data["refresh"] = request.COOKIES[refresh_cookie_name]
            request._full_data = request_data

        response = super().post(request, *args, **kwargs)

        if response.status_code == status.HTTP_200_OK and getattr(
            settings, "ENABLE_JWT_AUTH", False
        ):
            set_jwt_cookies(response, response.data)

        return response
