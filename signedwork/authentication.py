import logging

from django.conf import settings
from rest_framework import exceptions
from rest_framework_simplejwt.authentication import (
    JWTAuthentication as BaseJWTAuthentication,
)
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError

logger = logging.getLogger(__name__)


class JWTAuthentication(BaseJWTAuthentication):
    """
    Accepts a Bearer token in the Authorization header, or the access token
    cookie set at login.

    A bad or expired token yields no account rather than an error, so
    session authentication still gets its turn.
    """

    def authenticate(self, request):
        if not getattr(settings, "ENABLE_JWT_AUTH", False):
            return None

        try:
            result = super().authenticate(request) or self._authenticate_cookie(
                request
            )
        except (InvalidToken, TokenError) as e:
            logger.warning(f"Ignoring unusable JWT: {e}")
            return None

        if result is None:
            return None

        account, token = result
        if not account.is_active:
            logger.warning(f"JWT presented for deactivated account {account.pk}")
            raise exceptions.AuthenticationFailed(
                "Account is deactivated.", code="user_inactive"
            )
        return account, token

    def _authenticate_cookie(self, request):
        cookie_name = getattr(settings, "SIMPLE_JWT", {}).get(
            "AUTH_COOKIE", "access_token"
        )
        raw_token = request.COOKIES.get(cookie_name)
        if not raw_token:
            return None
        validated_token = self.get_validated_token(raw_token.encode("utf-8"))
        return self.get_user(validated_token), validated_token
