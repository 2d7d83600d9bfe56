from typing import Callable

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.urls import NoReverseMatch, reverse


class LoginRequiredMiddleware:
    """
    Rejects anonymous API requests with a 401 JSON body.

    Bearer tokens and JWT cookies are passed through untouched; DRF
    validates them when the view runs.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response
        self.exempt_urls = []
        self.exempt_url_prefixes = []

        for url_name in getattr(settings, "LOGIN_EXEMPT_URLS", []):
            try:
                # Try to resolve the URL name to an actual path
                self.exempt_urls.append(reverse(url_name).rstrip("/"))
            except NoReverseMatch:
                # If it fails, we assume it's a prefix and add it directly
                self.exempt_url_prefixes.append(url_name)

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if not request.path_info.startswith("/api/"):
            return self.get_response(request)

        if request.path_info.rstrip("/") in self.exempt_urls:
            return self.get_response(request)

        path = request.path_info.lstrip("/")
        if any(path.startswith(prefix) for prefix in self.exempt_url_prefixes):
            return self.get_response(request)

        if request.user.is_authenticated or self._carries_jwt(request):
            return self.get_response(request)

        return JsonResponse(
            {"detail": "Authentication credentials were not provided."},
            status=401,
        )

    def _carries_jwt(self, request: HttpRequest) -> bool:
        if not getattr(settings, "ENABLE_JWT_AUTH", False):
            return False
        if request.headers.get("Authorization", "").startswith("Bearer "):
            return True
        cookie_name = getattr(settings, "SIMPLE_JWT", {}).get(
            "AUTH_COOKIE", "access_token"
        )
        return cookie_name in request.COOKIES
