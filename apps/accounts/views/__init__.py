from .auth_views import (
    ChangePasswordView,
    CurrentUserView,
    LoginView,
    LogoutView,
    RegisterCompanyView,
    RegisterEmployeeView,
)
from .token_view import CustomTokenObtainPairView, CustomTokenRefreshView

__all__ = [
    "ChangePasswordView",
    "CurrentUserView",
    "CustomTokenObtainPairView",
    "CustomTokenRefreshView",
    "LoginView",
    "LogoutView",
    "RegisterCompanyView",
    "RegisterEmployeeView",
]
