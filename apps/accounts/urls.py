from django.urls import path
from rest_framework_simplejwt.views import TokenVerifyView

from apps.accounts.views import (
    ChangePasswordView,
    CurrentUserView,
    CustomTokenObtainPairView,
    CustomTokenRefreshView,
    LoginView,
    LogoutView,
    RegisterCompanyView,
    RegisterEmployeeView,
)

app_name = "accounts"

urlpatterns = [
    path(
        "register/employee/",
        RegisterEmployeeView.as_view(),
        name="register_employee",
    ),
    path(
        "register/company/",
        RegisterCompanyView.as_view(),
        name="register_company",
    ),
    path("login/", LoginView.as_view(), name="login"),
    path("logout/", LogoutView.as_view(), name="logout"),
    path("user/", CurrentUserView.as_view(), name="current_user"),
    path("change-password/", ChangePasswordView.as_view(), name="change_password"),
    # JWT endpoints
    path("token/", CustomTokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("token/refresh/", CustomTokenRefreshView.as_view(), name="token_refresh"),
    path("token/verify/", TokenVerifyView.as_view(), name="token_verify"),
]
