"""
URL configuration for signedwork.

Every API lives under /api/. Authentication endpoints are grouped under
/api/auth/; the remaining apps declare their own resource paths.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("api/", include("apps.administration.urls")),
    path("api/", include("apps.companies.urls")),
    path("api/", include("apps.jobs.urls")),
    path("api/", include("apps.profiles.urls")),
    path("api/", include("apps.reports.urls")),
    path("api/", include("apps.workdiary.urls")),
    path("api/auth/", include("apps.accounts.urls")),
    path("django-admin/", admin.site.urls),
]
