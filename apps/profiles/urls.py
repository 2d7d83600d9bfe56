from django.urls import path

from apps.profiles import views
from apps.profiles.services.profile_service import SECTIONS

app_name = "profiles"

urlpatterns = [
    path("employee/profile/", views.OwnProfileView.as_view(), name="own_profile"),
    path(
        "employee/profile/<uuid:employee_id>/",
        views.EmployeeProfileView.as_view(),
        name="employee_profile",
    ),
    path(
        "company/employee/<uuid:employee_id>/profile/",
        views.CompanyEmployeeProfileView.as_view(),
        name="company_employee_profile",
    ),
    path(
        "company/employee-experience/<uuid:employee_id>/",
        views.CompanyEmployeeSectionView.as_view(kind="experience"),
        name="company_employee_experience",
    ),
    path(
        "company/employee-education/<uuid:employee_id>/",
        views.CompanyEmployeeSectionView.as_view(kind="education"),
        name="company_employee_education",
    ),
    path(
        "company/employee-certifications/<uuid:employee_id>/",
        views.CompanyEmployeeSectionView.as_view(kind="certification"),
        name="company_employee_certifications",
    ),
]

for kind in SECTIONS:
    urlpatterns += [
        path(
            f"employee/{kind}/",
            views.ProfileItemCreateView.as_view(),
            {"kind": kind},
            name=f"{kind}_create",
        ),
        path(
            f"employee/{kind}/<uuid:item_id>/",
            views.ProfileItemDetailView.as_view(),
            {"kind": kind},
            name=f"{kind}_detail",
        ),
    ]
