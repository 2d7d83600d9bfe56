from django.urls import path

from apps.companies import views

app_name = "companies"

urlpatterns = [
    path("company/context/", views.CompanyContextView.as_view(), name="context"),
    path("company/settings/", views.CompanySettingsView.as_view(), name="settings"),
    path(
        "company/verification/request/",
        views.RequestVerificationView.as_view(),
        name="request_verification",
    ),
    path(
        "company/invitation-code/",
        views.GenerateInvitationCodeView.as_view(),
        name="invitation_code",
    ),
    path("company/employees/", views.CompanyEmployeesView.as_view(), name="employees"),
    path(
        "company/employees/available-for-manager/",
        views.AvailableForManagerView.as_view(),
        name="available_for_manager",
    ),
    path(
        "company/employee/<uuid:employee_id>/",
        views.CompanyEmployeeDetailView.as_view(),
        name="employee_detail",
    ),
    path("company/admin/managers/", views.ManagerListView.as_view(), name="managers"),
    path(
        "company/admin/managers/<uuid:membership_id>/",
        views.ManagerDetailView.as_view(),
        name="manager_detail",
    ),
    path(
        "company/admin/assign-manager/",
        views.AssignManagerView.as_view(),
        name="assign_manager",
    ),
    path(
        "company/admin/assign-reports/",
        views.AssignReportsView.as_view(),
        name="assign_reports",
    ),
    path("employee/join-company/", views.JoinCompanyView.as_view(), name="join"),
    path(
        "employee/leave-company/<uuid:membership_id>/",
        views.LeaveCompanyView.as_view(),
        name="leave",
    ),
    path(
        "employee-companies/",
        views.EmployeeCompaniesView.as_view(),
        name="employee_companies",
    ),
]
