from django.urls import path

from apps.administration import views

app_name = "administration"

urlpatterns = [
    path(
        "admin/auth/create-first/",
        views.CreateFirstAdminView.as_view(),
        name="create_first_admin",
    ),
    path("admin/auth/login/", views.AdminLoginView.as_view(), name="admin_login"),
    path("admin/stats/", views.AdminStatsView.as_view(), name="stats"),
    path("admin/employees/", views.AdminEmployeeListView.as_view(), name="employees"),
    path(
        "admin/employees/<uuid:employee_id>/toggle-status/",
        views.ToggleEmployeeStatusView.as_view(),
        name="toggle_employee",
    ),
    path("admin/companies/", views.AdminCompanyListView.as_view(), name="companies"),
    path(
        "admin/companies/<uuid:company_id>/toggle-status/",
        views.ToggleCompanyStatusView.as_view(),
        name="toggle_company",
    ),
    path(
        "admin/companies/<uuid:company_id>/verification/",
        views.CompanyVerificationView.as_view(),
        name="company_verification",
    ),
    path(
        "admin/pending-verifications/",
        views.PendingVerificationsView.as_view(),
        name="pending_verifications",
    ),
    path("admin/feedback/", views.AdminFeedbackListView.as_view(), name="feedback"),
    path(
        "admin/feedback/stats/",
        views.AdminFeedbackStatsView.as_view(),
        name="feedback_stats",
    ),
    path(
        "admin/feedback/<uuid:feedback_id>/",
        views.AdminFeedbackDetailView.as_view(),
        name="feedback_detail",
    ),
    path("feedback/", views.FeedbackCreateView.as_view(), name="feedback_create"),
]
