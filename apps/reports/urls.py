from django.urls import path

from apps.reports import views

app_name = "reports"

urlpatterns = [
    path(
        "company/reports/summary/",
        views.SummaryReportView.as_view(),
        name="summary",
    ),
    path(
        "company/reports/time-by-employee/",
        views.TimeByEmployeeReportView.as_view(),
        name="time_by_employee",
    ),
    path(
        "company/reports/daily-activity/",
        views.DailyActivityReportView.as_view(),
        name="daily_activity",
    ),
    path(
        "company/reports/export/",
        views.ExportVerifiedWorkView.as_view(),
        name="export",
    ),
    path(
        "company/manager/dashboard/",
        views.ManagerDashboardView.as_view(),
        name="manager_dashboard",
    ),
]
