from django.urls import path

from apps.workdiary import views

app_name = "workdiary"

urlpatterns = [
    path("work-diary/", views.WorkEntryListCreateView.as_view(), name="entries"),
    path(
        "work-diary/<uuid:entry_id>/",
        views.WorkEntryDetailView.as_view(),
        name="entry_detail",
    ),
    path(
        "work-diary/<uuid:entry_id>/events/",
        views.WorkEntryEventsView.as_view(),
        name="entry_events",
    ),
    path(
        "company/work-entries/",
        views.CompanyWorkEntriesView.as_view(),
        name="company_entries",
    ),
    path(
        "company/work-entries/pending/",
        views.PendingWorkEntriesView.as_view(),
        name="pending_entries",
    ),
    path(
        "company/work-entries/<uuid:entry_id>/approve/",
        views.ApproveWorkEntryView.as_view(),
        name="approve_entry",
    ),
    path(
        "company/work-entries/<uuid:entry_id>/request-changes/",
        views.RequestChangesView.as_view(),
        name="request_changes",
    ),
    path(
        "company/employee-work-entries/<uuid:employee_id>/",
        views.EmployeeWorkEntriesView.as_view(),
        name="employee_entries",
    ),
]
