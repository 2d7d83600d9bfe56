from django.urls import path

from apps.jobs import views

app_name = "jobs"

urlpatterns = [
    # Employee job board
    path("jobs/search/", views.JobSearchView.as_view(), name="search"),
    path("jobs/my-applications/", views.MyApplicationsView.as_view(), name="my_applications"),
    path("jobs/saved/", views.SavedJobsView.as_view(), name="saved"),
    path(
        "jobs/applications/<uuid:application_id>/withdraw/",
        views.WithdrawApplicationView.as_view(),
        name="withdraw",
    ),
    path("jobs/<uuid:job_id>/", views.JobDetailView.as_view(), name="detail"),
    path("jobs/<uuid:job_id>/apply/", views.ApplyView.as_view(), name="apply"),
    path("jobs/<uuid:job_id>/save/", views.SaveJobView.as_view(), name="save"),
    path("job-alerts/", views.JobAlertListCreateView.as_view(), name="alerts"),
    path(
        "job-alerts/<uuid:alert_id>/",
        views.JobAlertDetailView.as_view(),
        name="alert_detail",
    ),
    path(
        "job-alerts/<uuid:alert_id>/matches/",
        views.JobAlertMatchesView.as_view(),
        name="alert_matches",
    ),
    # Recruiter
    path("company/jobs/", views.CompanyJobListCreateView.as_view(), name="company_jobs"),
    path(
        "company/jobs/<uuid:job_id>/",
        views.CompanyJobDetailView.as_view(),
        name="company_job_detail",
    ),
    path(
        "company/jobs/<uuid:job_id>/applications/",
        views.CompanyJobApplicationsView.as_view(),
        name="company_job_applications",
    ),
    path(
        "company/jobs/<uuid:job_id>/pipeline/",
        views.PipelineListCreateView.as_view(),
        name="pipeline",
    ),
    path(
        "company/pipeline/<uuid:candidate_id>/",
        views.PipelineDetailView.as_view(),
        name="pipeline_detail",
    ),
    path(
        "company/applications/",
        views.CompanyApplicationsView.as_view(),
        name="company_applications",
    ),
    path(
        "company/applications/<uuid:application_id>/",
        views.CompanyApplicationDetailView.as_view(),
        name="company_application_detail",
    ),
    path(
        "company/applications/<uuid:application_id>/employee/",
        views.ApplicantDetailView.as_view(),
        name="applicant_detail",
    ),
]
