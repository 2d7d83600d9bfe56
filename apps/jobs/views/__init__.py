from .company_views import (
    ApplicantDetailView,
    CompanyApplicationDetailView,
    CompanyApplicationsView,
    CompanyJobApplicationsView,
    CompanyJobDetailView,
    CompanyJobListCreateView,
    PipelineDetailView,
    PipelineListCreateView,
)
from .employee_views import (
    ApplyView,
    JobAlertDetailView,
    JobAlertListCreateView,
    JobAlertMatchesView,
    JobDetailView,
    JobSearchView,
    MyApplicationsView,
    SavedJobsView,
    SaveJobView,
    WithdrawApplicationView,
)

__all__ = [
    "ApplicantDetailView",
    "ApplyView",
    "CompanyApplicationDetailView",
    "CompanyApplicationsView",
    "CompanyJobApplicationsView",
    "CompanyJobDetailView",
    "CompanyJobListCreateView",
    "JobAlertDetailView",
    "JobAlertListCreateView",
    "JobAlertMatchesView",
    "JobDetailView",
    "JobSearchView",
    "MyApplicationsView",
    "PipelineDetailView",
    "PipelineListCreateView",
    "SavedJobsView",
    "SaveJobView",
    "WithdrawApplicationView",
]
