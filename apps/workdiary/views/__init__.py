from .employee_views import (
    WorkEntryDetailView,
    WorkEntryEventsView,
    WorkEntryListCreateView,
)
from .review_views import (
    ApproveWorkEntryView,
    CompanyWorkEntriesView,
    EmployeeWorkEntriesView,
    PendingWorkEntriesView,
    RequestChangesView,
)

__all__ = [
    "ApproveWorkEntryView",
    "CompanyWorkEntriesView",
    "EmployeeWorkEntriesView",
    "PendingWorkEntriesView",
    "RequestChangesView",
    "WorkEntryDetailView",
    "WorkEntryEventsView",
    "WorkEntryListCreateView",
]
