from .company_views import (
    CompanyContextView,
    CompanyEmployeeDetailView,
    CompanySettingsView,
    RequestVerificationView,
)
from .membership_views import (
    AssignManagerView,
    AssignReportsView,
    AvailableForManagerView,
    CompanyEmployeesView,
    EmployeeCompaniesView,
    GenerateInvitationCodeView,
    JoinCompanyView,
    LeaveCompanyView,
    ManagerDetailView,
    ManagerListView,
)

__all__ = [
    "AssignManagerView",
    "AssignReportsView",
    "AvailableForManagerView",
    "CompanyContextView",
    "CompanyEmployeeDetailView",
    "CompanyEmployeesView",
    "CompanySettingsView",
    "EmployeeCompaniesView",
    "GenerateInvitationCodeView",
    "JoinCompanyView",
    "LeaveCompanyView",
    "ManagerDetailView",
    "ManagerListView",
    "RequestVerificationView",
]
