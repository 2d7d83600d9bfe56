"""
Company role permissions.

Maps each company role to its permissions and to the console sections
it may open.
"""

from typing import FrozenSet, Optional

from apps.companies.enums import CompanyRole

WORK_APPROVE_ANY = "work.approve.any"
WORK_APPROVE_DIRECT_REPORTS = "work.approve.directReports"
EMPLOYEE_MANAGE = "employee.manage"
MANAGER_MANAGE = "manager.manage"
SETTINGS_READ = "settings.read"
SETTINGS_WRITE = "settings.write"
REPORTS_VIEW = "reports.view"
REPORTS_VIEW_TEAM = "reports.view.team"

ROLE_PERMISSIONS = {
    CompanyRole.COMPANY_ADMIN: frozenset(
        {
            WORK_APPROVE_ANY,
            EMPLOYEE_MANAGE,
            MANAGER_MANAGE,
            SETTINGS_READ,
            SETTINGS_WRITE,
            REPORTS_VIEW,
        }
    ),
    CompanyRole.MANAGER: frozenset(
        {
            WORK_APPROVE_DIRECT_REPORTS,
            REPORTS_VIEW_TEAM,
        }
    ),
    CompanyRole.BRANCH_ADMIN: frozenset(
        {
            WORK_APPROVE_DIRECT_REPORTS,
            REPORTS_VIEW_TEAM,
            SETTINGS_READ,
        }
    ),
}

# Longest prefix first
ROUTE_ROLES = (
    ("/company/admin/", frozenset({CompanyRole.COMPANY_ADMIN})),
    (
        "/company/manager/",
        frozenset({CompanyRole.MANAGER, CompanyRole.COMPANY_ADMIN}),
    ),
    (
        "/company/branch/",
        frozenset({CompanyRole.BRANCH_ADMIN, CompanyRole.COMPANY_ADMIN}),
    ),
)


def get_company_permissions(role: Optional[str]) -> FrozenSet[str]:
    if not role:
        return frozenset()
    return ROLE_PERMISSIONS.get(role, frozenset())


def has_company_permission(role: Optional[str], permission: str) -> bool:
    return permission in get_company_permissions(role)


def can_access_route(role: Optional[str], route: str) -> bool:
    """Unknown routes are denied."""
    if not role or not route:
        return False

    normalized = route if route.endswith("/") else f"{route}/"
    for prefix, roles in ROUTE_ROLES:
        if normalized.startswith(prefix):
            return role in roles
    return False
