from rest_framework.permissions import BasePermission

from apps.accounts.enums import AccountType


class _AccountTypePermission(BasePermission):
    account_type = None
    message = "You do not have permission to perform this action."

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and getattr(user, "account_type", None) == self.account_type
        )


class IsEmployee(_AccountTypePermission):
    account_type = AccountType.EMPLOYEE
    message = "Only employees can perform this action."


class IsCompany(_AccountTypePermission):
    account_type = AccountType.COMPANY
    message = "Only company accounts can perform this action."


class IsPlatformAdmin(_AccountTypePermission):
    account_type = AccountType.ADMIN
    message = "Admin access required."


class IsCompanyMember(BasePermission):
    """
    Company accounts, or employees holding a management role in some company.
    The exact company-level permission is checked by the service layer.
    """

    message = "Company access required."

    def has_permission(self, request, view):
        # Imported here to keep accounts free of a module-level companies import
        from apps.companies.services.membership_service import MembershipService

        user = request.user
        if not (user and user.is_authenticated):
            return False
        if user.account_type == AccountType.COMPANY:
            return True
        if user.account_type == AccountType.EMPLOYEE:
            return MembershipService.managed_memberships(user).exists()
        return False
