from django.db import models


class RegistrationType(models.TextChoices):
    PAN = "PAN", "Permanent Account Number"
    CIN = "CIN", "Corporate Identification Number"


class VerificationStatus(models.TextChoices):
    UNVERIFIED = "unverified", "Unverified"
    PENDING = "pending", "Pending Review"
    VERIFIED = "verified", "Verified"
    REJECTED = "rejected", "Rejected"


class CompanySize(models.TextChoices):
    MICRO = "1-10", "1-10 employees"
    SMALL = "11-50", "11-50 employees"
    MEDIUM = "51-200", "51-200 employees"
    LARGE = "201-1000", "201-1000 employees"
    ENTERPRISE = "1000+", "1000+ employees"


class CompanyRole(models.TextChoices):
    """
    Roles that carry company permissions.
    COMPANY_ADMIN is held by the company account itself.
    """

    COMPANY_ADMIN = "COMPANY_ADMIN", "Company Admin"
    MANAGER = "MANAGER", "Manager"
    BRANCH_ADMIN = "BRANCH_ADMIN", "Branch Admin"


class MembershipRole(models.TextChoices):
    EMPLOYEE = "EMPLOYEE", "Employee"
    MANAGER = "MANAGER", "Manager"
    BRANCH_ADMIN = "BRANCH_ADMIN", "Branch Admin"


class MembershipStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    LEFT = "left", "Left"
