from django.db import models


class AccountType(models.TextChoices):
    """
    Kinds of login on the platform
    """

    EMPLOYEE = "employee", "Employee"
    COMPANY = "company", "Company"
    ADMIN = "admin", "Platform Admin"
