import uuid

from django.conf import settings
from django.db import models
from django.db.models import Q

from apps.companies.enums import MembershipRole, MembershipStatus


class CompanyMembership(models.Model):
    """
    An employee's tenure at a company.

    ``manager`` points at the membership of the employee's direct manager
    in the same company.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey(
        "companies.Company", on_delete=models.CASCADE, related_name="memberships"
    )
    employee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="memberships",
    )
    role = models.CharField(
        max_length=20,
        choices=MembershipRole.choices,
        default=MembershipRole.EMPLOYEE,
    )
    position = models.CharField(max_length=150, blank=True)
    manager = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="direct_reports",
    )
    status = models.CharField(
        max_length=10,
        choices=MembershipStatus.choices,
        default=MembershipStatus.ACTIVE,
    )
    joined_at = models.DateTimeField(auto_now_add=True)
    left_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "companies_membership"
        ordering = ["-joined_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["company", "employee"],
                condition=Q(status=MembershipStatus.ACTIVE),
                name="unique_active_membership",
            )
        ]

    def __str__(self):
        return f"{self.employee} @ {self.company} ({self.role})"

    @property
    def is_active(self):
        return self.status == MembershipStatus.ACTIVE

    @property
    def is_manager(self):
        return self.role in (MembershipRole.MANAGER, MembershipRole.BRANCH_ADMIN)
