"""
Client reporting over a company's work entries.

Company admins report on the whole company (``reports.view``); managers and
branch admins on their direct reports (``reports.view.team``).
"""

import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Tuple

from django.db.models import Count, Q, QuerySet, Sum
from django.utils import timezone

from apps.companies.enums import MembershipStatus
from apps.companies.models import CompanyMembership
from apps.companies.roles import REPORTS_VIEW, REPORTS_VIEW_TEAM
from apps.companies.services.company_service import CompanyContext
from apps.companies.services.membership_service import MembershipService
from apps.workdiary.enums import ApprovalStatus
from apps.workdiary.services.review_service import ReviewService
from apps.workflow.helpers import decimal_to_float

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
RECENT_PENDING_LIMIT = 5

EXPORT_HEADER = [
    "Employee Code",
    "Employee Name",
    "Title",
    "Start Date",
    "End Date",
    "Hours",
    "Billable",
    "Approved At",
    "Reviewer",
]

FORMULA_PREFIXES = ("=", "+", "-", "@", "\t", "\r")


def csv_safe(value: str) -> str:
    """Quote user text that a spreadsheet would evaluate as a formula."""
    if value and value.startswith(FORMULA_PREFIXES):
        return "'" + value
    return value


class ReportService:
    @staticmethod
    def _scoped_entries(context: CompanyContext) -> QuerySet:
        if not (
            context.has_permission(REPORTS_VIEW)
            or context.has_permission(REPORTS_VIEW_TEAM)
        ):
            logger.warning(f"{context.actor.email} ({context.role}) denied reports")
            raise PermissionError("You do not have permission to view reports")
        return ReviewService.visible_entries(context)

    @staticmethod
    def _entries_in_range(context: CompanyContext, start: date, end: date) -> QuerySet:
        return ReportService._scoped_entries(context).filter(
            start_date__gte=start, start_date__lte=end
        )

    @staticmethod
    def summary(context: CompanyContext, start: date, end: date) -> Dict[str, Any]:
        entries = ReportService._entries_in_range(context, start, end)
        totals = entries.aggregate(
            total_entries=Count("id"),
            approved_entries=Count("id", filter=Q(status=ApprovalStatus.APPROVED)),
            pending_entries=Count("id", filter=Q(status=ApprovalStatus.PENDING_REVIEW)),
            needs_changes_entries=Count(
                "id", filter=Q(status=ApprovalStatus.NEEDS_CHANGES)
            ),
            total_hours=Sum("hours"),
            approved_hours=Sum("hours", filter=Q(status=ApprovalStatus.APPROVED)),
            pending_hours=Sum("hours", filter=Q(status=ApprovalStatus.PENDING_REVIEW)),
            billable_hours=Sum("hours", filter=Q(billable=True)),
            active_employees=Count("employee", distinct=True),
        )

        reviewed = totals["approved_entries"] + totals["needs_changes_entries"]
        approval_rate = (
            round(totals["approved_entries"] / reviewed * 100, 1) if reviewed else 0
        )

        return {
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
            "total_entries": totals["total_entries"],
            "approved_entries": totals["approved_entries"],
            "pending_entries": totals["pending_entries"],
            "needs_changes_entries": totals["needs_changes_entries"],
            "total_hours": decimal_to_float(totals["total_hours"] or ZERO),
            "approved_hours": decimal_to_float(totals["approved_hours"] or ZERO),
            "pending_hours": decimal_to_float(totals["pending_hours"] or ZERO),
            "billable_hours": decimal_to_float(totals["billable_hours"] or ZERO),
            "approval_rate": approval_rate,
            "active_employees": totals["active_employees"],
        }

    @staticmethod
    def time_by_employee(
        context: CompanyContext, start: date, end: date
    ) -> List[Dict[str, Any]]:
        rows = (
            ReportService._entries_in_range(context, start, end)
            .values(
                "employee_id",
                "employee__first_name",
                "employee__last_name",
                "employee__employee_code",
            )
            .annotate(
                total_hours=Sum("hours"),
                approved_hours=Sum("hours", filter=Q(status=ApprovalStatus.APPROVED)),
                billable_hours=Sum("hours", filter=Q(billable=True)),
                entry_count=Count("id"),
            )
            .order_by("-total_hours", "employee__first_name")
        )

        return [
            {
                "employee_id": str(row["employee_id"]),
                "employee_name": f"{row['employee__first_name']} "
                f"{row['employee__last_name']}".strip(),
                "employee_code": row["employee__employee_code"],
                "total_hours": decimal_to_float(row["total_hours"] or ZERO),
                "approved_hours": decimal_to_float(row["approved_hours"] or ZERO),
                "billable_hours": decimal_to_float(row["billable_hours"] or ZERO),
                "entry_count": row["entry_count"],
            }
            for row in rows
        ]

    @staticmethod
    def daily_activity(
        context: CompanyContext, start: date, end: date
    ) -> List[Dict[str, Any]]:
        """One row per day of the range; entries count on their start date."""
        per_day = {
            row["start_date"]: row
            for row in ReportService._entries_in_range(context, start, end)
            .values("start_date")
            .annotate(hours=Sum("hours"), entry_count=Count("id"))
            .order_by("start_date")
        }

        rows = []
        day = start
        while day <= end:
            row = per_day.get(day)
            rows.append(
                {
                    "date": day.isoformat(),
                    "hours": decimal_to_float(row["hours"]) if row else 0.0,
                    "entry_count": row["entry_count"] if row else 0,
                }
            )
            day += timedelta(days=1)
        return rows

    @staticmethod
    def export_rows(
        context: CompanyContext, start: date, end: date
    ) -> Tuple[List[str], Iterator[List[Any]]]:
        """Header and rows of approved entries for CSV export."""
        entries = (
            ReportService._entries_in_range(context, start, end)
            .filter(status=ApprovalStatus.APPROVED)
            .select_related("employee", "reviewed_by")
            .order_by("start_date", "employee__first_name")
        )

        def rows():
            for entry in entries.iterator():
                yield [
                    csv_safe(entry.employee.employee_code or ""),
                    csv_safe(entry.employee.get_full_name()),
                    csv_safe(entry.title),
                    entry.start_date.isoformat(),
                    entry.end_date.isoformat() if entry.end_date else "",
                    f"{entry.hours:.2f}",
                    "Yes" if entry.billable else "No",
                    entry.approved_at.isoformat() if entry.approved_at else "",
                    csv_safe(entry.reviewed_by.get_full_name()) if entry.reviewed_by_id else "",
                ]

        logger.info(
            f"{context.actor.email} exported approved entries for "
            f"{context.company.id} ({start} to {end})"
        )
        return EXPORT_HEADER, rows()

    @staticmethod
    def manager_dashboard(context: CompanyContext) -> Dict[str, Any]:
        entries = ReportService._scoped_entries(context)

        visible = MembershipService.visible_employee_ids(context)
        if visible is None:
            team_size = CompanyMembership.objects.filter(
                company=context.company, status=MembershipStatus.ACTIVE
            ).count()
        else:
            team_size = len(visible)

        today = timezone.localdate()
        week_start = timezone.make_aware(
            datetime.combine(today - timedelta(days=today.weekday()), time.min)
        )

        pending = entries.filter(status=ApprovalStatus.PENDING_REVIEW)
        recent_pending = pending.order_by("-created_at")[:RECENT_PENDING_LIMIT]

        return {
            "role": context.role,
            "team_size": team_size,
            "pending_count": pending.count(),
            "approved_this_week": entries.filter(
                status=ApprovalStatus.APPROVED, approved_at__gte=week_start
            ).count(),
            "recent_pending": list(recent_pending),
        }
