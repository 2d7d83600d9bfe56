import csv
import io
from datetime import date
from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.companies.enums import MembershipRole
from apps.reports.services.report_service import EXPORT_HEADER
from apps.workdiary.enums import ApprovalStatus
from apps.workflow.testing import add_member, make_company, make_employee, make_work_entry

RANGE = {"start_date": "2024-03-01", "end_date": "2024-03-07"}


class ReportTestCase(APITestCase):
    def setUp(self):
        self.company = make_company()
        self.manager = make_employee(email="boss@example.com", first_name="Meera")
        self.report = make_employee(email="report@example.com", first_name="Ravi")
        self.peer = make_employee(email="peer@example.com", first_name="Sana")
        self.manager_m = add_member(self.company, self.manager, role=MembershipRole.MANAGER)
        add_member(self.company, self.report, manager=self.manager_m)
        add_member(self.company, self.peer)

        make_work_entry(
            self.report,
            self.company,
            status=ApprovalStatus.APPROVED,
            start_date=date(2024, 3, 4),
            hours=Decimal("8"),
            reviewed_by=self.manager,
        )
        make_work_entry(
            self.report,
            self.company,
            status=ApprovalStatus.NEEDS_CHANGES,
            start_date=date(2024, 3, 5),
            hours=Decimal("2"),
        )
        make_work_entry(
            self.peer,
            self.company,
            start_date=date(2024, 3, 4),
            hours=Decimal("4"),
            billable=False,
        )
        # outside the range
        make_work_entry(self.peer, self.company, start_date=date(2024, 2, 1))


class SummaryReportTests(ReportTestCase):
    def test_company_summary(self):
        self.client.force_login(self.company.account)

        response = self.client.get(reverse("reports:summary"), RANGE)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["total_entries"], 3)
        self.assertEqual(response.data["approved_entries"], 1)
        self.assertEqual(response.data["total_hours"], 14.0)
        self.assertEqual(response.data["approved_hours"], 8.0)
        self.assertEqual(response.data["billable_hours"], 10.0)
        self.assertEqual(response.data["approval_rate"], 50.0)
        self.assertEqual(response.data["active_employees"], 2)

    def test_manager_summary_covers_team(self):
        self.client.force_login(self.manager)

        response = self.client.get(reverse("reports:summary"), RANGE)

        self.assertEqual(response.data["total_entries"], 2)
        self.assertEqual(response.data["total_hours"], 10.0)

    def test_end_before_start(self):
        self.client.force_login(self.company.account)

        response = self.client.get(
            reverse("reports:summary"),
            {"start_date": "2024-03-07", "end_date": "2024-03-01"},
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_plain_employee_refused(self):
        self.client.force_login(self.peer)

        response = self.client.get(reverse("reports:summary"), RANGE)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class BreakdownReportTests(ReportTestCase):
    def test_time_by_employee(self):
        self.client.force_login(self.company.account)

        response = self.client.get(reverse("reports:time_by_employee"), RANGE)

        employees = response.data["employees"]
        self.assertEqual([row["employee_name"] for row in employees], ["Ravi Rao", "Sana Rao"])
        self.assertEqual(employees[0]["total_hours"], 10.0)
        self.assertEqual(employees[0]["approved_hours"], 8.0)
        self.assertEqual(employees[1]["billable_hours"], 0.0)

    def test_daily_activity_fills_empty_days(self):
        self.client.force_login(self.company.account)

        response = self.client.get(reverse("reports:daily_activity"), RANGE)

        days = response.data["days"]
        self.assertEqual(len(days), 7)
        by_date = {day["date"]: day for day in days}
        self.assertEqual(by_date["2024-03-04"]["hours"], 12.0)
        self.assertEqual(by_date["2024-03-04"]["entry_count"], 2)
        self.assertEqual(by_date["2024-03-01"]["entry_count"], 0)

    def test_daily_activity_refuses_unbounded_ranges(self):
        self.client.force_login(self.company.account)

        response = self.client.get(
            reverse("reports:daily_activity"),
            {"start_date": "1900-01-01", "end_date": "2100-01-01"},
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Date range cannot exceed 366 days")

    def test_export_contains_approved_entries_only(self):
        self.client.force_login(self.company.account)

        response = self.client.get(reverse("reports:export"), RANGE)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response["Content-Type"], "text/csv")
        self.assertIn("verified_work_20240301_20240307.csv", response["Content-Disposition"])
        rows = list(csv.reader(io.StringIO(response.content.decode())))
        self.assertEqual(rows[0], EXPORT_HEADER)
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[1][1], "Ravi Rao")
        self.assertEqual(rows[1][5], "8.00")
        self.assertEqual(rows[1][8], "Meera Rao")

    def test_export_quotes_formula_text(self):
        make_work_entry(
            self.peer,
            self.company,
            status=ApprovalStatus.APPROVED,
            title='=HYPERLINK("http://example.com")',
            start_date=date(2024, 3, 6),
        )
        self.client.force_login(self.company.account)

        response = self.client.get(reverse("reports:export"), RANGE)

        rows = list(csv.reader(io.StringIO(response.content.decode())))
        self.assertEqual(rows[2][2], '\'=HYPERLINK("http://example.com")')
        self.assertEqual(rows[1][2], "Wired the east wing")


class ManagerDashboardTests(ReportTestCase):
    def test_manager_dashboard(self):
        make_work_entry(self.report, self.company)
        self.client.force_login(self.manager)

        response = self.client.get(reverse("reports:manager_dashboard"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["role"], "MANAGER")
        self.assertEqual(response.data["team_size"], 1)
        self.assertEqual(response.data["pending_count"], 1)
        self.assertEqual(len(response.data["recent_pending"]), 1)

    def test_company_dashboard_counts_whole_company(self):
        self.client.force_login(self.company.account)

        response = self.client.get(reverse("reports:manager_dashboard"))

        self.assertEqual(response.data["team_size"], 3)
        self.assertEqual(response.data["pending_count"], 2)
