from datetime import date
from decimal import Decimal
from unittest.mock import patch

from django.db.models.query import QuerySet
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.workdiary.enums import ApprovalStatus, WorkEntryEventType
from apps.workdiary.models import WorkEntry, WorkEntryEvent
from apps.workflow.models import AppError
from apps.workflow.testing import add_member, make_company, make_employee, make_work_entry


class WorkEntryCreateTests(APITestCase):
    url = reverse("workdiary:entries")

    def setUp(self):
        self.company = make_company()
        self.employee = make_employee()
        add_member(self.company, self.employee)
        self.client.force_login(self.employee)

    def payload(self, **overrides):
        data = {
            "company": str(self.company.id),
            "title": "Site survey",
            "start_date": "2024-05-01",
            "hours": "7.5",
        }
        data.update(overrides)
        return data

    def test_creates_pending_entry_with_event(self):
        response = self.client.post(self.url, self.payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        entry = WorkEntry.objects.get()
        self.assertEqual(entry.status, ApprovalStatus.PENDING_REVIEW)
        self.assertEqual(entry.hours, Decimal("7.50"))
        self.assertEqual(response.data["hours"], 7.5)
        event = WorkEntryEvent.objects.get(entry=entry)
        self.assertEqual(event.event_type, WorkEntryEventType.SUBMITTED)

    def test_requires_active_membership(self):
        other = make_company(email="other@example.com", name="Other")

        response = self.client.post(
            self.url, self.payload(company=str(other.id)), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["error"], "You are not an active member of this company"
        )

    def test_validation_messages(self):
        cases = [
            ({"title": ""}, "Title is required"),
            ({"start_date": ""}, "Start date is required"),
            ({"hours": "abc"}, "Hours must be a number"),
            ({"hours": "0"}, "Hours must be greater than 0"),
            ({"end_date": "2024-04-30"}, "End date cannot be before start date"),
            ({"hours": "25"}, "Hours cannot exceed 24 for this date range"),
            ({"priority": "someday"}, "Invalid priority"),
            ({"start_date": "01/05/2024"}, "Invalid start_date format. Use YYYY-MM-DD"),
            ({"title": 123}, "Title must be text"),
            ({"description": ["notes"]}, "Description must be text"),
        ]
        for overrides, message in cases:
            with self.subTest(overrides=overrides):
                response = self.client.post(self.url, self.payload(**overrides), format="json")
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data["error"], message)
        self.assertFalse(WorkEntry.objects.exists())

    def test_multi_day_range_raises_hour_cap(self):
        response = self.client.post(
            self.url,
            self.payload(end_date="2024-05-03", hours="60"),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_company_accounts_cannot_log_work(self):
        self.client.force_login(self.company.account)

        response = self.client.post(self.url, self.payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class WorkEntryEditTests(APITestCase):
    def setUp(self):
        self.company = make_company()
        self.employee = make_employee()
        add_member(self.company, self.employee)
        self.client.force_login(self.employee)

    def test_list_filters_by_status(self):
        make_work_entry(self.employee, self.company)
        make_work_entry(self.employee, self.company, status=ApprovalStatus.APPROVED)

        response = self.client.get(reverse("workdiary:entries"), {"status": "approved"})

        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["status"], "approved")

    def test_editing_returns_entry_to_review(self):
        entry = make_work_entry(
            self.employee,
            self.company,
            status=ApprovalStatus.NEEDS_CHANGES,
            company_feedback="Split this by day",
        )

        response = self.client.patch(
            reverse("workdiary:entry_detail", args=[entry.id]),
            {"hours": "4"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        entry.refresh_from_db()
        self.assertEqual(entry.status, ApprovalStatus.PENDING_REVIEW)
        self.assertEqual(entry.company_feedback, "")
        self.assertEqual(entry.hours, Decimal("4.00"))
        self.assertTrue(
            entry.events.filter(
                event_type=WorkEntryEventType.UPDATED, from_status="needs_changes"
            ).exists()
        )

    def test_partial_edit_checks_dates_against_stored_values(self):
        entry = make_work_entry(self.employee, self.company, start_date=date(2024, 3, 4))

        response = self.client.patch(
            reverse("workdiary:entry_detail", args=[entry.id]),
            {"end_date": "2024-03-01"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_approved_entry_is_locked(self):
        entry = make_work_entry(self.employee, self.company, status=ApprovalStatus.APPROVED)
        url = reverse("workdiary:entry_detail", args=[entry.id])

        edit = self.client.patch(url, {"title": "Rewrite"}, format="json")
        delete = self.client.delete(url)

        self.assertEqual(edit.status_code, status.HTTP_403_FORBIDDEN)
        self.assertIn("Cannot edit approved work entry", edit.data["error"])
        self.assertEqual(delete.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(WorkEntry.objects.filter(id=entry.id).exists())

    def test_delete_pending_entry(self):
        entry = make_work_entry(self.employee, self.company)

        response = self.client.delete(reverse("workdiary:entry_detail", args=[entry.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(WorkEntry.objects.filter(id=entry.id).exists())

    def test_delete_locks_the_row_before_checking_approval(self):
        entry = make_work_entry(self.employee, self.company)
        original = QuerySet.select_for_update

        with patch.object(
            QuerySet, "select_for_update", autospec=True, side_effect=original
        ) as select_for_update:
            self.client.delete(reverse("workdiary:entry_detail", args=[entry.id]))

        select_for_update.assert_called()
        self.assertFalse(WorkEntry.objects.filter(id=entry.id).exists())

    def test_non_text_title_on_edit_is_a_bad_request(self):
        entry = make_work_entry(self.employee, self.company)

        response = self.client.patch(
            reverse("workdiary:entry_detail", args=[entry.id]), {"title": 42}, format="json"
        )

        entry.refresh_from_db()
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Title must be text")
        self.assertEqual(entry.title, "Wired the east wing")
        self.assertFalse(AppError.objects.exists())

    def test_cannot_touch_someone_elses_entry(self):
        other = make_employee(email="other@example.com")
        entry = make_work_entry(other, self.company)

        response = self.client.get(reverse("workdiary:entry_detail", args=[entry.id]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
