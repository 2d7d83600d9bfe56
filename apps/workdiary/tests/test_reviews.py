from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.companies.enums import MembershipRole
from apps.workdiary.enums import ApprovalStatus
from apps.workflow.models import AppError
from apps.workflow.testing import add_member, make_company, make_employee, make_work_entry


class ReviewTestCase(APITestCase):
    def setUp(self):
        self.company = make_company()
        self.manager = make_employee(email="boss@example.com", first_name="Meera")
        self.report = make_employee(email="report@example.com", first_name="Ravi")
        self.peer = make_employee(email="peer@example.com", first_name="Sana")
        self.manager_m = add_member(self.company, self.manager, role=MembershipRole.MANAGER)
        add_member(self.company, self.report, manager=self.manager_m)
        add_member(self.company, self.peer)

    def approve(self, entry, **data):
        return self.client.post(
            reverse("workdiary:approve_entry", args=[entry.id]), data, format="json"
        )


class ApproveTests(ReviewTestCase):
    def test_company_admin_approves_with_rating(self):
        entry = make_work_entry(self.peer, self.company)
        self.client.force_login(self.company.account)

        response = self.approve(entry, rating=5, feedback="Great work")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        entry.refresh_from_db()
        self.assertEqual(entry.status, ApprovalStatus.APPROVED)
        self.assertEqual(entry.rating, 5)
        self.assertEqual(entry.reviewed_by, self.company.account)
        self.assertIsNotNone(entry.approved_at)
        self.assertTrue(entry.is_locked)

    def test_manager_approves_direct_report(self):
        entry = make_work_entry(self.report, self.company)
        self.client.force_login(self.manager)

        response = self.approve(entry)

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_manager_cannot_approve_outside_team(self):
        entry = make_work_entry(self.peer, self.company)
        self.client.force_login(self.manager)

        response = self.approve(entry)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        entry.refresh_from_db()
        self.assertEqual(entry.status, ApprovalStatus.PENDING_REVIEW)

    def test_manager_cannot_approve_own_entry(self):
        entry = make_work_entry(self.manager, self.company)
        self.client.force_login(self.manager)

        response = self.approve(entry)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "You cannot review your own work entry")

    def test_other_company_gets_not_found(self):
        entry = make_work_entry(self.peer, self.company)
        rival = make_company(email="rival@example.com", name="Rival")
        self.client.force_login(rival.account)

        response = self.approve(entry)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_only_pending_entries_can_be_approved(self):
        entry = make_work_entry(self.peer, self.company, status=ApprovalStatus.APPROVED)
        self.client.force_login(self.company.account)

        response = self.approve(entry)

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_rating_out_of_range(self):
        entry = make_work_entry(self.peer, self.company)
        self.client.force_login(self.company.account)

        response = self.approve(entry, rating=9)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class RequestChangesTests(ReviewTestCase):
    def test_feedback_required(self):
        entry = make_work_entry(self.report, self.company)
        self.client.force_login(self.manager)

        response = self.client.post(
            reverse("workdiary:request_changes", args=[entry.id]),
            {"feedback": "  "},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["error"], "Feedback is required when requesting changes"
        )

    def test_non_text_feedback_is_a_bad_request(self):
        entry = make_work_entry(self.report, self.company)
        self.client.force_login(self.manager)

        response = self.client.post(
            reverse("workdiary:request_changes", args=[entry.id]),
            {"feedback": 5},
            format="json",
        )

        entry.refresh_from_db()
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Feedback must be text")
        self.assertEqual(entry.status, ApprovalStatus.PENDING_REVIEW)
        self.assertFalse(AppError.objects.exists())

    def test_request_changes_then_resubmit(self):
        entry = make_work_entry(self.report, self.company)
        self.client.force_login(self.manager)

        response = self.client.post(
            reverse("workdiary:request_changes", args=[entry.id]),
            {"feedback": "Add the client name"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        entry.refresh_from_db()
        self.assertEqual(entry.status, ApprovalStatus.NEEDS_CHANGES)
        self.assertEqual(entry.company_feedback, "Add the client name")

        self.client.force_login(self.report)
        self.client.patch(
            reverse("workdiary:entry_detail", args=[entry.id]),
            {"description": "For client Zen Foods"},
            format="json",
        )
        entry.refresh_from_db()
        self.assertEqual(entry.status, ApprovalStatus.PENDING_REVIEW)

        events = self.client.get(reverse("workdiary:entry_events", args=[entry.id]))
        self.assertEqual(
            [event["event_type"] for event in events.data],
            ["changes_requested", "updated"],
        )


class CompanyListingTests(ReviewTestCase):
    def test_admin_sees_all_pending(self):
        make_work_entry(self.report, self.company)
        make_work_entry(self.peer, self.company)
        make_work_entry(self.peer, self.company, status=ApprovalStatus.APPROVED)
        self.client.force_login(self.company.account)

        pending = self.client.get(reverse("workdiary:pending_entries"))
        everything = self.client.get(reverse("workdiary:company_entries"))

        self.assertEqual(len(pending.data), 2)
        self.assertEqual(len(everything.data), 3)

    def test_manager_sees_team_only(self):
        make_work_entry(self.report, self.company)
        make_work_entry(self.peer, self.company)
        self.client.force_login(self.manager)

        response = self.client.get(reverse("workdiary:pending_entries"))

        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["employee"], self.report.id)

    def test_employee_entries_for_former_member(self):
        former = make_employee(email="former@example.com")
        add_member(self.company, former, status="left")
        make_work_entry(former, self.company)
        self.client.force_login(self.company.account)

        response = self.client.get(reverse("workdiary:employee_entries", args=[former.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)

    def test_employee_entries_refused_for_non_member(self):
        outsider = make_employee(email="outsider@example.com")
        self.client.force_login(self.company.account)

        response = self.client.get(reverse("workdiary:employee_entries", args=[outsider.id]))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_manager_cannot_browse_peer_entries(self):
        self.client.force_login(self.manager)

        response = self.client.get(reverse("workdiary:employee_entries", args=[self.peer.id]))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_events_hidden_from_unrelated_employee(self):
        entry = make_work_entry(self.report, self.company)
        self.client.force_login(self.peer)

        response = self.client.get(reverse("workdiary:entry_events", args=[entry.id]))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
