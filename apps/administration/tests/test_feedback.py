from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.administration.enums import FeedbackStatus, FeedbackType
from apps.administration.models import Feedback
from apps.workflow.testing import make_admin, make_employee


class FeedbackSubmissionTests(APITestCase):
    def setUp(self):
        self.url = reverse("administration:feedback_create")

    def test_visitors_can_leave_feedback(self):
        response = self.client.post(
            self.url,
            {
                "feedback_type": "bug_report",
                "title": "Broken link",
                "description": "The footer link 404s",
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["message"], "Thank you for your feedback")
        self.assertIsNone(Feedback.objects.get().account)

    def test_signed_in_feedback_is_attributed(self):
        employee = make_employee()
        self.client.force_login(employee)

        self.client.post(
            self.url, {"title": "Nice", "description": "Works well"}, format="json"
        )

        self.assertEqual(Feedback.objects.get().account, employee)

    def test_submitters_cannot_set_status(self):
        self.client.post(
            self.url,
            {"title": "Hi", "description": "Hello", "status": "resolved"},
            format="json",
        )

        self.assertEqual(Feedback.objects.get().status, FeedbackStatus.NEW)

    def test_title_required(self):
        response = self.client.post(self.url, {"description": "No title"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("title", response.data)


class FeedbackTriageTests(APITestCase):
    def setUp(self):
        self.admin = make_admin()
        self.bug = Feedback.objects.create(
            feedback_type=FeedbackType.BUG_REPORT, title="Crash", description="On save"
        )
        Feedback.objects.create(title="Thanks", description="Great tool")
        self.client.force_login(self.admin)

    def test_list_filters(self):
        bugs = self.client.get(
            reverse("administration:feedback"), {"feedback_type": "bug_report"}
        )
        bad = self.client.get(reverse("administration:feedback"), {"status": "lost"})

        self.assertEqual([row["title"] for row in bugs.data], ["Crash"])
        self.assertEqual(bad.status_code, status.HTTP_400_BAD_REQUEST)

    def test_stats(self):
        response = self.client.get(reverse("administration:feedback_stats"))

        self.assertEqual(response.data["total"], 2)
        self.assertEqual(response.data["new"], 2)
        self.assertEqual(response.data["by_type"]["bug_report"], 1)

    def test_respond(self):
        response = self.client.patch(
            reverse("administration:feedback_detail", args=[self.bug.id]),
            {"status": "resolved", "admin_response": "Fixed in the latest release"},
            format="json",
        )

        self.bug.refresh_from_db()
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.bug.status, FeedbackStatus.RESOLVED)
        self.assertEqual(self.bug.responded_by, self.admin)
        self.assertIsNotNone(self.bug.responded_at)
