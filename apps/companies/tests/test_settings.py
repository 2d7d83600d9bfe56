from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.companies.enums import MembershipRole, VerificationStatus
from apps.workflow.testing import add_member, make_company, make_employee


class CompanySettingsTests(APITestCase):
    def setUp(self):
        self.company = make_company()
        self.client.force_login(self.company.account)

    def test_read_settings(self):
        response = self.client.get(reverse("companies:settings"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["email"], self.company.account.email)

    def test_update_without_registration_change_keeps_verification(self):
        response = self.client.patch(
            reverse("companies:settings"),
            {"industry": "Construction", "size": "11-50"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.company.refresh_from_db()
        self.assertEqual(self.company.industry, "Construction")
        self.assertEqual(self.company.verification_status, VerificationStatus.VERIFIED)

    def test_registration_change_sends_company_back_to_review(self):
        response = self.client.patch(
            reverse("companies:settings"),
            {"registration_number": "ZZZZZ9999Z"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.company.refresh_from_db()
        self.assertEqual(self.company.verification_status, VerificationStatus.PENDING)
        self.assertIsNone(self.company.verified_at)

    def test_invalid_registration_number(self):
        response = self.client.patch(
            reverse("companies:settings"),
            {"registration_type": "CIN"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "CIN must be exactly 21 characters")

    def test_branch_admin_reads_but_cannot_write(self):
        branch_admin = make_employee()
        add_member(self.company, branch_admin, role=MembershipRole.BRANCH_ADMIN)
        self.client.force_login(branch_admin)

        self.assertEqual(
            self.client.get(reverse("companies:settings")).status_code,
            status.HTTP_200_OK,
        )
        self.assertEqual(
            self.client.patch(
                reverse("companies:settings"), {"name": "Hijack"}, format="json"
            ).status_code,
            status.HTTP_403_FORBIDDEN,
        )


class VerificationRequestTests(APITestCase):
    def test_unverified_company_requests_review(self):
        company = make_company(verification_status=VerificationStatus.UNVERIFIED)
        self.client.force_login(company.account)

        response = self.client.post(reverse("companies:request_verification"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["verification_status"], "pending")

    def test_verified_company_cannot_request_again(self):
        company = make_company()
        self.client.force_login(company.account)

        response = self.client.post(reverse("companies:request_verification"))

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
