from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.accounts.enums import AccountType
from apps.accounts.models import Account
from apps.companies.enums import VerificationStatus
from apps.workflow.testing import (
    DEFAULT_PASSWORD,
    make_admin,
    make_company,
    make_employee,
    make_work_entry,
)


class FirstAdminTests(APITestCase):
    def setUp(self):
        self.url = reverse("administration:create_first_admin")

    def test_only_one_bootstrap_admin(self):
        first = self.client.post(
            self.url,
            {"email": "Root@Example.com", "password": "Sup3rSecret"},
            format="json",
        )
        second = self.client.post(
            self.url,
            {"email": "again@example.com", "password": "Sup3rSecret"},
            format="json",
        )

        self.assertEqual(first.status_code, status.HTTP_201_CREATED)
        self.assertEqual(first.data["admin"]["email"], "root@example.com")
        self.assertEqual(second.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(Account.objects.admins().count(), 1)

    def test_password_policy(self):
        response = self.client.post(
            self.url, {"email": "root@example.com", "password": "weak"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Account.objects.admins().exists())


class AdminLoginTests(APITestCase):
    def setUp(self):
        self.url = reverse("administration:admin_login")

    def test_admin_login(self):
        make_admin()

        response = self.client.post(
            self.url,
            {"email": "admin@example.com", "password": DEFAULT_PASSWORD},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["account_type"], AccountType.ADMIN)
        self.assertIn("access_token", response.cookies)

    def test_employees_cannot_use_admin_login(self):
        make_employee()

        response = self.client.post(
            self.url,
            {"email": "employee@example.com", "password": DEFAULT_PASSWORD},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class OversightTests(APITestCase):
    def setUp(self):
        self.admin = make_admin()
        self.company = make_company()
        self.employee = make_employee()
        make_work_entry(self.employee, self.company)
        self.client.force_login(self.admin)

    def test_stats(self):
        make_company(
            email="new@example.com",
            name="Newco",
            verification_status=VerificationStatus.PENDING,
        )

        response = self.client.get(reverse("administration:stats"))

        self.assertEqual(response.data["employees"], 1)
        self.assertEqual(response.data["companies"], 2)
        self.assertEqual(response.data["work_entries"], 1)
        self.assertEqual(response.data["pending_verifications"], 1)

    def test_employee_search(self):
        make_employee(email="bilal@example.com", first_name="Bilal")

        response = self.client.get(
            reverse("administration:employees"), {"search": "bilal"}
        )

        self.assertEqual([row["email"] for row in response.data], ["bilal@example.com"])

    def test_company_filter(self):
        response = self.client.get(
            reverse("administration:companies"),
            {"verification_status": VerificationStatus.VERIFIED},
        )

        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["name"], "Acme Works")

    def test_deactivating_a_company_blocks_its_login(self):
        response = self.client.patch(
            reverse("administration:toggle_company", args=[self.company.id]),
            {"is_active": False},
            format="json",
        )

        self.company.account.refresh_from_db()
        self.assertEqual(response.data, {"id": str(self.company.id), "is_active": False})
        self.assertFalse(self.company.account.is_active)

    def test_toggle_employee(self):
        response = self.client.patch(
            reverse("administration:toggle_employee", args=[self.employee.id]),
            {"is_active": False},
            format="json",
        )

        self.employee.refresh_from_db()
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(self.employee.is_active)

    def test_toggle_requires_flag(self):
        response = self.client.patch(
            reverse("administration:toggle_employee", args=[self.employee.id]),
            {},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_non_admins_are_forbidden(self):
        self.client.force_login(self.employee)

        for name in ("stats", "employees", "companies", "pending_verifications", "feedback"):
            with self.subTest(name=name):
                response = self.client.get(reverse(f"administration:{name}"))
                self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class VerificationReviewTests(APITestCase):
    def setUp(self):
        self.admin = make_admin()
        self.company = make_company(verification_status=VerificationStatus.PENDING)
        self.client.force_login(self.admin)
        self.url = reverse(
            "administration:company_verification", args=[self.company.id]
        )

    def test_pending_queue(self):
        response = self.client.get(reverse("administration:pending_verifications"))

        self.assertEqual([row["id"] for row in response.data], [str(self.company.id)])

    def test_verify(self):
        response = self.client.patch(
            self.url, {"status": "verified", "notes": "PAN checked"}, format="json"
        )

        self.company.refresh_from_db()
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.company.verification_status, VerificationStatus.VERIFIED)
        self.assertEqual(self.company.verified_by, self.admin)
        self.assertIsNotNone(self.company.verified_at)

    def test_rejection_needs_a_reason(self):
        missing = self.client.patch(self.url, {"status": "rejected"}, format="json")
        rejected = self.client.patch(
            self.url,
            {"status": "rejected", "rejection_reason": "PAN does not match"},
            format="json",
        )

        self.company.refresh_from_db()
        self.assertEqual(missing.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("rejection_reason", missing.data)
        self.assertEqual(rejected.status_code, status.HTTP_200_OK)
        self.assertEqual(self.company.rejection_reason, "PAN does not match")

    def test_only_pending_companies_are_reviewed(self):
        self.client.patch(self.url, {"status": "verified"}, format="json")

        response = self.client.patch(
            self.url,
            {"status": "rejected", "rejection_reason": "Changed my mind"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
