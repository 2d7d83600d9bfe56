from django.conf import settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.workflow.testing import DEFAULT_PASSWORD, make_company, make_employee


class LoginTests(APITestCase):
    def setUp(self):
        self.employee = make_employee(email="worker@example.com")
        self.company = make_company(email="owner@example.com")

    def test_employee_login_starts_session_and_sets_cookies(self):
        response = self.client.post(
            reverse("accounts:login"),
            {"email": "Worker@Example.com", "password": DEFAULT_PASSWORD},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["account_type"], "employee")
        self.assertEqual(response.data["user"]["email"], "worker@example.com")
        self.assertIn(settings.SIMPLE_JWT["AUTH_COOKIE"], response.cookies)

        current = self.client.get(reverse("accounts:current_user"))
        self.assertEqual(current.status_code, status.HTTP_200_OK)
        self.assertEqual(current.data["user"]["id"], str(self.employee.id))

    def test_wrong_password(self):
        response = self.client.post(
            reverse("accounts:login"),
            {"email": "worker@example.com", "password": "Wrong1234"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"], "Invalid email or password")

    def test_account_type_must_match(self):
        response = self.client.post(
            reverse("accounts:login"),
            {
                "email": "owner@example.com",
                "password": DEFAULT_PASSWORD,
                "account_type": "employee",
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_company_login(self):
        response = self.client.post(
            reverse("accounts:login"),
            {
                "email": "owner@example.com",
                "password": DEFAULT_PASSWORD,
                "account_type": "company",
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["account_type"], "company")

    def test_unknown_account_type(self):
        response = self.client.post(
            reverse("accounts:login"),
            {"email": "worker@example.com", "password": DEFAULT_PASSWORD, "account_type": "robot"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_logout_ends_session(self):
        self.client.force_login(self.employee)

        response = self.client.post(reverse("accounts:logout"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            self.client.get(reverse("accounts:current_user")).status_code,
            status.HTTP_401_UNAUTHORIZED,
        )

    def test_current_user_requires_login(self):
        response = self.client.get(reverse("accounts:current_user"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class TokenTests(APITestCase):
    def test_token_flags_password_reset(self):
        make_employee(email="reset@example.com", password_needs_reset=True)

        response = self.client.post(
            reverse("accounts:token_obtain_pair"),
            {"username": "reset@example.com", "password": DEFAULT_PASSWORD},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["password_needs_reset"])
        self.assertIn("change-password", response.data["password_reset_url"])
        self.assertNotIn("access", response.data)

    def test_token_rejects_bad_credentials(self):
        response = self.client.post(
            reverse("accounts:token_obtain_pair"),
            {"username": "nobody@example.com", "password": "Nope12345"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class ChangePasswordTests(APITestCase):
    def setUp(self):
        self.employee = make_employee(password_needs_reset=True)
        self.client.force_login(self.employee)
        self.url = reverse("accounts:change_password")

    def test_changes_password_and_clears_reset_flag(self):
        response = self.client.post(
            self.url,
            {"old_password": DEFAULT_PASSWORD, "new_password": "Another456"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.employee.refresh_from_db()
        self.assertTrue(self.employee.check_password("Another456"))
        self.assertFalse(self.employee.password_needs_reset)
        # session survives the hash change
        self.assertEqual(
            self.client.get(reverse("accounts:current_user")).status_code,
            status.HTTP_200_OK,
        )

    def test_wrong_current_password(self):
        response = self.client.post(
            self.url,
            {"old_password": "Wrong1234", "new_password": "Another456"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Current password is incorrect")

    def test_new_password_must_differ(self):
        response = self.client.post(
            self.url,
            {"old_password": DEFAULT_PASSWORD, "new_password": DEFAULT_PASSWORD},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
