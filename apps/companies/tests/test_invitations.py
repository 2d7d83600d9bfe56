from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.companies.enums import MembershipRole, MembershipStatus
from apps.companies.models import CompanyMembership, InvitationCode
from apps.workflow.testing import add_member, make_company, make_employee


class InvitationCodeTests(APITestCase):
    def setUp(self):
        self.company = make_company()
        self.employee = make_employee()

    def generate(self):
        self.client.force_login(self.company.account)
        response = self.client.post(reverse("companies:invitation_code"))
        self.client.logout()
        return response

    def test_company_generates_code(self):
        response = self.generate()

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertRegex(response.data["code"], r"^[A-Z0-9]{8}$")
        invitation = InvitationCode.objects.get(code=response.data["code"])
        self.assertGreater(invitation.expires_at, timezone.now())

    def test_manager_cannot_generate_code(self):
        manager = make_employee(email="boss@example.com")
        add_member(self.company, manager, role=MembershipRole.MANAGER)
        self.client.force_login(manager)

        response = self.client.post(reverse("companies:invitation_code"))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_employee_joins_with_code_once(self):
        code = self.generate().data["code"]
        self.client.force_login(self.employee)

        response = self.client.post(
            reverse("companies:join"), {"code": code.lower()}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(
            CompanyMembership.objects.filter(
                company=self.company, employee=self.employee, status="active"
            ).exists()
        )

        other = make_employee(email="other@example.com")
        self.client.force_login(other)
        reused = self.client.post(reverse("companies:join"), {"code": code}, format="json")
        self.assertEqual(reused.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(reused.data["error"], "Invalid or expired invitation code")

    def test_expired_code(self):
        InvitationCode.objects.create(
            company=self.company,
            code="OLDCODE1",
            expires_at=timezone.now() - timedelta(minutes=1),
        )
        self.client.force_login(self.employee)

        response = self.client.post(
            reverse("companies:join"), {"code": "OLDCODE1"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_already_member(self):
        add_member(self.company, self.employee)
        code = self.generate().data["code"]
        self.client.force_login(self.employee)

        response = self.client.post(reverse("companies:join"), {"code": code}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "You are already a member of this company")

    def test_rejoining_reactivates_membership(self):
        membership = add_member(
            self.company,
            self.employee,
            status=MembershipStatus.LEFT,
            left_at=timezone.now(),
        )
        code = self.generate().data["code"]
        self.client.force_login(self.employee)

        self.client.post(reverse("companies:join"), {"code": code}, format="json")

        membership.refresh_from_db()
        self.assertEqual(membership.status, MembershipStatus.ACTIVE)
        self.assertIsNone(membership.left_at)
        self.assertEqual(CompanyMembership.objects.count(), 1)

    def test_company_accounts_cannot_join(self):
        self.client.force_login(self.company.account)

        response = self.client.post(reverse("companies:join"), {"code": "X"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class LeaveCompanyTests(APITestCase):
    def setUp(self):
        self.company = make_company()
        self.manager = make_employee(email="boss@example.com")
        self.employee = make_employee()
        self.manager_membership = add_member(
            self.company, self.manager, role=MembershipRole.MANAGER
        )
        self.membership = add_member(
            self.company, self.employee, manager=self.manager_membership
        )

    def test_leave_detaches_reports(self):
        self.client.force_login(self.manager)

        response = self.client.post(
            reverse("companies:leave", args=[self.manager_membership.id])
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.manager_membership.refresh_from_db()
        self.membership.refresh_from_db()
        self.assertEqual(self.manager_membership.status, MembershipStatus.LEFT)
        self.assertIsNotNone(self.manager_membership.left_at)
        self.assertIsNone(self.membership.manager)

    def test_cannot_leave_someone_elses_membership(self):
        self.client.force_login(self.employee)

        response = self.client.post(
            reverse("companies:leave", args=[self.manager_membership.id])
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_cannot_leave_twice(self):
        self.client.force_login(self.employee)
        self.client.post(reverse("companies:leave", args=[self.membership.id]))

        response = self.client.post(reverse("companies:leave", args=[self.membership.id]))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_employee_companies_lists_history(self):
        self.client.force_login(self.employee)
        self.client.post(reverse("companies:leave", args=[self.membership.id]))

        response = self.client.get(reverse("companies:employee_companies"))

        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["status"], "left")
