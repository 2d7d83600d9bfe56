from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.companies.enums import MembershipRole, MembershipStatus
from apps.companies.services.company_service import CompanyService
from apps.workflow.testing import add_member, make_company, make_employee


class CompanyContextTests(APITestCase):
    def setUp(self):
        self.company = make_company()
        self.other = make_company(email="rival@example.com", name="Rival")

    def test_company_account_is_admin(self):
        self.client.force_login(self.company.account)

        response = self.client.get(reverse("companies:context"))

        self.assertEqual(response.data["role"], "COMPANY_ADMIN")
        self.assertIn("work.approve.any", response.data["permissions"])
        self.assertIn("/company/admin/", response.data["routes"])

    def test_manager_context(self):
        manager = make_employee()
        add_member(self.company, manager, role=MembershipRole.MANAGER)
        self.client.force_login(manager)

        response = self.client.get(reverse("companies:context"))

        self.assertEqual(response.data["role"], "MANAGER")
        self.assertEqual(response.data["routes"], ["/company/manager/"])

    def test_manager_of_two_companies_must_choose(self):
        manager = make_employee()
        add_member(self.company, manager, role=MembershipRole.MANAGER)
        add_member(self.other, manager, role=MembershipRole.BRANCH_ADMIN)
        self.client.force_login(manager)

        ambiguous = self.client.get(reverse("companies:context"))
        chosen = self.client.get(
            reverse("companies:context"), {"company_id": str(self.other.id)}
        )

        self.assertEqual(ambiguous.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(chosen.data["role"], "BRANCH_ADMIN")

    def test_plain_employee_has_no_company_access(self):
        employee = make_employee()
        add_member(self.company, employee)
        self.client.force_login(employee)

        response = self.client.get(reverse("companies:context"))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_malformed_company_id(self):
        self.client.force_login(self.company.account)

        response = self.client.get(reverse("companies:context"), {"company_id": "nope"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_company_cannot_act_for_another(self):
        with self.assertRaises(PermissionError):
            CompanyService.get_context(self.company.account, str(self.other.id))


class ManagerAssignmentTests(APITestCase):
    def setUp(self):
        self.company = make_company()
        self.alice = make_employee(email="alice@example.com", first_name="Alice")
        self.bob = make_employee(email="bob@example.com", first_name="Bob")
        self.carol = make_employee(email="carol@example.com", first_name="Carol")
        self.alice_m = add_member(self.company, self.alice)
        self.bob_m = add_member(self.company, self.bob)
        self.carol_m = add_member(self.company, self.carol)
        self.client.force_login(self.company.account)

    def promote(self, membership, role="MANAGER"):
        return self.client.post(
            reverse("companies:assign_manager"),
            {"membership_id": str(membership.id), "role": role},
            format="json",
        )

    def test_assign_manager_and_reports(self):
        self.assertEqual(self.promote(self.alice_m).status_code, status.HTTP_200_OK)

        response = self.client.post(
            reverse("companies:assign_reports"),
            {
                "manager_membership_id": str(self.alice_m.id),
                "membership_ids": [str(self.bob_m.id), str(self.carol_m.id)],
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.bob_m.refresh_from_db()
        self.assertEqual(self.bob_m.manager_id, self.alice_m.id)

        managers = self.client.get(reverse("companies:managers"))
        self.assertEqual([m["id"] for m in managers.data], [str(self.alice_m.id)])

        available = self.client.get(reverse("companies:available_for_manager"))
        self.assertEqual(len(available.data), 2)

    def test_invalid_role(self):
        response = self.promote(self.alice_m, role="EMPLOYEE")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_manager_cannot_report_to_self(self):
        self.promote(self.alice_m)

        response = self.client.post(
            reverse("companies:assign_reports"),
            {
                "manager_membership_id": str(self.alice_m.id),
                "membership_ids": [str(self.alice_m.id)],
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "A manager cannot report to themselves")

    def test_manager_above_cannot_become_a_report(self):
        self.promote(self.alice_m)
        self.promote(self.bob_m)
        url = reverse("companies:assign_reports")
        self.client.post(
            url,
            {
                "manager_membership_id": str(self.alice_m.id),
                "membership_ids": [str(self.bob_m.id)],
            },
            format="json",
        )

        response = self.client.post(
            url,
            {
                "manager_membership_id": str(self.bob_m.id),
                "membership_ids": [str(self.alice_m.id)],
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["error"],
            "Reporting lines cannot loop back to the selected manager",
        )
        self.alice_m.refresh_from_db()
        self.assertIsNone(self.alice_m.manager_id)

    def test_reports_need_a_manager_target(self):
        response = self.client.post(
            reverse("companies:assign_reports"),
            {
                "manager_membership_id": str(self.alice_m.id),
                "membership_ids": [str(self.bob_m.id)],
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_remove_manager_detaches_reports(self):
        self.alice_m.role = MembershipRole.MANAGER
        self.alice_m.save()
        self.bob_m.manager = self.alice_m
        self.bob_m.save()

        response = self.client.delete(
            reverse("companies:manager_detail", args=[self.alice_m.id])
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.alice_m.refresh_from_db()
        self.bob_m.refresh_from_db()
        self.assertEqual(self.alice_m.role, MembershipRole.EMPLOYEE)
        self.assertIsNone(self.bob_m.manager)

    def test_manager_cannot_manage_managers(self):
        self.alice_m.role = MembershipRole.MANAGER
        self.alice_m.save()
        self.client.force_login(self.alice)

        response = self.promote(self.bob_m)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class CompanyEmployeesTests(APITestCase):
    def setUp(self):
        self.company = make_company()
        self.manager = make_employee(email="boss@example.com")
        self.report = make_employee(email="report@example.com", phone="9876543210")
        self.stranger = make_employee(email="stranger@example.com")
        self.manager_m = add_member(self.company, self.manager, role=MembershipRole.MANAGER)
        add_member(self.company, self.report, manager=self.manager_m)
        add_member(self.company, self.stranger, status=MembershipStatus.LEFT)

    def test_admin_sees_active_members(self):
        self.client.force_login(self.company.account)

        active = self.client.get(reverse("companies:employees"))
        everyone = self.client.get(reverse("companies:employees"), {"include_left": "true"})

        self.assertEqual(len(active.data), 2)
        self.assertEqual(len(everyone.data), 3)

    def test_manager_sees_direct_reports_only(self):
        self.client.force_login(self.manager)

        response = self.client.get(reverse("companies:employees"))

        self.assertEqual([m["employee"] for m in response.data], [self.report.id])

    def test_employee_detail_hides_private_fields(self):
        self.client.force_login(self.company.account)

        response = self.client.get(
            reverse("companies:employee_detail", args=[self.report.id])
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertNotIn("phone", response.data)
        self.assertNotIn("date_of_birth", response.data)
        self.assertEqual(response.data["employee_code"], self.report.employee_code)

    def test_employee_detail_requires_membership_history(self):
        outsider = make_employee(email="outsider@example.com")
        self.client.force_login(self.company.account)

        response = self.client.get(reverse("companies:employee_detail", args=[outsider.id]))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(
            response.data["error"], "Employee is not associated with your company"
        )
