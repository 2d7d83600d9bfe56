from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.companies.enums import MembershipStatus
from apps.profiles.models import Endorsement, Experience
from apps.workflow.testing import add_member, make_company, make_employee


class OwnProfileTests(APITestCase):
    def setUp(self):
        self.employee = make_employee(phone="9876543210")
        self.client.force_login(self.employee)

    def test_own_profile_includes_private_fields(self):
        Experience.objects.create(
            employee=self.employee,
            title="Electrician",
            company_name="Volt Ltd",
            start_date="2020-01-01",
        )

        response = self.client.get(reverse("profiles:own_profile"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["employee"]["phone"], "9876543210")
        self.assertEqual(len(response.data["experiences"]), 1)
        self.assertEqual(response.data["endorsements"], [])

    def test_update_professional_fields(self):
        response = self.client.patch(
            reverse("profiles:own_profile"),
            {"headline": "Senior electrician", "skills": ["wiring", "solar"]},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.employee.refresh_from_db()
        self.assertEqual(self.employee.headline, "Senior electrician")
        self.assertEqual(self.employee.skills, ["wiring", "solar"])

    def test_email_and_type_are_not_editable(self):
        self.client.patch(
            reverse("profiles:own_profile"),
            {"email": "new@example.com", "account_type": "admin"},
            format="json",
        )

        self.employee.refresh_from_db()
        self.assertEqual(self.employee.email, "employee@example.com")
        self.assertEqual(self.employee.account_type, "employee")


class ProfileItemTests(APITestCase):
    def setUp(self):
        self.employee = make_employee()
        self.client.force_login(self.employee)

    def test_add_current_experience_clears_end_date(self):
        response = self.client.post(
            reverse("profiles:experience_create"),
            {
                "title": "Site lead",
                "company_name": "Volt Ltd",
                "start_date": "2021-06-01",
                "end_date": "2023-01-01",
                "is_current": True,
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIsNone(Experience.objects.get().end_date)

    def test_end_before_start_is_rejected(self):
        response = self.client.post(
            reverse("profiles:project_create"),
            {"name": "Solar farm", "start_date": "2022-05-01", "end_date": "2022-01-01"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("end_date", response.data)

    def test_update_and_delete_own_item(self):
        created = self.client.post(
            reverse("profiles:education_create"),
            {"institution": "City Polytechnic", "degree": "Diploma"},
            format="json",
        )
        url = reverse("profiles:education_detail", args=[created.data["id"]])

        updated = self.client.patch(url, {"grade": "A"}, format="json")
        deleted = self.client.delete(url)

        self.assertEqual(updated.data["grade"], "A")
        self.assertEqual(deleted.status_code, status.HTTP_200_OK)

    def test_cannot_modify_someone_elses_item(self):
        other = make_employee(email="other@example.com")
        item = Experience.objects.create(
            employee=other, title="Welder", company_name="Arc", start_date="2019-01-01"
        )

        response = self.client.delete(
            reverse("profiles:experience_detail", args=[item.id])
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Experience.objects.filter(id=item.id).exists())

    def test_endorsements_cannot_be_edited(self):
        endorsement = Endorsement.objects.create(
            employee=self.employee, endorser_name="Kiran", message="Reliable"
        )

        response = self.client.patch(
            reverse("profiles:endorsement_detail", args=[endorsement.id]),
            {"message": "Edited"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)


class ProfileVisibilityTests(APITestCase):
    def setUp(self):
        self.company = make_company()
        self.employee = make_employee(phone="9876543210", headline="Plumber")
        Experience.objects.create(
            employee=self.employee, title="Plumber", company_name="Pipes", start_date="2018-01-01"
        )

    def test_company_sees_public_profile_of_member(self):
        add_member(self.company, self.employee)
        self.client.force_login(self.company.account)

        response = self.client.get(
            reverse("profiles:company_employee_profile", args=[self.employee.id])
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["employee"]["headline"], "Plumber")
        self.assertNotIn("phone", response.data["employee"])
        self.assertEqual(len(response.data["experiences"]), 1)

    def test_former_member_stays_visible(self):
        add_member(self.company, self.employee, status=MembershipStatus.LEFT)
        self.client.force_login(self.company.account)

        response = self.client.get(
            reverse("profiles:company_employee_experience", args=[self.employee.id])
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)

    def test_unrelated_company_is_refused(self):
        self.client.force_login(self.company.account)

        section = self.client.get(
            reverse("profiles:company_employee_education", args=[self.employee.id])
        )
        profile = self.client.get(
            reverse("profiles:employee_profile", args=[self.employee.id])
        )

        self.assertEqual(section.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(profile.status_code, status.HTTP_403_FORBIDDEN)

    def test_other_employee_is_refused(self):
        self.client.force_login(make_employee(email="nosy@example.com"))

        response = self.client.get(
            reverse("profiles:employee_profile", args=[self.employee.id])
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
