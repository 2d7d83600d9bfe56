from django.test import SimpleTestCase

from apps.companies.enums import CompanyRole
from apps.companies.roles import (
    EMPLOYEE_MANAGE,
    REPORTS_VIEW_TEAM,
    SETTINGS_READ,
    SETTINGS_WRITE,
    WORK_APPROVE_ANY,
    WORK_APPROVE_DIRECT_REPORTS,
    can_access_route,
    get_company_permissions,
    has_company_permission,
)
from apps.companies.validation import (
    clean_company_details,
    validate_registration_number,
)


class RolePermissionTests(SimpleTestCase):
    def test_company_admin_can_approve_anything(self):
        self.assertTrue(has_company_permission(CompanyRole.COMPANY_ADMIN, WORK_APPROVE_ANY))
        self.assertTrue(has_company_permission(CompanyRole.COMPANY_ADMIN, SETTINGS_WRITE))

    def test_manager_is_limited_to_direct_reports(self):
        self.assertTrue(
            has_company_permission(CompanyRole.MANAGER, WORK_APPROVE_DIRECT_REPORTS)
        )
        self.assertFalse(has_company_permission(CompanyRole.MANAGER, WORK_APPROVE_ANY))
        self.assertFalse(has_company_permission(CompanyRole.MANAGER, EMPLOYEE_MANAGE))

    def test_branch_admin_reads_settings_only(self):
        permissions = get_company_permissions(CompanyRole.BRANCH_ADMIN)
        self.assertIn(SETTINGS_READ, permissions)
        self.assertIn(REPORTS_VIEW_TEAM, permissions)
        self.assertNotIn(SETTINGS_WRITE, permissions)

    def test_unknown_role_has_nothing(self):
        self.assertEqual(get_company_permissions(None), frozenset())
        self.assertEqual(get_company_permissions("JANITOR"), frozenset())

    def test_route_access(self):
        self.assertTrue(can_access_route(CompanyRole.COMPANY_ADMIN, "/company/admin/users"))
        self.assertFalse(can_access_route(CompanyRole.MANAGER, "/company/admin/"))
        self.assertTrue(can_access_route(CompanyRole.MANAGER, "/company/manager"))
        self.assertTrue(can_access_route(CompanyRole.BRANCH_ADMIN, "/company/branch/x"))
        self.assertFalse(can_access_route(CompanyRole.MANAGER, "/company/branch/"))
        self.assertFalse(can_access_route(CompanyRole.COMPANY_ADMIN, "/elsewhere/"))
        self.assertFalse(can_access_route(None, "/company/admin/"))


class RegistrationNumberTests(SimpleTestCase):
    def test_pan(self):
        self.assertEqual(validate_registration_number("PAN", "abcde1234f"), (True, None))
        self.assertEqual(
            validate_registration_number("PAN", "ABCDE12345"),
            (False, "Invalid PAN format (e.g. ABCDE1234F)"),
        )
        self.assertEqual(
            validate_registration_number("PAN", "ABC"),
            (False, "PAN must be exactly 10 characters"),
        )

    def test_cin(self):
        self.assertTrue(validate_registration_number("CIN", "L12345AB1234ABC123456")[0])
        self.assertEqual(
            validate_registration_number("CIN", "L12345"),
            (False, "CIN must be exactly 21 characters"),
        )

    def test_missing_or_unknown_type(self):
        self.assertEqual(
            validate_registration_number("PAN", ""),
            (False, "Registration number is required"),
        )
        self.assertEqual(
            validate_registration_number("GST", "ABCDE1234F"),
            (False, "Registration type must be PAN or CIN"),
        )


class CleanCompanyDetailsTests(SimpleTestCase):
    base = {
        "name": " Acme ",
        "address": "1 Road",
        "pincode": "560001",
        "registration_type": "pan",
        "registration_number": "abcde1234f",
    }

    def test_normalises_fields(self):
        cleaned = clean_company_details(self.base)
        self.assertEqual(cleaned["name"], "Acme")
        self.assertEqual(cleaned["registration_type"], "PAN")
        self.assertEqual(cleaned["registration_number"], "ABCDE1234F")

    def test_short_pincode(self):
        with self.assertRaisesMessage(ValueError, "Pincode must be at least 5 characters"):
            clean_company_details({**self.base, "pincode": "123"})

    def test_establishment_year_bounds(self):
        with self.assertRaises(ValueError):
            clean_company_details({**self.base, "establishment_year": 1700})
        cleaned = clean_company_details({**self.base, "establishment_year": "1999"})
        self.assertEqual(cleaned["establishment_year"], 1999)

    def test_partial_update_checks_only_supplied_fields(self):
        self.assertEqual(clean_company_details({"industry": "Steel"}, partial=True), {"industry": "Steel"})
