from datetime import date, timedelta
import uuid

from django.test import SimpleTestCase, override_settings
from django.utils import timezone

from apps.workflow.helpers import (
    clean_text,
    parse_date,
    parse_date_range,
    parse_uuid,
    split_csv_param,
)


class DateParsingTests(SimpleTestCase):
    def test_parse_date(self):
        self.assertEqual(parse_date("2024-03-04"), date(2024, 3, 4))
        with self.assertRaisesMessage(ValueError, "Invalid start_date format. Use YYYY-MM-DD"):
            parse_date("04/03/2024", "start_date")

    def test_explicit_range(self):
        params = {"start_date": "2024-03-01", "end_date": "2024-03-31"}

        self.assertEqual(
            parse_date_range(params), (date(2024, 3, 1), date(2024, 3, 31))
        )

    @override_settings(REPORT_DEFAULT_RANGE_DAYS=7)
    def test_default_range_ends_today(self):
        today = timezone.localdate()

        start, end = parse_date_range({})

        self.assertEqual(end, today)
        self.assertEqual(start, today - timedelta(days=6))

    @override_settings(REPORT_MAX_RANGE_DAYS=31)
    def test_overlong_range_is_refused(self):
        self.assertEqual(
            parse_date_range({"start_date": "2024-03-01", "end_date": "2024-03-31"}),
            (date(2024, 3, 1), date(2024, 3, 31)),
        )
        with self.assertRaisesMessage(ValueError, "Date range cannot exceed 31 days"):
            parse_date_range({"start_date": "2024-03-01", "end_date": "2024-04-01"})

    def test_end_before_start(self):
        with self.assertRaisesMessage(ValueError, "end_date must not be before start_date"):
            parse_date_range({"start_date": "2024-03-05", "end_date": "2024-03-04"})


class ParamParsingTests(SimpleTestCase):
    def test_split_csv_param(self):
        self.assertEqual(split_csv_param("a, b,,c "), ["a", "b", "c"])
        self.assertEqual(split_csv_param(["remote", " hybrid"]), ["remote", "hybrid"])
        self.assertEqual(split_csv_param(None), [])

    def test_parse_uuid(self):
        value = uuid.uuid4()

        self.assertEqual(parse_uuid(str(value)), value)
        with self.assertRaisesMessage(ValueError, "Invalid company_id"):
            parse_uuid("abc", "company_id")

    def test_clean_text(self):
        self.assertEqual(clean_text("  Site survey "), "Site survey")
        self.assertEqual(clean_text(None), "")
        with self.assertRaisesMessage(ValueError, "Title must be text"):
            clean_text(123, "Title")
