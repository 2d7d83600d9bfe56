from datetime import date, datetime, timedelta
from decimal import Decimal
import uuid

from django.conf import settings
from django.utils import timezone


def decimal_to_float(value):
    return float(value) if isinstance(value, Decimal) else value


def parse_date(value, field_name="date"):
    """Parse a ``YYYY-MM-DD`` string, raising ``ValueError`` with a client-safe message."""
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {field_name} format. Use YYYY-MM-DD")


def parse_date_range(params, default_days=None):
    """
    Read ``start_date``/``end_date`` from query params.

    Missing bounds default to the last ``default_days`` days ending today.
    Ranges longer than ``REPORT_MAX_RANGE_DAYS`` are refused.

    Returns:
        tuple[date, date]: inclusive start and end dates

    Raises:
        ValueError: on bad format, an end date before the start date or an
            overlong range
    """
    if default_days is None:
        default_days = settings.REPORT_DEFAULT_RANGE_DAYS

    today = timezone.localdate()
    end_raw = params.get("end_date")
    start_raw = params.get("start_date")

    end_date = parse_date(end_raw, "end_date") if end_raw else today
    start_date = (
        parse_date(start_raw, "start_date")
        if start_raw
        else end_date - timedelta(days=default_days - 1)
    )

    if end_date < start_date:
        raise ValueError("end_date must not be before start_date")

    max_days = settings.REPORT_MAX_RANGE_DAYS
    if (end_date - start_date).days + 1 > max_days:
        raise ValueError(f"Date range cannot exceed {max_days} days")

    return start_date, end_date


def split_csv_param(value):
    """Turn ``"a,b, c"`` into ``["a", "b", "c"]``; empty input gives an empty list."""
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item).strip() for item in value if str(item).strip()]
    return [item.strip() for item in str(value).split(",") if item.strip()]


def parse_uuid(value, field_name="id"):
    """Parse a UUID from a query or body value, raising ``ValueError`` when malformed."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise ValueError(f"Invalid {field_name}")


def clean_text(value, field_name="value"):
    """Strip a free-text body value; ``None`` gives ``""`` and non-strings raise ``ValueError``."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be text")
    return value.strip()
