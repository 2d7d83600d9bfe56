import re
from datetime import date
from typing import Any, Dict, Optional, Tuple

from apps.companies.enums import CompanySize, RegistrationType

PAN_PATTERN = re.compile(r"^[A-Z]{5}[0-9]{4}[A-Z]$")
CIN_PATTERN = re.compile(r"^[LU][0-9]{5}[A-Z]{2}[0-9]{4}[A-Z]{3}[0-9]{6}$")

PAN_LENGTH = 10
CIN_LENGTH = 21
PINCODE_MIN_LENGTH = 5
EARLIEST_ESTABLISHMENT_YEAR = 1800


def validate_registration_number(
    registration_type: Optional[str], registration_number: Optional[str]
) -> Tuple[bool, Optional[str]]:
    """
    Check a PAN or CIN against its official format.

    Returns:
        (is_valid, error_message); error_message is None when valid
    """
    number = (registration_number or "").strip().upper()
    registration_type = (registration_type or "").strip().upper()

    if not number:
        return False, "Registration number is required"

    if registration_type == RegistrationType.PAN:
        if len(number) != PAN_LENGTH:
            return False, "PAN must be exactly 10 characters"
        if not PAN_PATTERN.match(number):
            return False, "Invalid PAN format (e.g. ABCDE1234F)"
        return True, None

    if registration_type == RegistrationType.CIN:
        if len(number) != CIN_LENGTH:
            return False, "CIN must be exactly 21 characters"
        if not CIN_PATTERN.match(number):
            return False, "Invalid CIN format (e.g. L12345AB1234ABC123456)"
        return True, None

    return False, "Registration type must be PAN or CIN"


def clean_company_details(
    data: Dict[str, Any], partial: bool = False, current=None
) -> Dict[str, Any]:
    """
    Normalise and validate company fields.
    With ``partial`` only the supplied fields are checked; a registration
    change is validated against the other half stored on ``current``.

    Raises:
        ValueError: on the first invalid field
    """
    cleaned: Dict[str, Any] = {}

    def supplied(field):
        return not partial or field in data

    if supplied("name"):
        name = (data.get("name") or "").strip()
        if not name:
            raise ValueError("Company name is required")
        cleaned["name"] = name

    if supplied("address"):
        address = (data.get("address") or "").strip()
        if not address:
            raise ValueError("Address is required")
        cleaned["address"] = address

    if supplied("pincode"):
        pincode = str(data.get("pincode") or "").strip()
        if len(pincode) < PINCODE_MIN_LENGTH:
            raise ValueError("Pincode must be at least 5 characters")
        cleaned["pincode"] = pincode

    if supplied("registration_type") or supplied("registration_number"):
        registration_type = data.get("registration_type")
        registration_number = data.get("registration_number")
        if current is not None:
            registration_type = registration_type or current.registration_type
            registration_number = registration_number or current.registration_number
        registration_type = str(registration_type or "").strip().upper()
        registration_number = str(registration_number or "").strip().upper()
        is_valid, error = validate_registration_number(
            registration_type, registration_number
        )
        if not is_valid:
            raise ValueError(error)
        cleaned["registration_type"] = registration_type
        cleaned["registration_number"] = registration_number

    if "size" in data and data.get("size"):
        if data["size"] not in CompanySize.values:
            raise ValueError("Invalid company size")
        cleaned["size"] = data["size"]

    if "establishment_year" in data and data.get("establishment_year") not in (None, ""):
        try:
            year = int(data["establishment_year"])
        except (TypeError, ValueError):
            raise ValueError("Establishment year must be a number")
        current_year = date.today().year
        if not EARLIEST_ESTABLISHMENT_YEAR <= year <= current_year:
            raise ValueError(
                f"Establishment year must be between {EARLIEST_ESTABLISHMENT_YEAR} "
                f"and {current_year}"
            )
        cleaned["establishment_year"] = year

    for field in ("industry", "website", "description"):
        if field in data and data[field] is not None:
            cleaned[field] = str(data[field]).strip()

    return cleaned
