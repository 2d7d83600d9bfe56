import re

from django.core.exceptions import ValidationError

PHONE_DIGITS_MIN = 10


class UppercaseDigitPasswordValidator:
    """
    Require at least one uppercase letter and one digit.
    Length is left to ``MinimumLengthValidator``.
    """

    def validate(self, password, user=None):
        errors = password_policy_errors(password, check_length=False)
        if errors:
            raise ValidationError(errors, code="password_policy")

    def get_help_text(self):
        return "Your password must contain at least one uppercase letter and one number."


def password_policy_errors(password, check_length=True):
    """Return the list of password policy violations (empty when valid)."""
    errors = []
    password = password or ""
    if check_length and len(password) < 8:
        errors.append("Password must be at least 8 characters")
    if not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")
    if not re.search(r"\d", password):
        errors.append("Password must contain at least one number")
    return errors


def validate_phone(value):
    digits = re.sub(r"\D", "", value or "")
    if len(digits) < PHONE_DIGITS_MIN:
        raise ValidationError("Phone number must be at least 10 digits")
