import logging
import random
import string

from django.conf import settings
from django.contrib.auth import get_user_model

logger = logging.getLogger(__name__)


def generate_employee_code() -> str:
    """Format: EMP-ABC123 (3 letters + 3 numbers)."""
    letters = "".join(random.choices(string.ascii_uppercase, k=3))
    numbers = "".join(random.choices(string.digits, k=3))
    return f"EMP-{letters}{numbers}"


def generate_unique_employee_code() -> str:
    """
    Generate an employee code not yet taken by any account.

    Raises:
        RuntimeError: if no free code is found within EMPLOYEE_ID_MAX_ATTEMPTS tries
    """
    Account = get_user_model()
    max_attempts = settings.EMPLOYEE_ID_MAX_ATTEMPTS

    for attempt in range(max_attempts):
        code = generate_employee_code()
        if not Account.objects.filter(employee_code=code).exists():
            return code
        logger.debug(f"Employee code collision on attempt {attempt + 1}: {code}")

    logger.error(f"Failed to generate unique employee ID after {max_attempts} attempts")
    raise RuntimeError("Failed to generate unique employee ID")
