"""
Account service layer.

Registration, credential checks and password changes. Views call these and
translate the raised exceptions into HTTP responses.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from django.contrib.auth import authenticate
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import transaction

from apps.accounts.enums import AccountType
from apps.accounts.models import Account
from apps.accounts.utils import generate_unique_employee_code
from apps.accounts.validators import password_policy_errors, validate_phone
from apps.workflow.exceptions import DuplicateError

logger = logging.getLogger(__name__)


class AccountService:
    """
    Business rules for account lifecycle operations.
    """

    @staticmethod
    def clean_email(email: Optional[str]) -> str:
        email = (email or "").strip().lower()
        if not email:
            raise ValueError("Email is required")
        try:
            validate_email(email)
        except ValidationError:
            raise ValueError("Invalid email format")
        if Account.objects.filter(email__iexact=email).exists():
            raise DuplicateError("Email already registered", field="email")
        return email

    @staticmethod
    def check_password_policy(password: Optional[str], user=None) -> None:
        """
        Raises:
            ValueError: with every violated rule, joined into one message
        """
        errors = password_policy_errors(password)
        if errors:
            raise ValueError(". ".join(errors))
        try:
            validate_password(password, user=user)
        except ValidationError as e:
            raise ValueError(" ".join(e.messages))

    @staticmethod
    def _clean_phone(phone: Optional[str]) -> str:
        phone = (phone or "").strip()
        if phone:
            try:
                validate_phone(phone)
            except ValidationError as e:
                raise ValueError(e.messages[0])
        return phone

    @staticmethod
    def register_employee(data: Dict[str, Any]) -> Account:
        """
        Create an employee account with a fresh employee code.

        Raises:
            ValueError: invalid email, phone, name or password
            DuplicateError: email already registered
            RuntimeError: no free employee code could be generated
        """
        email = AccountService.clean_email(data.get("email"))

        first_name = (data.get("first_name") or "").strip()
        if not first_name:
            raise ValueError("First name is required")

        phone = AccountService._clean_phone(data.get("phone"))
        password = data.get("password")
        AccountService.check_password_policy(password)

        with transaction.atomic():
            account = Account.objects.create_user(
                email=email,
                password=password,
                first_name=first_name,
                last_name=(data.get("last_name") or "").strip(),
                phone=phone,
                country_code=data.get("country_code") or "+1",
                account_type=AccountType.EMPLOYEE,
                employee_code=generate_unique_employee_code(),
            )

        logger.info(
            f"Registered employee {account.email} with code {account.employee_code}"
        )
        return account

    @staticmethod
    def register_company(data: Dict[str, Any]) -> Tuple[Account, Any]:
        """
        Create a company login together with its Company record.
        Either both rows exist afterwards or neither does.

        Raises:
            ValueError: invalid account or company details
            DuplicateError: email already registered
        """
        from apps.companies.services.company_service import CompanyService

        email = AccountService.clean_email(data.get("email"))
        phone = AccountService._clean_phone(data.get("phone"))
        password = data.get("password")
        AccountService.check_password_policy(password)

        company_name = (data.get("name") or "").strip()
        if not company_name:
            raise ValueError("Company name is required")

        contact_name = (data.get("contact_name") or company_name).strip()

        with transaction.atomic():
            account = Account.objects.create_user(
                email=email,
                password=password,
                first_name=contact_name[:50],
                phone=phone,
                country_code=data.get("country_code") or "+1",
                account_type=AccountType.COMPANY,
            )
            company = CompanyService.create_company(account, data)

        logger.info(f"Registered company {company.name} for {account.email}")
        return account, company

    @staticmethod
    def authenticate_account(
        request, email: Optional[str], password: Optional[str], account_type: str
    ) -> Optional[Account]:
        """
        Returns the account when the credentials match an active account of
        the requested type, otherwise None.
        """
        if not email or not password:
            return None

        account = authenticate(
            request=request, username=email.strip().lower(), password=password
        )
        if account is None:
            logger.warning(f"Failed login for {email}")
            return None

        if account_type and account.account_type != account_type:
            logger.warning(
                f"Login for {email} rejected: account is {account.account_type}, "
                f"requested {account_type}"
            )
            return None

        return account

    @staticmethod
    def change_password(account: Account, old_password: str, new_password: str) -> None:
        """
        Raises:
            ValueError: wrong current password or policy violation
        """
        if not account.check_password(old_password or ""):
            raise ValueError("Current password is incorrect")

        if old_password == new_password:
            raise ValueError("New password must be different from the current password")

        AccountService.check_password_policy(new_password, user=account)

        account.set_password(new_password)
        account.password_needs_reset = False
        account.save()
        logger.info(f"Password changed for {account.email}")
