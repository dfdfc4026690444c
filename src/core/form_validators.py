"""
Field validators for the sign-up form.

Every validator is a pure function: it maps a raw field value to a
ValidationResult and never raises for user input. A failed check is data
(``valid=False`` plus a message to show under the field), not an exception.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

from .errors import ErrorCode, ValidationError

EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")
DIGITS_PATTERN = re.compile(r"[0-9]+")

DEFAULT_MIN_PASSWORD_LENGTH = 8
DEFAULT_MIN_PHONE_DIGITS = 10
DEFAULT_MIN_AGE_YEARS = 17

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class FormField(Enum):
    """Fields of the sign-up form, valued by the key used in signals."""

    EMAIL = "email"
    PASSWORD = "password"
    PHONE = "phone"
    BIRTHDAY = "birthday"

    @classmethod
    def from_key(cls, key: FormField | str) -> FormField:
        """Resolve a field key, raising ValidationError for unknown keys."""
        if isinstance(key, FormField):
            return key
        try:
            return cls(key)
        except ValueError:
            raise ValidationError(
                code=ErrorCode.UNKNOWN_FIELD,
                user_message=f"Unknown form field: {key!r}",
                field=str(key),
                technical_message=f"Expected one of {[f.value for f in cls]}",
            ) from None


@dataclass(frozen=True)
class ValidationResult:
    """Validity flag paired with the message shown under the field."""

    valid: bool
    message: str


def is_valid_email(email: str) -> bool:
    """Return True if the whole string looks like ``local@domain.tld``."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_email(email: str) -> ValidationResult:
    valid = is_valid_email(email)
    message = "Valid email address." if valid else "Please match the email format. e.g. a@a.aa"
    return ValidationResult(valid=valid, message=message)


def validate_password(password: str, min_length: int = DEFAULT_MIN_PASSWORD_LENGTH) -> ValidationResult:
    valid = len(password) >= min_length
    message = "Valid password." if valid else f"Enter at least {min_length} characters."
    return ValidationResult(valid=valid, message=message)


def validate_phone(phone: str, min_digits: int = DEFAULT_MIN_PHONE_DIGITS) -> ValidationResult:
    """
    Validate a phone number.

    The digit check comes first, so a string holding any non-digit character
    (or nothing at all) is reported as "digits only" whatever its length.
    Only ASCII digits count; ``str.isdigit`` would also accept superscripts.
    """
    if DIGITS_PATTERN.fullmatch(phone) is None:
        return ValidationResult(valid=False, message="Enter digits only.")
    if len(phone) < min_digits:
        return ValidationResult(valid=False, message=f"Enter at least {min_digits} digits.")
    return ValidationResult(valid=True, message="Valid phone number.")


def is_old_enough(birthday: date, today: date | None = None, min_age: int = DEFAULT_MIN_AGE_YEARS) -> bool:
    """
    Check the minimum age by calendar-year subtraction.

    Month and day are ignored: someone born later in the year counts as
    having had this year's birthday already.
    """
    today = today or date.today()
    return today.year - birthday.year >= min_age


def validate_birthday(
    birthday: date, today: date | None = None, min_age: int = DEFAULT_MIN_AGE_YEARS
) -> ValidationResult:
    valid = is_old_enough(birthday, today, min_age)
    message = "You are old enough to sign up." if valid else f"You must be at least {min_age} years old to sign up."
    return ValidationResult(valid=valid, message=message)


def format_birthday(value: date) -> str:
    """Format a date for the birthday info label, e.g. ``October 19, 2026``."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


@dataclass(frozen=True)
class ValidationRules:
    """
    Thresholds used by the field validators.

    Built from configuration by ``ConfigManager.validation_rules()``; the
    defaults are the values the form ships with.
    """

    min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH
    min_phone_digits: int = DEFAULT_MIN_PHONE_DIGITS
    min_age_years: int = DEFAULT_MIN_AGE_YEARS

    def validate(self, field: FormField | str, value: Any, today: date | None = None) -> ValidationResult:
        """
        Run the validator for ``field`` on ``value``.

        Raises:
            ValidationError: If the field is unknown or the value has the wrong type
        """
        form_field = FormField.from_key(field)

        if form_field is FormField.BIRTHDAY:
            if not isinstance(value, date):
                raise _wrong_type(form_field, "date", value)
            return validate_birthday(value, today, self.min_age_years)

        if not isinstance(value, str):
            raise _wrong_type(form_field, "str", value)

        if form_field is FormField.EMAIL:
            return validate_email(value)
        if form_field is FormField.PASSWORD:
            return validate_password(value, self.min_password_length)
        return validate_phone(value, self.min_phone_digits)


def _wrong_type(field: FormField, expected: str, value: Any) -> ValidationError:
    return ValidationError(
        code=ErrorCode.INVALID_INPUT,
        user_message=f"Field '{field.value}' expects a {expected} value",
        field=field.value,
        technical_message=f"Got {type(value).__name__} for field '{field.value}'",
    )
