"""
Input validation utilities.
"""

import re

from .constants import (
    CONTACT_NUMBER_LENGTH,
    EMAIL_MAX_LENGTH,
    PASSWORD_MIN_LENGTH_EXCLUSIVE,
    PINCODE_LENGTH,
)

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PASSWORD_SPECIAL_CHARS = re.compile(r"[#@$%&*!^]")
BASIC_CREDENTIALS_PATTERN = re.compile(r"^.+:.+$", re.DOTALL)


def is_blank(value: str | None) -> bool:
    """True for None, empty or whitespace-only strings."""
    return value is None or not value.strip()


def exceeds_length(value: str | None, max_length: int) -> bool:
    """True when a present value is longer than its column allows."""
    return value is not None and len(value) > max_length


def is_valid_email(email: str | None) -> bool:
    """Validate email format."""
    if not email or len(email) > EMAIL_MAX_LENGTH:
        return False
    return EMAIL_PATTERN.match(email) is not None


def is_valid_contact_number(contact_number: str | None) -> bool:
    """A contact number is exactly ten ASCII digits."""
    if not contact_number:
        return False
    return (
        contact_number.isascii()
        and contact_number.isdigit()
        and len(contact_number) == CONTACT_NUMBER_LENGTH
    )


def is_strong_password(password: str | None) -> bool:
    """
    Validate password strength.

    Requirements:
    - More than 7 characters
    - At least one uppercase letter
    - At least one number
    - At least one special character out of # @ $ % & * ! ^
    """
    if not password:
        return False

    return (
        len(password) > PASSWORD_MIN_LENGTH_EXCLUSIVE
        and re.search(r"[A-Z]", password) is not None
        and re.search(r"[0-9]", password) is not None
        and PASSWORD_SPECIAL_CHARS.search(password) is not None
    )


def is_valid_pincode(pincode: str | None) -> bool:
    if not pincode:
        return False
    return pincode.isascii() and pincode.isdigit() and len(pincode) == PINCODE_LENGTH


def is_valid_basic_credentials(decoded: str | None) -> bool:
    """Decoded Basic credentials must look like `contact:password`."""
    if not decoded:
        return False
    return BASIC_CREDENTIALS_PATTERN.match(decoded) is not None
