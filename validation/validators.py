"""
Validators Module
Pure field parsers: one raw line in, one constrained value out
Each parser raises ValidationError with the corrective message to show
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from errors import ValidationError


EMAIL_PATTERN = re.compile(r'^[^@\s|]+@[^@\s|]+\.[^@\s|]+$')
PHONE_PATTERN = re.compile(r'^[0-9 +\-()]*$')
DIGITS_ONLY = re.compile(r'^[0-9]+$')
INTEGER_LITERAL = re.compile(r'^[-+]?[0-9]+$')
DECIMAL_NUMBER = re.compile(r'^[0-9]+(\.[0-9]+)?$')
# Letters (ASCII plus Latin-1 accented ranges), space, apostrophe, period, hyphen
NAME_ALLOWED = re.compile("^[A-Za-zÀ-ÖØ-öø-ÿ '.\\-]+$")

NAME_MESSAGE = ("Please use letters, spaces, apostrophes ('), hyphens (-) or "
                "periods (.) only. Numbers are not allowed.")


def _clean(raw: Optional[str]) -> str:
    return (raw or '').strip()


def parse_required_text(raw: Optional[str]) -> str:
    text = _clean(raw)
    if not text:
        raise ValidationError("Input cannot be empty. Please provide a value.")
    return text


def parse_optional_text(raw: Optional[str]) -> str:
    return _clean(raw)


def parse_alpha(raw: Optional[str], required: bool = True) -> str:
    """
    Parse a name-like field

    Args:
        raw: Raw input line
        required: Reject empty input when True, return '' otherwise

    Returns:
        Trimmed text
    """
    text = _clean(raw)
    if not text:
        if required:
            raise ValidationError("Input cannot be empty. Please enter letters only.")
        return ''
    if not NAME_ALLOWED.match(text):
        raise ValidationError(NAME_MESSAGE)
    return text


def parse_phone(raw: Optional[str]) -> str:
    text = _clean(raw)
    if text and not PHONE_PATTERN.match(text):
        raise ValidationError(
            "Phone may contain only digits, spaces, +, -, and parentheses. "
            "Example: +63 912-345-6789"
        )
    return text


def parse_digits(raw: Optional[str]) -> str:
    text = _clean(raw)
    if text and not DIGITS_ONLY.match(text):
        raise ValidationError("Digits only. Leave blank if not available.")
    return text


def parse_int_in_range(raw: Optional[str], min_value: int, max_value: int) -> int:
    text = _clean(raw)
    if not text:
        raise ValidationError("Input cannot be empty. Enter a number.")
    if not INTEGER_LITERAL.match(text):
        raise ValidationError("Invalid number. Enter digits only (no letters).")

    try:
        value = int(text)
    except ValueError:
        raise ValidationError("Number out of range. Try again.")
    if value < min_value or value > max_value:
        raise ValidationError(f"Enter a number between {min_value} and {max_value}.")
    return value


def _parse_decimal(text: str, empty_message: str, format_message: str) -> Decimal:
    if not text:
        raise ValidationError(empty_message)
    if not DECIMAL_NUMBER.match(text):
        raise ValidationError(format_message)
    try:
        return Decimal(text)
    except InvalidOperation:
        raise ValidationError(format_message)


def parse_decimal_in_range(raw: Optional[str], min_value: Decimal,
                           max_value: Decimal) -> Decimal:
    value = _parse_decimal(
        _clean(raw),
        "Input cannot be empty. Enter a number.",
        "Invalid number format. Use digits and optional decimal point.",
    )
    if value < min_value or value > max_value:
        raise ValidationError(f"Enter a value between {min_value} and {max_value}.")
    return value


def parse_decimal_min(raw: Optional[str], min_value: Decimal) -> Decimal:
    value = _parse_decimal(
        _clean(raw),
        "Input cannot be empty. Enter a numeric amount.",
        "Invalid amount. Use digits and optional decimal point.",
    )
    if value < min_value:
        raise ValidationError(f"Enter an amount >= {format_money(min_value)}")
    return value


def is_valid_email(email: Optional[str]) -> bool:
    if email is None:
        return False
    return EMAIL_PATTERN.match(email) is not None


def parse_email(raw: Optional[str]) -> str:
    """Parse an email address; the result is always lowercase"""
    text = _clean(raw)
    if not text:
        raise ValidationError("Input cannot be empty. Please provide a value.")
    email = text.lower()
    if not is_valid_email(email):
        raise ValidationError("Invalid email format. Example: user@example.com")
    return email


def check_password(raw: Optional[str], min_length: int) -> str:
    password = raw or ''
    if len(password) < min_length:
        raise ValidationError(f"Password must be at least {min_length} characters.")
    return password


def check_confirmation(password: str, confirm: Optional[str]) -> str:
    if password != confirm:
        raise ValidationError("Passwords do not match. Try again.")
    return password


def format_money(value) -> str:
    """Format an amount with thousands separators and two decimals"""
    return f"{Decimal(value):,.2f}"
