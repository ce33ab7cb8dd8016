"""
Field validators used by the registration pipeline.

Every function here is a pure predicate: it returns ``True``/``False`` and
never raises for scalar input. A value of the wrong type is rejected by
returning ``False``.

- Identity validators (username, email, password) are fixed and invoked
  unconditionally by the pipeline.
- Length/phone/gender/age validators back the generic rule table and the
  specific per-field overrides in :mod:`signup.registration.registry`.
"""

import re
from collections.abc import Mapping
from typing import Any

USERNAME_PATTERN = re.compile(r"[A-Za-z0-9]{8,}")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PASSWORD_SYMBOLS = "@$!%*?&"
PASSWORD_PATTERN = re.compile(r"[A-Za-z0-9@$!%*?&]+")
PHONE_PATTERN = re.compile(r"[0-9]{10}")
AGE_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")

PASSWORD_MIN_LENGTH = 8
GENDERS = frozenset({"male", "female", "other"})
AGE_RANGE = (18, 100)
NAME_LENGTH = {"min": 1, "max": 8}


# ---------------------------------------------------------------------------
# Identity fields
# ---------------------------------------------------------------------------
def validate_username(username: Any) -> bool:
    """Alphanumeric, at least eight characters."""
    return isinstance(username, str) and USERNAME_PATTERN.fullmatch(username) is not None


def validate_email(email: Any) -> bool:
    """Simple ``local@domain.tld`` shape with no whitespace."""
    return isinstance(email, str) and EMAIL_PATTERN.fullmatch(email) is not None


def validate_password(password: Any) -> bool:
    """
    At least eight characters drawn only from letters, digits and ``@$!%*?&``,
    with at least one lowercase, one uppercase, one digit and one symbol.
    """
    if not isinstance(password, str) or len(password) < PASSWORD_MIN_LENGTH:
        return False
    if PASSWORD_PATTERN.fullmatch(password) is None:
        return False
    return (
        any("a" <= ch <= "z" for ch in password)
        and any("A" <= ch <= "Z" for ch in password)
        and any("0" <= ch <= "9" for ch in password)
        and any(ch in PASSWORD_SYMBOLS for ch in password)
    )


# ---------------------------------------------------------------------------
# Generic table validators: (value, params) -> bool
# ---------------------------------------------------------------------------
def validate_length(value: Any, params: Mapping[str, Any]) -> bool:
    return isinstance(value, str) and params["min"] <= len(value) <= params["max"]


def validate_phone_number(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    # Digit strings only; an int such as 1234567890 is rejected.
    return isinstance(value, str) and PHONE_PATTERN.fullmatch(value) is not None


def validate_gender(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    return isinstance(value, str) and value.lower() in GENDERS


def validate_age(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    low, high = AGE_RANGE
    if params:
        low, high = params.get("min", low), params.get("max", high)
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        age = value
    elif isinstance(value, str) and AGE_PATTERN.fullmatch(value):
        age = int(value)
    else:
        return False
    return low <= age <= high


# ---------------------------------------------------------------------------
# Specific per-field validators: (value) -> bool
# ---------------------------------------------------------------------------
def validate_firstname(firstname: Any) -> bool:
    return validate_length(firstname, NAME_LENGTH)


def validate_lastname(lastname: Any) -> bool:
    return validate_length(lastname, NAME_LENGTH)


def validate_number(number: Any) -> bool:
    return validate_phone_number(number)
