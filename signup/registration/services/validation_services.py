# signup/registration/services/validation_services.py
"""
Validation stages of the registration pipeline, in the order they run:

1. check_mandatory_fields     - username/email/password present
2. check_identity_fields      - username -> email -> password format
3. validate_additional_fields - every other key through the registry

Each stage raises on the first problem it finds, so later fields are
never evaluated once an earlier one has failed.
"""

from collections.abc import Mapping
from typing import Any

from signup.registration import validators
from signup.registration.errors import (
    MANDATORY_FIELDS,
    InvalidField,
    MissingMandatoryField,
)
from signup.registration.registry import ValidatorRegistry, default_registry

IDENTITY_VALIDATORS = (
    ("username", validators.validate_username),
    ("email", validators.validate_email),
    ("password", validators.validate_password),
)


def check_mandatory_fields(payload: Mapping[str, Any]) -> None:
    """
    Raises:
        MissingMandatoryField: If any identity field is absent, empty or falsy
    """
    if not all(payload.get(name) for name in MANDATORY_FIELDS):
        raise MissingMandatoryField()


def check_identity_fields(payload: Mapping[str, Any]) -> None:
    """
    Raises:
        InvalidField: For the first identity field whose format is rejected
    """
    for name, is_valid in IDENTITY_VALIDATORS:
        if not is_valid(payload[name]):
            raise InvalidField(name)


def split_additional_fields(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Payload minus the identity fields, in submission order."""
    return {key: value for key, value in payload.items() if key not in MANDATORY_FIELDS}


def validate_additional_fields(
    fields: Mapping[str, Any],
    registry: ValidatorRegistry | None = None,
) -> None:
    """
    Check each additional field against the validator the registry resolves.
    Fields without a registered validator pass unchecked.

    Raises:
        InvalidField: For the first field that fails its validator
    """
    if registry is None:
        registry = default_registry()
    for name, value in fields.items():
        if not registry.resolve(name)(value):
            raise InvalidField(name)
