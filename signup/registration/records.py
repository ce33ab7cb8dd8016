"""
Value objects passed between the registration pipeline and its collaborators.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from signup.registration.errors import RegistrationError, ValidationError


# ---------------------------------------------------------------------------
# User record
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class UserRecord:
    """
    A validated user ready for storage.

    ``password`` always holds the derived hash; the plaintext never reaches
    this type. ``extra`` keeps the additional payload fields in their
    submitted order.
    """

    username: str
    email: str
    password: str
    extra: Mapping[str, Any] = field(default_factory=dict)

    def as_dict(self, *, include_password: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {"username": self.username, "email": self.email}
        if include_password:
            data["password"] = self.password
        data.update(self.extra)
        return data


# ---------------------------------------------------------------------------
# Storage outcome
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class SaveOutcome:
    """Result of ``UserStorage.save``."""

    ok: bool
    detail: Optional[str] = None

    @classmethod
    def success(cls) -> "SaveOutcome":
        return cls(ok=True)

    @classmethod
    def failure(cls, detail: str) -> "SaveOutcome":
        return cls(ok=False, detail=detail)


# ---------------------------------------------------------------------------
# Registration result
# ---------------------------------------------------------------------------
class RegistrationStatus(str, enum.Enum):
    SUCCESS = "success"
    VALIDATION_ERROR = "validation_error"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True, slots=True)
class RegistrationResult:
    """
    Exactly one of: success (with ``record``), validation error, internal error.

    For failures ``error`` holds the exception from
    :mod:`signup.registration.errors` that ended the attempt.
    """

    status: RegistrationStatus
    record: Optional[UserRecord] = None
    error: Optional[RegistrationError] = None

    @classmethod
    def succeeded(cls, record: UserRecord) -> "RegistrationResult":
        return cls(status=RegistrationStatus.SUCCESS, record=record)

    @classmethod
    def rejected(cls, error: ValidationError) -> "RegistrationResult":
        return cls(status=RegistrationStatus.VALIDATION_ERROR, error=error)

    @classmethod
    def failed(cls, error: RegistrationError) -> "RegistrationResult":
        return cls(status=RegistrationStatus.INTERNAL_ERROR, error=error)

    @property
    def ok(self) -> bool:
        return self.status is RegistrationStatus.SUCCESS

    @property
    def field(self) -> Optional[str]:
        """Name of the rejected field, for validation errors only."""
        if isinstance(self.error, ValidationError):
            return self.error.field
        return None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None
