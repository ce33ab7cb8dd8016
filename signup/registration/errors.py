"""
Registration error taxonomy.

These exceptions are framework-agnostic: the pipeline raises them, the
orchestrator folds them into a :class:`~signup.registration.records.RegistrationResult`,
and only the route layer turns a result into an ``HTTPException``.
"""

from __future__ import annotations

MANDATORY_FIELDS = ("username", "email", "password")


class RegistrationError(Exception):
    """Base class for every failure a registration attempt can end with."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ---------------------------------------------------------------------------
# Validation (user-actionable, terminal, never retried)
# ---------------------------------------------------------------------------
class ValidationError(RegistrationError):
    """A field of the payload was rejected."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field

    def __repr__(self) -> str:
        return f"{type(self).__name__}(field={self.field!r}, message={self.message!r})"


class MissingMandatoryField(ValidationError):
    """One or more identity fields is absent or empty; reported once for all three."""

    def __init__(self) -> None:
        super().__init__(
            ", ".join(MANDATORY_FIELDS),
            "Username, email, and password are required fields.",
        )


class InvalidField(ValidationError):
    def __init__(self, field: str) -> None:
        super().__init__(field, f"Invalid {field}.")


# ---------------------------------------------------------------------------
# Internal (opaque to the caller)
# ---------------------------------------------------------------------------
class InternalError(RegistrationError):
    """Failure that is not the caller's fault."""


class HashingFailure(InternalError):
    def __init__(self, message: str = "Failed to hash password.") -> None:
        super().__init__(message)


class StorageFailure(InternalError):
    def __init__(self, message: str = "Failed to persist user.") -> None:
        super().__init__(message)
