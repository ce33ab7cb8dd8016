# signup/registration/services/register_services.py
import logging
from collections.abc import Mapping
from typing import Any, Optional

from fastapi.concurrency import run_in_threadpool

from signup.core.security import HashedCredential, HashMode, PasswordHasher
from signup.registration.errors import HashingFailure, StorageFailure, ValidationError
from signup.registration.records import RegistrationResult, UserRecord
from signup.registration.registry import ValidatorRegistry, default_registry
from signup.registration.services.validation_services import (
    check_identity_fields,
    check_mandatory_fields,
    split_additional_fields,
    validate_additional_fields,
)
from signup.registration.storage import UserStorage

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Main registration service
# ---------------------------------------------------------------------------
class RegistrationService:
    """
    Validate a registration payload, hash the password and save the user.

    • Mandatory fields are checked first, then username/email/password
      formats, then every additional field in submission order.
    • The first failing check ends the attempt; storage is never touched.
    • storage.save is called at most once per attempt, with no retries.
    • The hashing mode is fixed by the hasher passed in here.
    • register_user never runs Argon2 or storage I/O on the event loop:
      sync mode runs register_user_sync in the threadpool, async mode awaits
      the hasher and hands save to the threadpool.
    """

    def __init__(
        self,
        storage: UserStorage,
        hasher: PasswordHasher,
        registry: Optional[ValidatorRegistry] = None,
    ) -> None:
        self.storage = storage
        self.hasher = hasher
        self.registry = registry if registry is not None else default_registry()

    @property
    def hash_mode(self) -> HashMode:
        return self.hasher.mode

    async def register_user(self, payload: Mapping[str, Any]) -> RegistrationResult:
        if self.hasher.mode is not HashMode.ASYNC:
            return await run_in_threadpool(self.register_user_sync, payload)

        try:
            additional_fields = self._validate(payload)
        except ValidationError as exc:
            return self._reject(exc)

        try:
            credential = await self.hasher.hash(payload["password"])
        except HashingFailure as exc:
            logger.exception(f"Password hashing failed for {payload['username']}")
            return RegistrationResult.failed(exc)

        record = self._build_record(payload, credential, additional_fields)
        return await run_in_threadpool(self._save, record)

    def register_user_sync(self, payload: Mapping[str, Any]) -> RegistrationResult:
        """Blocking pipeline for sync-mode hashers; the caller's thread does the work."""
        if self.hasher.mode is HashMode.ASYNC:
            raise TypeError("register_user_sync needs a sync-mode hasher; await register_user instead")

        try:
            additional_fields = self._validate(payload)
        except ValidationError as exc:
            return self._reject(exc)

        try:
            credential = self.hasher.hash(payload["password"])
        except HashingFailure as exc:
            logger.exception(f"Password hashing failed for {payload['username']}")
            return RegistrationResult.failed(exc)

        return self._save(self._build_record(payload, credential, additional_fields))

    # ------------------------------------------------------------------
    # Pipeline stages
    # ------------------------------------------------------------------

    def _validate(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        check_mandatory_fields(payload)
        check_identity_fields(payload)
        additional_fields = split_additional_fields(payload)
        validate_additional_fields(additional_fields, self.registry)
        return additional_fields

    @staticmethod
    def _reject(exc: ValidationError) -> RegistrationResult:
        logger.info(f"Registration rejected: {exc.message}", extra={"field": exc.field})
        return RegistrationResult.rejected(exc)

    @staticmethod
    def _build_record(
        payload: Mapping[str, Any],
        credential: HashedCredential,
        additional_fields: dict[str, Any],
    ) -> UserRecord:
        return UserRecord(
            username=payload["username"],
            email=payload["email"],
            password=credential.password_hash,
            extra=additional_fields,
        )

    def _save(self, record: UserRecord) -> RegistrationResult:
        username = record.username
        try:
            outcome = self.storage.save(record)
        except Exception:
            logger.exception(f"Storage raised while saving {username}")
            return RegistrationResult.failed(StorageFailure())

        if not outcome.ok:
            logger.error(f"Error saving user {username}: {outcome.detail}")
            return RegistrationResult.failed(StorageFailure())

        logger.info(f"Registered user {username}", extra={"username": username})
        return RegistrationResult.succeeded(record)
