"""Shared fixtures: fast hashers, storage doubles and a ready-made service.

Argon2 costs are lowered to the minimum the algorithm accepts so that
every registration in the suite hashes in a few milliseconds.
"""

from __future__ import annotations

import pytest

from signup.core.security import AsyncPasswordHasher, SyncPasswordHasher
from signup.registration.records import SaveOutcome, UserRecord
from signup.registration.services.register_services import RegistrationService
from signup.registration.storage import InMemoryUserStorage

FAST_ARGON2 = {"time_cost": 1, "memory_cost": 8, "parallelism": 1}
PEPPER = "test-pepper"


class RecordingStorage(InMemoryUserStorage):
    """In-memory storage that remembers every record it was asked to save."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[UserRecord] = []

    def save(self, record: UserRecord) -> SaveOutcome:
        self.calls.append(record)
        return super().save(record)


class FailingStorage(RecordingStorage):
    """Reports every save as failed."""

    def save(self, record: UserRecord) -> SaveOutcome:
        self.calls.append(record)
        return SaveOutcome.failure("disk full")


class RaisingStorage(RecordingStorage):
    """Raises from save, as a broken driver would."""

    def save(self, record: UserRecord) -> SaveOutcome:
        self.calls.append(record)
        raise ConnectionError("database unreachable")


@pytest.fixture()
def sync_hasher() -> SyncPasswordHasher:
    return SyncPasswordHasher(pepper=PEPPER, **FAST_ARGON2)


@pytest.fixture()
def async_hasher() -> AsyncPasswordHasher:
    return AsyncPasswordHasher(pepper=PEPPER, **FAST_ARGON2)


@pytest.fixture()
def storage() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture()
def failing_storage() -> FailingStorage:
    return FailingStorage()


@pytest.fixture()
def raising_storage() -> RaisingStorage:
    return RaisingStorage()


@pytest.fixture()
def service(storage, sync_hasher) -> RegistrationService:
    return RegistrationService(storage, sync_hasher)


@pytest.fixture()
def valid_payload() -> dict:
    """A payload that passes every stage of the pipeline."""
    return {
        "username": "testuser1",
        "email": "test@example.com",
        "password": "Testpass1@",
        "age": 25,
        "gender": "female",
    }
