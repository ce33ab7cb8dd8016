"""
Storage collaborators for registered users.

The pipeline only depends on :class:`UserStorage`: ``save(record)`` returns
a :class:`SaveOutcome`. Implementations own their own locking and
transactions.
"""

import logging
import threading
from collections.abc import Callable
from typing import Optional, Protocol

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from signup.registration.models import RegisteredUser
from signup.registration.records import SaveOutcome, UserRecord

logger = logging.getLogger(__name__)


class UserStorage(Protocol):
    def save(self, record: UserRecord) -> SaveOutcome:
        ...


# ---------------------------------------------------------------------------
# In-memory
# ---------------------------------------------------------------------------
class InMemoryUserStorage:
    """Dict-backed storage keyed by username; rejects duplicate username/email."""

    def __init__(self) -> None:
        self._users: dict[str, UserRecord] = {}
        self._lock = threading.Lock()

    def save(self, record: UserRecord) -> SaveOutcome:
        with self._lock:
            if record.username in self._users:
                return SaveOutcome.failure("Username already exists.")
            email = record.email.lower()
            if any(user.email.lower() == email for user in self._users.values()):
                return SaveOutcome.failure("Email already exists.")
            self._users[record.username] = record
        return SaveOutcome.success()

    def get(self, username: str) -> Optional[UserRecord]:
        return self._users.get(username)

    def __len__(self) -> int:
        return len(self._users)


# ---------------------------------------------------------------------------
# SQLAlchemy
# ---------------------------------------------------------------------------
class SQLAlchemyUserStorage:
    """Persists each record as a ``RegisteredUser`` row, one session per save."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def save(self, record: UserRecord) -> SaveOutcome:
        row = RegisteredUser(
            username=record.username,
            email=record.email,
            password_hash=record.password,
            profile=dict(record.extra),
        )
        with self._session_factory() as db:
            db.add(row)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                # Unique constraint violation on username or email
                return SaveOutcome.failure("Username or email already exists.")
            except SQLAlchemyError as exc:
                db.rollback()
                logger.error(f"Failed to save user {record.username}: {exc}")
                return SaveOutcome.failure("Database error.")
        return SaveOutcome.success()

    def get(self, username: str) -> Optional[UserRecord]:
        with self._session_factory() as db:
            row = db.query(RegisteredUser).filter(RegisteredUser.username == username).first()
            if row is None:
                return None
            return UserRecord(
                username=row.username,
                email=row.email,
                password=row.password_hash,
                extra=dict(row.profile or {}),
            )
