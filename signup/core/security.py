# signup/core/security.py
"""
Password hashing for registration.

Provides two hashing strategies sharing one Argon2id derivation:
- SyncPasswordHasher  (blocking; returns the hash directly)
- AsyncPasswordHasher (salt generation and hashing run in the threadpool;
  the caller suspends until both complete)

The strategy is picked once, when the registration service is built, via
``build_password_hasher``. A fresh random salt is drawn for every call and
an optional server-side pepper is appended to the password so it never
travels with a database dump.
"""

import enum
import secrets
from dataclasses import dataclass

from fastapi.concurrency import run_in_threadpool
from passlib.hash import argon2

from signup.registration.errors import HashingFailure

MIN_SALT_BYTES = 8


class HashMode(str, enum.Enum):
    SYNC = "sync"
    ASYNC = "async"


@dataclass(frozen=True, slots=True)
class HashedCredential:
    """Salt (hex) and the encoded Argon2id hash derived with it."""

    salt: str
    password_hash: str


# ----------------------------------------------------------------------
# Primitives
# ----------------------------------------------------------------------

def generate_salt(size: int = 16) -> bytes:
    """
    Draw ``size`` random bytes from the OS entropy source.

    Raises:
        HashingFailure: If the entropy source is unavailable
    """
    if size < MIN_SALT_BYTES:
        raise HashingFailure(f"Salt must be at least {MIN_SALT_BYTES} bytes.")
    try:
        return secrets.token_bytes(size)
    except (OSError, NotImplementedError) as exc:
        raise HashingFailure("Entropy source unavailable.") from exc


def verify_password(plain_password: str, hashed_password: str, pepper: str = "") -> bool:
    """
    Verify password using Argon2id with optional server-side pepper.
    """
    return argon2.verify(plain_password + pepper, hashed_password)


# ----------------------------------------------------------------------
# Hashing strategies
# ----------------------------------------------------------------------

class PasswordHasher:
    """
    Shared Argon2id derivation used by both hashing modes.

    Args:
        pepper: Server-side secret appended to every password
        salt_bytes: Length of the random salt
        time_cost / memory_cost / parallelism: Argon2id cost parameters
    """

    mode: HashMode

    def __init__(
        self,
        *,
        pepper: str = "",
        salt_bytes: int = 16,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ) -> None:
        self.pepper = pepper
        self.salt_bytes = salt_bytes
        self._costs = {
            "time_cost": time_cost,
            "memory_cost": memory_cost,
            "parallelism": parallelism,
        }

    def _derive(self, password: str, salt: bytes) -> HashedCredential:
        try:
            handler = argon2.using(salt=salt, **self._costs)
            password_hash = handler.hash(password + self.pepper)
        except (RuntimeError, ValueError, TypeError) as exc:
            raise HashingFailure() from exc
        return HashedCredential(salt=salt.hex(), password_hash=password_hash)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        return verify_password(plain_password, hashed_password, self.pepper)


class SyncPasswordHasher(PasswordHasher):
    mode = HashMode.SYNC

    def hash(self, password: str) -> HashedCredential:
        salt = generate_salt(self.salt_bytes)
        return self._derive(password, salt)


class AsyncPasswordHasher(PasswordHasher):
    mode = HashMode.ASYNC

    async def hash(self, password: str) -> HashedCredential:
        salt = await run_in_threadpool(generate_salt, self.salt_bytes)
        return await run_in_threadpool(self._derive, password, salt)


def build_password_hasher(mode: HashMode | str, **options) -> PasswordHasher:
    """
    Return the hashing strategy for ``mode``.

    Raises:
        ValueError: If ``mode`` is not a known HashMode
    """
    mode = HashMode(mode)
    if mode is HashMode.ASYNC:
        return AsyncPasswordHasher(**options)
    return SyncPasswordHasher(**options)
