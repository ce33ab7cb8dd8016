import pytest

from signup.core import security
from signup.core.security import (
    AsyncPasswordHasher,
    HashMode,
    SyncPasswordHasher,
    build_password_hasher,
    generate_salt,
    verify_password,
)
from signup.registration.errors import HashingFailure
from tests.conftest import FAST_ARGON2, PEPPER

PASSWORD = "Testpass1@"


class TestSyncPasswordHasher:
    def test_hash_is_not_plaintext_and_verifies(self, sync_hasher):
        credential = sync_hasher.hash(PASSWORD)

        assert credential.password_hash != PASSWORD
        assert credential.password_hash.startswith("$argon2id$")
        assert verify_password(PASSWORD, credential.password_hash, PEPPER)
        assert sync_hasher.verify(PASSWORD, credential.password_hash)

    def test_pepper_is_required_to_verify(self, sync_hasher):
        credential = sync_hasher.hash(PASSWORD)
        assert not verify_password(PASSWORD, credential.password_hash)

    def test_fresh_salt_per_call(self, sync_hasher):
        first = sync_hasher.hash(PASSWORD)
        second = sync_hasher.hash(PASSWORD)

        assert first.salt != second.salt
        assert first.password_hash != second.password_hash
        assert len(bytes.fromhex(first.salt)) == sync_hasher.salt_bytes

    def test_entropy_failure_becomes_hashing_failure(self, sync_hasher, monkeypatch):
        def broken(size):
            raise OSError("no entropy")

        monkeypatch.setattr(security.secrets, "token_bytes", broken)
        with pytest.raises(HashingFailure):
            sync_hasher.hash(PASSWORD)

    def test_invalid_cost_becomes_hashing_failure(self):
        hasher = SyncPasswordHasher(time_cost=1, memory_cost=1, parallelism=1)
        with pytest.raises(HashingFailure):
            hasher.hash(PASSWORD)


class TestAsyncPasswordHasher:
    pytestmark = pytest.mark.asyncio

    async def test_hash_verifies(self, async_hasher):
        credential = await async_hasher.hash(PASSWORD)

        assert credential.password_hash != PASSWORD
        assert async_hasher.verify(PASSWORD, credential.password_hash)

    async def test_fresh_salt_per_call(self, async_hasher):
        first = await async_hasher.hash(PASSWORD)
        second = await async_hasher.hash(PASSWORD)
        assert first.salt != second.salt

    async def test_entropy_failure_propagates(self, async_hasher, monkeypatch):
        def broken(size):
            raise OSError("no entropy")

        monkeypatch.setattr(security.secrets, "token_bytes", broken)
        with pytest.raises(HashingFailure):
            await async_hasher.hash(PASSWORD)


class TestBuildPasswordHasher:
    @pytest.mark.parametrize(
        "mode, expected",
        [
            ("sync", SyncPasswordHasher),
            ("async", AsyncPasswordHasher),
            (HashMode.ASYNC, AsyncPasswordHasher),
        ],
    )
    def test_selects_strategy(self, mode, expected):
        hasher = build_password_hasher(mode, **FAST_ARGON2)
        assert type(hasher) is expected
        assert hasher.mode is HashMode(mode)

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValueError):
            build_password_hasher("threaded")

    def test_short_salt_rejected(self):
        with pytest.raises(HashingFailure):
            generate_salt(4)
