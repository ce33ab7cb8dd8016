# signup/dependencies/registration.py
"""
FastAPI dependency providing the process-wide RegistrationService.

The storage backend and hashing mode are read from settings here, once,
and baked into the service; request handlers never consult settings for
them.
"""

from functools import lru_cache

from signup.core.config import Settings, settings
from signup.core.security import build_password_hasher
from signup.db.base import Base
from signup.db.session import build_engine, build_session_factory
from signup.registration.registry import default_registry
from signup.registration.services.register_services import RegistrationService
from signup.registration.storage import (
    InMemoryUserStorage,
    SQLAlchemyUserStorage,
    UserStorage,
)


def build_storage(config: Settings) -> UserStorage:
    if config.uses_database:
        engine = build_engine(config.DATABASE_URL)
        # For quick local development. In production, manage schema with Alembic.
        Base.metadata.create_all(bind=engine)
        return SQLAlchemyUserStorage(build_session_factory(engine))
    return InMemoryUserStorage()


def build_registration_service(config: Settings) -> RegistrationService:
    hasher = build_password_hasher(
        config.HASH_MODE,
        pepper=config.AUTH_PEPPER,
        salt_bytes=config.SALT_BYTES,
        time_cost=config.ARGON2_TIME_COST,
        memory_cost=config.ARGON2_MEMORY_COST,
        parallelism=config.ARGON2_PARALLELISM,
    )
    return RegistrationService(build_storage(config), hasher, default_registry())


@lru_cache
def get_registration_service() -> RegistrationService:
    return build_registration_service(settings)
