# signup/db/session.py
"""
Engine and session factory for the database-backed user storage.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from signup.core.config import settings


def build_engine(url: str = settings.DATABASE_URL):
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)

    connect_args = {"check_same_thread": False}
    if parsed.database in (None, "", ":memory:"):
        # In-memory SQLite lives on one connection; share it across threads
        return create_engine(url, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


def build_session_factory(engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
