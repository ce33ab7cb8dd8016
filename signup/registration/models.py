"""
models.py
----------
SQLAlchemy ORM model for registered users.

Portable column types only (``Uuid``, ``JSON``) so the same table works on
PostgreSQL and on the SQLite database used in tests. Additional profile
fields are kept verbatim in ``profile``.
"""

import uuid

from sqlalchemy import JSON, TIMESTAMP, Column, Index, String, Text, Uuid, func

from signup.db.base import Base


# ---------------------------------------------------------------------------
# Registered users
# ---------------------------------------------------------------------------
class RegisteredUser(Base):
    """
    One row per successful registration.
    - username and email are unique.
    - password_hash is the encoded Argon2id string (salt embedded).
    """
    __tablename__ = "registered_users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(150), unique=True, nullable=False)
    email = Column(String(320), unique=True, nullable=False)
    password_hash = Column(Text, nullable=False)
    profile = Column(JSON, nullable=False, default=dict)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    # Case-insensitive email index for quick lookups
    __table_args__ = (
        Index("idx_registered_users_email_lower", func.lower(email)),
    )
