"""
db/base.py

Declarative base, timestamp mixin and schema bootstrap for the catalog tables.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Project-wide declarative base.
    All models must inherit from this class.
    """


class TimestampMixin:
    """
    Adds created_at/updated_at, stamped client-side so SQLite and PostgreSQL
    behave the same.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )


def init_schema(engine: Engine) -> None:
    """
    Create missing catalog tables. Existing tables are left untouched.
    """

    import db.models  # noqa: F401 (registers models on Base.metadata)

    Base.metadata.create_all(bind=engine)
