"""Base model classes and mixins."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from app.utils.security import generate_object_id


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base model class."""


class ObjectIdMixin:
    """Primary key in the store's 24-hex identifier format."""

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=generate_object_id)


class TimestampMixin:
    """Mixin for created_at and updated_at timestamps."""

    # Assigned in Python so listings sorted by creation time get microsecond resolution
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )
