"""User model."""

from enum import Enum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, ObjectIdMixin, TimestampMixin


class Role(str, Enum):
    """Closed set of account roles."""

    CLIENT = "client"
    VENDOR = "vendor"
    ADMIN = "admin"


class User(Base, ObjectIdMixin, TimestampMixin):
    """Account of a client, vendor or administrator."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), default=Role.CLIENT.value, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(20))

    services: Mapped[list["Service"]] = relationship(
        "Service",
        back_populates="vendor",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role={self.role})>"
