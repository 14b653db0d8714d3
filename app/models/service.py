"""Service catalog model."""

from enum import Enum

from sqlalchemy import Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, ObjectIdMixin, TimestampMixin


class ServiceStatus(str, Enum):
    """Visibility of a service in the public catalog."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class ServiceCategory(str, Enum):
    """Categories a vendor may file a service under."""

    HAIR = "Hair"
    MAKEUP = "Makeup"
    SPA = "Spa"
    NAILS = "Nails"
    SKINCARE = "Skincare"
    MASSAGE = "Massage"
    OTHER = "Other"


class Service(Base, ObjectIdMixin, TimestampMixin):
    """A bookable service offered by exactly one vendor."""

    __tablename__ = "services"
    __table_args__ = (Index("ix_services_vendor_status", "vendor_id", "status"),)

    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    category: Mapped[str] = mapped_column(String(20), index=True, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), default=ServiceStatus.ACTIVE.value, index=True, nullable=False
    )
    image_url: Mapped[str | None] = mapped_column(String(500))

    # Owner; never reassigned after creation
    vendor_id: Mapped[str] = mapped_column(
        String(24), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    vendor: Mapped["User"] = relationship("User", back_populates="services", lazy="joined")

    def __repr__(self) -> str:
        return f"<Service(id={self.id}, title='{self.title}', vendor_id={self.vendor_id})>"
