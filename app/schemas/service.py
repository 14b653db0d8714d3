"""Service catalog schemas."""

from pydantic import BaseModel, Field, field_validator

from app.models.service import ServiceCategory, ServiceStatus
from app.utils.validators import validate_duration, validate_price

from .common import BaseResponse, TimestampMixin


class ServiceRecord(BaseModel):
    """Field constraints every stored service must satisfy."""

    model_config = {"str_strip_whitespace": True, "extra": "ignore"}

    title: str = Field(..., min_length=3, max_length=100)
    description: str = Field(..., min_length=10, max_length=1000)
    price: float
    duration: int
    category: ServiceCategory
    status: ServiceStatus = ServiceStatus.ACTIVE
    image_url: str | None = Field(None, max_length=500)

    @field_validator("price")
    @classmethod
    def validate_price_value(cls, v):
        return validate_price(v)

    @field_validator("duration")
    @classmethod
    def validate_duration_value(cls, v):
        return validate_duration(v)


class ServiceUpdate(BaseModel):
    """Partial update; unknown and owner fields are ignored."""

    model_config = {"str_strip_whitespace": True, "extra": "ignore"}

    title: str | None = Field(None, min_length=3, max_length=100)
    description: str | None = Field(None, min_length=10, max_length=1000)
    price: float | None = None
    duration: int | None = None
    category: ServiceCategory | None = None
    status: ServiceStatus | None = None
    image_url: str | None = Field(None, max_length=500)

    @field_validator("price")
    @classmethod
    def validate_price_value(cls, v):
        if v is not None:
            validate_price(v)
        return v

    @field_validator("duration")
    @classmethod
    def validate_duration_value(cls, v):
        if v is not None:
            validate_duration(v)
        return v


class VendorSummary(BaseModel):
    """Owner details embedded in service responses."""

    model_config = {"from_attributes": True}

    id: str
    name: str
    email: str


class ServiceResponse(TimestampMixin):
    """Schema for service response."""

    model_config = {"from_attributes": True}

    id: str
    title: str
    description: str
    price: float
    duration: int
    category: str
    status: str
    image_url: str | None = None
    vendor_id: str
    vendor: VendorSummary | None = None


class ServiceDetailResponse(BaseResponse):
    """Schema for a single service."""

    data: ServiceResponse


class ServiceListResponse(BaseResponse):
    """Schema for a page of services."""

    count: int
    total: int
    page: int
    total_pages: int
    data: list[ServiceResponse]
