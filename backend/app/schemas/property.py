from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from app.models.property import PropertyStatus, PropertyType

_NOT_NULLABLE = {
    "title",
    "address",
    "city",
    "state",
    "zip_code",
    "price",
    "property_type",
    "status",
    "featured",
    "images",
    "features",
}


class PropertyCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    address: str = Field(min_length=1, max_length=255)
    city: str = Field(min_length=1, max_length=120)
    state: str = Field(min_length=1, max_length=120)
    zip_code: str = Field(min_length=1, max_length=20)
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    bedrooms: int | None = Field(default=None, ge=0)
    bathrooms: Decimal | None = Field(default=None, ge=0, max_digits=3, decimal_places=1)
    sqft: int | None = Field(default=None, ge=0)
    lot_size: Decimal | None = Field(default=None, ge=0, max_digits=8, decimal_places=2)
    year_built: int | None = None
    property_type: PropertyType
    status: PropertyStatus = PropertyStatus.for_sale
    featured: bool = False
    images: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    agent_id: str | None = None


class PropertyUpdate(BaseModel):
    # Partial update: only fields present in the request body are applied.
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    address: str | None = Field(default=None, min_length=1, max_length=255)
    city: str | None = Field(default=None, min_length=1, max_length=120)
    state: str | None = Field(default=None, min_length=1, max_length=120)
    zip_code: str | None = Field(default=None, min_length=1, max_length=20)
    price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    bedrooms: int | None = Field(default=None, ge=0)
    bathrooms: Decimal | None = Field(default=None, ge=0, max_digits=3, decimal_places=1)
    sqft: int | None = Field(default=None, ge=0)
    lot_size: Decimal | None = Field(default=None, ge=0, max_digits=8, decimal_places=2)
    year_built: int | None = None
    property_type: PropertyType | None = None
    status: PropertyStatus | None = None
    featured: bool | None = None
    images: list[str] | None = None
    features: list[str] | None = None
    agent_id: str | None = None

    @model_validator(mode="after")
    def _reject_null_required(self):
        for name in sorted(self.model_fields_set & _NOT_NULLABLE):
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class PropertyResponse(BaseModel):
    id: str
    title: str
    description: str | None
    address: str
    city: str
    state: str
    zip_code: str
    price: Decimal
    bedrooms: int | None
    bathrooms: Decimal | None
    sqft: int | None
    lot_size: Decimal | None
    year_built: int | None
    property_type: PropertyType
    status: PropertyStatus
    featured: bool
    images: list[str]
    features: list[str]
    agent_id: str | None
    views: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class PropertySearch(BaseModel):
    """Filter, sort and page parameters for a listing query.

    Every filter is optional; a missing filter places no constraint on its
    column. ``sort_by`` accepts ``price``, ``created_at``, ``views`` or
    ``sqft``; anything else sorts by ``created_at``.
    """

    query: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    property_type: PropertyType | None = None
    status: PropertyStatus | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    min_bedrooms: int | None = None
    max_bedrooms: int | None = None
    min_bathrooms: Decimal | None = None
    max_bathrooms: Decimal | None = None
    min_sqft: int | None = None
    max_sqft: int | None = None
    featured: bool | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=12, ge=1)
    sort_by: str = "created_at"
    sort_order: Literal["asc", "desc"] = "desc"

    def filters(self) -> dict:
        """The filter fields that were actually supplied, for search history."""
        return self.model_dump(
            mode="json",
            exclude_none=True,
            exclude={"query", "page", "limit", "sort_by", "sort_order"},
        )


class PropertyListResponse(BaseModel):
    properties: list[PropertyResponse]
    total: int
