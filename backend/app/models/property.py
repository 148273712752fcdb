from datetime import datetime
from decimal import Decimal
import enum
import uuid

from sqlalchemy import JSON, Boolean, CheckConstraint, DateTime, Enum, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base


class PropertyType(str, enum.Enum):
    house = "house"
    condo = "condo"
    townhome = "townhome"
    multi_family = "multi-family"
    land = "land"
    commercial = "commercial"


class PropertyStatus(str, enum.Enum):
    for_sale = "for-sale"
    for_rent = "for-rent"
    sold = "sold"
    rented = "rented"
    pending = "pending"
    off_market = "off-market"


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    # Store "multi-family", not the member name "multi_family".
    return [member.value for member in enum_cls]


class Property(Base):
    __tablename__ = "properties"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_properties_price_non_negative"),
        CheckConstraint("views >= 0", name="ck_properties_views_non_negative"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
    state: Mapped[str] = mapped_column(String(120), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, index=True)
    bedrooms: Mapped[int | None] = mapped_column(Integer)
    bathrooms: Mapped[Decimal | None] = mapped_column(Numeric(3, 1))
    sqft: Mapped[int | None] = mapped_column(Integer)
    lot_size: Mapped[Decimal | None] = mapped_column(Numeric(8, 2))
    year_built: Mapped[int | None] = mapped_column(Integer)
    property_type: Mapped[PropertyType] = mapped_column(
        Enum(PropertyType, name="property_type", values_callable=_enum_values), nullable=False, index=True
    )
    status: Mapped[PropertyStatus] = mapped_column(
        Enum(PropertyStatus, name="property_status", values_callable=_enum_values),
        default=PropertyStatus.for_sale,
        nullable=False,
    )
    featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    images: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    features: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    agent_id: Mapped[str | None] = mapped_column(ForeignKey("users.id", ondelete="SET NULL"))
    views: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    agent = relationship("User")
