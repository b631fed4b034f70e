"""SQLAlchemy models for all database tables."""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import TIMESTAMP, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from assetlens.core.database import Base


def generate_id() -> str:
    """Generate an opaque record identifier."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """A signed-in or guest user."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    email: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    google_id: Mapped[str | None] = mapped_column(String, unique=True, nullable=True)
    created_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), default=utc_now, onupdate=utc_now
    )

    assets: Mapped[list["UserAsset"]] = relationship("UserAsset", back_populates="user")


class UserAsset(Base):
    """Binds a user to one vehicle or property request for the dashboard.

    ``asset_id`` references ``valuation_requests.id`` or
    ``land_assessment_requests.id`` depending on ``asset_type``. There is no
    foreign key across the two tables.
    """

    __tablename__ = "user_assets"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    user_id: Mapped[str] = mapped_column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    asset_type: Mapped[str] = mapped_column(String(16), nullable=False)  # vehicle, property
    asset_id: Mapped[str] = mapped_column(String(64), nullable=False)
    custom_name: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), default=utc_now)

    user: Mapped["User"] = relationship("User", back_populates="assets")


class ValuationRequest(Base):
    """A vehicle valuation query."""

    __tablename__ = "valuation_requests"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    user_id: Mapped[str | None] = mapped_column(String(64), ForeignKey("users.id"), nullable=True)
    make: Mapped[str] = mapped_column(String, nullable=False)
    model: Mapped[str] = mapped_column(String, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    mileage: Mapped[int] = mapped_column(Integer, nullable=False)
    zip_code: Mapped[str] = mapped_column(String(10), nullable=False)
    created_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), default=utc_now)


class ValuationResult(Base):
    """Price tiers and loan analysis computed for a valuation request."""

    __tablename__ = "valuation_results"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    request_id: Mapped[str | None] = mapped_column(
        String(64), ForeignKey("valuation_requests.id"), nullable=True, index=True
    )
    trade_in_value: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    private_party_value: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    retail_value: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    loan_amount: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    ltv_ratio: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)  # percent
    estimated_rate: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)  # APR percent
    monthly_payment: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    created_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), default=utc_now)


class LandAssessmentRequest(Base):
    """A property assessment query."""

    __tablename__ = "land_assessment_requests"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    user_id: Mapped[str | None] = mapped_column(String(64), ForeignKey("users.id"), nullable=True)
    street_address: Mapped[str] = mapped_column(String, nullable=False)
    city: Mapped[str] = mapped_column(String, nullable=False)
    state: Mapped[str] = mapped_column(String, nullable=False)
    zip_code: Mapped[str | None] = mapped_column(String(10), nullable=True)
    created_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), default=utc_now)


class LandAssessmentResult(Base):
    """Normalized parcel values for a land assessment request."""

    __tablename__ = "land_assessment_results"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_id)
    request_id: Mapped[str | None] = mapped_column(
        String(64), ForeignKey("land_assessment_requests.id"), nullable=True, index=True
    )
    assessed_value: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    market_value: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    land_value: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    improvement_value: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    property_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    lot_size: Mapped[Decimal | None] = mapped_column(Numeric(12, 4), nullable=True)  # acres
    year_built: Mapped[int | None] = mapped_column(Integer, nullable=True)
    owner_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    apn: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), default=utc_now)
