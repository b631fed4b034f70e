"""Vehicle valuation request/result schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ValuationRequestCreate(BaseModel):
    """Vehicle details submitted from the valuation form."""

    make: str = Field(..., min_length=1, max_length=64, description="Vehicle make", examples=["Toyota"])
    model: str = Field(..., min_length=1, max_length=64, description="Vehicle model", examples=["Camry"])
    year: int = Field(..., gt=0, description="Model year", examples=[2019])
    mileage: int = Field(..., ge=0, description="Odometer reading in miles", examples=[45000])
    zip_code: str = Field(
        ..., pattern=r"^\d{5}$", description="5-digit ZIP code, kept as text", examples=["02134"]
    )
    user_id: Optional[str] = Field(None, description="Owning user, set by the server")


class ValuationResultCreate(BaseModel):
    """Computed values to persist for a valuation request."""

    request_id: Optional[str] = None
    trade_in_value: Optional[Decimal] = None
    private_party_value: Optional[Decimal] = None
    retail_value: Optional[Decimal] = None
    loan_amount: Optional[Decimal] = None
    ltv_ratio: Optional[Decimal] = None
    estimated_rate: Optional[Decimal] = None
    monthly_payment: Optional[Decimal] = None


class ValuationRequestRead(BaseModel):
    """Persisted valuation request."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    make: str
    model: str
    year: int
    mileage: int
    zip_code: str
    created_at: Optional[datetime] = None


class ValuationResultRead(BaseModel):
    """Persisted valuation result."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    request_id: Optional[str] = None
    trade_in_value: Optional[Decimal] = None
    private_party_value: Optional[Decimal] = None
    retail_value: Optional[Decimal] = None
    loan_amount: Optional[Decimal] = None
    ltv_ratio: Optional[Decimal] = None
    estimated_rate: Optional[Decimal] = None
    monthly_payment: Optional[Decimal] = None
    created_at: Optional[datetime] = None


class VehicleInfo(BaseModel):
    """Display strings for the vehicle summary card."""

    summary: str = Field(..., examples=["2019 Toyota Camry"])
    mileage: str = Field(..., examples=["45,000 miles"])
    location: str = Field(..., examples=["ZIP 02134"])


class ReportInfo(BaseModel):
    """Report metadata shown on result pages."""

    date: str = Field(..., examples=["Oct 19, 2026"])


class ValuationResponse(BaseModel):
    """Combined request/result view for a vehicle valuation."""

    request: ValuationRequestRead
    result: ValuationResultRead
    vehicle_info: VehicleInfo
    report_info: ReportInfo
