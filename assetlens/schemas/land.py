"""Land assessment request/result schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from assetlens.schemas.valuation import ReportInfo


class LandAssessmentRequestCreate(BaseModel):
    """Address submitted from the land assessment form.

    ``lat``/``lng`` come from the places autocomplete and are only used by the
    county pre-filter; they are not persisted.
    """

    street_address: str = Field(..., min_length=1, description="Street address", examples=["101 City Hall Plaza"])
    city: str = Field(..., min_length=1, description="City", examples=["Durham"])
    state: str = Field(..., min_length=2, max_length=2, description="Two-letter state code", examples=["NC"])
    zip_code: Optional[str] = Field(None, pattern=r"^\d{5}$", description="5-digit ZIP code")
    lat: Optional[float] = Field(None, ge=-90, le=90, description="Latitude from geocoding")
    lng: Optional[float] = Field(None, ge=-180, le=180, description="Longitude from geocoding")
    user_id: Optional[str] = Field(None, description="Owning user, set by the server")


class LandAssessmentResultCreate(BaseModel):
    """Normalized parcel values to persist for a land assessment request."""

    request_id: Optional[str] = None
    assessed_value: Optional[Decimal] = None
    market_value: Optional[Decimal] = None
    land_value: Optional[Decimal] = None
    improvement_value: Optional[Decimal] = None
    property_type: Optional[str] = None
    lot_size: Optional[Decimal] = None
    year_built: Optional[int] = None
    owner_name: Optional[str] = None
    apn: Optional[str] = None


class LandAssessmentRequestRead(BaseModel):
    """Persisted land assessment request."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    street_address: str
    city: str
    state: str
    zip_code: Optional[str] = None
    created_at: Optional[datetime] = None


class LandAssessmentResultRead(BaseModel):
    """Persisted land assessment result."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    request_id: Optional[str] = None
    assessed_value: Optional[Decimal] = None
    market_value: Optional[Decimal] = None
    land_value: Optional[Decimal] = None
    improvement_value: Optional[Decimal] = None
    property_type: Optional[str] = None
    lot_size: Optional[Decimal] = None
    year_built: Optional[int] = None
    owner_name: Optional[str] = None
    apn: Optional[str] = None
    created_at: Optional[datetime] = None


class PropertyInfo(BaseModel):
    """Display strings for the property summary card."""

    summary: str = Field(..., examples=["Single Family Residential"])
    address: str = Field(..., examples=["101 City Hall Plaza, Durham, NC 27701"])
    location: str = Field(..., examples=["Durham, NC"])


class LandAssessmentResponse(BaseModel):
    """Combined request/result view for a land assessment."""

    request: LandAssessmentRequestRead
    result: LandAssessmentResultRead
    property_info: PropertyInfo
    report_info: ReportInfo
