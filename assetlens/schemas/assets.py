"""User asset and dashboard schemas."""

from datetime import datetime
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from assetlens.schemas.auth import UserProfile


class AssetType(str, Enum):
    """Kind of request a user asset points at."""

    VEHICLE = "vehicle"
    PROPERTY = "property"


class VehicleAssetRef(BaseModel):
    """Reference to a vehicle valuation request."""

    asset_type: Literal["vehicle"] = "vehicle"
    request_id: str


class PropertyAssetRef(BaseModel):
    """Reference to a land assessment request."""

    asset_type: Literal["property"] = "property"
    request_id: str


AssetRef = Annotated[Union[VehicleAssetRef, PropertyAssetRef], Field(discriminator="asset_type")]


class UserAssetCreate(BaseModel):
    """Binding of a user to one request."""

    user_id: str
    asset_type: AssetType
    asset_id: str
    custom_name: Optional[str] = Field(None, max_length=120)


class UserAssetBind(BaseModel):
    """Request body for adding an existing report to the caller's portfolio."""

    asset: AssetRef
    custom_name: Optional[str] = Field(None, max_length=120, description="Display name override")


class AssetSummary(BaseModel):
    """One resolved row of the portfolio."""

    id: str = Field(..., description="User asset ID")
    type: AssetType
    request_id: str
    name: str = Field(..., examples=["My Commuter"])
    summary: str = Field(..., examples=["2019 Toyota Camry"])
    value: str = Field(..., examples=["$12,000"])
    created_at: Optional[datetime] = None


class UserDashboard(BaseModel):
    """Portfolio totals for the dashboard."""

    user: UserProfile
    assets: List[AssetSummary] = Field(default_factory=list)
    total_value: str = Field(..., examples=["$12,000"])
    vehicle_count: int = 0
    property_count: int = 0
