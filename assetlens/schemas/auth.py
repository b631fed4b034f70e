"""Authentication and user schemas.

This module defines Pydantic models for the identity carried by a bearer
token and for the user profile returned by the API.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class CurrentUser(BaseModel):
    """Identity extracted from a verified access token."""

    id: str = Field(..., description="External identity ID (token subject)")
    email: EmailStr = Field(..., description="User email")
    name: Optional[str] = Field(None, description="Display name")
    picture: Optional[str] = Field(None, description="Avatar URL")


class UserCreate(BaseModel):
    """User creation model."""

    email: EmailStr = Field(..., description="User email address")
    name: str = Field(..., description="Display name")
    image: Optional[str] = Field(None, description="Avatar URL")
    google_id: Optional[str] = Field(None, description="External identity ID")


class UserUpdate(BaseModel):
    """User update model with optional fields."""

    name: Optional[str] = Field(None, description="Display name")
    image: Optional[str] = Field(None, description="Avatar URL")
    google_id: Optional[str] = Field(None, description="External identity ID")


class UserProfile(BaseModel):
    """User profile information for API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User email")
    name: str = Field(..., description="Display name")
    image: Optional[str] = Field(None, description="Avatar URL")
    created_at: Optional[datetime] = Field(None, description="Account creation date")


__all__ = [
    "CurrentUser",
    "UserCreate",
    "UserUpdate",
    "UserProfile",
]
