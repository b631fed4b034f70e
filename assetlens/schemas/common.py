"""Shared response envelope models."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ResponseMeta(BaseModel):
    """Metadata attached to every API response."""

    timestamp: datetime = Field(..., description="Response creation time (UTC)")
    request_id: str = Field(..., description="Request correlation ID")
    api_version: str = Field(default="v1", description="API version")


class ApiResponse(BaseModel):
    """Standard success envelope."""

    status: bool = Field(default=True, description="Whether the operation succeeded")
    message: str = Field(..., description="Human-readable status message")
    data: Dict[str, Any] = Field(default_factory=dict, description="Response payload")
    meta: ResponseMeta


class ErrorDetail(BaseModel):
    """Problem details body (RFC 7807)."""

    title: str = Field(..., description="Short error title")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="User-facing explanation")
    instance: Optional[str] = Field(None, description="Request path")
    request_id: str = Field(..., description="Request correlation ID")
    timestamp: datetime = Field(..., description="Error time (UTC)")
