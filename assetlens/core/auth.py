"""Authentication dependencies for FastAPI routes.

This module provides FastAPI dependency injection functions for
bearer token verification and anonymous session identification.
"""

from typing import Any, Dict, Optional

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError as PydanticValidationError

from assetlens.core.config import settings
from assetlens.schemas.auth import CurrentUser
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)

ALGORITHM = "HS256"

# HTTP Bearer token scheme
security = HTTPBearer(auto_error=False)


def decode_token(token: str) -> Dict[str, Any]:
    """Verify an HS256 access token and return its claims.

    Raises:
        jwt.InvalidTokenError: If the token is malformed, expired or signed with another key
    """
    if not settings.auth.jwt_secret:
        raise jwt.InvalidTokenError("Token verification secret is not configured")

    options = {"require": ["sub", "exp"]}
    kwargs: Dict[str, Any] = {"algorithms": [ALGORITHM], "options": options}
    if settings.auth.jwt_audience:
        kwargs["audience"] = settings.auth.jwt_audience
    else:
        options["verify_aud"] = False
    if settings.auth.jwt_issuer:
        kwargs["issuer"] = settings.auth.jwt_issuer

    return jwt.decode(token, settings.auth.jwt_secret, **kwargs)


def claims_to_user(claims: Dict[str, Any]) -> CurrentUser:
    return CurrentUser(
        id=str(claims["sub"]),
        email=claims.get("email"),
        name=claims.get("name"),
        picture=claims.get("picture"),
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> CurrentUser:
    """Get the current authenticated user from the bearer token.

    Raises:
        HTTPException: If token is missing or invalid
    """
    if not credentials:
        LOGGER.warning("No authorization credentials provided")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header missing",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user = claims_to_user(decode_token(credentials.credentials))
        LOGGER.debug(f"Authenticated user: {user.id} ({user.email})")
        return user

    except (jwt.InvalidTokenError, PydanticValidationError) as e:
        LOGGER.warning(f"Invalid token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


async def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[CurrentUser]:
    """Get the current user if authenticated, None otherwise.

    Used by routes that serve both signed-in and anonymous callers.
    """
    if not credentials:
        return None

    try:
        return await get_current_user(credentials)
    except HTTPException:
        return None


async def get_anonymous_id(request: Request) -> Optional[str]:
    """Anonymous browser session id, if the client sent one."""
    value = request.headers.get(settings.auth.anonymous_header)
    return value.strip() if value and value.strip() else None
