"""User service for business logic operations.

Signed-in users are matched by email on every sign-in; anonymous callers get a
guest record keyed by the id their browser session sends.
"""

import hashlib
from typing import Optional

from assetlens.database.models import User
from assetlens.repositories.store import BaseStore
from assetlens.schemas.auth import CurrentUser, UserCreate, UserProfile, UserUpdate
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)

GUEST_EMAIL_DOMAIN = "guest.assetlens.io"
GUEST_NAME = "Guest"

GUEST_KEY_LENGTH = 32


def guest_email(anonymous_id: str) -> Optional[str]:
    """Stable guest email for an anonymous session id, or None for a blank id.

    The local part is a digest of the exact id, so ids that differ only in
    case or punctuation map to different guests.
    """
    raw_id = anonymous_id.strip()
    if not raw_id:
        return None
    key = hashlib.sha256(raw_id.encode()).hexdigest()[:GUEST_KEY_LENGTH]
    return f"guest-{key}@{GUEST_EMAIL_DOMAIN}"


class UserService:
    """Service for user business logic operations."""

    def __init__(self, store: BaseStore):
        """Initialize service with a store.

        Args:
            store: Storage backend
        """
        self.store = store

    async def get_user(self, user_id: str) -> Optional[User]:
        return await self.store.get_user(user_id)

    async def get_or_create_from_identity(self, current_user: CurrentUser) -> User:
        """Get or create the user for a verified identity.

        A returning user's name, image and external id are refreshed from the
        latest token.

        Args:
            current_user: Identity from the bearer token

        Returns:
            User record (existing or newly created)
        """
        name = current_user.name or current_user.email.split("@")[0]
        user = await self.store.get_user_by_email(current_user.email)

        if user is None:
            LOGGER.info(f"First sign-in for identity {current_user.id}")
            return await self.store.create_user(
                UserCreate(
                    email=current_user.email,
                    name=name,
                    image=current_user.picture,
                    google_id=current_user.id,
                )
            )

        updated = await self.store.update_user(
            user.id,
            UserUpdate(name=name, image=current_user.picture, google_id=current_user.id),
        )
        return updated or user

    async def get_or_create_guest(self, anonymous_id: str) -> Optional[User]:
        email = guest_email(anonymous_id)
        if email is None:
            LOGGER.debug("Ignoring unusable anonymous session id")
            return None

        user = await self.store.get_user_by_email(email)
        if user is None:
            user = await self.store.create_user(UserCreate(email=email, name=GUEST_NAME))
            LOGGER.info(f"Created guest user {user.id}")
        return user

    async def resolve_owner(
        self,
        current_user: Optional[CurrentUser],
        anonymous_id: Optional[str] = None,
    ) -> Optional[User]:
        """User to attribute a submission to: the signed-in user, else the guest, else nobody."""
        if current_user is not None:
            return await self.get_or_create_from_identity(current_user)
        if anonymous_id:
            return await self.get_or_create_guest(anonymous_id)
        return None

    async def sync_current_user(self, current_user: CurrentUser) -> UserProfile:
        """Sync the currently authenticated user with the store.

        Args:
            current_user: Current authenticated user

        Returns:
            UserProfile data
        """
        user = await self.get_or_create_from_identity(current_user)
        return UserProfile.model_validate(user)
