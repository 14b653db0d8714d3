"""User profile service."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.utils.exceptions import UserNotFoundError

# Fields a user may change on their own profile
PROFILE_FIELDS = frozenset({"name", "phone"})


class UserService:
    """Service for user profile operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_by_id(self, user_id: str) -> User:
        """Get user by ID."""

        user = await self.db.get(User, user_id)
        if not user:
            raise UserNotFoundError()

        return user

    async def update_profile(self, user_id: str, **update_data) -> User:
        """Update the caller's own profile fields."""

        user = await self.get_user_by_id(user_id)

        for field, value in update_data.items():
            if field in PROFILE_FIELDS and value is not None:
                setattr(user, field, value)

        await self.db.commit()
        await self.db.refresh(user)

        return user
