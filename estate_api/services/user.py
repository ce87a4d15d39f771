"""
User service for administrator accounts.
Accounts are managed from code and scripts only; there are no HTTP routes.
"""

from typing import Any, Dict, Optional, Union
import logging

from estate_api.storage import MemStorage
from estate_api.models.user import User
from estate_api.schemas.user import UserCreate
from estate_api.utils.exceptions import DuplicateResourceError, UserNotFoundError
from estate_api.utils.validators import validate_model

logger = logging.getLogger(__name__)


class UserService:
    """
    User account operations.

    Usernames are unique and accounts are never deleted.
    """

    def __init__(self, storage: MemStorage):
        self.user_repo = storage.users

    async def create_user(self, user_data: Union[UserCreate, Dict[str, Any]]) -> User:
        """
        Create a new user account.

        Args:
            user_data: Validated schema or raw dictionary with username and password

        Returns:
            Created user with hashed password

        Raises:
            ValidationError: If the raw input is invalid
            DuplicateResourceError: If the username is already taken
        """
        if not isinstance(user_data, UserCreate):
            user_data = validate_model(UserCreate, user_data)

        try:
            return await self.user_repo.create_user(user_data.model_dump())
        except ValueError:
            raise DuplicateResourceError("User", user_data.username)

    async def get_user(self, user_id: int) -> User:
        """
        Get user by ID.

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return await self.user_repo.get_by_username(username)

    async def authenticate(self, username: str, password: str) -> Optional[User]:
        """
        Check a username and password pair.

        Returns:
            The user when the password matches, None otherwise
        """
        user = await self.user_repo.get_by_username(username)
        if user is None or not user.verify_password(password):
            logger.warning(f"Failed authentication attempt for username: {username}")
            return None
        return user
