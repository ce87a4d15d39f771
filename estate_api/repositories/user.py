"""
User repository for administrator accounts.
Provides account creation with password hashing and lookup by username.
"""

from typing import Optional, Dict, Any
import copy
import logging

from estate_api.repositories.base import InMemoryRepository
from estate_api.models.user import User

logger = logging.getLogger(__name__)


class UserRepository(InMemoryRepository[User]):
    """
    Repository for user accounts.

    Usernames are unique. There is no delete: accounts are permanent.
    """

    def __init__(self):
        super().__init__(User)

    async def create_user(self, user_data: Dict[str, Any]) -> User:
        """
        Create a new user with a hashed password.

        Args:
            user_data: Dictionary with `username` and clear-text `password`

        Returns:
            Created user instance

        Raises:
            ValueError: If the username is already taken
        """
        username = user_data["username"]
        hashed_password = User.hash_password(user_data["password"])

        with self._lock:
            # Check and insert under one lock so two creates cannot both pass
            if self._find_by_username(username) is not None:
                logger.error(f"User validation failed: username {username} already exists")
                raise ValueError(f"User with username {username} already exists")

            created_user = self._insert({"username": username, "password": hashed_password})

        logger.info(f"Created user: {created_user.username} (ID: {created_user.id})")
        return created_user

    def _find_by_username(self, username: str) -> Optional[User]:
        for user in self._rows.values():
            if user.username == username:
                return user
        return None

    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username.

        Args:
            username: Exact username to search for

        Returns:
            User instance if found, None otherwise
        """
        with self._lock:
            user = self._find_by_username(username)
            return copy.deepcopy(user) if user else None

    async def update(self, id: int, changes: Dict[str, Any]) -> Optional[User]:
        """
        Update a user, hashing a new password and keeping usernames unique.

        Args:
            id: Identifier of the user
            changes: Field values to overwrite; `password` is clear text

        Returns:
            Updated user if found, None otherwise

        Raises:
            ValueError: If a value is null or the new username belongs to another user
        """
        changes = dict(changes)
        for field_name in ("username", "password"):
            if field_name in changes and changes[field_name] is None:
                raise ValueError(f"User {field_name} cannot be null")
        if "password" in changes:
            changes["password"] = User.hash_password(changes["password"])

        with self._lock:
            current = self._rows.get(id)
            if current is None:
                logger.debug(f"User with id {id} not found for update")
                return None

            if "username" in changes:
                owner = self._find_by_username(changes["username"])
                if owner is not None and owner.id != id:
                    logger.error(f"User validation failed: username {changes['username']} already exists")
                    raise ValueError(f"User with username {changes['username']} already exists")

            if not changes:
                return copy.deepcopy(current)

            updated = self._merge(current, changes)
            self._rows[id] = updated

        logger.info(f"Updated user: {updated.username} (ID: {id})")
        return copy.deepcopy(updated)
