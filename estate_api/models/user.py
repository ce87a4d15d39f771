"""
User model for site administrators.
Handles password hashing for stored accounts.
"""

from dataclasses import dataclass
from passlib.context import CryptContext

# Password hashing context
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


@dataclass
class User:
    """
    Administrator account.

    `password` holds an opaque hash, never the clear text.
    Users are permanent once created.
    """

    id: int
    username: str
    password: str

    SERVER_FIELDS = ("id",)

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash a password for storage.

        Args:
            password: Plain text password

        Returns:
            Hashed password string
        """
        return pwd_context.hash(password)

    def verify_password(self, password: str) -> bool:
        """
        Verify a password against the stored hash.

        Args:
            password: Plain text password to verify

        Returns:
            True if password matches, False otherwise
        """
        return pwd_context.verify(password, self.password)

    def to_dict(self) -> dict:
        """Convert user to dictionary, without the password hash."""
        return {"id": self.id, "username": self.username}

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
