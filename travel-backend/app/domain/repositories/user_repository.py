from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserAlreadyExistsError(ValueError):
    """Raised when a user with the same email is already stored"""


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insert a new user.

        Raises UserAlreadyExistsError when the email is taken; the check and
        the insert are a single store operation.
        """
        pass
