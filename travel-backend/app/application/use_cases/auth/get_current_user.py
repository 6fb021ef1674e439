# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for loading the profile of the user a verified token names"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> Optional[UserResponse]:
        """
        Get the current user's profile

        Args:
            user_id: User ID taken from a verified access token

        Returns:
            UserResponse, or None if the user no longer exists
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return None

        return UserResponse(
            id=user.id or "",
            full_name=user.full_name,
            email=user.email,
            created_on=user.created_on,
        )
