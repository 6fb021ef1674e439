# Standard library imports
import asyncio
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import verify_password, create_access_token
from ...dto.auth_dto import UserLoginRequest, AuthResponse
from ...dto.user_dto import UserSummary

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> Optional[AuthResponse]:
        """
        Authenticate user and generate access token

        Unknown email and wrong password are indistinguishable to the caller.

        Args:
            request: Login request with email and password

        Returns:
            AuthResponse if authentication successful, None otherwise

        Raises:
            ValueError: If email or password is missing
        """
        if not request.email or not request.password:
            raise ValueError("Email and Password are required")

        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            logger.info("Login failed: unknown email")
            return None

        if not await asyncio.to_thread(verify_password, request.password, user.hashed_password):
            logger.info("Login failed: wrong password for user %s", user.id)
            return None

        return AuthResponse(
            message="Login Successful",
            user=UserSummary(full_name=user.full_name, email=user.email),
            access_token=create_access_token(user.id or ""),
        )
