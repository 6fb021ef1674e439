# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository, UserAlreadyExistsError
from ....domain.models.user import User
from ....core.security import hash_password, create_access_token
from ...dto.auth_dto import UserRegistrationRequest, AuthResponse
from ...dto.user_dto import UserSummary

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user and issuing their first token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> AuthResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            AuthResponse with the user summary and an access token

        Raises:
            ValueError: If a field is missing
            UserAlreadyExistsError: If user with email already exists
        """
        if not request.full_name or not request.email or not request.password:
            raise ValueError("All fields are required")

        # Friendly early exit; the unique index still guards concurrent registrations
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise UserAlreadyExistsError("User already exists")

        hashed_password = await asyncio.to_thread(hash_password, request.password)

        new_user = User(
            id=None,  # Will be set by repository
            full_name=request.full_name,
            email=request.email,
            hashed_password=hashed_password,
        )
        saved_user = await self.user_repository.create(new_user)
        logger.info("Registered user %s", saved_user.id)

        return AuthResponse(
            user=UserSummary(full_name=saved_user.full_name, email=saved_user.email),
            access_token=create_access_token(saved_user.id or ""),
            message="Registration Successful",
        )
