# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from ...application.dto.user_dto import UserProfileResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...domain.repositories.user_repository import UserAlreadyExistsError
from ...di.container import get_container
from ..exceptions import BadRequestError, ConflictError, UnauthorizedError
from .dependencies import get_current_user_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"])


@router.post("/create-account", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def create_account(request: UserRegistrationRequest) -> AuthResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        AuthResponse with the user summary and an access token
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        return await register_use_case.execute(request)
    except UserAlreadyExistsError as exception:
        raise ConflictError(str(exception))
    except ValueError as exception:
        raise BadRequestError(str(exception))


@router.post("/login", response_model=AuthResponse)
async def login(request: UserLoginRequest) -> AuthResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        AuthResponse with the user summary and an access token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        auth_response = await login_use_case.execute(request)
    except ValueError as exception:
        raise BadRequestError(str(exception))

    if auth_response is None:
        raise BadRequestError("Invalid Credentials")
    return auth_response


@router.get("/get-user", response_model=UserProfileResponse)
async def get_user(user_id: str = Depends(get_current_user_id)) -> UserProfileResponse:
    """
    Get the authenticated user's profile

    Args:
        user_id: User ID from the verified token

    Returns:
        UserProfileResponse wrapping the user record
    """
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    user = await get_current_user_use_case.execute(user_id)
    if user is None:
        logger.info("Token for unknown user %s rejected", user_id)
        raise UnauthorizedError()
    return UserProfileResponse(user=user)
