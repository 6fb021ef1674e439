# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...core.security import verify_access_token
from ..exceptions import UnauthorizedError


security_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> str:
    """
    FastAPI dependency guarding protected routes

    Verifies the bearer token and returns the user ID it carries. The user
    itself is not looked up here.

    Args:
        credentials: HTTP Bearer token credentials, if the header was sent

    Returns:
        The authenticated user ID

    Raises:
        UnauthorizedError: If the header is missing or the token does not verify
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()

    try:
        return verify_access_token(credentials.credentials)
    except ValueError:
        raise UnauthorizedError()
