
from .config import Settings, get_settings
from .logging import configure_logging
from .security import (
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
    create_access_token,
    verify_access_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "hash_password",
    "verify_password",
    "create_jwt_token",
    "decode_jwt_token",
    "create_access_token",
    "verify_access_token",
]
