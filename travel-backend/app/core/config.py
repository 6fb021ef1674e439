
# Standard library imports
import os
from pathlib import Path
from typing import Final, List, Optional


_BACKEND_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", os.getenv("MONGO_URL", "mongodb://localhost:27017"))
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "travel_journal")
        self.mongo_server_selection_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "10000")
        )

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("ACCESS_TOKEN_SECRET", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_hours: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "72")
        )

        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "8000"))
        self.environment: Final[str] = os.getenv("APP_ENV", os.getenv("NODE_ENV", "production")).lower()
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Image Storage Configuration
        self.public_base_url: Final[str] = os.getenv("PUBLIC_BASE_URL", "http://localhost:8000").rstrip("/")
        self.upload_dir: Final[str] = os.getenv("UPLOAD_DIR", str(_BACKEND_ROOT / "uploads"))
        self.assets_dir: Final[str] = os.getenv("ASSETS_DIR", str(_BACKEND_ROOT / "assets"))
        self.image_upload_max_mb: Final[int] = int(os.getenv("IMAGE_UPLOAD_MAX_MB", "10"))

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
