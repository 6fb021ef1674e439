from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    full_name: str
    email: str
    hashed_password: str
    created_on: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        if not self.full_name or not self.full_name.strip():
            raise ValueError("Full name is required")
        if not self.email or not self.email.strip():
            raise ValueError("Email is required")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
