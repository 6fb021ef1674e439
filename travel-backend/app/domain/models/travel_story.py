# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

# Local application imports
from ...utils.datetime_utils import utc_now


@dataclass
class TravelStory:
    """
    Pure domain model for a travel story - no external dependencies.

    A story belongs to the user whose token created it. `image_url` and
    `user_id` are references only; neither is checked for existence.
    """
    id: Optional[str]
    user_id: str
    title: str
    story: str
    visited_location: str
    image_url: str
    visited_date: datetime
    is_favourite: bool = False
    created_on: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user_id:
            raise ValueError("User ID is required")
        for name in ("title", "story", "visited_location", "image_url"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{name} is required")
        if not isinstance(self.visited_date, datetime):
            raise ValueError("visited_date must be a valid date")
