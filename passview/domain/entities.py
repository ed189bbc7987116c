"""Display state for the pass screen.

``DisplayState`` is the immutable snapshot the view model hands to the
rendering layer. The storage keys below are fixed names in a flat key-value
store; ``origin`` is stored under ``location`` for compatibility with data
written by earlier builds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

PROFILE_IMAGE_KEY = "profileImage"
USER_NAME_KEY = "userName"
ORIGIN_KEY = "location"
DESTINATION_KEY = "destination"

FIELD_KEYS: Tuple[str, ...] = (
    PROFILE_IMAGE_KEY,
    USER_NAME_KEY,
    ORIGIN_KEY,
    DESTINATION_KEY,
)


@dataclass(frozen=True)
class DisplayState:
    """Everything the pass screen renders at one point in time.

    Attributes:
        current_time: Wall-clock time at the last tick (``HH:MM:SS``).
        current_date: Wall-clock date at the last tick (``DD MonthName YYYY``).
        profile_image: In-memory Pillow image or ``None`` for the placeholder.
        user_name: Holder name shown next to the photo.
        origin: Journey start ("From").
        destination: Journey end ("To").
    """

    current_time: str = ""
    current_date: str = ""
    profile_image: Optional[Any] = None
    user_name: str = ""
    origin: str = ""
    destination: str = ""

    @property
    def has_profile_image(self) -> bool:
        return self.profile_image is not None

    @property
    def journey(self) -> Tuple[str, str]:
        return (self.origin, self.destination)


__all__ = [
    "DESTINATION_KEY",
    "FIELD_KEYS",
    "ORIGIN_KEY",
    "PROFILE_IMAGE_KEY",
    "USER_NAME_KEY",
    "DisplayState",
]
