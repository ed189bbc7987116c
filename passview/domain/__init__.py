"""Domain package exports for the pass display state and its ports."""

from .clock import format_date, format_time
from .entities import (
    DESTINATION_KEY,
    FIELD_KEYS,
    ORIGIN_KEY,
    PROFILE_IMAGE_KEY,
    USER_NAME_KEY,
    DisplayState,
)
from .ports import ImageCodecPort, KeyValueStorePort, StoredValue, UseCaseError

__all__ = [
    "DESTINATION_KEY",
    "FIELD_KEYS",
    "ORIGIN_KEY",
    "PROFILE_IMAGE_KEY",
    "USER_NAME_KEY",
    "DisplayState",
    "ImageCodecPort",
    "KeyValueStorePort",
    "StoredValue",
    "UseCaseError",
    "format_date",
    "format_time",
]
