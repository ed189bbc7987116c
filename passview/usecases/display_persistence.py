"""Read and write the user-editable pass fields.

Loads fail softly: a missing key, an unexpected value type, a storage read
error or an undecodable image all yield ``None`` and a warning log entry.
Saves wrap any failure in ``UseCaseError`` so the view model can report it
without knowing which adapter raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from ..domain.entities import (
    DESTINATION_KEY,
    ORIGIN_KEY,
    PROFILE_IMAGE_KEY,
    USER_NAME_KEY,
)
from ..domain.ports import ImageCodecPort, KeyValueStorePort, UseCaseError


@dataclass
class DisplayPersistence:
    storage: KeyValueStorePort
    codec: ImageCodecPort
    log: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    # ---- Profile image (binary) ----
    def load_profile_image(self) -> Optional[Any]:
        data = self._load(PROFILE_IMAGE_KEY)
        if data is None:
            return None
        if not isinstance(data, (bytes, bytearray)):
            self.log.warning("Ignoring %s: expected bytes, got %s", PROFILE_IMAGE_KEY, type(data).__name__)
            return None
        try:
            return self.codec.decode(bytes(data))
        except Exception as exc:
            self.log.warning("Stored profile image could not be decoded: %s", exc)
            return None

    def save_profile_image(self, image: Optional[Any]) -> None:
        if image is None:
            return
        try:
            payload = self.codec.encode(image)
            self.storage.save(PROFILE_IMAGE_KEY, payload)
        except Exception as e:
            raise UseCaseError("SAVE_IMAGE_FAILED", str(e))

    # ---- Text fields ----
    def load_user_name(self) -> Optional[str]:
        return self._load_text(USER_NAME_KEY)

    def save_user_name(self, name: str) -> None:
        self._save_text(USER_NAME_KEY, name)

    def load_origin(self) -> Optional[str]:
        return self._load_text(ORIGIN_KEY)

    def save_origin(self, value: str) -> None:
        self._save_text(ORIGIN_KEY, value)

    def load_destination(self) -> Optional[str]:
        return self._load_text(DESTINATION_KEY)

    def save_destination(self, value: str) -> None:
        self._save_text(DESTINATION_KEY, value)

    # ------------------------------------------------------------------
    def _load(self, key: str) -> Optional[Any]:
        try:
            return self.storage.load(key)
        except Exception as exc:
            self.log.warning("Could not read %s from storage: %s", key, exc)
            return None

    def _load_text(self, key: str) -> Optional[str]:
        value = self._load(key)
        if value is None:
            return None
        if not isinstance(value, str):
            self.log.warning("Ignoring %s: expected text, got %s", key, type(value).__name__)
            return None
        return value

    def _save_text(self, key: str, value: str) -> None:
        try:
            self.storage.save(key, str(value))
        except Exception as e:
            raise UseCaseError("SAVE_FIELD_FAILED", f"{key}: {e}")


__all__ = ["DisplayPersistence"]
