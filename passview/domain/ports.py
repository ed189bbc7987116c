from __future__ import annotations
from typing import Any, Optional, Protocol, Union

StoredValue = Union[str, bytes]


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class KeyValueStorePort(Protocol):
    """Flat string-keyed store for text and binary values.

    No transactions and no ordering guarantees across keys.
    """

    def load(self, key: str) -> Optional[StoredValue]: ...  # None if never written
    def save(self, key: str, value: StoredValue) -> None: ...


class ImageCodecPort(Protocol):
    """Serialize in-memory images to bytes and back."""

    def encode(self, image: Any) -> bytes: ...
    def decode(self, data: bytes) -> Any: ...  # raises ValueError on bad data
