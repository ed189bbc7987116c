from __future__ import annotations
from collections import Counter
from typing import Dict, Mapping, Optional

from passview.domain.ports import KeyValueStorePort, StoredValue


class StorageMemory(KeyValueStorePort):
    """Dict-backed store for ephemeral sessions and tests.

    ``writes`` counts ``save`` calls per key so callers can check when a
    field was flushed.
    """

    def __init__(self, data: Optional[Mapping[str, StoredValue]] = None) -> None:
        self.data: Dict[str, StoredValue] = dict(data or {})
        self.writes: Counter = Counter()

    def load(self, key: str) -> Optional[StoredValue]:
        return self.data.get(key)

    def save(self, key: str, value: StoredValue) -> None:
        if not isinstance(value, (str, bytes)):
            raise TypeError(f"Unsupported value type for store: {type(value).__name__}")
        self.data[key] = value
        self.writes[key] += 1

    def total_writes(self) -> int:
        return sum(self.writes.values())
