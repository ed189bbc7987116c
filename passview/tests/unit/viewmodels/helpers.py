from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from passview.adapters.image_codec import PillowImageCodec
from passview.adapters.storage_memory import StorageMemory
from passview.usecases.display_persistence import DisplayPersistence
from passview.viewmodels.ticket_vm import TicketVM


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int = 1) -> None:
        self.now = self.now + timedelta(seconds=seconds)


def make_ticket_vm(
    storage: Optional[StorageMemory] = None,
    *,
    clock: Optional[FakeClock] = None,
    errors: Optional[List] = None,
) -> TicketVM:
    store = storage if storage is not None else StorageMemory()
    return TicketVM(
        DisplayPersistence(store, PillowImageCodec()),
        now=clock or FakeClock(datetime(2024, 7, 13, 9, 5, 3)),
        on_error=errors.append if errors is not None else None,
    )


__all__ = ["FakeClock", "make_ticket_vm"]
