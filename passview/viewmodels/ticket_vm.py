from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, List, Optional

from ..domain.clock import format_clock
from ..domain.entities import DisplayState
from ..domain.ports import UseCaseError
from ..usecases.display_persistence import DisplayPersistence

StateListener = Callable[[DisplayState], None]
ErrorHandler = Callable[[UseCaseError], None]


class TicketVM:
    """Single source of truth for the pass screen.

    Text fields are write-through: every change is saved before the setter
    returns. The profile image is a deferred write: it is only flushed by
    ``on_deactivate``. Time and date are derived from ``now()`` on each
    ``tick`` and cannot be set from outside.

    Views either ``subscribe`` to receive a ``DisplayState`` after every
    change or poll ``get_state()``.
    """

    def __init__(
        self,
        persistence: DisplayPersistence,
        *,
        now: Optional[Callable[[], datetime]] = None,
        on_error: Optional[ErrorHandler] = None,
    ) -> None:
        self._persistence = persistence
        self._now = now or datetime.now
        self.on_error = on_error
        self._log = logging.getLogger(__name__)
        self._state = DisplayState()
        self._listeners: List[StateListener] = []
        self.initialize()

    # ------------------------------------------------------------------
    # Read-only views on the current state
    # ------------------------------------------------------------------
    @property
    def current_time(self) -> str:
        return self._state.current_time

    @property
    def current_date(self) -> str:
        return self._state.current_date

    @property
    def profile_image(self) -> Optional[Any]:
        return self._state.profile_image

    @property
    def user_name(self) -> str:
        return self._state.user_name

    @property
    def origin(self) -> str:
        return self._state.origin

    @property
    def destination(self) -> str:
        return self._state.destination

    def get_state(self) -> DisplayState:
        return self._state

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------
    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self) -> None:
        """Compute the clock, then hydrate persisted fields (missing -> defaults)."""
        self.tick()
        p = self._persistence
        user_name = p.load_user_name()
        origin = p.load_origin()
        destination = p.load_destination()
        self._apply(
            profile_image=p.load_profile_image(),
            user_name=user_name if user_name is not None else "",
            origin=origin if origin is not None else "",
            destination=destination if destination is not None else "",
        )

    def on_activate(self) -> None:
        """Screen appeared: pick up a stored profile image if there is one."""
        image = self._persistence.load_profile_image()
        if image is not None:
            self._apply(profile_image=image)

    def on_deactivate(self) -> None:
        """Screen disappeared: flush the deferred profile image."""
        if self._state.profile_image is None:
            return
        self._save(self._persistence.save_profile_image, self._state.profile_image)

    def tick(self) -> None:
        current_time, current_date = format_clock(self._now())
        self._apply(current_time=current_time, current_date=current_date)

    # ------------------------------------------------------------------
    # User input
    # ------------------------------------------------------------------
    def set_profile_image(self, image: Optional[Any]) -> None:
        self._apply(profile_image=image)

    def set_user_name(self, name: str) -> None:
        """Show and save ``name`` before returning.

        A value equal to the current one is ignored: listeners are not
        notified and nothing is written.
        """
        name = self._coerce_text(name)
        if name == self._state.user_name:
            return
        self._apply(user_name=name)
        self._save(self._persistence.save_user_name, name)

    def set_origin(self, value: str) -> None:
        """Same rules as :meth:`set_user_name`, for the "From" field."""
        value = self._coerce_text(value)
        if value == self._state.origin:
            return
        self._apply(origin=value)
        self._save(self._persistence.save_origin, value)

    def set_destination(self, value: str) -> None:
        """Same rules as :meth:`set_user_name`, for the "To" field."""
        value = self._coerce_text(value)
        if value == self._state.destination:
            return
        self._apply(destination=value)
        self._save(self._persistence.save_destination, value)

    def swap_origin_destination(self) -> None:
        origin, destination = self._state.destination, self._state.origin
        # one update: listeners never see a half-swapped pair
        self._apply(origin=origin, destination=destination)
        self._save(self._persistence.save_origin, origin)
        self._save(self._persistence.save_destination, destination)

    # ---- Image picker callbacks ----
    def on_image_selected(self, image: Any) -> None:
        self.set_profile_image(image)

    def on_image_cancelled(self) -> None:
        self._log.debug("Image selection cancelled")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _apply(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        snapshot = self._state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                self._log.exception("State listener %r failed", listener)

    def _save(self, action: Callable[[Any], None], value: Any) -> None:
        try:
            action(value)
        except UseCaseError as err:
            self._log.warning("Persisting failed (%s): %s", err.code, err.message)
            if self.on_error:
                self.on_error(err)

    @staticmethod
    def _coerce_text(value: Any) -> str:
        if value is None:
            return ""
        return str(value)


__all__ = ["TicketVM", "StateListener", "ErrorHandler"]
