# passview/app/main.py
from __future__ import annotations

import logging
import tkinter as tk
from typing import Optional, Sequence

# ---- Views (UI-only) ----
from .views.theme import apply_theme
from .views.ticket_view import SplashView, TicketView
from .views.image_picker import ImagePicker

# ---- ViewModel, UseCase & Adapters ----
from ..viewmodels.ticket_vm import TicketVM
from ..usecases.display_persistence import DisplayPersistence
from ..adapters.image_codec import PillowImageCodec
from ..adapters.storage_local import StorageLocal
from ..adapters.storage_memory import StorageMemory
from ..domain.entities import DisplayState
from ..domain.ports import KeyValueStorePort, UseCaseError
from ..utils import logging as logging_utils
from .config import AppConfig, load_config
from .interval_timer import IntervalTimer


class App:
    """Bootstrap: wire TicketView <-> TicketVM, storage and the clock timer."""

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig()
        logging_utils.configure_root(self.config.log_level)
        self._log = logging.getLogger(__name__)

        self.win = tk.Tk()
        self.win.title("Pass")
        self.win.geometry("380x640")
        self.win.minsize(340, 560)
        self.win.columnconfigure(0, weight=1)
        self.win.rowconfigure(0, weight=1)
        apply_theme(self.win)
        self.win.protocol("WM_DELETE_WINDOW", self._on_close)

        # ---- Storage + ViewModel ----
        self.storage = self._build_storage()
        self.persistence = DisplayPersistence(self.storage, PillowImageCodec())
        self.vm = TicketVM(self.persistence, on_error=self._on_save_error)

        # ---- Views (constructor callbacks) ----
        self.picker = ImagePicker(
            self.win,
            on_image_selected=self.vm.on_image_selected,
            on_cancelled=self.vm.on_image_cancelled,
        )
        self.view = TicketView(
            self.win,
            on_name_changed=self.vm.set_user_name,
            on_origin_changed=self.vm.set_origin,
            on_destination_changed=self.vm.set_destination,
            on_swap=self.vm.swap_origin_destination,
            on_pick_image=self.picker.show,
            on_close=self._on_close,
            transport_mode=self.config.transport_mode,
            ticket_type=self.config.ticket_type,
        )
        self.splash = SplashView(self.win)

        self._unsubscribe = self.vm.subscribe(self._render)
        self.timer = IntervalTimer(
            self.win.after,
            self.win.after_cancel,
            self.config.tick_interval_ms,
            self.vm.tick,
        )
        self._closed = False
        self._mount()

    # ------------------------------------------------------------------
    def _build_storage(self) -> KeyValueStorePort:
        if self.config.ephemeral:
            self._log.info("Using in-memory storage; nothing will be kept")
            return StorageMemory()
        self._log.info("Using storage in %s", self.config.data_dir)
        return StorageLocal(root_dir=self.config.data_dir)

    def _mount(self) -> None:
        self.view.render(self.vm.get_state())
        self.vm.on_activate()
        self.timer.start()
        if self.config.splash_ms > 0:
            self.splash.grid(row=0, column=0, sticky="nsew")
            self.win.after(self.config.splash_ms, self._reveal)
        else:
            self._reveal()

    def _reveal(self) -> None:
        self.splash.grid_forget()
        self.view.grid(row=0, column=0, sticky="nsew")

    def _render(self, state: DisplayState) -> None:
        self.view.render(state)

    def _on_save_error(self, err: UseCaseError) -> None:
        self.view.show_status(f"Could not save: {err.message}")

    def _on_close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.timer.stop()
        self.vm.on_deactivate()
        self._unsubscribe()
        self.win.destroy()

    def run(self) -> None:
        self.win.mainloop()


def main(argv: Optional[Sequence[str]] = None) -> None:
    app = App(load_config(argv))
    app.run()


if __name__ == "__main__":
    main()
