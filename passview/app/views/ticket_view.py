"""
TicketView
----------
Tkinter view for the single pass screen. This file contains **only View
code**: no storage, no clock logic. User edits are forwarded through
constructor callbacks and the current ``DisplayState`` is pushed in with
``render``.

Layout, top to bottom:
  * Header bar with title and Close button
  * Clock (time + date)
  * Profile row: photo (click to change) and name entry
  * Journey block: "From" / "To" entries and a swap button
  * Ticket details: transport mode and ticket type
  * "SAMPLE" marking and a status line for save errors
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Any, Callable, Optional

from PIL import Image, ImageDraw, ImageTk

from ...adapters.image_codec import crop_square
from ...domain.entities import DisplayState
from .theme import DIVIDER

PHOTO_SIZE = 65


class TicketView(ttk.Frame):
    """Pass screen content frame."""

    OnText = Optional[Callable[[str], None]]
    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        title: str = "Pass info",
        transport_mode: str = "Bus",
        ticket_type: str = "One-way journey",
        on_name_changed: OnText = None,
        on_origin_changed: OnText = None,
        on_destination_changed: OnText = None,
        on_swap: OnVoid = None,
        on_pick_image: OnVoid = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__(parent)
        self._on_name_changed = on_name_changed
        self._on_origin_changed = on_origin_changed
        self._on_destination_changed = on_destination_changed
        self._on_swap = on_swap
        self._on_pick_image = on_pick_image
        self._on_close = on_close

        self.time_var = tk.StringVar(value="")
        self.date_var = tk.StringVar(value="")
        self.name_var = tk.StringVar(value="")
        self.origin_var = tk.StringVar(value="")
        self.destination_var = tk.StringVar(value="")
        self.status_var = tk.StringVar(value="")

        # set while render() writes into the entry vars
        self._rendering = False
        self._photo: Optional[ImageTk.PhotoImage] = None
        self._photo_source: Any = None

        self.columnconfigure(0, weight=1)
        self._build_header(title)
        self._build_clock()
        self._divider(row=2)
        self._build_profile()
        self._divider(row=4)
        self._build_journey()
        self._divider(row=6)
        self._build_footer(transport_mode, ticket_type)

        self._bind_entry(self.name_var, lambda: self._on_name_changed)
        self._bind_entry(self.origin_var, lambda: self._on_origin_changed)
        self._bind_entry(self.destination_var, lambda: self._on_destination_changed)

        self._set_photo(None)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build_header(self, title: str) -> None:
        header = ttk.Frame(self, style="Header.TFrame", padding=(12, 14))
        header.grid(row=0, column=0, sticky="ew")
        header.columnconfigure(0, weight=1)
        ttk.Label(header, text=title, style="Header.TLabel").grid(row=0, column=0)
        ttk.Button(header, text="Close", style="Header.TButton", command=lambda: self._safe(self._on_close)).grid(
            row=0, column=1, sticky="e"
        )

    def _build_clock(self) -> None:
        clock = ttk.Frame(self, padding=(0, 12, 0, 8))
        clock.grid(row=1, column=0, sticky="ew")
        clock.columnconfigure(0, weight=1)
        ttk.Label(clock, textvariable=self.time_var, style="Clock.TLabel").grid(row=0, column=0)
        ttk.Label(clock, textvariable=self.date_var, style="Date.TLabel").grid(row=1, column=0)

    def _build_profile(self) -> None:
        profile = ttk.Frame(self, padding=(16, 6))
        profile.grid(row=3, column=0, sticky="ew")
        profile.columnconfigure(1, weight=1)

        self.photo_label = ttk.Label(profile, cursor="hand2")
        self.photo_label.grid(row=0, column=0, rowspan=2, padx=(0, 12))
        self.photo_label.bind("<Button-1>", lambda e: self._safe(self._on_pick_image))

        ttk.Entry(profile, textvariable=self.name_var, font=("TkDefaultFont", 16, "bold")).grid(
            row=0, column=1, sticky="ew"
        )
        ttk.Label(profile, text="Enter your name", style="Caption.TLabel").grid(row=1, column=1, sticky="w")

    def _build_journey(self) -> None:
        journey = ttk.Frame(self, padding=(16, 8))
        journey.grid(row=5, column=0, sticky="ew")
        journey.columnconfigure(1, weight=1)

        route = tk.Canvas(journey, width=16, height=96, highlightthickness=0, bg=self._bg())
        route.grid(row=0, column=0, rowspan=4, padx=(4, 14))
        route.create_oval(2, 2, 14, 14, outline="#1d5d9b", width=3)
        route.create_line(8, 14, 8, 82, fill="#1d5d9b", width=4)
        route.create_oval(2, 82, 14, 94, outline="#1d5d9b", width=3)

        ttk.Label(journey, text="From", style="Caption.TLabel").grid(row=0, column=1, sticky="w")
        ttk.Entry(journey, textvariable=self.origin_var).grid(row=1, column=1, sticky="ew", pady=(0, 6))
        ttk.Label(journey, text="To", style="Caption.TLabel").grid(row=2, column=1, sticky="w")
        ttk.Entry(journey, textvariable=self.destination_var).grid(row=3, column=1, sticky="ew")

        ttk.Button(journey, text="⇅", width=3, style="Swap.TButton", command=lambda: self._safe(self._on_swap)).grid(
            row=0, column=2, rowspan=4, padx=(12, 0)
        )

    def _build_footer(self, transport_mode: str, ticket_type: str) -> None:
        footer = ttk.Frame(self, padding=(16, 8))
        footer.grid(row=7, column=0, sticky="ew")
        footer.columnconfigure(1, weight=1)
        ttk.Label(footer, text="Mode", style="Caption.TLabel").grid(row=0, column=0, sticky="w", padx=(0, 12))
        ttk.Label(footer, text=transport_mode).grid(row=0, column=1, sticky="w")
        ttk.Label(footer, text="Ticket", style="Caption.TLabel").grid(row=1, column=0, sticky="w", padx=(0, 12))
        ttk.Label(footer, text=ticket_type).grid(row=1, column=1, sticky="w", pady=(0, 6))
        ttk.Label(footer, text="SAMPLE - not valid for travel", style="Sample.TLabel").grid(row=2, column=0, columnspan=2)
        ttk.Label(footer, textvariable=self.status_var, style="Status.TLabel").grid(
            row=3, column=0, columnspan=2, sticky="w"
        )

    def _divider(self, row: int) -> None:
        ttk.Separator(self, orient="horizontal").grid(row=row, column=0, sticky="ew", padx=20, pady=2)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render(self, state: DisplayState) -> None:
        """Show ``state``; entries are only rewritten when their text differs."""
        self.time_var.set(state.current_time)
        self.date_var.set(state.current_date)
        self._rendering = True
        try:
            for var, value in (
                (self.name_var, state.user_name),
                (self.origin_var, state.origin),
                (self.destination_var, state.destination),
            ):
                if var.get() != value:
                    var.set(value)
        finally:
            self._rendering = False
        if state.profile_image is not self._photo_source:
            self._set_photo(state.profile_image)

    def show_status(self, message: str) -> None:
        self.status_var.set(message)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _bind_entry(self, var: tk.StringVar, callback_ref: Callable[[], OnText]) -> None:
        def on_write(*_args: Any) -> None:
            if self._rendering:
                return
            callback = callback_ref()
            if callback:
                callback(var.get())

        var.trace_add("write", on_write)

    def _set_photo(self, image: Any) -> None:
        self._photo_source = image
        self._photo = ImageTk.PhotoImage(self._circular(image), master=self)
        self.photo_label.configure(image=self._photo)

    @staticmethod
    def _circular(image: Any) -> Image.Image:
        size = (PHOTO_SIZE, PHOTO_SIZE)
        mask = Image.new("L", size, 0)
        ImageDraw.Draw(mask).ellipse((0, 0, PHOTO_SIZE - 1, PHOTO_SIZE - 1), fill=255)
        if image is None:
            base = Image.new("RGBA", size, DIVIDER)
        else:
            base = crop_square(image).convert("RGBA").resize(size)
        out = Image.new("RGBA", size, (0, 0, 0, 0))
        out.paste(base, (0, 0), mask)
        return out

    def _bg(self) -> str:
        style = ttk.Style(self)
        return style.lookup("TFrame", "background") or "#ffffff"

    @staticmethod
    def _safe(fn: OnVoid) -> None:
        if fn:
            fn()


class SplashView(ttk.Frame):
    """Placeholder shown while the window settles."""

    def __init__(self, parent: tk.Widget, *, text: str = "Loading…") -> None:
        super().__init__(parent, padding=40)
        self.columnconfigure(0, weight=1)
        self.rowconfigure(0, weight=1)
        ttk.Label(self, text=text, style="Date.TLabel").grid(row=0, column=0)


__all__ = ["TicketView", "SplashView"]
