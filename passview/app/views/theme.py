"""Shared visual theme for the pass display.

The module centralizes ttk style tokens so the views carry no styling logic.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

ACCENT = "#1d5d9b"
BG = "#ffffff"
MUTED = "#6b7280"
DIVIDER = "#d1d1d1"
TEXT = "#111827"


def apply_theme(root: tk.Misc) -> None:
    """Apply the ttk + tk visual theme to the whole window.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 11")
    root.configure(bg=BG)

    style.configure(".", background=BG, foreground=TEXT)
    style.configure("TFrame", background=BG)
    style.configure("Header.TFrame", background=ACCENT)
    style.configure("Header.TLabel", background=ACCENT, foreground="#ffffff", font=("TkDefaultFont", 12, "bold"))
    style.configure(
        "Header.TButton",
        background=ACCENT,
        foreground="#ffffff",
        bordercolor=ACCENT,
        relief="flat",
    )
    style.map("Header.TButton", background=[("active", "#174a7c")])
    style.configure("TLabel", background=BG, foreground=TEXT)
    style.configure("Clock.TLabel", background=BG, foreground=TEXT, font=("TkDefaultFont", 24, "bold"))
    style.configure("Date.TLabel", background=BG, foreground=MUTED, font=("TkDefaultFont", 14, "bold"))
    style.configure("Caption.TLabel", background=BG, foreground=MUTED, font=("TkDefaultFont", 10, "bold"))
    style.configure("Sample.TLabel", background=BG, foreground="#b42318", font=("TkDefaultFont", 10, "bold"))
    style.configure("Status.TLabel", background=BG, foreground="#b42318")
    style.configure("TEntry", fieldbackground=BG, bordercolor=DIVIDER)
    style.configure("Swap.TButton", padding=(8, 8))
    style.configure("TSeparator", background=DIVIDER)
