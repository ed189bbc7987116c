"""Profile photo picker (UI-only).

Shows the native open-file dialog, decodes the selection with Pillow and hands
back the centred square crop. Cancellation and unreadable files both end in
``on_cancelled``.
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import filedialog
from typing import Any, Callable, Optional

from PIL import Image, UnidentifiedImageError

from ...adapters.image_codec import crop_square

FILETYPES = (
    ("Images", "*.png *.jpg *.jpeg *.gif *.bmp *.webp"),
    ("All files", "*.*"),
)


class ImagePicker:
    OnImage = Optional[Callable[[Any], None]]
    OnVoid = Optional[Callable[[], None]]

    def __init__(self, parent: tk.Misc, *, on_image_selected: OnImage = None, on_cancelled: OnVoid = None) -> None:
        self._parent = parent
        self._on_image_selected = on_image_selected
        self._on_cancelled = on_cancelled
        self._log = logging.getLogger(__name__)

    def show(self) -> None:
        path = filedialog.askopenfilename(parent=self._parent, title="Choose photo", filetypes=FILETYPES)
        if not path:
            self._cancel()
            return
        try:
            with Image.open(path) as img:
                img.load()
                image = crop_square(img)
        except (UnidentifiedImageError, OSError, Image.DecompressionBombError) as exc:
            self._log.warning("Could not open %s: %s", path, exc)
            self._cancel()
            return
        if self._on_image_selected:
            self._on_image_selected(image)

    def _cancel(self) -> None:
        if self._on_cancelled:
            self._on_cancelled()
