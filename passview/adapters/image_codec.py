"""Pillow-backed image codec for the profile photo.

Images are stored as PNG so the persisted bytes are lossless. The square crop
helper is shared by the picker and the Tk view.
"""

from __future__ import annotations

import io

from PIL import Image, UnidentifiedImageError

from passview.domain.ports import ImageCodecPort

_KEEP_MODES = ("RGB", "RGBA", "L", "LA")


class PillowImageCodec(ImageCodecPort):
    """Encode/decode ``PIL.Image.Image`` objects to PNG bytes."""

    format = "PNG"

    def encode(self, image: Image.Image) -> bytes:
        if not isinstance(image, Image.Image):
            raise TypeError("PillowImageCodec.encode requires a PIL image.")
        if image.mode not in _KEEP_MODES:
            image = image.convert("RGBA")
        buffer = io.BytesIO()
        image.save(buffer, format=self.format, optimize=True)
        return buffer.getvalue()

    def decode(self, data: bytes) -> Image.Image:
        if not data:
            raise ValueError("Empty image payload.")
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
        except Image.DecompressionBombError as exc:
            raise ValueError(f"Refusing oversized image: {exc}") from exc
        except (UnidentifiedImageError, OSError, SyntaxError, EOFError) as exc:
            raise ValueError(f"Cannot decode image: {exc}") from exc
        return image


def crop_square(image: Image.Image) -> Image.Image:
    """Return the centred square crop of ``image``."""
    width, height = image.size
    side = min(width, height)
    left = (width - side) // 2
    top = (height - side) // 2
    return image.crop((left, top, left + side, top + side))


__all__ = ["PillowImageCodec", "crop_square"]
