"""Pillow conversion and PNG output for pixel buffers."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Sequence

from PIL import Image

from mondrian.render.canvas import Color, canvas_size

logger = logging.getLogger(__name__)

__all__ = ["pixel_bytes", "pixel_digest", "save_png", "to_image"]


def pixel_bytes(canvas: Sequence[Sequence[Color]]) -> bytes:
    """Pack the canvas into raw row-major RGB bytes."""
    return bytes(c for row in canvas for px in row for c in px)


def pixel_digest(canvas: Sequence[Sequence[Color]]) -> str:
    """SHA-256 hex digest of the raw RGB bytes of *canvas*."""
    return hashlib.sha256(pixel_bytes(canvas)).hexdigest()


def to_image(canvas: Sequence[Sequence[Color]]) -> Image.Image:
    """Build an RGB :class:`PIL.Image.Image` with the canvas contents."""
    width, height = canvas_size(canvas)
    if width < 1 or height < 1:
        raise ValueError("cannot convert an empty canvas to an image")
    return Image.frombytes("RGB", (width, height), pixel_bytes(canvas))


def save_png(canvas: Sequence[Sequence[Color]], path: str | Path) -> Path:
    """Write *canvas* to *path* as PNG, creating parent directories."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    img = to_image(canvas)
    img.save(out, format="PNG")
    logger.info("wrote %dx%d image to %s", img.width, img.height, out)
    return out
