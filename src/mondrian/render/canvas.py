"""Row-major RGB pixel buffers.

A canvas is a list of rows, each a list of ``(r, g, b)`` tuples, indexed
``canvas[row][col]``. The engine paints into these in place; allocation
and conversion to images happen here and in :mod:`mondrian.render.image_io`.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from mondrian.core.models import Color

PixelBuffer = List[List[Color]]

BLACK: Color = (0, 0, 0)


def new_canvas(width: int, height: int, background: Color = BLACK) -> PixelBuffer:
    """Allocate a ``width`` x ``height`` canvas cleared to *background*."""
    if width < 1 or height < 1:
        raise ValueError(f"canvas size must be positive, got {width}x{height}")
    bg = (int(background[0]), int(background[1]), int(background[2]))
    return [[bg] * width for _ in range(height)]


def canvas_size(canvas: Sequence[Sequence[Color]]) -> Tuple[int, int]:
    """Return ``(width, height)`` of *canvas*."""
    height = len(canvas)
    return (len(canvas[0]) if height else 0, height)
