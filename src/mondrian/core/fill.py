from __future__ import annotations

from typing import MutableSequence

from mondrian.core.models import Color, Rect

__all__ = ["fill_leaf"]


def fill_leaf(
    canvas: MutableSequence[MutableSequence[Color]], rect: Rect, color: Color
) -> int:
    """Paint the interior of *rect* with *color*.

    The outermost row and column on every side of the rectangle are left
    untouched; on a canvas cleared to black they become the grid lines.
    The canvas is indexed ``canvas[row][col]``. Returns the number of
    pixels written (0 when the rectangle is narrower than 3 px).
    """
    inner = rect.inset()
    if inner is None:
        return 0
    span = inner.width
    for row in range(inner.y0, inner.y1):
        canvas[row][inner.x0 : inner.x1] = [color] * span
    return span * inner.height
