"""Mondrian painting engine.

The engine owns a random source and paints caller-owned pixel buffers in
place. Buffers are indexed ``canvas[row][col]`` and hold RGB triples; the
caller clears them to the background color first because the engine
leaves a one-pixel border around every leaf unpainted.

Example:
    from mondrian.core.engine import MondrianEngine
    from mondrian.render.canvas import new_canvas

    canvas = new_canvas(400, 400)
    MondrianEngine(seed=1).paint_complex(canvas)
"""

from __future__ import annotations

import logging
import random
from typing import Any, MutableSequence, Optional, Tuple

from mondrian.core.fill import fill_leaf
from mondrian.core.models import Color
from mondrian.core.subdivide import Subdivider
from mondrian.settings.values import CANVAS_DEFAULTS

logger = logging.getLogger(__name__)

__all__ = ["InvalidCanvas", "MondrianEngine"]


class InvalidCanvas(ValueError):
    """Raised when a pixel buffer is absent or too small to paint."""


class MondrianEngine:
    """Paints Mondrian-style compositions into pixel buffers.

    Parameters
    ----------
    seed: Seed for the engine's own random source. ``None`` seeds from the
        operating system, so every run differs.
    min_canvas_size: Smallest accepted width and height, at least 1.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        *,
        min_canvas_size: int = CANVAS_DEFAULTS.min_size,
    ) -> None:
        if min_canvas_size < 1:
            raise ValueError("min_canvas_size must be >= 1")
        self.seed = seed
        self.min_canvas_size = int(min_canvas_size)
        self._rng = random.Random(seed)

    def _validate(self, canvas: Any) -> Tuple[int, int]:
        if canvas is None:
            raise InvalidCanvas("pixel buffer is missing")
        try:
            height = len(canvas)
            width = len(canvas[0]) if height else 0
        except TypeError:
            raise InvalidCanvas("pixel buffer must be a sequence of rows") from None
        if height < self.min_canvas_size or width < self.min_canvas_size:
            raise InvalidCanvas(
                f"pixel buffer is {width}x{height}, "
                f"minimum is {self.min_canvas_size}x{self.min_canvas_size}"
            )
        if any(len(row) != width for row in canvas):
            raise InvalidCanvas("pixel buffer rows have different lengths")
        return width, height

    def paint(
        self, canvas: MutableSequence[MutableSequence[Color]], complex_mode: bool
    ) -> None:
        """Subdivide the whole canvas and fill every leaf in place."""
        width, height = self._validate(canvas)
        sub = Subdivider(width, height, self._rng, complex_mode=complex_mode)
        leaves = 0
        for leaf in sub.leaves():
            fill_leaf(canvas, leaf.rect, leaf.color)
            leaves += 1
        logger.debug(
            "painted %dx%d canvas (%s): %d leaves, depth %d",
            width,
            height,
            "complex" if complex_mode else "basic",
            leaves,
            sub.max_depth,
        )

    def paint_basic(self, canvas: MutableSequence[MutableSequence[Color]]) -> None:
        """Paint leaves with colors drawn from the fixed palette."""
        self.paint(canvas, complex_mode=False)

    def paint_complex(self, canvas: MutableSequence[MutableSequence[Color]]) -> None:
        """Paint leaves with a radial gradient that darkens away from the center."""
        self.paint(canvas, complex_mode=True)
