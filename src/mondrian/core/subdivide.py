"""Recursive rectangle subdivision.

A rectangle is tested against the full canvas size in strict priority
order:

1. ``QUAD``: both sides are at least a quarter of the canvas and longer
   than the minimum split span. One split column and one split row are
   drawn (column first) and the four quadrants are visited top-left,
   bottom-left, top-right, bottom-right.
2. ``VERTICAL``: only the width qualifies. One split column; left then
   right.
3. ``HORIZONTAL``: only the height qualifies. One split row; top then
   bottom.
4. ``LEAF``: nothing qualifies; the rectangle is colored.

Split positions are uniform on ``[lo + padding, hi - padding)``. The
traversal is depth-first pre-order driven by an explicit stack, so the
random source is consumed in the same order a plain recursive walk would
consume it and deep canvases never hit the interpreter recursion limit.
"""

from __future__ import annotations

import random
from typing import Iterator, List, Tuple

from mondrian.core.colors import choose_color
from mondrian.core.models import Leaf, Rect, SplitKind
from mondrian.settings.values import SUBDIVISION, SubdivisionConfig

__all__ = ["Subdivider", "classify"]


def classify(
    rect: Rect, width: int, height: int, cfg: SubdivisionConfig = SUBDIVISION
) -> SplitKind:
    """Return which case applies to *rect* on a ``width`` x ``height`` canvas.

    The quarter thresholds use integer division.
    """
    min_w = width // cfg.size_divisor
    min_h = height // cfg.size_divisor
    span = cfg.min_split_span_px
    wide = rect.width >= min_w and rect.x0 + span < rect.x1
    tall = rect.height >= min_h and rect.y0 + span < rect.y1
    if wide and tall:
        return SplitKind.QUAD
    if wide:
        return SplitKind.VERTICAL
    if tall:
        return SplitKind.HORIZONTAL
    return SplitKind.LEAF


class Subdivider:
    """Walks a canvas-sized rectangle down to its colored leaves.

    Parameters
    ----------
    width, height: Full canvas size; every guard is relative to it.
    rng: Random source for split positions and leaf colors.
    complex_mode: Select gradient coloring instead of the palette.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: random.Random,
        *,
        complex_mode: bool = False,
        cfg: SubdivisionConfig = SUBDIVISION,
    ) -> None:
        self.width = int(width)
        self.height = int(height)
        self.complex_mode = bool(complex_mode)
        self._rng = rng
        self._cfg = cfg
        self.max_depth = 0

    def _draw(self, lo: int, hi: int) -> int:
        pad = self._cfg.split_padding_px
        return self._rng.randrange(lo + pad, hi - pad)

    def split(self, rect: Rect, kind: SplitKind) -> Tuple[Rect, ...]:
        """Draw split positions for *rect* and return its children in visit order."""
        x0, y0, x1, y1 = rect.x0, rect.y0, rect.x1, rect.y1
        if kind is SplitKind.QUAD:
            xs = self._draw(x0, x1)
            ys = self._draw(y0, y1)
            return (
                Rect(x0, y0, xs, ys),
                Rect(x0, ys, xs, y1),
                Rect(xs, y0, x1, ys),
                Rect(xs, ys, x1, y1),
            )
        if kind is SplitKind.VERTICAL:
            xs = self._draw(x0, x1)
            return (Rect(x0, y0, xs, y1), Rect(xs, y0, x1, y1))
        if kind is SplitKind.HORIZONTAL:
            ys = self._draw(y0, y1)
            return (Rect(x0, y0, x1, ys), Rect(x0, ys, x1, y1))
        return ()

    def leaf(self, rect: Rect) -> Leaf:
        cx, cy = rect.centroid
        color = choose_color(
            self.width,
            self.height,
            cx,
            cy,
            complex_mode=self.complex_mode,
            rng=self._rng,
        )
        return Leaf(rect, color)

    def leaves(self) -> Iterator[Leaf]:
        """Yield every leaf of the whole canvas in depth-first pre-order.

        Random draws happen lazily as the iterator advances, so consuming it
        fully is what fixes the layout.
        """
        self.max_depth = 0
        stack: List[Tuple[Rect, int]] = [(Rect(0, 0, self.width, self.height), 0)]
        while stack:
            rect, depth = stack.pop()
            if depth > self.max_depth:
                self.max_depth = depth
            kind = classify(rect, self.width, self.height, self._cfg)
            if kind is SplitKind.LEAF:
                yield self.leaf(rect)
                continue
            children = self.split(rect, kind)
            # Reversed so the first child is popped next
            stack.extend((child, depth + 1) for child in reversed(children))
