from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Color = Tuple[int, int, int]


class SplitKind(Enum):
    """Outcome of the split decision for one rectangle."""

    QUAD = "quad"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    LEAF = "leaf"


@dataclass(frozen=True, slots=True)
class Rect:
    """Closed-open pixel rectangle ``[x0, x1) x [y0, y1)``.

    ``x`` runs along columns and ``y`` along rows, so the rectangle covers
    ``canvas[y0:y1]`` rows and ``x0:x1`` columns of each row.
    """

    x0: int
    y0: int
    x1: int
    y1: int

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    @property
    def centroid(self) -> Tuple[int, int]:
        """Integer midpoint used as the color sample point."""
        return (self.x0 + self.x1) // 2, (self.y0 + self.y1) // 2

    def inset(self) -> "Rect | None":
        """Interior after dropping a one-pixel border, or None when empty."""
        if self.width < 3 or self.height < 3:
            return None
        return Rect(self.x0 + 1, self.y0 + 1, self.x1 - 1, self.y1 - 1)


@dataclass(frozen=True, slots=True)
class Leaf:
    """Terminal rectangle together with the color painted into it."""

    rect: Rect
    color: Color
