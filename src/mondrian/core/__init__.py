"""Subdivision-and-fill core.

Re-exports the engine entry points so callers can write
``from mondrian.core import MondrianEngine``.
"""

from .engine import InvalidCanvas, MondrianEngine
from .models import Color, Leaf, Rect, SplitKind

__all__ = [
    "Color",
    "InvalidCanvas",
    "Leaf",
    "MondrianEngine",
    "Rect",
    "SplitKind",
]
