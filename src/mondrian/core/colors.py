"""Leaf color selection.

Basic mode samples the fixed palette uniformly. Complex mode derives a
color from the distance between the leaf centroid and the canvas center:
leaves near the center come out pale, distant leaves darken linearly, and
independent noise on the red and blue channels tints the darker leaves
toward magenta. Green has a lower ceiling than red and blue so the center
never degenerates to pure white.

All functions take the random source explicitly; they keep no state.
"""

from __future__ import annotations

import random
from math import isqrt
from typing import Sequence

from mondrian.core.models import Color
from mondrian.settings.values import GRADIENT, PALETTE, GradientConfig

__all__ = [
    "PALETTE",
    "center_distance",
    "choose_color",
    "gradient_color",
    "palette_color",
]


def _clamp(v: float, lo: float, hi: float) -> float:
    return min(max(v, lo), hi)


def palette_color(
    rng: random.Random, palette: Sequence[Color] = PALETTE
) -> Color:
    """Return a palette entry drawn uniformly at random."""
    return palette[rng.randrange(len(palette))]


def center_distance(width: int, height: int, x: int, y: int) -> int:
    """Floor of the Euclidean distance from ``(x, y)`` to the canvas center.

    The center is ``(width // 2, height // 2)``.
    """
    dx = x - width // 2
    dy = y - height // 2
    return isqrt(dx * dx + dy * dy)


def gradient_color(
    width: int,
    height: int,
    x: int,
    y: int,
    rng: random.Random,
    cfg: GradientConfig = GRADIENT,
) -> Color:
    """Distance-attenuated color for a leaf centered at ``(x, y)``.

    Red noise is drawn before blue noise; green carries no noise.
    """
    scale = cfg.dist_scale * center_distance(width, height, x, y)
    base = 255 - scale
    red = int(_clamp(base + rng.randrange(cfg.noise_range), 0, cfg.red_ceiling))
    green = int(_clamp(base, 0, cfg.green_ceiling))
    blue = int(_clamp(base + rng.randrange(cfg.noise_range), 0, cfg.blue_ceiling))
    return (red, green, blue)


def choose_color(
    width: int,
    height: int,
    x: int,
    y: int,
    *,
    complex_mode: bool,
    rng: random.Random,
) -> Color:
    """Pick the color for a leaf whose centroid is ``(x, y)``."""
    if complex_mode:
        return gradient_color(width, height, x, y, rng)
    return palette_color(rng)
