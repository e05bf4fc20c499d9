"""Centralized tunables loaded from YAML.

The master source is ``values.yml`` in this package: the basic palette,
the gradient constants used by complex mode, the subdivision guards and
the canvas defaults used by the CLI.

On import we attempt to load and parse the YAML. Failures fall back to
hard-coded literals that mirror the shipped file so painting stays
reproducible if the YAML is missing or corrupt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

import yaml

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

# --- Fallback literals ---------------------------------------------------
_FALLBACK_PALETTE = [
    (255, 0, 0),
    (255, 255, 0),
    (0, 255, 255),
    (255, 255, 255),
]
_FALLBACK_GRADIENT = {
    "dist_scale": 0.75,
    "noise_range": 190,
    "ceilings": {"red": 255, "green": 250, "blue": 255},
}
_FALLBACK_SUBDIVISION = {
    "size_divisor": 4,
    "split_padding_px": 10,
    "min_split_span_px": 20,
}
_FALLBACK_CANVAS = {
    "width": 600,
    "height": 600,
    "background": (0, 0, 0),
    "min_size": 1,
}


# --- Dataclasses ---------------------------------------------------------
@dataclass(frozen=True, slots=True)
class GradientConfig:
    dist_scale: float
    noise_range: int
    red_ceiling: int
    green_ceiling: int
    blue_ceiling: int


@dataclass(frozen=True, slots=True)
class SubdivisionConfig:
    size_divisor: int
    split_padding_px: int
    min_split_span_px: int


@dataclass(frozen=True, slots=True)
class CanvasDefaults:
    width: int
    height: int
    background: Tuple[int, int, int]
    min_size: int


def _rgb(value: Any) -> Tuple[int, int, int] | None:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        return None
    try:
        r, g, b = (int(c) for c in value)
    except (TypeError, ValueError):
        return None
    if not all(0 <= c <= 255 for c in (r, g, b)):
        return None
    return (r, g, b)


# --- Load YAML -----------------------------------------------------------
_palette: List[Tuple[int, int, int]] = list(_FALLBACK_PALETTE)
_gradient: Dict[str, Any] = {
    **_FALLBACK_GRADIENT,
    "ceilings": dict(_FALLBACK_GRADIENT["ceilings"]),
}
_subdivision: Dict[str, int] = dict(_FALLBACK_SUBDIVISION)
_canvas: Dict[str, Any] = dict(_FALLBACK_CANVAS)

if _YAML_PATH.exists():  # pragma: no branch - simple path
    try:
        with _YAML_PATH.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        # Palette
        pal = raw.get("palette", {}).get("basic")
        if isinstance(pal, list):
            colors = [_rgb(c) for c in pal]
            if colors and all(c is not None for c in colors):
                _palette = [c for c in colors if c is not None]
        # Gradient
        grad = raw.get("gradient")
        if isinstance(grad, dict):
            if isinstance(grad.get("dist_scale"), (int, float)):
                _gradient["dist_scale"] = float(grad["dist_scale"])
            if isinstance(grad.get("noise_range"), int) and grad["noise_range"] > 0:
                _gradient["noise_range"] = int(grad["noise_range"])
            ceilings = grad.get("ceilings")
            if isinstance(ceilings, dict):
                _gradient["ceilings"].update(
                    {
                        k: int(v)
                        for k, v in ceilings.items()
                        if k in {"red", "green", "blue"} and isinstance(v, int)
                    }
                )
        # Subdivision
        sub = raw.get("subdivision")
        if isinstance(sub, dict):
            for k in _FALLBACK_SUBDIVISION:
                v = sub.get(k)
                if isinstance(v, int) and v > 0:
                    _subdivision[k] = v
        # Canvas defaults
        cv = raw.get("canvas")
        if isinstance(cv, dict):
            for k in ("width", "height", "min_size"):
                v = cv.get(k)
                if isinstance(v, int) and v > 0:
                    _canvas[k] = v
            bg = _rgb(cv.get("background"))
            if bg is not None:
                _canvas["background"] = bg
    except (OSError, yaml.YAMLError, AttributeError) as e:
        logger.warning("failed to parse %s, using built-in values: %s", _YAML_PATH, e)

# --- Public accessors ----------------------------------------------------
PALETTE: Sequence[Tuple[int, int, int]] = tuple(_palette)
GRADIENT = GradientConfig(
    dist_scale=float(_gradient["dist_scale"]),
    noise_range=int(_gradient["noise_range"]),
    red_ceiling=int(_gradient["ceilings"]["red"]),
    green_ceiling=int(_gradient["ceilings"]["green"]),
    blue_ceiling=int(_gradient["ceilings"]["blue"]),
)
SUBDIVISION = SubdivisionConfig(
    size_divisor=int(_subdivision["size_divisor"]),
    split_padding_px=int(_subdivision["split_padding_px"]),
    min_split_span_px=int(_subdivision["min_split_span_px"]),
)
CANVAS_DEFAULTS = CanvasDefaults(
    width=int(_canvas["width"]),
    height=int(_canvas["height"]),
    background=tuple(_canvas["background"]),  # type: ignore[arg-type]
    min_size=int(_canvas["min_size"]),
)
MODES: Sequence[str] = ("basic", "complex")

__all__ = [
    "GradientConfig",
    "SubdivisionConfig",
    "CanvasDefaults",
    "PALETTE",
    "GRADIENT",
    "SUBDIVISION",
    "CANVAS_DEFAULTS",
    "MODES",
]
