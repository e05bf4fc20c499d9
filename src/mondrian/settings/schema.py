"""Pydantic model for user settings."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from .values import CANVAS_DEFAULTS, MODES


class Settings(BaseModel):
    """User defaults persisted to disk.

    Parameters
    ----------
    width, height: Canvas size in pixels used when the CLI is not given an
        explicit size.
    mode: Painting mode, ``basic`` (palette leaves) or ``complex``
        (radial gradient leaves).
    seed: Optional random seed. ``None`` means a fresh non-deterministic
        seed every run.
    background: RGB color the canvas is cleared to before painting. This is
        the color of the grid lines between leaves.
    min_canvas_size: Smallest accepted canvas side. Smaller canvases are
        rejected by the engine with ``InvalidCanvas``.
    output: Default PNG path; ``None`` skips writing a file.
    """

    width: int = Field(default=CANVAS_DEFAULTS.width)
    height: int = Field(default=CANVAS_DEFAULTS.height)
    mode: str = Field(default=MODES[0])
    seed: Optional[int] = Field(default=None)
    background: Tuple[int, int, int] = Field(default=CANVAS_DEFAULTS.background)
    min_canvas_size: int = Field(default=CANVAS_DEFAULTS.min_size)
    output: Optional[str] = Field(default=None)

    @field_validator("width", "height", "min_canvas_size")
    @classmethod
    def _chk_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("canvas sizes must be >= 1 px")
        return v

    @field_validator("mode")
    @classmethod
    def _chk_mode(cls, v: str) -> str:
        if v not in set(MODES):
            raise ValueError("invalid mode: must be one of " + ", ".join(MODES))
        return v

    @field_validator("background")
    @classmethod
    def _chk_background(cls, v: Tuple[int, int, int]) -> Tuple[int, int, int]:
        if not all(0 <= c <= 255 for c in v):
            raise ValueError("background channels must be within 0..255")
        return v
