"""Pygame preview surface with headless (offscreen) support.

Copies a finished pixel buffer onto a pygame surface and, when a window
was requested, shows it until the user closes the window. Setting the
environment variable SDL_VIDEODRIVER=dummy before importing pygame keeps
everything offscreen, which is how the tests drive it.

Example:
    import os
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from mondrian.platform.display.pygame_backend import PygameDisplayBackend

    backend = PygameDisplayBackend(size=(400, 400))
    backend.show(canvas)
"""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

import pygame as pg

from mondrian.render.canvas import Color, canvas_size
from mondrian.render.image_io import pixel_bytes

logger = logging.getLogger(__name__)


class PygameDisplayBackend:
    """Static preview of a painted canvas.

    A window is only created when ``create_window`` is true and the SDL
    video driver is not ``dummy``; otherwise drawing goes to an offscreen
    surface only.
    """

    def __init__(
        self, size: Tuple[int, int] = (600, 600), *, create_window: bool = False
    ) -> None:
        if os.environ.get("SDL_VIDEODRIVER") == "dummy":
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

        if not pg.get_init():
            pg.init()

        self._width, self._height = int(size[0]), int(size[1])
        self._window_surface: Any = None
        if create_window and os.environ.get("SDL_VIDEODRIVER") != "dummy":
            try:
                self._window_surface = pg.display.set_mode(
                    (self._width, self._height)
                )
                pg.display.set_caption("Mondrian")
            except pg.error as e:
                logger.warning(
                    "window creation failed, falling back to offscreen: %s", e
                )
                self._window_surface = None

        self._surface = pg.Surface((self._width, self._height))

    @property
    def surface(self) -> Any:
        return self._surface

    @property
    def has_window(self) -> bool:
        return self._window_surface is not None

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def show(self, canvas: Sequence[Sequence[Color]]) -> None:
        """Copy *canvas* onto the surface and flip the window if there is one."""
        width, height = canvas_size(canvas)
        if (width, height) != (self._width, self._height):
            raise ValueError(
                f"canvas is {width}x{height}, backend is {self._width}x{self._height}"
            )
        img = pg.image.frombuffer(pixel_bytes(canvas), (width, height), "RGB")
        self._surface.blit(img, (0, 0))
        if self._window_surface is not None:
            self._window_surface.blit(self._surface, (0, 0))
            pg.display.flip()

    def save_png(self, path: str | Path) -> Path:
        """Write the current surface to a PNG file at *path*."""
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        pg.image.save(self._surface, str(out))
        return out

    def wait_closed(
        self, poll_s: float = 0.05, timeout_s: Optional[float] = None
    ) -> None:
        """Block until the window is closed, ESC/q is pressed or *timeout_s* passes.

        Returns immediately when there is no window.
        """
        if self._window_surface is None:
            return
        deadline = None if timeout_s is None else time.monotonic() + timeout_s
        while deadline is None or time.monotonic() < deadline:
            for ev in pg.event.get():
                if ev.type == pg.QUIT:
                    return
                if ev.type == pg.KEYDOWN and ev.key in (pg.K_ESCAPE, pg.K_q):
                    return
            time.sleep(poll_s)

    def close(self) -> None:
        if self._window_surface is not None:
            pg.display.quit()
            self._window_surface = None
