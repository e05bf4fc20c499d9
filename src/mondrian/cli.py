"""Command-line interface for Mondrian.

Allocates a canvas, paints it with :class:`~mondrian.core.engine.MondrianEngine`
and writes the result to PNG and/or shows it in a preview window. Invoked
via the ``mondrian`` console script or ``python -m mondrian``.
"""

from __future__ import annotations

import argparse
import logging
from typing import Tuple

from mondrian import __version__
from mondrian.config import RenderConfig, make_render_config, settings_from_config
from mondrian.core.engine import MondrianEngine
from mondrian.render.canvas import PixelBuffer, new_canvas
from mondrian.render.image_io import save_png
from mondrian.settings.store import SettingsStore
from mondrian.settings.values import MODES

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "mondrian.png"


def _rgb(s: str) -> Tuple[int, int, int]:
    parts = s.split(",")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError("expected R,G,B")
    try:
        r, g, b = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError("expected integer channels") from None
    return (r, g, b)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Options left unset stay None so persisted settings can fill them in.
    """
    p = argparse.ArgumentParser(
        prog="mondrian", description="Paint Mondrian-style compositions"
    )
    p.add_argument(
        "mode",
        nargs="?",
        choices=MODES,
        default=None,
        help="basic (palette leaves) or complex (radial gradient leaves)",
    )
    p.add_argument("--width", type=int, default=None, help="Canvas width in px")
    p.add_argument("--height", type=int, default=None, help="Canvas height in px")
    p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed; the same seed and size reproduce the same image",
    )
    p.add_argument(
        "--background",
        type=_rgb,
        default=None,
        help="Background / grid line color as R,G,B (default: 0,0,0)",
    )
    p.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help=f"PNG output path (default: {DEFAULT_OUTPUT} unless --show)",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Show the result in a window until it is closed",
    )
    p.add_argument(
        "--save-defaults",
        dest="save_defaults",
        action="store_true",
        help="Persist the effective options as the new defaults",
    )
    p.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p.parse_args(argv)


def render(cfg: RenderConfig) -> PixelBuffer:
    """Allocate and paint a canvas according to *cfg*."""
    canvas = new_canvas(cfg.width, cfg.height, cfg.background)
    engine = MondrianEngine(cfg.seed, min_canvas_size=cfg.min_canvas_size)
    engine.paint(canvas, complex_mode=cfg.complex_mode)
    return canvas


def _show(canvas: PixelBuffer, cfg: RenderConfig) -> None:
    # Imported lazily so headless runs never initialize SDL
    from mondrian.platform.display.pygame_backend import PygameDisplayBackend

    display = PygameDisplayBackend((cfg.width, cfg.height), create_window=True)
    try:
        display.show(canvas)
        display.wait_closed()
    finally:
        display.close()


def main(argv: list[str] | None = None) -> int:
    """Synchronous entrypoint; returns the process exit status."""
    args = parse_args(argv)

    if args.version:
        print(f"Mondrian {__version__}")
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = make_render_config(args=args)
        if args.save_defaults:
            saved = SettingsStore.save(settings_from_config(cfg))
            logger.info("saved defaults to %s", saved)
        canvas = render(cfg)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    output = cfg.output
    if output is None and not cfg.show:
        output = DEFAULT_OUTPUT
    if output is not None:
        save_png(canvas, output)
    if cfg.show:
        _show(canvas, cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
