"""Runtime configuration helpers.

Merges the persisted :class:`~mondrian.settings.schema.Settings` with
command-line overrides into the :class:`RenderConfig` the CLI renders
from.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .settings.schema import Settings
from .settings.store import SettingsStore


@dataclass(slots=True)
class RenderConfig:
    width: int
    height: int
    mode: str
    seed: Optional[int]
    background: Tuple[int, int, int]
    min_canvas_size: int
    output: Optional[str]
    show: bool = False

    @property
    def complex_mode(self) -> bool:
        return self.mode == "complex"


_OVERRIDABLE = ("width", "height", "mode", "seed", "background", "output")


def make_render_config(
    *, args: Optional[object] = None, settings: Optional[Settings] = None
) -> RenderConfig:
    """Build a RenderConfig from persisted settings and optional CLI *args*.

    Rules:
    - Persisted settings (``SettingsStore.load()`` unless *settings* is
      given) supply the defaults.
    - Any attribute of the argparse.Namespace-like *args* that is not None
      overrides the matching setting for this run. The merged values are
      re-validated through the pydantic schema, so bad overrides raise
      ``pydantic.ValidationError``.
    """
    base = settings if settings is not None else SettingsStore.load()
    data = base.model_dump()
    show = False
    if args is not None:
        for name in _OVERRIDABLE:
            value = getattr(args, name, None)
            if value is not None:
                data[name] = value
        show = bool(getattr(args, "show", False))
    merged = Settings.model_validate(data)
    return RenderConfig(
        width=merged.width,
        height=merged.height,
        mode=merged.mode,
        seed=merged.seed,
        background=merged.background,
        min_canvas_size=merged.min_canvas_size,
        output=merged.output,
        show=show,
    )


def settings_from_config(cfg: RenderConfig) -> Settings:
    """Convert a RenderConfig back into persistable Settings."""
    return Settings(
        width=cfg.width,
        height=cfg.height,
        mode=cfg.mode,
        seed=cfg.seed,
        background=cfg.background,
        min_canvas_size=cfg.min_canvas_size,
        output=cfg.output,
    )
