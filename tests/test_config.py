from __future__ import annotations

import argparse
from pathlib import Path

import pytest
from pydantic import ValidationError

from mondrian.config import make_render_config, settings_from_config
from mondrian.settings.schema import Settings
from mondrian.settings.store import SettingsStore


def _ns(**kw: object) -> argparse.Namespace:
    base = dict(
        mode=None,
        width=None,
        height=None,
        seed=None,
        background=None,
        output=None,
        show=False,
    )
    base.update(kw)
    return argparse.Namespace(**base)


def test_defaults_from_store(mondrian_home: Path) -> None:
    SettingsStore.save(Settings(mode="complex", width=50, seed=3))
    cfg = make_render_config()
    assert cfg.mode == "complex" and cfg.complex_mode
    assert (cfg.width, cfg.seed) == (50, 3)
    assert cfg.show is False


def test_cli_overrides_settings(mondrian_home: Path) -> None:
    base = Settings(mode="complex", width=50, height=60, seed=3)
    cfg = make_render_config(
        args=_ns(mode="basic", width=70, seed=9, show=True), settings=base
    )
    assert (cfg.mode, cfg.width, cfg.height, cfg.seed) == ("basic", 70, 60, 9)
    assert cfg.show is True
    assert not cfg.complex_mode


def test_bad_override_raises(mondrian_home: Path) -> None:
    with pytest.raises(ValidationError):
        make_render_config(args=_ns(width=0), settings=Settings())


def test_settings_from_config_roundtrip(mondrian_home: Path) -> None:
    cfg = make_render_config(args=_ns(width=123, background=(9, 9, 9)))
    s = settings_from_config(cfg)
    assert s.width == 123 and s.background == (9, 9, 9)
