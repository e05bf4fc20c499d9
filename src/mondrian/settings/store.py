"""Persisted user defaults.

Settings live in ``settings.json`` under ``$MONDRIAN_HOME`` (default
``~/.mondrian``). Reading never creates the directory; only a save does.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .schema import Settings

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"
DEFAULT_HOME = "~/.mondrian"


class SettingsStore:
    """Read and write the persisted :class:`Settings`."""

    @staticmethod
    def home() -> Path:
        """Directory holding the settings file."""
        return Path(os.environ.get("MONDRIAN_HOME") or DEFAULT_HOME).expanduser()

    @classmethod
    def settings_path(cls) -> Path:
        return cls.home() / SETTINGS_FILE

    @classmethod
    def load(cls) -> Settings:
        """Return the stored settings, or defaults if there are none usable.

        A missing file is the normal first-run case. Unreadable JSON or
        values the schema rejects are logged and replaced by defaults.
        """
        path = cls.settings_path()
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("no settings at %s, using defaults", path)
            return Settings()
        except OSError as e:
            logger.warning("cannot read settings %s: %s", path, e)
            return Settings()
        try:
            return Settings.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as e:
            logger.warning("ignoring invalid settings %s: %s", path, e)
            return Settings()

    @classmethod
    def save(cls, settings: Settings) -> Path:
        """Persist *settings*, replacing the previous file in one step."""
        path = cls.settings_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(path.name + ".tmp")
        tmp.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp, path)
        return path
