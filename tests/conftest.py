from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def mondrian_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    # Keep tests away from the real ~/.mondrian
    home = tmp_path / "home"
    monkeypatch.setenv("MONDRIAN_HOME", str(home))
    return home
