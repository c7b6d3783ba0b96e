from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from atto.adapters.textual import app as app_module


def test_missing_path_is_a_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        app_module.main([])

    assert excinfo.value.code == 2
    assert "usage: atto" in capsys.readouterr().err


def test_main_builds_session_from_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    launched: List[app_module.AttoApp] = []
    monkeypatch.setattr(app_module.AttoApp, "run", lambda self: launched.append(self))
    config_path = tmp_path / "config.json"
    config_path.write_text('{"vim_mode": false}', encoding="utf-8")
    target = tmp_path / "notes.txt"

    app_module.main([str(target), "--config", str(config_path)])

    assert len(launched) == 1
    session = launched[0].session
    assert session.config.vim_mode is False
    assert session.path == target
    assert "New File" in session.status_message


def test_config_status_wins_over_load_status(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    launched: List[app_module.AttoApp] = []
    monkeypatch.setattr(app_module.AttoApp, "run", lambda self: launched.append(self))
    config_path = tmp_path / "fresh" / "config.json"

    app_module.main([str(tmp_path / "notes.txt"), "--config", str(config_path)])

    assert config_path.exists()
    assert launched[0].session.status_message == (
        f"Created default config at: {config_path}"
    )


def test_title_row_is_left_aligned() -> None:
    title_rules = app_module.AttoApp.CSS.split("#title", 1)[1].split("}", 1)[0]

    assert "height: 1;" in title_rules
    assert "content-align" not in title_rules
