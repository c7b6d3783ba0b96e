from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pytest

from atto.adapters.textual import (
    TextualEditorAdapter,
    TextualUIHooks,
    normalize_key,
    render_status,
    render_text_area,
    text_area_size,
)
from atto.buffer import BufferMirror
from atto.config import EditorConfig
from atto.session import EditorSession


def make_adapter(
    session: Optional[EditorSession] = None,
) -> tuple[TextualEditorAdapter, List[BufferMirror], List[str], List[bool]]:
    frames: List[BufferMirror] = []
    logs: List[str] = []
    exits: List[bool] = []
    hooks = TextualUIHooks(
        update_frame=frames.append,
        request_exit=lambda: exits.append(True),
        log=logs.append,
    )
    adapter = TextualEditorAdapter(session or EditorSession(), hooks)
    return adapter, frames, logs, exits


def make_mirror(**overrides: object) -> BufferMirror:
    values: dict[str, object] = {
        "lines": ((1, "ab"),),
        "cursor_screen": (0, 1),
        "mode": "NORMAL",
        "modal": True,
        "filename": "notes.txt",
        "line": 1,
        "column": 2,
        "status": "",
    }
    values.update(overrides)
    return BufferMirror(**values)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("key", "character", "expected"),
    [
        ("escape", None, ("ESC", (), None)),
        ("enter", "\r", ("ENTER", (), None)),
        ("backspace", None, ("BACKSPACE", (), None)),
        ("up", None, ("UP", (), None)),
        ("ctrl+s", "\x13", ("s", ("ctrl",), None)),
        ("a", "a", ("a", (), "a")),
        ("colon", ":", (":", (), ":")),
        ("space", " ", (" ", (), " ")),
    ],
)
def test_normalize_key(
    key: str, character: Optional[str], expected: tuple[str, tuple[str, ...], Optional[str]]
) -> None:
    event = normalize_key(key, character)

    assert event is not None
    assert (event.key, event.modifiers, event.text) == expected


@pytest.mark.parametrize(
    ("key", "character"), [("f1", None), ("tab", "\t"), ("ctrl+home", None)]
)
def test_normalize_key_drops_unusable_keys(key: str, character: Optional[str]) -> None:
    assert normalize_key(key, character) is None


def test_adapter_pushes_frames_on_start_and_each_key() -> None:
    adapter, frames, _logs, _exits = make_adapter()
    assert len(frames) == 1

    adapter.handle_textual_key("i", "i")
    adapter.handle_textual_key("h", "h")

    assert len(frames) == 3
    assert frames[-1].mode == "INSERT"
    assert frames[-1].lines == ()  # no size reported yet


def test_adapter_resize_subtracts_chrome() -> None:
    adapter, frames, _logs, _exits = make_adapter()

    adapter.resize(40, 12)

    assert (adapter.session.buffer.viewport.height, adapter.session.buffer.viewport.width) == (
        10,
        35,
    )
    assert frames[-1].lines == ((1, ""),)


def test_adapter_requests_exit_when_session_stops() -> None:
    session = EditorSession(EditorConfig(vim_mode=False))
    adapter, _frames, _logs, exits = make_adapter(session)

    adapter.handle_textual_key("ctrl+q", None)

    assert exits == [True]
    assert session.is_running() is False


def test_adapter_command_line_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    session = EditorSession(path=target)
    adapter, frames, _logs, exits = make_adapter(session)

    for key, character in [("colon", ":"), ("w", "w")]:
        adapter.handle_textual_key(key, character)
    assert frames[-1].status == ":w"

    adapter.handle_textual_key("enter", "\r")

    assert frames[-1].status == f'"{target}" 1L written'
    assert frames[-1].command_active is False
    assert exits == []


def test_adapter_emits_log_lines() -> None:
    adapter, _frames, logs, _exits = make_adapter()

    adapter.handle_textual_key("i", "i")
    adapter.handle_textual_key("f5", None)

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)
    assert any(line.startswith("key dropped") for line in logs)


def test_text_area_size_never_negative() -> None:
    assert text_area_size(80, 24) == (22, 75)
    assert text_area_size(3, 1) == (0, 0)


def test_render_text_area_draws_gutter_and_cursor() -> None:
    text = render_text_area(make_mirror(lines=((9, "ab"), (10, "cd"))))

    assert text.plain == "9    ab\n10   cd"
    assert any(
        span.style == "reverse" and (span.start, span.end) == (6, 7)
        for span in text.spans
    )


def test_render_text_area_cursor_past_end_of_line() -> None:
    text = render_text_area(make_mirror(cursor_screen=(0, 2)))

    assert text.plain == "1    ab "


def test_render_text_area_without_cursor_when_not_modal() -> None:
    text = render_text_area(make_mirror(modal=False))

    assert text.plain == "1    ab"
    assert not any(span.style == "reverse" for span in text.spans)


def test_render_status_prefers_status_message() -> None:
    assert render_status(make_mirror(status="Unknown command: x"), 40).plain == (
        "Unknown command: x"
    )


def test_render_status_layout() -> None:
    text = render_status(make_mirror(), 60)

    assert text.plain.startswith("NORMAL  │notes.txt")
    assert text.plain.endswith("│ Ln 1, Col 2 ")
    assert text.cell_len == 60


def test_render_status_hides_mode_when_not_modal() -> None:
    text = render_status(make_mirror(modal=False, mode="INSERT"), 40)

    assert text.plain.startswith("notes.txt")
    assert "INSERT" not in text.plain
