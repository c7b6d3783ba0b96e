"""Executable Textual app that hosts an editor session."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use atto.adapters.textual.app"
    ) from exc

from atto.buffer import BufferMirror
from atto.config import load_config
from atto.runtime import telemetry
from atto.session import EditorSession

from .controller import TextualEditorAdapter, TextualUIHooks
from .render import render_status, render_text_area


class AttoApp(App[None], inherit_bindings=False):
    """Title row, buffer text, and a one-line status bar.

    Bindings are not inherited so ctrl+q, ctrl+c and friends reach the
    editor keymaps instead of Textual's own actions.
    """

    CSS = """
	Screen {
		layout: vertical;
	}

	#title {
		height: 1;
	}

	#text-area {
		height: 1fr;
		overflow: hidden;
	}

	#status-bar {
		height: 1;
		background: white;
		color: black;
	}
	"""

    ENABLE_COMMAND_PALETTE = False

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualEditorAdapter | None = None
        self._text_widget: Static | None = None
        self._status_widget: Static | None = None
        self._logger = telemetry.get_logger("atto.ui")

    def compose(self) -> ComposeResult:
        yield Static(Text("Atto", style="bold"), id="title")
        self._text_widget = Static("", id="text-area")
        self._status_widget = Static("", id="status-bar")
        yield self._text_widget
        yield self._status_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_frame=self._update_frame,
            request_exit=self.exit,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        self.adapter.resize(self.size.width, self.size.height)

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.width, event.size.height)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_key(event.key, event.character)
        event.stop()
        event.prevent_default()

    def _update_frame(self, mirror: BufferMirror) -> None:
        if self._text_widget:
            self._text_widget.update(render_text_area(mirror))
        if self._status_widget:
            self._status_widget.update(render_status(mirror, self.size.width))

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="atto", description="Minimal modal terminal text editor."
    )
    parser.add_argument("path", help="File to edit (created on first save)")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file to use instead of ./config.json or the user config dir",
    )
    parser.add_argument(
        "--log-file",
        default=os.environ.get("ATTO_LOG_FILE"),
        help="Write structured logs to this file",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("ATTO_LOG_LEVEL"),
        help="Minimum telemetry log level (default: INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(level=args.log_level, log_file=args.log_file)
    result = load_config(args.config)
    session = EditorSession(result.config, path=args.path, status=result.status)
    AttoApp(session).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
