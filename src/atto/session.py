"""Editor session: the editing core the surfaces drive."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from atto.buffer import Buffer, BufferDocument, BufferMirror, read_lines, write_lines
from atto.commands import CommandInterpreter
from atto.config import EditorConfig
from atto.keymaps import KeymapRegistry, KeymapResolver
from atto.keymaps.defaults import load_default_keymaps
from atto.modes import (
    CommandMode,
    InsertMode,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeManager,
    ModeName,
    ModeResult,
    NormalMode,
    command_state,
)
from atto.runtime import telemetry

UNTITLED = "Untitled"


class EditorSession:
    """Owns buffer, modes, command interpreter, status line, and run flag.

    The configuration is injected once; modal configurations get
    Normal/Insert/Command, the others a single Insert mode whose keymap is the
    chosen preset. Save and quit requests arrive as ``command.write`` and
    ``command.quit`` events on the mode bus, whichever binding raised them.
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        *,
        path: str | Path | None = None,
        status: Optional[str] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.logger = telemetry.get_logger("atto.session")
        self.path: Optional[Path] = None
        self.status_message = status or ""
        self._running = True

        self.buffer = Buffer(name=UNTITLED)
        self.bus = ModeBus()
        self.context = ModeContext(
            buffer=self.buffer,
            bus=self.bus,
            commands=CommandInterpreter(self.config.command_style),
        )
        registry = KeymapRegistry(logger_name="atto.keymaps")
        load_default_keymaps(
            registry,
            modal=self.config.vim_mode,
            preset=self.config.key_binding_preset,
        )
        self.modes = ModeManager(
            self.context,
            keymap_registry=registry,
            keymap_resolver=KeymapResolver(registry, logger_name="atto.keymaps"),
        )
        if self.config.vim_mode:
            self.modes.register_mode(NormalMode)
            self.modes.register_mode(InsertMode)
            self.modes.register_mode(CommandMode)
        else:
            self.modes.register_mode(InsertMode)

        self.bus.subscribe("command.write", self._on_write)
        self.bus.subscribe("command.quit", self._on_quit)
        self.bus.subscribe("command.error", self._on_unknown_command)

        if path is not None:
            self.load(path)

    # --- File operations -------------------------------------------------------
    def load(self, path: str | Path) -> None:
        target = Path(path)
        try:
            lines = read_lines(target)
        except (OSError, UnicodeDecodeError) as exc:
            # keep the path unset so a later save cannot clobber the original
            self.path = None
            self.buffer.replace_document(BufferDocument())
            self.logger.error(f"load failed: {target}: {exc}")
            self._default_status(f'Error: could not read "{target}": {exc}')
            return

        self.path = target
        self.buffer.name = str(target)
        if lines is None:
            self.buffer.replace_document(BufferDocument())
            self._default_status(f'"{target}" [New File]')
        else:
            self.buffer.replace_document(BufferDocument.from_lines(lines))
            self._default_status(
                f'"{target}" {self.buffer.document.line_count()}L read'
            )
        telemetry.record_event(
            "file.load",
            data={
                "path": str(target),
                "exists": lines is not None,
                "lines": self.buffer.document.line_count(),
            },
        )

    def save(self) -> bool:
        if self.path is None:
            self.status_message = "Error: No filename specified."
            self.logger.error("save failed: no filename")
            return False

        document = self.buffer.document
        try:
            write_lines(self.path, document.snapshot())
        except OSError as exc:
            self.status_message = "Error: Could not open file for writing!"
            self.logger.error(f"save failed: {self.path}: {exc}")
            return False

        document.mark_clean()
        self.status_message = f'"{self.path}" {document.line_count()}L written'
        telemetry.record_event(
            "file.save",
            data={"path": str(self.path), "lines": document.line_count()},
        )
        return True

    # --- Input -----------------------------------------------------------------
    def handle_input(self, event: KeyInput) -> ModeResult:
        if not self._running:
            return ModeResult(consumed=False, status="stopped")
        if self.modes.active_name != ModeName.COMMAND.value:
            self.status_message = ""
        return self.modes.handle_key(event)

    def is_running(self) -> bool:
        return self._running

    def quit(self) -> None:
        if self._running:
            self._running = False
            telemetry.record_event("session.quit", data={"dirty": self.dirty})

    # --- Read-only views -------------------------------------------------------
    @property
    def mode(self) -> ModeName:
        return ModeName(self.modes.active_name or ModeName.INSERT.value)

    @property
    def mode_label(self) -> str:
        if not self.config.vim_mode:
            return ModeName.INSERT.label
        return self.mode.label

    @property
    def command_active(self) -> bool:
        return self.config.vim_mode and self.mode is ModeName.COMMAND

    @property
    def command_line(self) -> str:
        if not self.command_active:
            return ""
        return str(command_state(self.context)["text"])

    @property
    def display_name(self) -> str:
        return str(self.path) if self.path is not None else UNTITLED

    @property
    def dirty(self) -> bool:
        return self.buffer.document.dirty

    def resize(self, height: int, width: int) -> None:
        self.buffer.resize(height, width)

    def mirror(self) -> BufferMirror:
        document = self.buffer.document
        viewport = self.buffer.viewport
        cursor = self.buffer.cursor
        lines = tuple(
            (row + 1, viewport.clip(document.line_text(row)))
            for row in viewport.visible_rows(document.line_count())
        )
        status = f":{self.command_line}" if self.command_active else self.status_message
        return BufferMirror(
            lines=lines,
            cursor_screen=viewport.screen_position(cursor),
            mode=self.mode_label,
            modal=self.config.vim_mode,
            filename=self.display_name,
            line=cursor.row + 1,
            column=cursor.column + 1,
            status=status,
            command_active=self.command_active,
        )

    # --- Bus handlers ----------------------------------------------------------
    def _on_write(self, payload: object | None) -> None:
        del payload
        self.save()

    def _on_quit(self, payload: object | None) -> None:
        del payload
        self.quit()

    def _on_unknown_command(self, payload: object | None) -> None:
        self.status_message = f"Unknown command: {payload}"

    def _default_status(self, message: str) -> None:
        if not self.status_message:
            self.status_message = message


__all__ = ["EditorSession", "UNTITLED"]
