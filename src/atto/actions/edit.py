"""Text-mutating actions bound to Enter and Backspace."""

from __future__ import annotations

from typing import TYPE_CHECKING

from atto.modes.base_mode import ModeContext, ModeResult

if TYPE_CHECKING:
    from atto.keymaps.resolver import ResolutionMatch


def new_line(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    context.buffer.new_line()
    return ModeResult(consumed=True, status="edit")


def backspace(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    delta = context.buffer.backspace()
    # at (0, 0) there is nothing to delete
    return ModeResult(consumed=True, status="edit" if delta.changed else "noop")


__all__ = ["new_line", "backspace"]
