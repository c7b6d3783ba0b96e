"""Actions that evaluate command lines or save/quit directly."""

from __future__ import annotations

from typing import TYPE_CHECKING

from atto.commands import CommandOutcome
from atto.modes.base_mode import ModeContext, ModeName, ModeResult, command_state
from atto.runtime import telemetry

if TYPE_CHECKING:
    from atto.keymaps.resolver import ResolutionMatch


def submit_command_line(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    """Run the typed command; always lands back in Normal mode."""

    del match
    state = command_state(context)
    text = str(state.get("text", ""))
    state["text"] = ""
    context.bus.emit("command.submit", text)

    outcome = context.commands.parse(text)
    telemetry.record_event(
        "command.outcome",
        data={"command": text, "outcome": outcome.value},
    )
    if outcome in (CommandOutcome.WRITE, CommandOutcome.WRITE_QUIT):
        context.bus.emit("command.write", {"command": text})
    if outcome in (CommandOutcome.QUIT, CommandOutcome.WRITE_QUIT):
        context.bus.emit("command.quit", {"command": text})
    if outcome is CommandOutcome.UNKNOWN:
        context.bus.emit("command.error", text)

    return ModeResult(
        consumed=True,
        switch_to=ModeName.NORMAL.value,
        status=f"command_{outcome.value}",
        message=text,
    )


def save_file(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    context.bus.emit("command.write", {"command": match.binding.key_signature})
    return ModeResult(consumed=True, status="write")


def quit_editor(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    context.bus.emit("command.quit", {"command": match.binding.key_signature})
    return ModeResult(consumed=True, status="quit")


__all__ = ["submit_command_line", "save_file", "quit_editor"]
