"""Mode-switch actions shared across modes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from atto.modes.base_mode import ModeContext, ModeName, ModeResult

if TYPE_CHECKING:
    from atto.keymaps.resolver import ResolutionMatch


def enter_insert_mode(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return ModeResult(
        consumed=True, switch_to=ModeName.INSERT.value, message="enter_insert"
    )


def exit_to_normal_mode(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return ModeResult(
        consumed=True, switch_to=ModeName.NORMAL.value, message="exit_to_normal"
    )


def enter_command_mode(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return ModeResult(
        consumed=True, switch_to=ModeName.COMMAND.value, message="enter_command"
    )


__all__ = [
    "enter_insert_mode",
    "exit_to_normal_mode",
    "enter_command_mode",
]
