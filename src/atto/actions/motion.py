"""Cursor motions; the buffer clamps and resyncs the viewport afterwards."""

from __future__ import annotations

from typing import TYPE_CHECKING

from atto.modes.base_mode import ModeContext, ModeResult

if TYPE_CHECKING:
    from atto.keymaps.resolver import ResolutionMatch


def move_up(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    context.buffer.move_up()
    return ModeResult(consumed=True, status="motion")


def move_down(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    context.buffer.move_down()
    return ModeResult(consumed=True, status="motion")


def move_left(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    context.buffer.move_left()
    return ModeResult(consumed=True, status="motion")


def move_right(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    context.buffer.move_right()
    return ModeResult(consumed=True, status="motion")


__all__ = ["move_up", "move_down", "move_left", "move_right"]
