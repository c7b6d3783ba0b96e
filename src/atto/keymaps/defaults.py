"""Built-in keymaps for the modal scheme and the single-mode presets."""

from __future__ import annotations

from atto.actions import command as command_actions
from atto.actions import core as core_actions
from atto.actions import edit as edit_actions
from atto.actions import motion as motion_actions
from atto.runtime import telemetry

from .models import (
    BACKSPACE,
    DOWN,
    ENTER,
    ESC,
    LEFT,
    RIGHT,
    UP,
    ActionRef,
    Binding,
    KeyStroke,
)
from .presets import KeyBindingSet, KeyPreset, preset_for
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="core.enter_insert",
        handler=core_actions.enter_insert_mode,
        description="Enter insert mode",
    ),
    ActionRef(
        id="core.exit_to_normal",
        handler=core_actions.exit_to_normal_mode,
        description="Return to normal mode",
    ),
    ActionRef(
        id="core.enter_command",
        handler=core_actions.enter_command_mode,
        description="Enter command-line mode",
    ),
    ActionRef(id="motion.up", handler=motion_actions.move_up, description="Move Up"),
    ActionRef(
        id="motion.down", handler=motion_actions.move_down, description="Move Down"
    ),
    ActionRef(
        id="motion.left", handler=motion_actions.move_left, description="Move Left"
    ),
    ActionRef(
        id="motion.right", handler=motion_actions.move_right, description="Move Right"
    ),
    ActionRef(
        id="edit.new_line",
        handler=edit_actions.new_line,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.backspace",
        handler=edit_actions.backspace,
        description="Delete before the cursor or join with the previous line",
    ),
    ActionRef(
        id="command.submit_line",
        handler=command_actions.submit_command_line,
        description="Evaluate the active command line",
    ),
    ActionRef(id="file.save", handler=command_actions.save_file, description="Save"),
    ActionRef(id="file.quit", handler=command_actions.quit_editor, description="Quit"),
)


def _binding(mode: str, key: str, action_id: str, description: str) -> Binding:
    stroke = KeyStroke.parse(key)
    return Binding(
        id=f"{mode}.{stroke.token}",
        mode=mode,
        stroke=stroke,
        action_id=action_id,
        description=description,
        source="defaults",
    )


MODAL_BINDINGS: tuple[Binding, ...] = (
    _binding("normal", "i", "core.enter_insert", "Enter insert mode"),
    _binding("normal", ":", "core.enter_command", "Enter command-line mode"),
    _binding("normal", "k", "motion.up", "Move Up"),
    _binding("normal", "j", "motion.down", "Move Down"),
    _binding("normal", "h", "motion.left", "Move Left"),
    _binding("normal", "l", "motion.right", "Move Right"),
    _binding("normal", UP, "motion.up", "Move Up"),
    _binding("normal", DOWN, "motion.down", "Move Down"),
    _binding("normal", LEFT, "motion.left", "Move Left"),
    _binding("normal", RIGHT, "motion.right", "Move Right"),
    _binding("insert", ESC, "core.exit_to_normal", "Leave insert mode"),
    _binding("insert", UP, "motion.up", "Move Up"),
    _binding("insert", DOWN, "motion.down", "Move Down"),
    _binding("insert", LEFT, "motion.left", "Move Left"),
    _binding("insert", RIGHT, "motion.right", "Move Right"),
    _binding("insert", ENTER, "edit.new_line", "New line"),
    _binding("insert", BACKSPACE, "edit.backspace", "Backspace"),
    _binding("command", ESC, "core.exit_to_normal", "Cancel command line"),
    _binding("command", ENTER, "command.submit_line", "Submit the command line"),
)

_PRESET_ACTIONS = {
    "save": "file.save",
    "quit": "file.quit",
    "move_up": "motion.up",
    "move_down": "motion.down",
    "move_left": "motion.left",
    "move_right": "motion.right",
}

# Bound after the preset, only where the preset left the key free.
_SINGLE_MODE_FALLBACKS: tuple[Binding, ...] = (
    _binding("insert", UP, "motion.up", "Move Up"),
    _binding("insert", DOWN, "motion.down", "Move Down"),
    _binding("insert", LEFT, "motion.left", "Move Left"),
    _binding("insert", RIGHT, "motion.right", "Move Right"),
    _binding("insert", ENTER, "edit.new_line", "New line"),
    _binding("insert", BACKSPACE, "edit.backspace", "Backspace"),
)


def preset_bindings(bindings: KeyBindingSet, *, mode: str = "insert") -> list[Binding]:
    """Translate a ``KeyBindingSet`` into registry bindings for ``mode``."""

    return [
        Binding(
            id=f"{mode}.preset.{name}",
            mode=mode,
            stroke=stroke,
            action_id=_PRESET_ACTIONS[name],
            description=name.replace("_", " ").title(),
            source="preset",
        )
        for name, stroke in bindings.items()
    ]


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    modal: bool = True,
    preset: str | KeyPreset | KeyBindingSet = KeyPreset.ATTO,
) -> None:
    """Register the built-in actions plus the bindings for one input scheme.

    ``modal`` selects the Normal/Insert/Command tables; otherwise the
    ``insert`` mode gets the preset's bindings and the arrow, Enter, and
    Backspace fallbacks.
    """

    for action in DEFAULT_ACTIONS:
        if not registry.has_action(action.id):
            registry.register_action(action)

    if modal:
        for binding in MODAL_BINDINGS:
            registry.register_binding(binding)
    else:
        key_set = preset if isinstance(preset, KeyBindingSet) else preset_for(preset)
        for binding in preset_bindings(key_set):
            registry.register_binding(binding)
        for binding in _SINGLE_MODE_FALLBACKS:
            if registry.detect_conflicts(binding, ignore=(binding.id,)):
                continue
            registry.register_binding(binding)

    stats = registry.stats()
    telemetry.record_event(
        "keymaps.loaded",
        level="debug",
        data={
            "modal": modal,
            "bindings": stats.binding_count,
            "modes": ",".join(stats.modes),
        },
    )


__all__ = [
    "load_default_keymaps",
    "preset_bindings",
    "DEFAULT_ACTIONS",
    "MODAL_BINDINGS",
]
