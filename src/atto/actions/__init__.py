"""Editing verbs that key bindings point at."""

from .core import enter_command_mode, enter_insert_mode, exit_to_normal_mode
from .motion import move_down, move_left, move_right, move_up
from .edit import backspace, new_line
from .command import quit_editor, save_file, submit_command_line

__all__ = [
    "enter_insert_mode",
    "exit_to_normal_mode",
    "enter_command_mode",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "new_line",
    "backspace",
    "submit_command_line",
    "save_file",
    "quit_editor",
]
