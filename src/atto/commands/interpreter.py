"""Command-line language: literal keywords per command style."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping


class CommandOutcome(str, Enum):
    QUIT = "quit"
    WRITE = "write"
    WRITE_QUIT = "write_quit"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class CommandStyle:
    """Keyword table for one style; matching is exact, case-sensitive."""

    name: str
    quit: tuple[str, ...]
    write: tuple[str, ...]
    write_quit: tuple[str, ...]
    _lookup: Mapping[str, CommandOutcome] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        lookup: Dict[str, CommandOutcome] = {}
        for outcome, keywords in (
            (CommandOutcome.QUIT, self.quit),
            (CommandOutcome.WRITE, self.write),
            (CommandOutcome.WRITE_QUIT, self.write_quit),
        ):
            for keyword in keywords:
                if keyword in lookup:
                    raise ValueError(
                        f"Keyword '{keyword}' used twice in style '{self.name}'"
                    )
                lookup[keyword] = outcome
        object.__setattr__(self, "_lookup", MappingProxyType(lookup))

    def outcome_for(self, keyword: str) -> CommandOutcome:
        return self._lookup.get(keyword, CommandOutcome.UNKNOWN)


COMMAND_STYLES: Mapping[str, CommandStyle] = MappingProxyType(
    {
        "vim": CommandStyle(
            name="vim",
            quit=("q", "quit"),
            write=("w",),
            write_quit=("wq",),
        ),
        "kakoune": CommandStyle(
            name="kakoune",
            quit=("quit",),
            write=("write",),
            write_quit=("write-quit",),
        ),
    }
)

DEFAULT_COMMAND_STYLE = "vim"


def get_style(name: str) -> CommandStyle:
    try:
        return COMMAND_STYLES[name]
    except KeyError as exc:
        raise ValueError(
            f"Unknown command style '{name}' (expected one of {sorted(COMMAND_STYLES)})"
        ) from exc


class CommandInterpreter:
    """Turns a submitted command line into a ``CommandOutcome``."""

    def __init__(self, style: str | CommandStyle = DEFAULT_COMMAND_STYLE) -> None:
        self.style = style if isinstance(style, CommandStyle) else get_style(style)

    def parse(self, text: str) -> CommandOutcome:
        return self.style.outcome_for(text)


__all__ = [
    "CommandOutcome",
    "CommandStyle",
    "CommandInterpreter",
    "COMMAND_STYLES",
    "DEFAULT_COMMAND_STYLE",
    "get_style",
]
