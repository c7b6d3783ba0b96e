"""Editor configuration: discovery, defaults, and tolerant parsing.

The configuration is a small JSON document::

    {"vim_mode": true, "command_style": "vim", "key_binding_preset": "atto"}

``./config.json`` wins when present; otherwise the per-user config directory
reported by platformdirs is used. A missing file is created with the
defaults. Nothing in here is allowed to stop the editor from starting: any
problem degrades to the built-in defaults plus a status message.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import platformdirs

from atto.commands import COMMAND_STYLES, DEFAULT_COMMAND_STYLE
from atto.keymaps.presets import KeyPreset
from atto.runtime import telemetry

APP_NAME = "atto"
CONFIG_FILENAME = "config.json"

LOGGER_NAME = "atto.config"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    vim_mode: bool = True
    command_style: str = DEFAULT_COMMAND_STYLE
    key_binding_preset: str = KeyPreset.ATTO.value

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], *, problems: Optional[List[str]] = None
    ) -> "EditorConfig":
        """Build a config from parsed JSON, keeping defaults for bad values.

        Each rejected value is described in ``problems`` when a list is given.
        Unknown keys are ignored.
        """

        found = problems if problems is not None else []
        config = cls()

        vim_mode = data.get("vim_mode", config.vim_mode)
        if isinstance(vim_mode, bool):
            config = replace(config, vim_mode=vim_mode)
        else:
            found.append(f"vim_mode must be true or false, got {vim_mode!r}")

        style = data.get("command_style", config.command_style)
        if isinstance(style, str) and style in COMMAND_STYLES:
            config = replace(config, command_style=style)
        else:
            found.append(
                f"command_style must be one of {sorted(COMMAND_STYLES)}, got {style!r}"
            )

        preset = data.get("key_binding_preset", config.key_binding_preset)
        names = [member.value for member in KeyPreset]
        if isinstance(preset, str) and preset in names:
            config = replace(config, key_binding_preset=preset)
        else:
            found.append(f"key_binding_preset must be one of {names}, got {preset!r}")

        for problem in found:
            telemetry.get_logger(LOGGER_NAME).warning(f"config: {problem}")
        return config

    def to_mapping(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ConfigLoadResult:
    """What ``load_config`` produced and what the status bar should say."""

    config: EditorConfig
    path: Optional[Path]
    status: Optional[str] = None


def user_config_path() -> Path:
    config_dir = platformdirs.user_config_dir(APP_NAME, appauthor=False, roaming=True)
    return Path(config_dir) / CONFIG_FILENAME


def default_config_path(cwd: Optional[Path] = None) -> Path:
    """``./config.json`` if it exists, else the per-user location."""

    local = (cwd or Path.cwd()) / CONFIG_FILENAME
    if local.exists():
        return local
    return user_config_path()


def write_default_config(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(EditorConfig().to_mapping(), handle, indent=4)
        handle.write("\n")


def load_config(path: Optional[Path] = None) -> ConfigLoadResult:
    target = path if path is not None else default_config_path()
    status: Optional[str] = None

    if not target.exists():
        try:
            write_default_config(target)
        except OSError as exc:
            telemetry.get_logger(LOGGER_NAME).warning(
                f"config: could not create {target}: {exc}"
            )
            telemetry.record_event(
                "config.fallback", level="warning", data={"reason": str(exc)}
            )
            return ConfigLoadResult(
                config=EditorConfig(),
                path=None,
                status=f"Error creating config at {target}: {exc}",
            )
        status = f"Created default config at: {target}"
        telemetry.record_event("config.created", data={"path": str(target)})

    try:
        with target.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        return _fallback(target, f"Error parsing config: {exc}")
    except OSError as exc:
        return _fallback(target, f"Error reading config: {exc}")

    if not isinstance(data, dict):
        return _fallback(target, "Error parsing config: expected a JSON object")

    problems: List[str] = []
    config = EditorConfig.from_mapping(data, problems=problems)
    if problems and status is None:
        status = f"Config warning: {problems[0]}"
    telemetry.record_event(
        "config.loaded",
        data={"path": str(target), **config.to_mapping()},
    )
    return ConfigLoadResult(config=config, path=target, status=status)


def _fallback(target: Path, status: str) -> ConfigLoadResult:
    telemetry.get_logger(LOGGER_NAME).warning(f"config: {status} ({target})")
    telemetry.record_event(
        "config.fallback", level="warning", data={"path": str(target), "reason": status}
    )
    return ConfigLoadResult(config=EditorConfig(), path=target, status=status)


__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "EditorConfig",
    "ConfigLoadResult",
    "default_config_path",
    "user_config_path",
    "write_default_config",
    "load_config",
]
