"""Per-mode lookup tables built from the registry, with telemetry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional

from atto.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(slots=True)
class KeymapTable:
    """Token -> winning binding id for a single mode."""

    mode: str
    entries: Dict[str, str] = field(default_factory=dict)

    def add_binding(self, binding: Binding) -> None:
        self.entries[binding.key_signature] = binding.id


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Builds mode-specific tables and resolves single key tokens."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._cache: Dict[str, tuple[int, KeymapTable]] = {}

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(self, mode: str, token: str) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "token": token},
        ) as handle:
            table = self._ensure_table(mode)
            binding_id = table.entries.get(token)
            if binding_id is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss")

            binding = self._registry.get_binding(binding_id)
            action = self._registry.get_action(binding.action_id)
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", binding.id)
            return ResolutionResult(
                status="match",
                match=ResolutionMatch(binding=binding, action=action),
            )

    def reset(self, mode: Optional[str] = None) -> None:
        if mode is None:
            self._cache.clear()
        else:
            self._cache.pop(mode, None)

    def _ensure_table(self, mode: str) -> KeymapTable:
        revision = self._registry.revision()
        cached = self._cache.get(mode)
        if cached and cached[0] == revision:
            return cached[1]

        table = KeymapTable(mode=mode)
        for binding in self._registry.iter_bindings(mode):
            table.add_binding(binding)
        self._cache[mode] = (revision, table)
        return table


__all__ = [
    "KeymapResolver",
    "KeymapTable",
    "ResolutionResult",
    "ResolutionMatch",
]
