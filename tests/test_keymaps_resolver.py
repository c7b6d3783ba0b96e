from __future__ import annotations

from atto.keymaps import (
    ActionRef,
    Binding,
    KeyStroke,
    KeymapRegistry,
    KeymapResolver,
)


def make_action(action_id: str) -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: action_id)


def make_binding(
    binding_id: str,
    *,
    mode: str = "normal",
    key: str = "g",
    action_id: str = "core.test",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        stroke=KeyStroke.parse(key),
        action_id=action_id,
    )


def build_registry(bindings: list[Binding]) -> KeymapRegistry:
    registry = KeymapRegistry()
    action_ids = {binding.action_id for binding in bindings}
    for action_id in action_ids:
        registry.register_action(make_action(action_id))
    for binding in bindings:
        registry.register_binding(binding)
    return registry


def test_resolver_matches_single_token() -> None:
    binding = make_binding("normal.g")
    registry = build_registry([binding])
    resolver = KeymapResolver(registry)

    result = resolver.resolve("normal", "g")

    assert result.status == "match"
    assert result.match is not None
    assert result.match.binding.id == binding.id
    assert result.match.action.id == "core.test"


def test_resolver_scopes_lookup_by_mode() -> None:
    registry = build_registry([make_binding("insert.g", mode="insert")])
    resolver = KeymapResolver(registry)

    assert resolver.resolve("normal", "g").status == "miss"
    assert resolver.resolve("insert", "g").status == "match"


def test_resolver_distinguishes_chords_from_plain_keys() -> None:
    registry = build_registry(
        [make_binding("insert.save", mode="insert", key="ctrl+s", action_id="save")]
    )
    resolver = KeymapResolver(registry)

    assert resolver.resolve("insert", "s").status == "miss"
    assert resolver.resolve("insert", "ctrl+s").status == "match"


def test_resolver_cache_refreshes_on_revision() -> None:
    registry = build_registry([])
    resolver = KeymapResolver(registry)

    miss = resolver.resolve("normal", "x")
    assert miss.status == "miss"

    new_binding = make_binding("normal.x", key="x", action_id="core.x")
    registry.register_action(make_action("core.x"))
    registry.register_binding(new_binding)

    match = resolver.resolve("normal", "x")
    assert match.status == "match"
    assert match.match is not None
    assert match.match.binding.id == new_binding.id

    registry.unregister_binding("normal.x")
    assert resolver.resolve("normal", "x").status == "miss"


def test_resolved_action_is_callable() -> None:
    registry = build_registry([make_binding("normal.g", action_id="core.go")])
    resolver = KeymapResolver(registry)

    result = resolver.resolve("normal", "g")

    assert result.match is not None
    assert result.match.action() == "core.go"


def test_reset_drops_cached_tables() -> None:
    registry = build_registry([make_binding("normal.g")])
    resolver = KeymapResolver(registry)
    resolver.resolve("normal", "g")

    resolver.reset("normal")
    resolver.reset()

    assert resolver.registry is registry
    assert resolver.resolve("normal", "g").status == "match"
