import pytest

from atto.keymaps import (
    ActionRef,
    Binding,
    KeyBindingSet,
    KeyPreset,
    KeyStroke,
    KeymapConflictError,
    KeymapRegistry,
    preset_for,
    resolve_preset,
)
from atto.keymaps.defaults import load_default_keymaps


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
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


def test_keystroke_tokens_normalize_modifiers() -> None:
    assert KeyStroke.parse("ctrl+s").token == "ctrl+s"
    assert KeyStroke("s", ("CTRL",)).token == "ctrl+s"
    assert KeyStroke.ctrl("Q") == KeyStroke.parse("ctrl+q")
    assert KeyStroke.parse("UP").token == "UP"
    assert KeyStroke.parse("+").token == "+"


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="normal.g")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings(mode="normal")) == [binding]


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.g"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="normal.g.duplicate"))

    assert [b.id for b in excinfo.value.conflicts] == ["normal.g"]


def test_same_key_in_different_modes_does_not_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="normal.g"))
    registry.register_binding(make_binding(binding_id="insert.g", mode="insert"))

    assert registry.stats().modes == ("insert", "normal")


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    first = make_binding(binding_id="binding")
    second = make_binding(binding_id="binding", key="x")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]
    assert registry.detect_conflicts(first) == []


def test_register_binding_unknown_action_raises() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="normal.g"))


def test_duplicate_action_requires_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())

    registry.register_action(make_action(), replace=True)
    assert registry.stats().action_count == 1


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="binding")
    registry.register_binding(binding)
    before = registry.revision()

    removed = registry.unregister_binding("binding")

    assert removed == binding
    assert registry.stats().binding_count == 0
    assert registry.revision() == before + 1
    assert registry.unregister_binding("binding") is None


def test_load_default_keymaps_modal_tables() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    assert registry.get_binding("normal.i").action_id == "core.enter_insert"
    assert registry.get_binding("normal.:").action_id == "core.enter_command"
    assert registry.get_binding("insert.ESC").action_id == "core.exit_to_normal"
    assert registry.get_binding("command.ENTER").action_id == "command.submit_line"
    assert registry.stats().modes == ("command", "insert", "normal")


def test_load_default_keymaps_nano_preset() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry, modal=False, preset="nano")

    tokens = {b.key_signature: b.action_id for b in registry.iter_bindings("insert")}
    assert tokens["ctrl+o"] == "file.save"
    assert tokens["ctrl+x"] == "file.quit"
    assert tokens["UP"] == "motion.up"
    assert tokens["ENTER"] == "edit.new_line"
    assert tokens["BACKSPACE"] == "edit.backspace"
    assert "ESC" not in tokens
    assert registry.stats().modes == ("insert",)


def test_load_default_keymaps_emacs_keeps_arrow_fallbacks() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry, modal=False, preset=KeyPreset.EMACS)

    tokens = {b.key_signature: b.action_id for b in registry.iter_bindings("insert")}
    assert tokens["ctrl+p"] == "motion.up"
    assert tokens["ctrl+f"] == "motion.right"
    assert tokens["ctrl+c"] == "file.quit"
    assert tokens["LEFT"] == "motion.left"


def test_load_default_keymaps_accepts_custom_binding_set() -> None:
    registry = KeymapRegistry()
    custom = KeyBindingSet(save=KeyStroke.ctrl("w"), quit=KeyStroke.ctrl("e"))

    load_default_keymaps(registry, modal=False, preset=custom)

    assert registry.get_binding("insert.preset.save").key_signature == "ctrl+w"


def test_unknown_preset_name_falls_back_to_atto() -> None:
    assert resolve_preset("wordstar") is KeyPreset.ATTO
    assert resolve_preset(" NANO ") is KeyPreset.NANO
    assert preset_for("micro").save == KeyStroke.ctrl("s")
