from __future__ import annotations

import pytest

from line_buffer.keymaps import (
    ActionRef,
    Binding,
    CONTROL_KEYS,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)


def make_action(action_id: str = "edit.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda state, event: state)


def make_binding(
    binding_id: str, *, key: str = "Enter", action_id: str = "edit.test"
) -> Binding:
    return Binding(id=binding_id, key=key, action_id=action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding("key.enter")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings()) == [binding]
    assert registry.binding_for_key("Enter") == binding


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding("key.enter"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding("key.enter.duplicate"))

    assert excinfo.value.existing.id == "key.enter"


def test_register_binding_replace_overrides_key() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding("key.enter"))

    registry.register_binding(make_binding("key.enter.custom"), replace=True)

    assert registry.binding_for_key("Enter").id == "key.enter.custom"
    assert registry.stats().binding_count == 1


def test_register_binding_duplicate_id_rejected() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding("key.enter"))

    with pytest.raises(ValueError):
        registry.register_binding(make_binding("key.enter", key="Backspace"))


def test_register_binding_unknown_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding("key.enter", action_id="missing"))


def test_register_action_twice_requires_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())

    registry.register_action(make_action(), replace=True)
    assert registry.stats().action_count == 1


def test_unregister_binding_frees_key() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding("key.enter"))
    revision = registry.revision()

    removed = registry.unregister_binding("key.enter")

    assert removed is not None
    assert registry.binding_for_key("Enter") is None
    assert registry.revision() > revision
    assert registry.unregister_binding("key.enter") is None


def test_load_default_keymaps_binds_every_control_key() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    assert set(registry.stats().keys) == set(CONTROL_KEYS)


def test_load_default_keymaps_exclude_filter() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry, exclude_bindings=["key.backspace"])

    assert "Backspace" not in registry.stats().keys
    assert registry.has_action("edit.delete_backward")


def test_model_validation() -> None:
    with pytest.raises(ValueError):
        Binding(id="", key="Enter", action_id="x")
    with pytest.raises(ValueError):
        Binding(id="b", key="", action_id="x")
    with pytest.raises(TypeError):
        ActionRef(id="a", handler="not callable")  # type: ignore[arg-type]
