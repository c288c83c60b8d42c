from __future__ import annotations

from line_buffer.keymaps import (
    ActionRef,
    Binding,
    INSERT_ACTION_ID,
    KeyEvent,
    KeymapRegistry,
    KeymapResolver,
    load_default_keymaps,
)


def make_resolver() -> KeymapResolver:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    return KeymapResolver(registry)


def test_resolver_matches_control_key() -> None:
    result = make_resolver().resolve(KeyEvent("ArrowUp"))

    assert result.status == "control"
    assert result.match is not None
    assert result.match.binding is not None
    assert result.match.binding.id == "key.up"
    assert result.prevent_default is True


def test_resolver_routes_single_character_to_insert() -> None:
    result = make_resolver().resolve(KeyEvent("a"))

    assert result.status == "printable"
    assert result.match is not None
    assert result.match.action.id == INSERT_ACTION_ID
    assert result.match.binding is None
    assert result.mutates is True


def test_resolver_ignores_modified_characters() -> None:
    resolver = make_resolver()

    for event in (
        KeyEvent("a", ctrl=True),
        KeyEvent("a", meta=True),
        KeyEvent("a", alt=True),
        KeyEvent("a", ctrl=True, alt=True),
    ):
        result = resolver.resolve(event)
        assert result.status == "ignored"
        assert result.mutates is False


def test_resolver_ignores_multi_character_names() -> None:
    result = make_resolver().resolve(KeyEvent("PageDown"))

    assert result.status == "ignored"
    assert result.match is None


def test_resolver_without_insert_action_ignores_printables() -> None:
    registry = KeymapRegistry()
    registry.register_action(
        ActionRef(id="edit.noop", handler=lambda state, event: state)
    )
    registry.register_binding(Binding(id="key.enter", key="Enter", action_id="edit.noop"))
    resolver = KeymapResolver(registry)

    assert resolver.resolve(KeyEvent("a")).status == "ignored"
    assert resolver.resolve(KeyEvent("Enter")).status == "control"


def test_resolver_cache_tracks_registry_revision() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    resolver = KeymapResolver(registry)
    assert resolver.is_control_key("Backspace")

    registry.unregister_binding("key.backspace")

    assert not resolver.is_control_key("Backspace")
    assert resolver.resolve(KeyEvent("Backspace")).status == "ignored"


def test_resolver_picks_up_custom_binding() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    resolver = KeymapResolver(registry)
    resolver.resolve(KeyEvent("Delete"))

    registry.register_binding(
        Binding(id="key.delete", key="Delete", action_id="edit.delete_backward")
    )

    result = resolver.resolve(KeyEvent("Delete"))
    assert result.status == "control"
    assert result.match is not None
    assert result.match.action.id == "edit.delete_backward"


def test_key_event_token_lists_modifiers() -> None:
    assert KeyEvent("c", ctrl=True, alt=True).token == "ctrl+alt+c"
    assert KeyEvent("Enter").token == "Enter"
