from __future__ import annotations

from line_buffer.buffer import (
    CursorPosition,
    EditorState,
    Line,
    Metadata,
    renumber,
    sample_state,
)


def test_initial_state_is_single_empty_line() -> None:
    state = EditorState.initial()

    assert state.lines == (Line(0, ""),)
    assert state.total_lines == 1
    assert state.cursor_position == CursorPosition(0, 0)
    assert state.selection is None
    assert state.metadata is None


def test_from_text_splits_on_newlines() -> None:
    state = EditorState.from_text("ab\ncd")

    assert [line.text for line in state.lines] == ["ab", "cd"]
    assert [line.index for line in state.lines] == [0, 1]
    assert state.text == "ab\ncd"


def test_from_text_trailing_newline_adds_empty_line() -> None:
    state = EditorState.from_text("ab\n")

    assert [line.text for line in state.lines] == ["ab", ""]


def test_from_text_empty_string_yields_one_line() -> None:
    assert EditorState.from_text("") == EditorState.initial()


def test_lines_are_stored_as_tuple() -> None:
    state = EditorState(lines=[Line(0, "x")])

    assert isinstance(state.lines, tuple)


def test_current_line_missing_returns_none() -> None:
    state = EditorState(cursor_position=CursorPosition(3, 0))

    assert state.current_line is None
    assert state.line_at(-1) is None


def test_sample_state_matches_demo_document() -> None:
    state = sample_state()

    assert [line.text for line in state.lines] == [
        "Hello, Jayakrishnan!!",
        "This is a sample text editor.",
        "yea!",
        "",
    ]
    assert state.total_lines == 4
    assert isinstance(state.metadata, Metadata)
    assert state.metadata.file_path == "/"


def test_renumber_rebuilds_indexes_from_position() -> None:
    lines = renumber([Line(4, "a"), Line(0, "b"), Line(2, "c")])

    assert lines == (Line(0, "a"), Line(1, "b"), Line(2, "c"))
