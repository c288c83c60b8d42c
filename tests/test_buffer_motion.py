from __future__ import annotations

import pytest

from line_buffer.buffer import (
    CursorPosition,
    Direction,
    EditorState,
    Line,
    move_cursor,
)


def make_state(*texts: str, cursor: tuple[int, int] = (0, 0)) -> EditorState:
    return EditorState(
        lines=tuple(Line(index, text) for index, text in enumerate(texts)),
        cursor_position=CursorPosition(*cursor),
    )


def test_left_moves_within_line() -> None:
    state = make_state("abc", cursor=(0, 2))

    assert move_cursor(state, Direction.LEFT).cursor_position == CursorPosition(0, 1)


def test_left_wraps_to_end_of_previous_line() -> None:
    state = make_state("abc", "de", cursor=(1, 0))

    assert move_cursor(state, "left").cursor_position == CursorPosition(0, 3)


def test_left_at_buffer_start_is_idempotent() -> None:
    state = make_state("abc")

    result = state
    for _ in range(3):
        result = move_cursor(result, Direction.LEFT)

    assert result is state


def test_right_moves_within_line() -> None:
    state = make_state("abc", cursor=(0, 1))

    assert move_cursor(state, Direction.RIGHT).cursor_position == CursorPosition(0, 2)


def test_right_wraps_to_start_of_next_line() -> None:
    state = make_state("abc", "de", cursor=(0, 3))

    assert move_cursor(state, Direction.RIGHT).cursor_position == CursorPosition(1, 0)


def test_right_at_end_of_last_line_is_idempotent() -> None:
    state = make_state("abc", "de", cursor=(1, 2))

    result = move_cursor(move_cursor(state, Direction.RIGHT), Direction.RIGHT)

    assert result is state


def test_up_clamps_column_to_previous_line() -> None:
    state = make_state("ab", "cdefg", cursor=(1, 4))

    assert move_cursor(state, Direction.UP).cursor_position == CursorPosition(0, 2)


def test_up_keeps_column_when_it_fits() -> None:
    state = make_state("abcdef", "cd", cursor=(1, 1))

    assert move_cursor(state, Direction.UP).cursor_position == CursorPosition(0, 1)


def test_up_on_first_line_is_noop() -> None:
    state = make_state("abc", "de", cursor=(0, 2))

    assert move_cursor(state, Direction.UP) is state


def test_down_clamps_column_to_next_line() -> None:
    state = make_state("abcdef", "cd", cursor=(0, 5))

    assert move_cursor(state, Direction.DOWN).cursor_position == CursorPosition(1, 2)


def test_down_on_last_line_is_noop() -> None:
    state = make_state("abc", "de", cursor=(1, 1))

    assert move_cursor(state, Direction.DOWN) is state


def test_up_then_down_between_two_lines() -> None:
    state = make_state("ab", "cd", cursor=(1, 0))

    up = move_cursor(state, Direction.UP)
    down = move_cursor(up, Direction.DOWN)
    again = move_cursor(down, Direction.DOWN)

    assert up.cursor_position == CursorPosition(0, 0)
    assert down.cursor_position == CursorPosition(1, 0)
    assert again is down


@pytest.mark.parametrize("direction", list(Direction))
def test_moves_from_missing_line_are_noops(direction: Direction) -> None:
    state = make_state("ab", cursor=(4, 1))

    assert move_cursor(state, direction) is state


def test_unknown_direction_raises() -> None:
    with pytest.raises(ValueError):
        move_cursor(make_state("ab"), "sideways")


def test_motion_keeps_lines_shared() -> None:
    state = make_state("ab", "cd", cursor=(0, 1))

    result = move_cursor(state, Direction.DOWN)

    assert result.lines is state.lines
