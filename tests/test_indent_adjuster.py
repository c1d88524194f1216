import pytest

from two_spaces_indent.buffer import Position, Selection
from two_spaces_indent.indent import (
    NOTHING_TO_DECREASE_MESSAGE,
    affected_lines,
    decrease_indent,
    increase_indent,
)
from two_spaces_indent.settings import IndentSettings


def span(first: int, last: int, *, first_ch: int = 0, last_ch: int = 0) -> Selection:
    return Selection(head=Position(last, last_ch), anchor=Position(first, first_ch))


def test_increase_single_line() -> None:
    result = increase_indent(["Hello world"], [Selection.caret(0, 0)], IndentSettings())

    assert result.lines == ("  Hello world",)
    assert result.selections == (Selection.caret(0, 2),)
    assert result.notice is None
    assert result.modified_lines == (0,)


def test_decrease_single_line() -> None:
    result = decrease_indent(["  Hello world"], [Selection.caret(0, 5)])

    assert result.lines == ("Hello world",)
    assert result.selections == (Selection.caret(0, 3),)
    assert result.notice is None


def test_increase_empty_line() -> None:
    result = increase_indent([""], [Selection.caret(0, 0)], IndentSettings())

    assert result.lines == ("  ",)


def test_decrease_empty_line_reports_nothing_to_decrease() -> None:
    result = decrease_indent([""], [Selection.caret(0, 0)])

    assert result.lines == ("",)
    assert result.notice is not None
    assert result.notice.kind == "nothing_to_decrease"
    assert result.notice.message == NOTHING_TO_DECREASE_MESSAGE
    assert result.changed is False


def test_overlapping_selections_touch_each_line_once() -> None:
    lines = ["a", "b", "c", "d"]
    selections = [span(0, 2), span(1, 3), Selection.caret(2, 0)]

    result = increase_indent(lines, selections, IndentSettings())

    assert result.lines == ("  a", "  b", "  c", "  d")
    assert result.modified_lines == (0, 1, 2, 3)


def test_overlapping_selections_decrease_once() -> None:
    lines = ["    a", "    b"]

    result = decrease_indent(lines, [span(0, 1), span(0, 1)])

    assert result.lines == ("  a", "  b")


def test_affected_lines_are_ascending_and_unique() -> None:
    selections = [span(2, 3), span(0, 1), span(1, 2)]

    assert affected_lines(selections, 10) == [0, 1, 2, 3]


def test_affected_lines_skip_lines_past_the_end() -> None:
    assert affected_lines([span(1, 5)], 3) == [1, 2]


def test_reversed_selection_covers_same_lines() -> None:
    reversed_selection = Selection(head=Position(0, 0), anchor=Position(2, 1))

    result = increase_indent(["a", "b", "c"], [reversed_selection], IndentSettings())

    assert result.lines == ("  a", "  b", "  c")
    assert result.selections == (
        Selection(head=Position(0, 2), anchor=Position(2, 3)),
    )


def test_cap_reached_leaves_line_unchanged() -> None:
    settings = IndentSettings(max_indent_level=1)

    result = increase_indent(["  item"], [Selection.caret(0, 0)], settings)

    assert result.lines == ("  item",)
    assert result.notice is not None
    assert result.notice.kind == "max_level_reached"
    assert result.notice.message == "Maximum indent level (1) reached"
    assert result.modified_lines == ()


def test_cap_reached_still_indents_other_lines() -> None:
    settings = IndentSettings(max_indent_level=2)

    result = increase_indent(["    deep", "shallow"], [span(0, 1)], settings)

    assert result.lines == ("    deep", "  shallow")
    assert result.notice is not None
    assert result.notice.message == "Maximum indent level (2) reached"
    assert result.modified_lines == (1,)


def test_odd_leading_spaces_round_down_against_the_cap() -> None:
    settings = IndentSettings(max_indent_level=1)

    result = increase_indent(["   x"], [Selection.caret(0, 0)], settings)

    assert result.lines == ("   x",)
    assert result.notice is not None


def test_increase_shifts_columns_even_on_capped_lines() -> None:
    settings = IndentSettings(max_indent_level=1)

    result = increase_indent(["  item"], [Selection.caret(0, 4)], settings)

    assert result.selections == (Selection.caret(0, 6),)


def test_decrease_shifts_columns_even_without_prefix() -> None:
    result = decrease_indent(["item"], [Selection.caret(0, 3)])

    assert result.selections == (Selection.caret(0, 1),)


def test_decrease_clamps_columns_at_zero() -> None:
    result = decrease_indent(["  a"], [span(0, 0, first_ch=1, last_ch=0)])

    assert result.selections == (Selection(head=Position(0, 0), anchor=Position(0, 0)),)


def test_modified_column_shift_only_moves_rewritten_lines() -> None:
    settings = IndentSettings(max_indent_level=1, column_shift="modified")
    selections = [Selection.caret(0, 3), Selection.caret(1, 0)]

    result = increase_indent(["  a", "b"], selections, settings)

    assert result.lines == ("  a", "  b")
    assert result.selections == (Selection.caret(0, 3), Selection.caret(1, 2))


def test_modified_column_shift_on_decrease() -> None:
    settings = IndentSettings(column_shift="modified")
    selection = Selection(head=Position(1, 4), anchor=Position(0, 1))

    result = decrease_indent(["a", "    b"], [selection], settings)

    assert result.lines == ("a", "  b")
    assert result.selections == (
        Selection(head=Position(1, 2), anchor=Position(0, 1)),
    )


@pytest.mark.parametrize(
    ("line", "expected"),
    [("  a", "a"), ("    a", "  a"), ("   a", " a"), ("  ", "")],
)
def test_decrease_removes_exactly_two_spaces(line: str, expected: str) -> None:
    result = decrease_indent([line], [Selection.caret(0, 0)])

    assert result.lines == (expected,)
    assert result.notice is None


@pytest.mark.parametrize("line", [" a", "\ta", "a", "\t  a"])
def test_decrease_leaves_lines_without_prefix(line: str) -> None:
    result = decrease_indent([line], [Selection.caret(0, 0)])

    assert result.lines == (line,)
    assert result.notice is not None


def test_decrease_is_silent_when_any_line_changes() -> None:
    result = decrease_indent(["a", "  b"], [span(0, 1)])

    assert result.lines == ("a", "b")
    assert result.notice is None


@pytest.mark.parametrize("line", ["", "x", "  x", "    nested", "\tx"])
def test_increase_then_decrease_restores_line(line: str) -> None:
    settings = IndentSettings()
    selections = [Selection.caret(0, 0)]

    raised = increase_indent([line], selections, settings)
    lowered = decrease_indent(raised.lines, raised.selections, settings)

    assert lowered.lines == (line,)
    assert lowered.selections == tuple(selections)


def test_no_selections_is_a_noop() -> None:
    lines = ["  a", "b"]

    raised = increase_indent(lines, [], IndentSettings(max_indent_level=1))
    lowered = decrease_indent(lines, [])

    for result in (raised, lowered):
        assert result.lines == tuple(lines)
        assert result.selections == ()
        assert result.notice is None


def test_untouched_lines_keep_their_text() -> None:
    lines = ["keep", "a", "keep too"]

    result = increase_indent(lines, [Selection.caret(1, 0)], IndentSettings())

    assert result.lines == ("keep", "  a", "keep too")


def test_inputs_are_not_mutated() -> None:
    lines = ["a", "b"]

    increase_indent(lines, [span(0, 1)], IndentSettings())

    assert lines == ["a", "b"]
