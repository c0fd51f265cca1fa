"""Tests for position arithmetic and edit splicing."""

from modflow.edits import LineIndex, advance, offset_in_text, splice
from modflow.models import Range


def test_advance_single_line():
    assert advance((2, 4), "abc") == (2, 7)
    assert advance((2, 4), "") == (2, 4)


def test_advance_multi_line():
    assert advance((2, 4), "ab\ncd") == (3, 2)
    assert advance((0, 9), "{\n    ") == (1, 4)
    assert advance((0, 0), "x\n") == (1, 0)


def test_offset_in_text():
    text = "{\n    x: 1,\n  }"

    assert offset_in_text((1, 2), text, (1, 2)) == 0
    assert offset_in_text((1, 2), text, (2, 4)) == 6
    assert text[: offset_in_text((1, 2), text, (3, 2))] == "{\n    x: 1,\n  "


def test_line_index_slice_and_clamping():
    index = LineIndex("ab\ncde\n")

    assert index.offset((1, 1)) == 4
    assert index.slice((0, 1), (1, 2)) == "b\ncd"
    assert index.offset((9, 0)) == len("ab\ncde\n")


def test_splice_single_line():
    replaced = Range.from_points((0, 2), (0, 6))

    assert splice("f(a, b, c)", replaced, "b, a") == "f(b, a, c)"


def test_splice_multi_line_delete():
    source = "function f(){}\nconst x=1;"
    replaced = Range.from_points((0, 0), (0, 14))

    assert splice(source, replaced, "") == "\nconst x=1;"


def test_splice_across_lines():
    replaced = Range.from_points((0, 1), (2, 1))

    assert splice("a\nb\ncd", replaced, "X") == "aXd"
