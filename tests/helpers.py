"""Shared helpers for locating cursor positions in test sources."""

from __future__ import annotations

from modflow.models import Position


def point_of(source: str, needle: str, offset: int = 0, occurrence: int = 0) -> tuple[int, int]:
    """(line, column) of ``offset`` characters into the n-th ``needle``."""
    index = -1
    for _ in range(occurrence + 1):
        index = source.index(needle, index + 1)
    index += offset
    line = source.count("\n", 0, index)
    column = index - (source.rfind("\n", 0, index) + 1)
    return (line, column)


def cursor_at(source: str, needle: str, offset: int = 0, occurrence: int = 0) -> Position:
    line, column = point_of(source, needle, offset, occurrence)
    return Position(line=line, column=column)
