"""Text and position arithmetic shared by the mods."""

from typing import List

from .models import Point, Range


def advance(origin: Point, text: str) -> Point:
    """Position reached after writing ``text`` starting at ``origin``."""
    newlines = text.count("\n")
    if not newlines:
        return (origin[0], origin[1] + len(text))
    return (origin[0] + newlines, len(text) - text.rfind("\n") - 1)


def offset_in_text(origin: Point, text: str, point: Point) -> int:
    """Character offset of ``point`` inside ``text`` that begins at ``origin``."""
    row = point[0] - origin[0]
    if row == 0:
        return point[1] - origin[1]
    lines = text.split("\n")
    return sum(len(line) + 1 for line in lines[:row]) + point[1]


class LineIndex:
    """Converts between (line, column) points and offsets in a text."""

    def __init__(self, text: str):
        self.text = text
        self._starts: List[int] = [0]
        for i, char in enumerate(text):
            if char == "\n":
                self._starts.append(i + 1)

    def offset(self, point: Point) -> int:
        line, column = point
        if line >= len(self._starts):
            return len(self.text)
        return min(self._starts[line] + column, len(self.text))

    def slice(self, start: Point, end: Point) -> str:
        return self.text[self.offset(start):self.offset(end)]


def splice(source: str, replaced: Range, text: str) -> str:
    """Apply one edit: replace ``replaced`` in ``source`` with ``text``."""
    index = LineIndex(source)
    start = index.offset(replaced.start.as_point())
    end = index.offset(replaced.end.as_point())
    return source[:start] + text + source[end:]
