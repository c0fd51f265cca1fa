"""Position, range and node descriptor models."""

from __future__ import annotations

from typing import Tuple, Union

from pydantic import BaseModel, model_validator

Point = Tuple[int, int]


class Position(BaseModel):
    """Zero-based line/column location in a source text."""

    line: int
    column: int

    def as_point(self) -> Point:
        return (self.line, self.column)

    @classmethod
    def from_point(cls, point: Point) -> "Position":
        return cls(line=point[0], column=point[1])


class Range(BaseModel):
    """Span between two positions, start inclusive and end exclusive."""

    start: Position
    end: Position

    @model_validator(mode="after")
    def _check_order(self) -> "Range":
        if self.start.as_point() > self.end.as_point():
            raise ValueError("range start must not be after range end")
        return self

    def contains(self, point: Point) -> bool:
        return self.start.as_point() <= point < self.end.as_point()

    @classmethod
    def from_points(cls, start: Point, end: Point) -> "Range":
        return cls(start=Position.from_point(start), end=Position.from_point(end))


class NodeDescriptor(BaseModel):
    """Value summary of a node captured from an independently parsed tree.

    The host builds it at anchor-capture time and passes it through
    unchanged, so it can be correlated against a fresh parse later.
    """

    range: Range
    text: str
    type: str
    cursor: Position | None = None


Anchor = Union[Position, NodeDescriptor]


def anchor_point(anchor: Anchor) -> Point:
    """Return the cursor point carried by an anchor.

    A descriptor without a captured cursor falls back to the start of its
    range.
    """
    if isinstance(anchor, NodeDescriptor):
        if anchor.cursor is not None:
            return anchor.cursor.as_point()
        return anchor.range.start.as_point()
    return anchor.as_point()


__all__ = ["Anchor", "NodeDescriptor", "Point", "Position", "Range", "anchor_point"]
