"""Shared pieces for mod handlers."""

from typing import Callable, Optional

from ..edits import splice
from ..models import Anchor, ModSuccess, Point, Position, Range

# (source, language variant, anchor) -> ModSuccess; failures are raised.
ModHandler = Callable[[str, str, Anchor], ModSuccess]


def edit_result(
    source: str,
    start: Point,
    end: Point,
    replacement: str,
    cursor: Optional[Point] = None,
    clipboard: Optional[str] = None,
) -> ModSuccess:
    """Build a ModSuccess replacing ``start..end`` of ``source``."""
    replaced = Range.from_points(start, end)
    return ModSuccess(
        mod=replacement,
        original_range=replaced,
        original_source=source,
        source=splice(source, replaced, replacement),
        cursor=Position.from_point(cursor) if cursor is not None else None,
        clipboard=clipboard,
    )
