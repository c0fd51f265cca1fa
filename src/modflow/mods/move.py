"""move_left / move_right: swap the sibling under the cursor with a neighbour.

Three shapes of list-like parent are handled:

- binary expressions swap their two operands,
- ternary expressions swap their consequent and alternate branches,
- comma lists (arguments, parameters, object patterns) and union or
  intersection types swap the item under the cursor with the previous or
  next item.

The cursor follows whatever it was on: a moved operand, branch or item
carries the cursor to its new location, and a cursor on an operator or on
the ternary ``:`` stays on it.
"""

import logging
from typing import List

from ..edits import LineIndex, advance, offset_in_text
from ..errors import NoMatchError
from ..locator import list_parent_at
from ..models import Anchor, ModSuccess, Point, anchor_point
from ..parser import SyntaxNode, parse
from .base import edit_result

logger = logging.getLogger(__name__)

LEFT = "left"
RIGHT = "right"

_ITEM_SEPARATORS = {
    "union_type": " | ",
    "intersection_type": " & ",
}
_DEFAULT_SEPARATOR = ", "
_SEPARATOR_CHARS = ",|& \t\r\n"


def _follow(new_start: Point, node: SyntaxNode, point: Point) -> Point:
    """Cursor position after ``node`` has been moved to ``new_start``."""
    offset = offset_in_text(node.start, node.text, point)
    return advance(new_start, node.text[:offset])


def _find_token(parent: SyntaxNode, kind: str) -> SyntaxNode:
    for child in parent.children:
        if child.kind == kind:
            return child
    raise NoMatchError(f"'{kind}' token")


def _swap_binary(
    source: str, parent: SyntaxNode, point: Point, direction: str
) -> ModSuccess:
    children = parent.children
    left = parent.child_by_field("left") or children[0]
    operator = parent.child_by_field("operator") or children[1]
    right = parent.child_by_field("right") or children[-1]

    lines = LineIndex(source)
    before_op = lines.slice(left.end, operator.start)
    middle = lines.slice(left.end, right.start)
    replacement = right.text + middle + left.text

    if operator.contains(point):
        new_op_start = advance(left.start, right.text + before_op)
        cursor = _follow(new_op_start, operator, point)
    elif left.contains(point):
        if direction == LEFT:
            raise NoMatchError("previous operand")
        cursor = _follow(advance(left.start, right.text + middle), left, point)
    elif right.contains(point):
        if direction == RIGHT:
            raise NoMatchError("next operand")
        cursor = _follow(left.start, right, point)
    else:
        raise NoMatchError("operand")

    return edit_result(source, left.start, right.end, replacement, cursor=cursor)


def _swap_ternary(
    source: str, parent: SyntaxNode, point: Point, direction: str
) -> ModSuccess:
    condition = parent.child_by_field("condition")
    consequence = parent.child_by_field("consequence")
    alternative = parent.child_by_field("alternative")
    if condition is None or consequence is None or alternative is None:
        raise NoMatchError("branch")
    question = _find_token(parent, "?")
    colon = _find_token(parent, ":")

    if condition.contains(point) or question.contains(point):
        raise NoMatchError("branch", "cursor on condition")

    lines = LineIndex(source)
    head = lines.slice(parent.start, consequence.start)
    middle = lines.slice(consequence.end, alternative.start)
    tail = lines.slice(alternative.end, parent.end)
    replacement = head + alternative.text + middle + consequence.text + tail

    if consequence.contains(point):
        if direction == LEFT:
            raise NoMatchError("previous branch")
        new_start = advance(parent.start, head + alternative.text + middle)
        cursor = _follow(new_start, consequence, point)
    elif colon.contains(point):
        before_colon = lines.slice(consequence.end, colon.start)
        new_start = advance(parent.start, head + alternative.text + before_colon)
        cursor = _follow(new_start, colon, point)
    elif alternative.contains(point):
        if direction == RIGHT:
            raise NoMatchError("next branch")
        cursor = _follow(advance(parent.start, head), alternative, point)
    else:
        raise NoMatchError("branch")

    return edit_result(source, parent.start, parent.end, replacement, cursor=cursor)


def _list_items(parent: SyntaxNode) -> List[SyntaxNode]:
    """Named items of a list parent, with nested type operators flattened.

    ``A | B | C`` parses as ``(A | B) | C``; its items are A, B and C.
    """
    items: List[SyntaxNode] = []
    for child in parent.children:
        if not child.is_named or child.kind == "comment":
            continue
        if parent.kind in _ITEM_SEPARATORS and child.kind == parent.kind:
            items.extend(_list_items(child))
        else:
            items.append(child)
    return items


def _outermost_type_operator(parent: SyntaxNode) -> SyntaxNode:
    while parent.parent is not None and parent.parent.kind == parent.kind:
        parent = parent.parent
    return parent


def _swap_items(
    source: str, parent: SyntaxNode, point: Point, direction: str
) -> ModSuccess:
    items = _list_items(parent)
    position = next((i for i, item in enumerate(items) if item.contains(point)), None)
    if position is None:
        raise NoMatchError("item")

    pivot = items[position]
    if direction == LEFT:
        if position == 0:
            raise NoMatchError("previous item")
        first, second = items[position - 1], pivot
    else:
        if position == len(items) - 1:
            raise NoMatchError("next item")
        first, second = pivot, items[position + 1]

    # Only separators and whitespace may sit between the two items
    between = LineIndex(source).slice(first.end, second.start)
    if between.strip(_SEPARATOR_CHARS):
        raise NoMatchError("item", "comment between items")

    separator = _ITEM_SEPARATORS.get(parent.kind, _DEFAULT_SEPARATOR)
    replacement = second.text + separator + first.text

    if pivot == second:
        new_start = first.start
    else:
        new_start = advance(first.start, second.text + separator)
    cursor = _follow(new_start, pivot, point)

    return edit_result(source, first.start, second.end, replacement, cursor=cursor)


def _move(source: str, language: str, anchor: Anchor, direction: str) -> ModSuccess:
    tree = parse(source, language)
    point = anchor_point(anchor)
    parent = list_parent_at(tree, point)
    if parent is None:
        raise NoMatchError("swappable expression")

    logger.debug("Moving %s inside %r", direction, parent)
    if parent.kind == "binary_expression":
        return _swap_binary(source, parent, point, direction)
    if parent.kind == "ternary_expression":
        return _swap_ternary(source, parent, point, direction)
    if parent.kind in _ITEM_SEPARATORS:
        parent = _outermost_type_operator(parent)
    return _swap_items(source, parent, point, direction)


def move_left(source: str, language: str, anchor: Anchor) -> ModSuccess:
    """Swap the operand, branch or item under the cursor with its predecessor."""
    return _move(source, language, anchor, LEFT)


def move_right(source: str, language: str, anchor: Anchor) -> ModSuccess:
    """Swap the operand, branch or item under the cursor with its successor."""
    return _move(source, language, anchor, RIGHT)
