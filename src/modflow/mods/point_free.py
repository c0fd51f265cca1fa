"""Arrow-function wrapping mods.

point_free_to_anon wraps a bare function reference:
``items.map(format)`` becomes ``items.map(() => format())`` and
``<Button onClick={props.onClick} />`` becomes
``<Button onClick={() => props.onClick()} />``. When the outermost accessor
of the reference is optional (``a?.b``) the call is optional too:
``() => a?.b?.()``.

call_nearest_expression wraps the whole member/call chain around the
cursor, wherever it is: ``user.profile.name`` becomes
``() => user.profile.name()``.
"""

import logging
from typing import Iterator, Optional

from ..edits import advance
from ..errors import NoMatchError
from ..locator import ancestor_of_kind, closest_node_among, resolve_node
from ..models import Anchor, ModSuccess, anchor_point
from ..parser import SyntaxNode, parse
from .base import edit_result

logger = logging.getLogger(__name__)

REFERENCE_KINDS = frozenset({"identifier", "member_expression", "subscript_expression"})
CHAIN_KINDS = frozenset({"member_expression", "subscript_expression"})
CALLABLE_KINDS = frozenset({"member_expression", "call_expression"})
# Constructs whose whole content is a single embedded expression.
EMBEDDING_KINDS = frozenset({"jsx_expression", "template_substitution"})

WRAP_PREFIX = "() => "


def _chain(node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield ``node`` and the accessor chain links that extend it outward."""
    yield node
    while True:
        parent = node.parent
        if parent is None or parent.kind not in CHAIN_KINDS:
            return
        if parent.child_by_field("object") != node:
            return
        node = parent
        yield node


def _is_eligible(node: SyntaxNode) -> bool:
    parent = node.parent
    if parent is None:
        return False
    if parent.kind == "arguments":
        return (
            node.is_named
            and parent.parent is not None
            and parent.parent.kind in ("call_expression", "new_expression")
        )
    if parent.kind in EMBEDDING_KINDS:
        content = [c for c in parent.named_children if c.kind != "comment"]
        return content == [node]
    return False


def _outermost_is_optional(text: str, language: str) -> bool:
    """Whether the last accessor of a reference chain is ``?.``.

    Decided on a separate parse of the reference text alone, since the
    optional flag belongs to the whole chain rather than to the node the
    cursor resolved to.
    """
    tree = parse(text, language)
    statement = next(iter(tree.root.named_children), None)
    if statement is None or statement.kind != "expression_statement":
        return False
    expression = next(iter(statement.named_children), None)
    if expression is None or expression.kind not in CHAIN_KINDS:
        return False
    return any(child.kind == "optional_chain" for child in expression.children)


def _find_target(tree, point) -> Optional[SyntaxNode]:
    resolved = closest_node_among(tree.nodes_of_kind(REFERENCE_KINDS), point)
    if resolved is None:
        return None
    for candidate in _chain(resolved):
        if _is_eligible(candidate):
            return candidate
    logger.debug("Reference %r is not a call argument or embedded expression", resolved)
    return None


def point_free_to_anon(source: str, language: str, anchor: Anchor) -> ModSuccess:
    tree = parse(source, language)
    target = _find_target(tree, anchor_point(anchor))
    if target is None:
        raise NoMatchError("point-free function reference")

    call = "?.()" if _outermost_is_optional(target.text, tree.variant) else "()"
    replacement = f"{WRAP_PREFIX}{target.text}{call}"
    return edit_result(
        source,
        target.start,
        target.end,
        replacement,
        cursor=advance(target.start, WRAP_PREFIX),
    )


def call_nearest_expression(source: str, language: str, anchor: Anchor) -> ModSuccess:
    """Wrap the member or call chain around the anchor in ``() => chain()``.

    Unlike point_free_to_anon this works anywhere, not only on call
    arguments: the nearest member or call expression is found, then the
    outermost member/call expression it is part of is wrapped.
    """
    tree = parse(source, language)
    node = resolve_node(tree, anchor)

    target = node if node.kind in CALLABLE_KINDS else None
    if target is None:
        target = ancestor_of_kind(node, CALLABLE_KINDS)
    if target is None:
        raise NoMatchError("member expression")
    while target.parent is not None and target.parent.kind in CALLABLE_KINDS:
        target = target.parent

    return edit_result(
        source,
        target.start,
        target.end,
        f"{WRAP_PREFIX}{target.text}()",
        cursor=advance(target.start, WRAP_PREFIX),
    )
