"""Deletion mods: the closest function declaration or JSX tag."""

import logging

from ..errors import NoMatchError
from ..locator import closest_node_among, match_descriptor, resolve_node
from ..models import Anchor, ModSuccess, NodeDescriptor, anchor_point
from ..parser import parse
from .base import edit_result

logger = logging.getLogger(__name__)

FUNCTION_KINDS = frozenset({"function_declaration", "generator_function_declaration"})
TAG_KINDS = frozenset({"jsx_element", "jsx_self_closing_element", "jsx_fragment"})


def delete_function(source: str, language: str, anchor: Anchor) -> ModSuccess:
    """Delete the smallest function declaration around the cursor.

    A captured node that is itself a function declaration is deleted as is;
    any other descriptor falls back to the cursor it was captured at. An
    exported declaration is deleted with its ``export`` statement.
    """
    tree = parse(source, language)
    candidates = tree.nodes_of_kind(FUNCTION_KINDS)

    target = None
    if isinstance(anchor, NodeDescriptor):
        matches = match_descriptor(anchor, candidates)
        if len(matches) == 1:
            target = matches[0]
    if target is None:
        target = closest_node_among(candidates, anchor_point(anchor))
    if target is None:
        raise NoMatchError("function declaration")
    # An exported declaration goes together with its export keyword
    if target.parent is not None and target.parent.kind == "export_statement":
        target = target.parent

    logger.debug("Deleting %r", target)
    return edit_result(source, target.start, target.end, "", cursor=target.start)


def delete_closest_tag(source: str, language: str, anchor: Anchor) -> ModSuccess:
    """Delete the innermost JSX element or fragment around the anchor.

    The deleted markup is returned as the clipboard payload.
    """
    tree = parse(source, language)
    node = resolve_node(tree, anchor)

    target = node if node.kind in TAG_KINDS else None
    if target is None:
        for ancestor in node.ancestors():
            if ancestor.kind in TAG_KINDS:
                target = ancestor
                break
    if target is None:
        raise NoMatchError("JSX tag or fragment")

    return edit_result(
        source,
        target.start,
        target.end,
        "",
        cursor=target.start,
        clipboard=target.text,
    )
