"""debug_node_under_cursor: show the syntax tree around the anchor."""

from ..errors import DebugError
from ..locator import resolve_node
from ..models import Anchor, ModSuccess
from ..parser import ROOT_KINDS, parse
from ..render import render_subtree

LEVELS_UP = 3
LEVELS_DOWN = 3


def debug_node_under_cursor(source: str, language: str, anchor: Anchor) -> ModSuccess:
    """Raise a DebugError carrying a rendering of the anchor's surroundings.

    The tree goes out through the error channel so hosts display it with
    their usual error path instead of applying an edit.
    """
    tree = parse(source, language)
    target = resolve_node(tree, anchor)

    context_root = target
    for _ in range(LEVELS_UP):
        parent = context_root.parent
        if parent is None or parent.kind in ROOT_KINDS:
            break
        context_root = parent

    tree_view = render_subtree(context_root, LEVELS_DOWN, target)
    raise DebugError(
        f"AST Context ({LEVELS_UP} levels up, {LEVELS_DOWN} levels down):\n\n{tree_view}"
    )
