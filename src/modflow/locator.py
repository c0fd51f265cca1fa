"""Node search: point containment, ancestors, and descriptor correlation.

All containment tests use half-open ranges (start inclusive, end
exclusive), so a point on the boundary between two adjacent siblings
belongs to the second one only.
"""

import logging
from typing import Iterable, List, Optional

from .errors import NoMatchError
from .models import Anchor, NodeDescriptor, Point
from .parser import SyntaxNode, SyntaxTree

logger = logging.getLogger(__name__)

# Weight of one line in the node size metric; any single-line span is
# smaller than any multi-line one.
LINE_WEIGHT = 1000

LIST_PARENT_KINDS = frozenset(
    {
        "arguments",
        "formal_parameters",
        "binary_expression",
        "ternary_expression",
        "object_pattern",
        "intersection_type",
        "union_type",
    }
)


def node_size(node: SyntaxNode) -> int:
    (start_line, start_col), (end_line, end_col) = node.start, node.end
    return (end_line - start_line) * LINE_WEIGHT + (end_col - start_col)


def deepest_node_at(tree: SyntaxTree, point: Point) -> Optional[SyntaxNode]:
    """Find the most specific node containing ``point``.

    Descends from the root into the first child containing the point until
    no child does. Returns None when even the root does not contain it.
    """
    node = tree.root
    if not node.contains(point):
        return None
    while True:
        for child in node.children:
            if child.contains(point):
                node = child
                break
        else:
            return node


def closest_node_among(
    candidates: Iterable[SyntaxNode], point: Point
) -> Optional[SyntaxNode]:
    """Return the smallest candidate containing ``point``.

    Ties keep the first candidate in input order.
    """
    best = None
    best_size = None
    for node in candidates:
        if not node.contains(point):
            continue
        size = node_size(node)
        if best_size is None or size < best_size:
            best, best_size = node, size
    return best


def ancestor_of_kind(node: SyntaxNode, kinds: Iterable[str]) -> Optional[SyntaxNode]:
    """Closest proper ancestor whose kind is in ``kinds``."""
    kinds = frozenset(kinds)
    for ancestor in node.ancestors():
        if ancestor.kind in kinds:
            return ancestor
    return None


def list_parent_at(tree: SyntaxTree, point: Point) -> Optional[SyntaxNode]:
    """Find the closest list-like parent around the node at ``point``."""
    node = deepest_node_at(tree, point)
    if node is None:
        return None
    return ancestor_of_kind(node, LIST_PARENT_KINDS)


def _narrow(matches: List[SyntaxNode], keep) -> List[SyntaxNode]:
    narrowed = [node for node in matches if keep(node)]
    return narrowed or matches


def match_descriptor(
    descriptor: NodeDescriptor, candidates: Iterable[SyntaxNode]
) -> List[SyntaxNode]:
    """Nodes among ``candidates`` that a descriptor from another parse names.

    Exact range equality is the primary key. When more than one node shares
    the range (a statement and its expression, say), the set is narrowed by
    kind and then by text; a filter that would leave nothing is skipped.
    """
    start = descriptor.range.start.as_point()
    end = descriptor.range.end.as_point()
    matches = [node for node in candidates if node.start == start and node.end == end]

    if len(matches) > 1:
        matches = _narrow(matches, lambda node: node.kind == descriptor.type)
    if len(matches) > 1:
        matches = _narrow(matches, lambda node: node.text == descriptor.text)
    return matches


def correlate(tree: SyntaxTree, descriptor: NodeDescriptor) -> SyntaxNode:
    """Resolve a descriptor to exactly one node of ``tree`` or fail NO_MATCH."""
    matches = match_descriptor(descriptor, tree.nodes())
    if len(matches) != 1:
        logger.debug(
            "Descriptor %s at %s matched %d nodes",
            descriptor.type,
            descriptor.range.start.as_point(),
            len(matches),
        )
        raise NoMatchError("syntax node matching the captured node")
    return matches[0]


def resolve_node(tree: SyntaxTree, anchor: Anchor) -> SyntaxNode:
    """Resolve an anchor to a single node of ``tree``."""
    if isinstance(anchor, NodeDescriptor):
        return correlate(tree, anchor)
    node = deepest_node_at(tree, anchor.as_point())
    if node is None:
        raise NoMatchError("syntax node")
    return node
