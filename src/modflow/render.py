"""Text rendering of syntax subtrees for diagnostics."""

from typing import List, Optional

from .parser import SyntaxNode

INDENT = "  "
MAX_TEXT = 40


def _label(node: SyntaxNode, target: Optional[SyntaxNode]) -> str:
    kind = node.kind if node.is_named else repr(node.kind)
    if target is not None and node == target:
        kind = f"<<<{kind}>>>"

    (sl, sc), (el, ec) = node.start, node.end
    label = f"{kind} [{sl}:{sc}-{el}:{ec}]"
    if node.field_name:
        label = f"{node.field_name}: {label}"

    if node.is_named and not node.children:
        text = node.text.replace("\n", "\\n")
        if len(text) > MAX_TEXT:
            text = text[: MAX_TEXT - 3] + "..."
        label += f" {text!r}"
    return label


def render_subtree(
    node: SyntaxNode,
    max_depth: int = 3,
    target: Optional[SyntaxNode] = None,
) -> str:
    """Render ``node`` and its descendants down to ``max_depth`` levels.

    One line per node, indented two spaces per level. Anonymous tokens are
    quoted, fields are shown as ``field: kind`` and ``target`` is wrapped
    in ``<<<...>>>``.
    """
    lines: List[str] = []

    def walk(current: SyntaxNode, depth: int) -> None:
        lines.append(INDENT * depth + _label(current, target))
        if depth >= max_depth:
            return
        for child in current.children:
            walk(child, depth + 1)

    walk(node, 0)
    return "\n".join(lines) + "\n"
