"""Parser adapter: source text + language variant -> indexed syntax tree.

Tree-sitter trees are copied into a flat arena of node records. Each record
keeps its parent as an index and its children as a list of indices, so the
tree can be walked in both directions without holding tree-sitter objects
after the parse. A tree lives for a single request.
"""

import importlib
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from .models import Point, Range

logger = logging.getLogger(__name__)

JAVASCRIPT = "javascript"
TYPESCRIPT = "typescript"
JAVASCRIPT_REACT = "javascriptreact"
TYPESCRIPT_REACT = "typescriptreact"

LANGUAGE_VARIANTS = (JAVASCRIPT, TYPESCRIPT, JAVASCRIPT_REACT, TYPESCRIPT_REACT)

# variant -> (grammar module, language function)
_GRAMMARS = {
    JAVASCRIPT: ("tree_sitter_javascript", "language"),
    JAVASCRIPT_REACT: ("tree_sitter_javascript", "language"),
    TYPESCRIPT: ("tree_sitter_typescript", "language_typescript"),
    TYPESCRIPT_REACT: ("tree_sitter_typescript", "language_tsx"),
}

_EXTENSIONS = {
    ".js": JAVASCRIPT,
    ".mjs": JAVASCRIPT,
    ".cjs": JAVASCRIPT,
    ".jsx": JAVASCRIPT_REACT,
    ".ts": TYPESCRIPT,
    ".mts": TYPESCRIPT,
    ".cts": TYPESCRIPT,
    ".tsx": TYPESCRIPT_REACT,
}

ROOT_KINDS = frozenset({"program", "source_file"})

# Language objects are immutable and safe to share; parsers are not.
_LANGUAGES = {}


def normalize_variant(variant: Optional[str]) -> str:
    """Map a language variant name onto a supported one (default javascript)."""
    if variant in _GRAMMARS:
        return variant
    if variant:
        logger.debug("Unknown language variant %r, using javascript", variant)
    return JAVASCRIPT


def detect_variant(filename: str) -> str:
    """Detect the language variant from a file extension."""
    return _EXTENSIONS.get(Path(filename).suffix.lower(), JAVASCRIPT)


def _get_language(variant: str):
    """Lazy-load the tree-sitter language for a variant."""
    if variant in _LANGUAGES:
        return _LANGUAGES[variant]

    from tree_sitter import Language

    module_name, func_name = _GRAMMARS[variant]
    mod = importlib.import_module(module_name)
    language = Language(getattr(mod, func_name)())
    _LANGUAGES[variant] = language
    return language


@dataclass
class _NodeRecord:
    kind: str
    is_named: bool
    start: Point
    end: Point
    text: str
    parent: int
    field_name: Optional[str]
    children: List[int] = field(default_factory=list)


class SyntaxNode:
    """Lightweight view of one node in a SyntaxTree."""

    __slots__ = ("tree", "index")

    def __init__(self, tree: "SyntaxTree", index: int):
        self.tree = tree
        self.index = index

    @property
    def _record(self) -> _NodeRecord:
        return self.tree._records[self.index]

    @property
    def kind(self) -> str:
        return self._record.kind

    @property
    def is_named(self) -> bool:
        return self._record.is_named

    @property
    def start(self) -> Point:
        return self._record.start

    @property
    def end(self) -> Point:
        return self._record.end

    @property
    def range(self) -> Range:
        return Range.from_points(self.start, self.end)

    @property
    def text(self) -> str:
        return self._record.text

    @property
    def field_name(self) -> Optional[str]:
        """Name of the field this node hangs under in its parent, if any."""
        return self._record.field_name

    @property
    def parent(self) -> Optional["SyntaxNode"]:
        parent = self._record.parent
        return None if parent < 0 else SyntaxNode(self.tree, parent)

    @property
    def children(self) -> List["SyntaxNode"]:
        return [SyntaxNode(self.tree, i) for i in self._record.children]

    @property
    def named_children(self) -> List["SyntaxNode"]:
        return [child for child in self.children if child.is_named]

    def child_by_field(self, name: str) -> Optional["SyntaxNode"]:
        for child in self.children:
            if child.field_name == name:
                return child
        return None

    def contains(self, point: Point) -> bool:
        """Half-open containment: start inclusive, end exclusive."""
        return self.start <= point < self.end

    def ancestors(self) -> Iterator["SyntaxNode"]:
        """Yield parents from the closest outward, excluding this node."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def __eq__(self, other) -> bool:
        if not isinstance(other, SyntaxNode):
            return NotImplemented
        return self.tree is other.tree and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.tree), self.index))

    def __repr__(self) -> str:
        (sl, sc), (el, ec) = self.start, self.end
        return f"<SyntaxNode {self.kind} {sl}:{sc}-{el}:{ec}>"


class SyntaxTree:
    """Arena of nodes built from one tree-sitter parse."""

    def __init__(self, source: str, variant: str, ts_tree):
        self.source = source
        self.variant = variant
        self.has_errors = ts_tree.root_node.has_error
        self._records: List[_NodeRecord] = []
        self._source_bytes = source.encode("utf-8")
        self._line_bytes = self._source_bytes.split(b"\n")
        self._ascii = len(self._source_bytes) == len(source)
        self._index(ts_tree)

    def _column(self, row: int, byte_column: int) -> int:
        if self._ascii or row >= len(self._line_bytes):
            return byte_column
        prefix = self._line_bytes[row][:byte_column]
        return len(prefix.decode("utf-8", errors="replace"))

    def _append(self, ts_node, parent: int, field_name: Optional[str]) -> int:
        start_row, start_col = ts_node.start_point
        end_row, end_col = ts_node.end_point
        record = _NodeRecord(
            kind=ts_node.type,
            is_named=ts_node.is_named,
            start=(start_row, self._column(start_row, start_col)),
            end=(end_row, self._column(end_row, end_col)),
            text=self._source_bytes[ts_node.start_byte:ts_node.end_byte].decode(
                "utf-8", errors="replace"
            ),
            parent=parent,
            field_name=field_name,
        )
        index = len(self._records)
        self._records.append(record)
        if parent >= 0:
            self._records[parent].children.append(index)
        return index

    def _index(self, ts_tree) -> None:
        # Pre-order walk; ``stack`` holds the arena indices of the ancestors
        # of the cursor's current node.
        cursor = ts_tree.walk()
        stack: List[int] = []
        while True:
            parent = stack[-1] if stack else -1
            index = self._append(cursor.node, parent, cursor.field_name)
            if cursor.goto_first_child():
                stack.append(index)
                continue
            while not cursor.goto_next_sibling():
                if not cursor.goto_parent():
                    return
                stack.pop()

    @property
    def root(self) -> SyntaxNode:
        return SyntaxNode(self, 0)

    def __len__(self) -> int:
        return len(self._records)

    def nodes(self) -> Iterator[SyntaxNode]:
        """All nodes in pre-order (arena order)."""
        for index in range(len(self._records)):
            yield SyntaxNode(self, index)

    def nodes_of_kind(self, kinds: Iterable[str]) -> List[SyntaxNode]:
        kinds = frozenset(kinds)
        return [node for node in self.nodes() if node.kind in kinds]


def parse(source: str, variant: Optional[str] = None) -> SyntaxTree:
    """Parse source text with the grammar for ``variant``.

    Never raises on malformed input: tree-sitter produces a best-effort tree
    with ERROR nodes instead.
    """
    from tree_sitter import Parser

    variant = normalize_variant(variant)
    parser = Parser(_get_language(variant))
    ts_tree = parser.parse(source.encode("utf-8"))
    tree = SyntaxTree(source, variant, ts_tree)
    if tree.has_errors:
        logger.debug("Parsed %s source with syntax errors", variant)
    return tree
