"""Tests for the parser adapter and the node arena."""

from modflow.parser import (
    JAVASCRIPT,
    TYPESCRIPT_REACT,
    detect_variant,
    normalize_variant,
    parse,
)


def test_parse_javascript_root():
    tree = parse("const x = 1;", "javascript")

    assert tree.root.kind == "program"
    assert tree.root.parent is None
    assert tree.root.children[0].kind == "lexical_declaration"
    assert not tree.has_errors


def test_named_fields_and_parent_links():
    tree = parse("a + b", "javascript")
    [binary] = tree.nodes_of_kind(["binary_expression"])

    assert binary.child_by_field("left").text == "a"
    assert binary.child_by_field("operator").kind == "+"
    assert binary.child_by_field("right").text == "b"
    assert binary.child_by_field("missing") is None
    assert binary.parent.kind == "expression_statement"
    assert binary.child_by_field("left").field_name == "left"


def test_every_child_points_back_to_its_parent():
    tree = parse("function f(a, b) { return a ? b : [a, b]; }", "javascript")

    for node in tree.nodes():
        for child in node.children:
            assert child.parent == node


def test_nodes_are_in_preorder():
    tree = parse("f(a, b)", "javascript")
    kinds = [node.kind for node in tree.nodes()]

    assert kinds[0] == "program"
    assert kinds.index("call_expression") < kinds.index("arguments")
    assert kinds.index("arguments") < kinds.index(",")


def test_columns_count_characters_not_bytes():
    tree = parse('const s = "é"; foo', "javascript")
    [foo] = [n for n in tree.nodes_of_kind(["identifier"]) if n.text == "foo"]

    assert foo.start == (0, 15)
    assert foo.end == (0, 18)


def test_malformed_source_still_parses():
    tree = parse("function (", "javascript")

    assert tree.root.kind == "program"
    assert tree.has_errors


def test_typescript_and_tsx_variants():
    ts_tree = parse("let x: string | number;", "typescript")
    assert ts_tree.nodes_of_kind(["union_type"])

    tsx_tree = parse("const a = <div />;", TYPESCRIPT_REACT)
    assert tsx_tree.nodes_of_kind(["jsx_self_closing_element"])


def test_jsx_in_javascriptreact():
    tree = parse("const a = <div><span>hi</span></div>;", "javascriptreact")

    assert len(tree.nodes_of_kind(["jsx_element"])) == 2


def test_unknown_variant_falls_back_to_javascript():
    assert normalize_variant("coffeescript") == JAVASCRIPT
    assert normalize_variant(None) == JAVASCRIPT
    assert parse("x", "coffeescript").variant == JAVASCRIPT


def test_detect_variant_from_extension():
    assert detect_variant("app.js") == "javascript"
    assert detect_variant("lib/index.mjs") == "javascript"
    assert detect_variant("view.jsx") == "javascriptreact"
    assert detect_variant("app.ts") == "typescript"
    assert detect_variant("View.TSX") == "typescriptreact"
    assert detect_variant("README") == "javascript"


def test_node_range_model():
    tree = parse("foo(bar)", "javascript")
    [bar] = [n for n in tree.nodes_of_kind(["identifier"]) if n.text == "bar"]

    assert bar.range.start.line == 0
    assert bar.range.start.column == 4
    assert bar.range.end.column == 7
