"""Test compact and indented rendering."""

from __future__ import annotations

import pytest

from svgtree import Children, Format, Node, ViewBox, render
from svgtree import serialize

ROOT_TAG = (
    '<svg preserveAspectRatio="xMidYMid meet"'
    ' xmlns="http://www.w3.org/2000/svg" viewBox="0 0 0 0">'
)


def test_empty_root() -> None:
    """An empty root renders on one line in both formats."""
    root = Node.root()
    expected = f'{ROOT_TAG}</svg>'
    assert str(root) == expected
    assert root.pretty() == expected


def test_just_leaf() -> None:
    leaf = Node.leaf('abc', 'def')
    assert str(leaf) == '<abc>def</abc>'
    assert leaf.pretty() == '<abc>\n  def\n</abc>'


def test_small_tree(small_tree: Node) -> None:
    assert str(small_tree) == (
        f'{ROOT_TAG}<abc>def</abc><hij>lmnop</hij></svg>'
    )
    assert small_tree.pretty() == '\n'.join(
        (
            ROOT_TAG,
            '  <abc>',
            '    def',
            '  </abc>',
            '  <hij>',
            '    lmnop',
            '  </hij>',
            '</svg>',
        )
    )


def test_nested_indent() -> None:
    """Each nesting level adds one indent."""
    inner = Node('g', Children()).add(Node.leaf('text', 'hi'))
    outer = Node('g', Children()).add(inner)
    assert outer.pretty() == '\n'.join(
        (
            '<g>',
            '  <g>',
            '    <text>',
            '      hi',
            '    </text>',
            '  </g>',
            '</g>',
        )
    )
    assert outer.pretty(indent='\t') == '\n'.join(
        (
            '<g>',
            '\t<g>',
            '\t\t<text>',
            '\t\t\thi',
            '\t\t</text>',
            '\t</g>',
            '</g>',
        )
    )


def test_attribute_order() -> None:
    """Attributes are sorted by name and viewBox comes last."""
    node = Node(
        'svg',
        Children(),
        attrs={'zeta': '1', 'alpha': '2', 'width': '3', 'aardvark': '4'},
        viewbox=ViewBox(1, 2, 3, 4),
    )
    expected = (
        '<svg aardvark="4" alpha="2" width="3" zeta="1"'
        ' viewBox="1 2 3 4"></svg>'
    )
    assert str(node) == expected
    assert node.pretty() == expected


def test_viewbox_attr_is_not_sorted() -> None:
    """The viewbox follows attributes that sort after it."""
    node = Node('svg', Children(), attrs={'x': '0'}, viewbox=ViewBox())
    assert serialize.format_attrs(node) == ' x="0" viewBox="0 0 0 0"'


def test_no_attrs() -> None:
    """No space is written before '>' without attributes."""
    node = Node('g', Children())
    assert serialize.format_attrs(node) == ''
    assert str(node) == '<g></g>'
    assert node.pretty() == '<g></g>'


def test_values_are_verbatim() -> None:
    """Values are not escaped."""
    node = Node.leaf('text', 'a < b & "c"')
    node.attrs['title'] = 'say "hi" <now>'
    assert str(node) == '<text title="say "hi" <now>">a < b & "c"</text>'


def test_empty_leaf_keeps_line() -> None:
    """An empty leaf still gets a (blank) content line."""
    leaf = Node.leaf('abc', '')
    assert str(leaf) == '<abc></abc>'
    assert leaf.pretty() == '<abc>\n\n</abc>'


def test_multiline_text() -> None:
    """Every line of text is indented and blank lines are emptied."""
    leaf = Node.leaf('style', 'a {}\n   \nb {}')
    assert leaf.pretty() == '<style>\n  a {}\n\n  b {}\n</style>'


def test_crlf_text() -> None:
    """CRLF line endings in text are indented like LF endings."""
    leaf = Node.leaf('t', 'a\r\nb')
    assert leaf.pretty() == '<t>\n  a\n  b\n</t>'
    assert str(leaf) == '<t>a\r\nb</t>'


def test_empty_container_collapses() -> None:
    """Empty containers render the same in both formats."""
    root = Node.root().add(Node('g', Children()))
    assert str(root) == f'{ROOT_TAG}<g></g></svg>'
    assert root.pretty() == f'{ROOT_TAG}\n  <g></g>\n</svg>'


def test_idempotent(small_tree: Node) -> None:
    """Rendering has no side effects."""
    assert str(small_tree) == str(small_tree)
    assert small_tree.pretty() == small_tree.pretty()


@pytest.mark.parametrize('fmt', list(Format))
def test_render_formats(small_tree: Node, fmt: Format) -> None:
    """render() dispatches to the matching format."""
    expected = {
        Format.COMPACT: serialize.to_string,
        Format.INDENTED: serialize.to_pretty_string,
    }[fmt](small_tree)
    assert render(small_tree, fmt) == expected


def test_invalid_content() -> None:
    node = Node('g', 'oops')  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        str(node)
