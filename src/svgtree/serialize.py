"""Render a document tree as SVG text.

Both output formats share one traversal and one attribute formatter.
Attribute and text values are written verbatim, without escaping.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from .tree import Children, Text

if TYPE_CHECKING:
    from .tree import Node

DEFAULT_INDENT = '  '


class Format(enum.Enum):
    """Output format."""

    COMPACT = 'compact'
    """Single line, no inserted whitespace."""
    INDENTED = 'indented'
    """One element per line, nested bodies indented."""


def to_string(node: Node) -> str:
    """Render `node` on a single line."""
    return render(node, Format.COMPACT)


def to_pretty_string(node: Node, indent: str = DEFAULT_INDENT) -> str:
    """Render `node` on multiple lines.

    Args:
        node: The element to render.
        indent: Prefix added to each line once per nesting level.
    """
    return render(node, Format.INDENTED, indent=indent)


def render(node: Node, fmt: Format, indent: str = DEFAULT_INDENT) -> str:
    """Render `node` and its descendants in the given format."""
    if fmt is Format.COMPACT:
        body = _compact_body(node)
    else:
        body = _indent_block(_indented_body(node, indent), indent)
    return f'<{node.tag}{format_attrs(node)}>{body}</{node.tag}>'


def format_attrs(node: Node) -> str:
    """Format the attributes of an opening tag.

    Attributes are sorted by name and the viewBox, if any, comes last.

    Returns:
        The attributes with a leading space, or an empty string if
        there are none.
    """
    attrs = [f'{name}="{value}"' for name, value in sorted(node.attrs.items())]
    if node.viewbox is not None:
        attrs.append(f'viewBox="{node.viewbox}"')
    if not attrs:
        return ''
    return ' ' + ' '.join(attrs)


def _compact_body(node: Node) -> str:
    content = node.content
    if isinstance(content, Text):
        return content.value
    if isinstance(content, Children):
        return ''.join(render(child, Format.COMPACT) for child in content)
    raise TypeError(f'Invalid element content: {content!r}')


def _indented_body(node: Node, indent: str) -> str:
    # Unindented body; the caller indents it as a block.
    content = node.content
    if isinstance(content, Text):
        return f'\n{content.value}\n'
    if isinstance(content, Children):
        if not len(content):
            return ''
        block = '\n'.join(
            render(child, Format.INDENTED, indent=indent) for child in content
        )
        return f'\n{block}\n'
    raise TypeError(f'Invalid element content: {content!r}')


def _indent_block(text: str, indent: str) -> str:
    """Indent each non-blank line of `text`.

    Blank lines are emptied. Lines are newline terminated.
    """
    lines = _split_lines(text)
    if not lines:
        return ''
    return (
        '\n'.join(f'{indent}{line}' if line.strip() else '' for line in lines)
        + '\n'
    )


def _split_lines(text: str) -> list[str]:
    # Split on '\n' and '\r\n' only. A bare '\r' or other line break
    # characters in text content are kept as is.
    if not text:
        return []
    lines = [line.removesuffix('\r') for line in text.split('\n')]
    if not lines[-1]:
        lines.pop()
    return lines
