"""SVG document tree model.

A document is a tree of :class:`Node` elements. Each node holds a tag name,
an attribute mapping, and content that is either literal text (a leaf)
or an ordered list of child nodes. The content kind is fixed when the node
is created.

Example::

    svg = (
        Node.root()
        .add(Node.leaf('title', 'Hello'))
        .add(Node.leaf('desc', 'A small drawing'))
    )
    print(svg)
    print(svg.pretty())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from .viewbox import ViewBox

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from typing_extensions import Self, TypeAlias

logger = logging.getLogger(__name__)

SVG_XMLNS = 'http://www.w3.org/2000/svg'
DEFAULT_ASPECT_RATIO = 'xMidYMid meet'


class SVGTreeError(Exception):
    """SVG tree error."""


class Text:
    """Leaf content: literal text."""

    __slots__ = ('value',)

    def __init__(self, value: str) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Text):
            return NotImplemented
        return self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'Text({self.value!r})'


class Children:
    """Container content: child nodes in document order."""

    __slots__ = ('nodes',)

    def __init__(self, nodes: list[Node] | None = None) -> None:
        self.nodes: list[Node] = [] if nodes is None else list(nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Children):
            return NotImplemented
        return self.nodes == other.nodes

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'Children({self.nodes!r})'


TContent: TypeAlias = Union[Text, Children]


class Node:
    """An SVG element.

    Attributes are always rendered sorted by name. The `id` is metadata only
    and is not rendered. If `viewbox` is set it is rendered as a
    ``viewBox`` attribute after all the other attributes.
    """

    __slots__ = ('attrs', 'content', 'id', 'tag', 'viewbox')

    def __init__(
        self,
        tag: str,
        content: TContent,
        attrs: Mapping[str, str] | None = None,
        id: str | None = None,  # noqa: A002
        viewbox: ViewBox | None = None,
    ) -> None:
        self.tag = tag
        self.content = content
        self.attrs: dict[str, str] = dict(attrs) if attrs else {}
        self.id = id
        self.viewbox = viewbox

    @classmethod
    def root(cls: type[Self]) -> Self:
        """Create an empty svg document element."""
        return cls(
            'svg',
            Children(),
            attrs={
                'xmlns': SVG_XMLNS,
                'preserveAspectRatio': DEFAULT_ASPECT_RATIO,
            },
            viewbox=ViewBox(),
        )

    @classmethod
    def leaf(cls: type[Self], tag: str, content: str) -> Self:
        """Create an element whose body is the literal text `content`."""
        return cls(str(tag), Text(str(content)))

    def add(self, child: Node, strict: bool = False) -> Self:
        """Append a child element.

        Text elements cannot have children. Appending to one leaves it
        unchanged, unless `strict` is True.

        A node must only be added once. Nodes do not know their parent,
        so adding a node to a second parent is not detected and the node
        is shared by both trees. Adding a node twice to the same parent,
        or to itself or one of its descendants, is an error.

        Args:
            child: The element to append. It is owned by this node
                from now on.
            strict: Raise SVGTreeError instead of dropping the child.

        Returns:
            This node, so calls can be chained.

        Raises:
            SVGTreeError: `child` is this node, contains this node, or
                is already a child of this node.
        """
        if isinstance(self.content, Children):
            if any(node is child for node in self.content.nodes):
                raise SVGTreeError(f'<{child.tag}> was already added.')
            if child.contains(self):
                raise SVGTreeError(
                    f'Adding <{child.tag}> to <{self.tag}> makes a cycle.'
                )
            self.content.nodes.append(child)
        elif strict:
            raise SVGTreeError(
                f'Text element <{self.tag}> cannot have children.'
            )
        else:
            logger.warning(
                'Dropped <%s> appended to text element <%s>',
                child.tag,
                self.tag,
            )
        return self

    def contains(self, node: Node) -> bool:
        """True if `node` is this node or one of its descendants."""
        stack = [self]
        while stack:
            current = stack.pop()
            if current is node:
                return True
            stack.extend(current.children)
        return False

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.content, Text)

    @property
    def text(self) -> str | None:
        """The literal text of a leaf, None otherwise."""
        if isinstance(self.content, Text):
            return self.content.value
        return None

    @property
    def children(self) -> tuple[Node, ...]:
        if isinstance(self.content, Children):
            return tuple(self.content.nodes)
        return ()

    def pretty(self, indent: str = '  ') -> str:
        """Indented multi-line rendering."""
        from .serialize import to_pretty_string

        return to_pretty_string(self, indent=indent)

    def __str__(self) -> str:
        from .serialize import to_string

        return to_string(self)

    def __repr__(self) -> str:
        return f'Node({self.tag!r}, {self.content!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.tag == other.tag
            and self.content == other.content
            and self.attrs == other.attrs
            and self.id == other.id
            and self.viewbox == other.viewbox
        )

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]
