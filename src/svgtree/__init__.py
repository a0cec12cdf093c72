"""Build SVG documents in memory and render them as text.

A document is a small tree of elements built with :meth:`Node.root`,
:meth:`Node.leaf` and :meth:`Node.add`. It can be rendered as a single
compact line or as indented, human-readable text. Attributes are always
written sorted by name, with the root ``viewBox`` last.
"""

import importlib.metadata

from .serialize import Format, render, to_pretty_string, to_string
from .tree import Children, Node, SVGTreeError, Text
from .viewbox import ViewBox

__version__ = importlib.metadata.version('svgtree')

__all__ = [
    'Children',
    'Format',
    'Node',
    'SVGTreeError',
    'Text',
    'ViewBox',
    'render',
    'to_pretty_string',
    'to_string',
]
