"""Convert a document tree to an lxml element tree.

Useful for handing a document to lxml based tooling (XPath queries,
schema validation, canonical serialization, etc.). Unlike the text
renderers in :mod:`svgtree.serialize`, lxml escapes attribute and
text values and rejects invalid XML names.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lxml import etree

from .tree import Children, SVGTreeError, Text

if TYPE_CHECKING:
    from typing_extensions import TypeAlias

    from .tree import Node

logger = logging.getLogger(__name__)

# : Well known namespaces for prefixed names
SVG_NS = {
    'svg': 'http://www.w3.org/2000/svg',
    'xlink': 'http://www.w3.org/1999/xlink',
    'xml': 'http://www.w3.org/XML/1998/namespace',
    'rdf': 'http://www.w3.org/1999/02/22-rdf-syntax-ns#',
    'cc': 'http://creativecommons.org/ns#',
    'dc': 'http://purl.org/dc/elements/1.1/',
    'inkscape': 'http://www.inkscape.org/namespaces/inkscape',
    'sodipodi': 'http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd',
}

TDocument: TypeAlias = (
    etree._ElementTree  # noqa: SLF001 pylint: disable=protected-access
)
TElement: TypeAlias = (
    etree._Element  # noqa: SLF001 pylint: disable=protected-access
)


def to_element(node: Node) -> TElement:
    """Convert `node` and its descendants to an lxml element.

    An ``xmlns`` attribute sets the default namespace of the element
    and its descendants, and ``xmlns:prefix`` attributes declare
    namespace prefixes. Other prefixed names are resolved against
    the declared prefixes, then the well known prefixes in `SVG_NS`.
    The node `id` metadata is not converted.

    Raises:
        SVGTreeError: A name has an unknown namespace prefix.
        ValueError: lxml rejected a tag or attribute name or value.
    """
    return _build(node, None, {})


def to_document(node: Node) -> TDocument:
    """Convert `node` to an lxml ElementTree with `node` as its root."""
    return etree.ElementTree(to_element(node))


def add_ns(name: str, uri: str | None) -> str:
    """Prepend the namespace `uri` to `name` in lxml (Clark) notation."""
    if not uri:
        return name
    return f'{{{uri}}}{name}'


def _build(
    node: Node, parent: TElement | None, scope: dict[str | None, str]
) -> TElement:
    nsmap: dict[str | None, str] = {}
    attrs: list[tuple[str, str]] = []
    for name, value in sorted(node.attrs.items()):
        if name == 'xmlns':
            nsmap[None] = value
        elif name.startswith('xmlns:'):
            nsmap[name.partition(':')[2]] = value
        else:
            attrs.append((name, value))
    if node.viewbox is not None:
        attrs.append(('viewBox', str(node.viewbox)))

    scope = {**scope, **nsmap}
    tag = _qualify(node.tag, scope, nsmap, is_tag=True)
    qattrs = [(_qualify(name, scope, nsmap), value) for name, value in attrs]

    if parent is None:
        element = etree.Element(tag, nsmap=nsmap or None)
    else:
        element = etree.SubElement(parent, tag, nsmap=nsmap or None)
    for name, value in qattrs:
        element.set(name, value)

    content = node.content
    if isinstance(content, Text):
        element.text = content.value
    elif isinstance(content, Children):
        for child in content:
            _build(child, element, scope)
    else:
        raise TypeError(f'Invalid element content: {content!r}')
    return element


def _qualify(
    name: str,
    scope: dict[str | None, str],
    nsmap: dict[str | None, str],
    is_tag: bool = False,
) -> str:
    """Resolve a possibly prefixed name to Clark notation.

    Well known prefixes that are not in scope are declared in `nsmap`.
    """
    prefix, sep, local = name.rpartition(':')
    if not sep:
        # Unprefixed attributes are not in the default namespace
        return add_ns(name, scope.get(None)) if is_tag else name
    uri = scope.get(prefix)
    if uri is None:
        uri = SVG_NS.get(prefix)
        if uri is None:
            raise SVGTreeError(f'Unknown namespace prefix in {name!r}')
        if prefix != 'xml':
            logger.debug('Declaring namespace prefix %s=%s', prefix, uri)
            nsmap[prefix] = uri
            scope[prefix] = uri
    return add_ns(local, uri)
