"""Small helpers over ElementTree for namespace-agnostic lookups.

Both the bucket listing and the RSS feed may carry namespaces
(``http://s3.amazonaws.com/doc/2006-03-01/``, ``itunes:``), while the
fields we read are identified by local name only.
"""

import xml.etree.ElementTree as ET
from collections.abc import Iterator

from podsite.utils.errors import ParseError


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element tag."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def parse_document(
    content: str | bytes,
    root_name: str,
    error_cls: type[ParseError] = ParseError,
) -> ET.Element:
    """Parse an XML document and check the root element's local name.

    Args:
        content: Raw document
        root_name: Expected local name of the root element
        error_cls: ParseError subclass to raise

    Returns:
        Root element

    Raises:
        ParseError: If the markup is malformed or the root is unexpected
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise error_cls(f"Malformed XML: {e}") from e

    if local_name(root.tag) != root_name:
        raise error_cls(
            f"Expected <{root_name}> document, got <{local_name(root.tag)}>"
        )
    return root


def iter_children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    """Yield direct children whose local name is ``name``."""
    for child in element:
        if local_name(child.tag) == name:
            yield child


def find_child(element: ET.Element, name: str) -> ET.Element | None:
    """Return the first direct child with local name ``name``."""
    return next(iter_children(element, name), None)


def child_text(element: ET.Element, name: str) -> str:
    """Return the text of the last child named ``name``, or an empty string.

    Later elements override earlier ones, so ``<itunes:author>`` after
    ``<author>`` supplies the value.
    """
    text = ""
    for child in iter_children(element, name):
        text = child.text or ""
    return text
