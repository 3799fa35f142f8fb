"""Small utilities used across the sorter.

These helpers were intentionally kept independent of any class to make them
easy to test in isolation and to allow reuse in external scripts.  They deal
with the low level element navigation that both the order table and the
wrapper factory depend on.
"""

from __future__ import annotations

import re
from typing import List, Optional

from lxml import etree

import config
from .errors import MalformedInputTree

PATH_SEPARATOR = "/"


def is_element(node) -> bool:
    """Check whether a tree node is a real element.

    Comments, processing instructions and entities share the child list with
    elements in :mod:`lxml` but carry a non-string ``tag``.

    :param node: Any node of a parsed tree.
    :returns: ``True`` for elements only.
    """
    return isinstance(node.tag, str)


def local_name(elem) -> str:
    """Return the element name without its namespace.

    Project descriptors usually declare a default namespace, so lxml reports
    ``{http://maven.apache.org/POM/4.0.0}dependency`` where the sort order
    template simply says ``dependency``.

    :param elem: Element to inspect.
    :returns: The local part of the tag.
    """
    tag = elem.tag
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def parent_element(elem) -> Optional[etree._Element]:
    """Look up the parent element, ``None`` at the document root."""
    parent = elem.getparent()
    if parent is None or not is_element(parent):
        return None
    return parent


def child_text(elem, name: str) -> str:
    """Get the stripped text of the first child called ``name``.

    :param elem: Element whose children are searched.
    :param name: Local name of the wanted child.
    :returns: The text, or an empty string when the child is missing or empty.
    """
    for child in elem:
        if is_element(child) and local_name(child) == name:
            return (child.text or "").strip()
    return ""


def structural_path(elem, max_depth: int = config.MAX_DEPTH) -> str:
    """Build the structural path of an element.

    The path joins the local names of all ancestors, starting at the root,
    each prefixed by ``/``.  Elements at the same position in structurally
    identical documents therefore get the same path regardless of sibling
    index.  The walk is iterative and refuses to loop on a cyclic parent chain.

    :param elem: Element to describe.
    :param max_depth: Longest accepted parent chain.
    :returns: A string such as ``/project/dependencies/dependency``.
    :raises MalformedInputTree: On a cycle or an excessively deep chain.
    """
    # Holding the nodes keeps their proxies alive so ids stay unique.
    chain: List[etree._Element] = []
    seen = set()
    node = elem
    while node is not None:
        if id(node) in seen:
            raise MalformedInputTree(
                f"Cyclic parent chain at {local_name(node)!r}"
            )
        if len(chain) >= max_depth:
            raise MalformedInputTree(
                f"Parent chain deeper than {max_depth} elements"
            )
        seen.add(id(node))
        chain.append(node)
        node = parent_element(node)
    return "".join(PATH_SEPARATOR + local_name(n) for n in reversed(chain))


def detect_encoding(data: bytes, default: str = config.ENCODING) -> str:
    """Detect the declared XML encoding.

    Reading only the header keeps the operation fast while covering typical
    declarations.

    :param data: Raw document bytes.
    :param default: Encoding returned when no declaration is present.
    :returns: The encoding string.
    """
    header = data[:200].decode("ascii", errors="ignore")
    match = re.search(r"encoding=[\"']([^\"']+)[\"']", header)
    return match.group(1) if match else default
