"""Sort whole documents with a :class:`~xml_sortorder.factory.WrapperFactory`.

Every container element is wrapped in a
:class:`~xml_sortorder.wrapper.GroupWrapper` and reordered in place.
Reordering one container never changes which elements another container
holds, so the containers can be processed in any order.
"""

from __future__ import annotations

from typing import Union

from lxml import etree

import config
from . import utils
from .factory import WrapperFactory
from .wrapper import UnsortedWrapper


def sort_element(root: etree._Element, factory: WrapperFactory) -> etree._Element:
    """Sort the children of ``root`` and of all its descendants in place.

    :param root: Element whose subtree should be sorted.
    :param factory: Factory holding the order table and sort settings.
    :returns: ``root`` for convenience.
    """
    containers = [elem for elem in root.iter("*") if len(elem)]
    sorted_count = 0
    unsorted_count = 0
    for container in containers:
        group = factory.create(container)
        for wrapper in group.children:
            if not utils.is_element(wrapper.content):
                continue
            if isinstance(wrapper, UnsortedWrapper):
                unsorted_count += 1
            else:
                sorted_count += 1
        if not group.is_sorted():
            group.apply()
    factory.logger.info("Containers sorted: %s", len(containers))
    factory.logger.info("Nodes with priority: %s", sorted_count)
    factory.logger.info("Nodes without priority: %s", unsorted_count)
    return root


def sort_document(
    text: Union[str, bytes],
    factory: WrapperFactory,
    encoding: str = config.ENCODING,
) -> etree._ElementTree:
    """Parse a document and sort it.

    :param text: Document as text or raw bytes.
    :param factory: Factory holding the order table and sort settings.
    :param encoding: Encoding used to turn text into bytes for the parser.
    :returns: The sorted element tree.
    :raises lxml.etree.XMLSyntaxError: When the document is not well formed.
    """
    if isinstance(text, str):
        data = text.encode(encoding)
        parser = etree.XMLParser(remove_blank_text=False, encoding=encoding)
    else:
        data = text
        parser = etree.XMLParser(remove_blank_text=False)
    root = etree.fromstring(data, parser)
    sort_element(root, factory)
    return etree.ElementTree(root)
