"""Build the lookup table of element priorities from a template.

The table maps every structural path found in a sort order template to a
number reflecting the template's document order.  It is built once per
sorting session and never modified afterwards, so a single instance may be
shared by any number of factories.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Union

from lxml import etree

import config
from . import templates, utils
from .errors import TemplateLoadError

logger = logging.getLogger("xml_sortorder")


class OrderTable(Mapping[str, int]):
    """Read-only mapping from structural path to priority."""

    def __init__(self, priorities: Mapping[str, int]) -> None:
        self._priorities = MappingProxyType(dict(priorities))

    def __getitem__(self, path: str) -> int:
        return self._priorities[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._priorities)

    def __len__(self) -> int:
        return len(self._priorities)

    def __repr__(self) -> str:
        return f"OrderTable({dict(self._priorities)!r})"

    def lookup(self, path: str) -> int | None:
        """Return the priority of ``path`` or ``None`` when it is unknown."""
        return self._priorities.get(path)


def build_order_table(
    template_root: etree._Element,
    base: int = config.SORT_ORDER_BASE,
    increment: int = config.SORT_ORDER_INCREMENT,
) -> OrderTable:
    """Walk a template and number its elements in document order.

    The root receives ``base``.  Each call adds ``increment`` to its own
    running value before descending into the next child, and passes the
    result down as that child's starting value.  A template
    ``root -> (a, b, c)`` therefore yields 1100, 1200 and 1300 for the
    children, while grandchildren continue from their parent's value instead
    of being re-based per level.

    :param template_root: Root element of the parsed template.
    :param base: Priority of the root.
    :param increment: Step added on every descent.
    :returns: The finished :class:`OrderTable`.
    """
    priorities: Dict[str, int] = {}

    def add(elem: etree._Element, sort_order: int) -> None:
        priorities[utils.structural_path(elem)] = sort_order
        for child in elem:
            if not utils.is_element(child):
                continue
            sort_order += increment
            add(child, sort_order)

    add(template_root, base)
    logger.debug("Template paths numbered: %s", len(priorities))
    return OrderTable(priorities)


def parse_template(
    text: Union[str, bytes], encoding: str = config.ENCODING
) -> etree._Element:
    """Parse template text into an element tree.

    String input is encoded with ``encoding`` first and the parser is told to
    use the same encoding, so any declaration inside the text is overridden.

    :param text: Template as text or raw bytes.
    :param encoding: Character encoding of the template.
    :returns: The root element.
    :raises TemplateLoadError: When decoding or parsing fails.
    """
    try:
        data = text.encode(encoding) if isinstance(text, str) else text
        parser = etree.XMLParser(encoding=encoding, remove_comments=True, remove_pis=True)
        root = etree.fromstring(data, parser)
    except (UnicodeError, LookupError, etree.XMLSyntaxError) as exc:
        logger.error("Sort order template could not be loaded: %s", exc)
        raise TemplateLoadError(f"Invalid sort order template: {exc}") from exc
    return root


def load_order_table(
    text: Union[str, bytes, None] = None,
    encoding: str = config.ENCODING,
) -> OrderTable:
    """Parse a template and build its order table.

    :param text: Template text, the embedded default when ``None``.
    :param encoding: Character encoding of the template.
    :returns: The finished :class:`OrderTable`.
    """
    if text is None:
        text = templates.DEFAULT_SORT_ORDER
    table = build_order_table(parse_template(text, encoding))
    logger.info("Order table built: %s entries", len(table))
    return table
