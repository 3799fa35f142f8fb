"""Classify elements and wrap them for sorting.

The factory looks up each element's structural path in an
:class:`~xml_sortorder.order_table.OrderTable`.  Elements missing from the
table are wrapped as unsorted and keep their relative order.  Dependency and
plugin entries can optionally be sorted by groupId and artifactId among
themselves, which is controlled by :class:`SortSettings`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from lxml import etree

import config
from . import utils
from .errors import SettingsFrozenError
from .order_table import OrderTable, load_order_table
from .wrapper import (
    GroupArtifactSortedWrapper,
    GroupWrapper,
    SortedWrapper,
    UnsortedWrapper,
    Wrapper,
)

# (element name, required parent name) of families sorted by group/artifact.
DEPENDENCY_FAMILY = ("dependency", "dependencies")
PLUGIN_FAMILY = ("plugin", "plugins")


@dataclass(frozen=True)
class SortSettings:
    """Flags fixed for the whole sorting session."""

    sort_dependencies: bool = False
    sort_plugins: bool = False

    @classmethod
    def from_config(cls) -> "SortSettings":
        return cls(config.SORT_DEPENDENCIES, config.SORT_PLUGINS)


def _in_family(elem: etree._Element, family) -> bool:
    name, parent_name = family
    if utils.local_name(elem) != name:
        return False
    parent = utils.parent_element(elem)
    return parent is not None and utils.local_name(parent) == parent_name


def group_artifact_key(elem: etree._Element) -> str:
    """Concatenate the groupId and artifactId texts of an element."""
    return utils.child_text(elem, "groupId") + utils.child_text(elem, "artifactId")


def classify(node, table: OrderTable, settings: SortSettings) -> Wrapper:
    """Wrap a single node according to the order table.

    :param node: Element or other tree node to classify.
    :param table: Priorities built from the sort order template.
    :param settings: Which element families get a secondary key.
    :returns: One of the three wrapper variants.
    :raises MalformedInputTree: When the node's parent chain is broken.
    """
    if not utils.is_element(node):
        return UnsortedWrapper(node)
    priority = table.lookup(utils.structural_path(node))
    if priority is None:
        return UnsortedWrapper(node)
    if (settings.sort_dependencies and _in_family(node, DEPENDENCY_FAMILY)) or (
        settings.sort_plugins and _in_family(node, PLUGIN_FAMILY)
    ):
        return GroupArtifactSortedWrapper(node, priority, group_artifact_key(node))
    return SortedWrapper(node, priority)


class WrapperFactory:
    """Create wrappers for the elements of an input document.

    The factory is bound to one order table.  Sort flags can be passed to the
    constructor or set once through :meth:`setup`; after the first element has
    been classified they are frozen so a sorting pass never sees them change.
    """

    def __init__(
        self,
        order_table: OrderTable,
        settings: SortSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.order_table = order_table
        self._settings = settings
        self._frozen = False
        if logger is None:
            logger = logging.getLogger("xml_sortorder")
            logger.setLevel(getattr(logging, config.LOG_LEVEL))
        self.logger = logger

    @classmethod
    def from_template(
        cls,
        text: Union[str, bytes, None] = None,
        encoding: str = config.ENCODING,
        settings: SortSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> "WrapperFactory":
        """Build the order table from a template and wrap it in a factory.

        :param text: Template text, the embedded default when ``None``.
        :param encoding: Character encoding of the template.
        :param settings: Sort flags; may also be given later via :meth:`setup`.
        :param logger: Optional logger to report through.
        :returns: A ready factory.
        :raises TemplateLoadError: When the template is invalid.
        """
        table = load_order_table(text, encoding)
        return cls(table, settings, logger)

    @property
    def settings(self) -> SortSettings:
        if self._settings is None:
            self._settings = SortSettings.from_config()
        return self._settings

    def setup(self, sort_dependencies: bool, sort_plugins: bool) -> None:
        """Fix the sort flags before classification starts.

        :raises SettingsFrozenError: When elements were already classified.
        """
        if self._frozen:
            raise SettingsFrozenError(
                "Sort settings cannot change once classification has started"
            )
        self._settings = SortSettings(sort_dependencies, sort_plugins)
        self.logger.debug(
            "Sort settings: dependencies=%s plugins=%s",
            sort_dependencies,
            sort_plugins,
        )

    def classify(self, node) -> Wrapper:
        """Classify one node with this factory's table and settings."""
        settings = self.settings
        self._frozen = True
        wrapper = classify(node, self.order_table, settings)
        if utils.is_element(node):
            self.logger.debug(
                "%s -> %s", utils.local_name(node), type(wrapper).__name__
            )
        return wrapper

    def create(self, root: etree._Element) -> GroupWrapper:
        """Wrap the direct children of a container element.

        :param root: Container whose children should be ordered.
        :returns: A :class:`GroupWrapper` over the classified children.
        """
        return GroupWrapper(root, tuple(self.classify(child) for child in root))
