"""Wrapper variants consumed by the tree sorter.

A wrapper describes one child of a container together with how it should be
ordered.  The set of variants is closed: an element is either unsorted,
sorted by its template priority, or sorted by priority and then by its
groupId/artifactId.  :class:`GroupWrapper` holds the wrappers of one
container and performs the actual ordering.

Wrappers only reference the underlying nodes; they never copy them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple, Union

from lxml import etree

from . import utils

SortKey = Tuple[int, int, str]

# Rank of each variant inside a sort key.  Prioritized wrappers come first,
# unsorted elements after them and dangling comments last.
_PRIORITIZED = 0
_UNPRIORITIZED = 1
_TRAILING = 2


@dataclass(frozen=True)
class UnsortedWrapper:
    """Passthrough for nodes without a template priority."""

    content: Any

    def sort_key(self) -> SortKey:
        return (_UNPRIORITIZED, 0, "")


@dataclass(frozen=True)
class SortedWrapper:
    """Element ordered by its template priority."""

    content: etree._Element
    priority: int

    def sort_key(self) -> SortKey:
        return (_PRIORITIZED, self.priority, "")


@dataclass(frozen=True)
class GroupArtifactSortedWrapper:
    """Element ordered by priority, then by groupId and artifactId."""

    content: etree._Element
    priority: int
    secondary_key: str

    def sort_key(self) -> SortKey:
        return (_PRIORITIZED, self.priority, self.secondary_key)


Wrapper = Union[UnsortedWrapper, SortedWrapper, GroupArtifactSortedWrapper]


@dataclass(frozen=True)
class GroupWrapper:
    """Ordered collection of the wrappers of one container element.

    The container itself carries no priority.  Comments and processing
    instructions are bound to the element that follows them, so a comment
    describing a dependency stays in front of it after sorting.  Those after
    the last element keep their place at the end.
    """

    content: etree._Element
    children: Tuple[Wrapper, ...]

    def _units(self) -> List[Tuple[SortKey, List[Wrapper]]]:
        units: List[Tuple[SortKey, List[Wrapper]]] = []
        pending: List[Wrapper] = []
        for wrapper in self.children:
            pending.append(wrapper)
            if utils.is_element(wrapper.content):
                units.append((wrapper.sort_key(), pending))
                pending = []
        if pending:
            units.append(((_TRAILING, 0, ""), pending))
        return units

    def sorted_children(self) -> List[Wrapper]:
        """Return the child wrappers in their sorted order.

        The sort is stable, so unsorted elements and wrappers with equal keys
        keep their original relative order.
        """
        units = sorted(self._units(), key=lambda unit: unit[0])
        return [wrapper for _, wrappers in units for wrapper in wrappers]

    def is_sorted(self) -> bool:
        """Check whether the container is already in sorted order."""
        return [w.content for w in self.sorted_children()] == [
            w.content for w in self.children
        ]

    def apply(self) -> etree._Element:
        """Reorder the container's children in place.

        Whitespace tails stay at their positions so indentation survives the
        move; only the nodes change places.

        :returns: The reordered container element.
        """
        elem = self.content
        tails = [child.tail for child in elem]
        for wrapper in self.sorted_children():
            elem.append(wrapper.content)
        for child, tail in zip(elem, tails):
            child.tail = tail
        return elem
