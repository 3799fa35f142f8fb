"""Public entry points for :mod:`xml_sortorder`.

This module re-exports the primary classes so that applications can build a
factory from a sort order template and sort documents without touching the
implementation modules.
"""

from .errors import (
    MalformedInputTree,
    SettingsFrozenError,
    SortOrderError,
    TemplateLoadError,
)
from .factory import SortSettings, WrapperFactory, classify
from .order_table import OrderTable, build_order_table, load_order_table, parse_template
from .sorter import sort_document, sort_element
from .wrapper import (
    GroupArtifactSortedWrapper,
    GroupWrapper,
    SortedWrapper,
    UnsortedWrapper,
    Wrapper,
)

__all__ = [
    "GroupArtifactSortedWrapper",
    "GroupWrapper",
    "MalformedInputTree",
    "OrderTable",
    "SettingsFrozenError",
    "SortOrderError",
    "SortSettings",
    "SortedWrapper",
    "TemplateLoadError",
    "UnsortedWrapper",
    "Wrapper",
    "WrapperFactory",
    "build_order_table",
    "classify",
    "load_order_table",
    "parse_template",
    "sort_document",
    "sort_element",
]
