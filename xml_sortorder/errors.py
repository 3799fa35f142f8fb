"""Exception hierarchy for xml_sortorder.

Missing entries in the order table are not errors; such elements are simply
left unsorted.  Everything below is raised to the caller without retries.
"""


class SortOrderError(Exception):
    """Base exception for all xml_sortorder errors."""


class TemplateLoadError(SortOrderError):
    """Raised when the sort order template cannot be decoded or parsed."""


class MalformedInputTree(SortOrderError):
    """Raised when a parent chain is cyclic or unreasonably deep."""


class SettingsFrozenError(SortOrderError):
    """Raised when sort flags are changed after classification has started."""
