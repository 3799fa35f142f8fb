"""Library configuration.

The sorter is configurable via an external ``TOML`` file so build scripts and
interactive sessions can alter defaults without patching the code.  By reading
``XML_SORTORDER_CONFIG`` first, deployments may point to a central config
location while still falling back to a project ``config.toml`` when the
environment variable is unset.
"""

from __future__ import annotations

import os
import pytoml

_CONFIG_PATH = os.environ.get(
    "XML_SORTORDER_CONFIG",
    os.path.join(os.path.dirname(__file__), "config.toml"),
)

if os.path.exists(_CONFIG_PATH):
    with open(_CONFIG_PATH, "r", encoding="utf-8") as _cfg:
        _CONF = pytoml.load(_cfg)
else:
    _CONF = {}

# Priority given to the root of the sort order template.
SORT_ORDER_BASE: int = 1000

# Added to the running priority every time the template walk descends into a
# child element.
SORT_ORDER_INCREMENT: int = 100

# Longest parent chain accepted when computing structural paths.  Real
# descriptors are a handful of levels deep.
MAX_DEPTH: int = 256

# Sort <dependency> and <plugin> entries by groupId and artifactId.
SORT_DEPENDENCIES: bool = False
SORT_PLUGINS: bool = False

# Encoding used when a template is handed over as raw bytes.
ENCODING: str = "UTF-8"

# Default log level used by :class:`~xml_sortorder.factory.WrapperFactory`.
LOG_LEVEL: str = "INFO"

# Override with TOML values if provided
SORT_ORDER_BASE = int(_CONF.get("SORT_ORDER_BASE", SORT_ORDER_BASE))
SORT_ORDER_INCREMENT = int(_CONF.get("SORT_ORDER_INCREMENT", SORT_ORDER_INCREMENT))
MAX_DEPTH = int(_CONF.get("MAX_DEPTH", MAX_DEPTH))
SORT_DEPENDENCIES = bool(_CONF.get("SORT_DEPENDENCIES", SORT_DEPENDENCIES))
SORT_PLUGINS = bool(_CONF.get("SORT_PLUGINS", SORT_PLUGINS))
ENCODING = _CONF.get("ENCODING", ENCODING)
LOG_LEVEL = _CONF.get("LOG_LEVEL", LOG_LEVEL)
