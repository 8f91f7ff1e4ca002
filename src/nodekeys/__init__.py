# topmark:header:start
#
#   project      : NodeKeys
#   file         : __init__.py
#   file_relpath : src/nodekeys/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NodeKeys package.

NodeKeys flattens arbitrarily nested children trees (primitives, elements,
portals, lists and iterables) into a flat list and assigns every leaf a stable,
path-derived key. The public operations live in `nodekeys.children`.
"""

from __future__ import annotations

from nodekeys import children
from nodekeys.children import Children, KeyedLeaf, keyed_leaves
from nodekeys.config.model import Config, FlattenStrategy, MutableConfig
from nodekeys.core.errors import (
    ConfigError,
    InvalidChildError,
    NodekeysError,
    OnlyChildError,
)
from nodekeys.core.nodes import Element, Portal
from nodekeys.diagnostic.model import DiagnosticLog

__all__ = [
    "Children",
    "Config",
    "ConfigError",
    "DiagnosticLog",
    "Element",
    "FlattenStrategy",
    "InvalidChildError",
    "KeyedLeaf",
    "MutableConfig",
    "NodekeysError",
    "OnlyChildError",
    "Portal",
    "children",
    "keyed_leaves",
]
