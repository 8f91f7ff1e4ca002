# topmark:header:start
#
#   project      : NodeKeys
#   file         : __init__.py
#   file_relpath : src/nodekeys/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for NodeKeys.

Build configs with `MutableConfig` (mutable) and `freeze()` them into a
`Config` before passing them to the public operations.
"""

from __future__ import annotations

from nodekeys.config.model import Config, FlattenStrategy, MutableConfig

__all__ = [
    "Config",
    "FlattenStrategy",
    "MutableConfig",
]
