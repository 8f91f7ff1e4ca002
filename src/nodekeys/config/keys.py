# topmark:header:start
#
#   project      : NodeKeys
#   file         : keys.py
#   file_relpath : src/nodekeys/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for NodeKeys configuration.

Keys defined here represent the *external configuration API* as it appears in
``nodekeys.toml`` (top-level keys) and in ``[tool.nodekeys]`` inside
``pyproject.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by NodeKeys configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_NODEKEYS: Final[str] = "nodekeys"

    # Flattening behavior
    KEY_STRATEGY: Final[str] = "strategy"
    KEY_DEV_CHECKS: Final[str] = "dev_checks"

    ALL_KEYS: Final[frozenset[str]] = frozenset({KEY_STRATEGY, KEY_DEV_CHECKS})
