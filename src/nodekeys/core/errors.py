# topmark:header:start
#
#   project      : NodeKeys
#   file         : errors.py
#   file_relpath : src/nodekeys/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by NodeKeys.

Both flattening errors are fatal to the current call and propagate unchanged;
the core performs no recovery.
"""

from __future__ import annotations


class NodekeysError(Exception):
    """Base class for all NodeKeys errors."""


class InvalidChildError(NodekeysError, TypeError):
    """A node is neither a leaf, a sequence, nor an iterable.

    Attributes:
        found: Human-readable description of the offending object.
    """

    def __init__(self, found: str) -> None:
        self.found: str = found
        super().__init__(
            f"Objects are not valid as a child (found: {found}). "
            "If you meant to render a collection of children, use a list instead."
        )


class OnlyChildError(NodekeysError, ValueError):
    """`only` received something other than a single element."""

    def __init__(self) -> None:
        super().__init__("children.only expected to receive a single element child.")


class ConfigError(NodekeysError, ValueError):
    """Configuration error (unreadable, malformed, or invalid values)."""
