# topmark:header:start
#
#   project      : NodeKeys
#   file         : paths.py
#   file_relpath : src/nodekeys/core/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path state threaded through a flattening pass.

A leaf key is ``escaped_prefix + name``. ``name`` grows one segment per level:
the first level is joined with ``.``, deeper levels with ``:``. The prefix only
changes when a map callback returns a list, in which case the mapped leaf's own
key becomes the prefix of everything it expanded into.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from nodekeys.constants import SEPARATOR, SUBSEPARATOR, USER_KEY_DELIMITER
from nodekeys.core.escaping import escape_user_provided_key

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True, slots=True)
class PathState:
    """Accumulated ``(escaped_prefix, name_so_far)`` for one position in the tree."""

    escaped_prefix: str = ""
    name_so_far: str = ""

    @property
    def is_root(self) -> bool:
        """Return True when no segment has been appended yet."""
        return self.name_so_far == ""

    def descend(self, segment: str) -> PathState:
        """Return the state of a child whose key segment is ``segment``."""
        prefix: str = SEPARATOR if self.is_root else self.name_so_far + SUBSEPARATOR
        return PathState(self.escaped_prefix, prefix + segment)

    def leaf_name(self, own_segment: Callable[[], str]) -> str:
        """Return the name of a leaf at this position.

        A leaf reached without any enclosing sequence is named as if it were the
        only item of one, so growing a single child into a list keeps its key.

        Args:
            own_segment: Produces the leaf's key segment at index 0; only called
                at the root.

        Returns:
            str: The leaf name (without the caller-renaming prefix).
        """
        return SEPARATOR + own_segment() if self.is_root else self.name_so_far

    @staticmethod
    def expansion_of(leaf_name: str) -> PathState:
        """Return the root state for a list a map callback returned for ``leaf_name``."""
        return PathState(escape_user_provided_key(leaf_name) + USER_KEY_DELIMITER, "")


ROOT: PathState = PathState()
