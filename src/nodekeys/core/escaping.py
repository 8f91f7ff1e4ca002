# topmark:header:start
#
#   project      : NodeKeys
#   file         : escaping.py
#   file_relpath : src/nodekeys/core/escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Key escaping routines for the path grammar.

The grammar reserves ``=`` and ``:`` inside key segments, and ``/`` as the
delimiter between a caller-renaming prefix and the rest of a key. All helpers
are pure, total functions over strings.
"""

from __future__ import annotations

from itertools import groupby
from typing import Final

from nodekeys.constants import EXPLICIT_KEY_PREFIX, USER_KEY_DELIMITER

_ESCAPER_LOOKUP: Final[dict[str, str]] = {
    "=": "=0",
    ":": "=2",
}

_BASE36_DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"


def escape(key: str) -> str:
    """Escape and wrap an explicit key so it is safe to use as a key segment.

    Args:
        key: The explicit key, already converted to ``str``.

    Returns:
        str: ``key`` with ``=`` replaced by ``=0`` and ``:`` by ``=2``, prefixed with ``$``.

    Example:
        ```python
        assert escape("a=b:c") == "$a=0b=2c"
        ```
    """
    return EXPLICIT_KEY_PREFIX + "".join(_ESCAPER_LOOKUP.get(ch, ch) for ch in key)


def escape_user_provided_key(text: str) -> str:
    """Append one extra ``/`` to every maximal run of ``/`` in ``text``.

    After escaping, a single ``/`` appended by the flattener is always the
    delimiter and never part of user data.

    Args:
        text: Key text to escape.

    Returns:
        str: The escaped text, e.g. ``"a/b"`` -> ``"a//b"``, ``"a//b"`` -> ``"a///b"``.
    """
    parts: list[str] = []
    for ch, run in groupby(text):
        parts.append("".join(run))
        if ch == USER_KEY_DELIMITER:
            parts.append(USER_KEY_DELIMITER)
    return "".join(parts)


def to_base36(index: int) -> str:
    """Render a non-negative index in lowercase base 36.

    Args:
        index: Zero-based position.

    Returns:
        str: The base-36 digits (``0`` -> ``"0"``, ``35`` -> ``"z"``, ``36`` -> ``"10"``).

    Raises:
        ValueError: If ``index`` is negative.
    """
    if index < 0:
        raise ValueError(f"index must be >= 0 (got {index})")
    if index == 0:
        return "0"
    digits: list[str] = []
    while index:
        index, rem = divmod(index, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))
