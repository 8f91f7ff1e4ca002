# topmark:header:start
#
#   project      : NodeKeys
#   file         : __main__.py
#   file_relpath : src/nodekeys/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running NodeKeys via ``python -m nodekeys``.

It delegates directly to :func:`nodekeys.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how NodeKeys is launched.

Examples:
    Flatten a JSON node tree read from STDIN::

        echo '["a", ["b", "c"]]' | python -m nodekeys flatten -
"""

from __future__ import annotations

from nodekeys.cli.main import cli

if __name__ == "__main__":
    cli()
