# topmark:header:start
#
#   project      : NodeKeys
#   file         : constants.py
#   file_relpath : src/nodekeys/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NodeKeys Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

NODEKEYS_VERSION: str = get_version("nodekeys")

# Path grammar: root/array separator and nested-level separator.
SEPARATOR: Final[str] = "."
SUBSEPARATOR: Final[str] = ":"

# Prefix of an escaped explicit key segment.
EXPLICIT_KEY_PREFIX: Final[str] = "$"

# Delimiter between a caller-renaming prefix and the rest of a key.
USER_KEY_DELIMITER: Final[str] = "/"

# Environment variable consulted by `nodekeys.config.logging.resolve_env_log_level`.
LOG_LEVEL_ENV: Final[str] = "NODEKEYS_LOG_LEVEL"

# Configuration file discovery.
CONFIG_FILE_NAME: Final[str] = "nodekeys.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
