# topmark:header:start
#
#   project      : NodeKeys
#   file         : io.py
#   file_relpath : src/nodekeys/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

Parsing and rendering are done with `tomlkit`; parsed documents are returned as
plain `dict` structures so the config layer never sees tomlkit container types.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from nodekeys.config.keys import Toml
from nodekeys.config.logging import get_logger
from nodekeys.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME
from nodekeys.core.errors import ConfigError

if TYPE_CHECKING:
    from nodekeys.config.logging import NodekeysLogger

TomlTable = dict[str, Any]

logger: NodekeysLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (``nodekeys.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_nodekeys_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the NodeKeys table of a parsed config document.

    ``nodekeys.toml`` stores settings at the top level; ``pyproject.toml`` nests
    them under ``[tool.nodekeys]``.

    Args:
        path: The path the document was read from (selects the layout).
        data: The parsed TOML document.

    Returns:
        The settings table, or None when a ``pyproject.toml`` has no
        ``[tool.nodekeys]`` section.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool_any: Any = data.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool_any, dict):
        return None
    section: Any = cast("TomlTable", tool_any).get(Toml.SECTION_NODEKEYS)
    return cast("TomlTable", section) if isinstance(section, dict) else None


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file at or above ``start``.

    In each directory ``nodekeys.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.nodekeys]`` section.

    Args:
        start: Directory (or file) to start searching from.

    Returns:
        The path of the discovered config file, or None.
    """
    current: Path = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                table = extract_nodekeys_table(pyproject, load_toml_dict(pyproject))
            except ConfigError:
                table = None
            if table is not None:
                logger.debug("Discovered config section in: %s", pyproject)
                return pyproject
    return None


def to_toml(data: TomlTable) -> str:
    """Render a plain dict as a TOML document string."""
    return tomlkit.dumps(data)
