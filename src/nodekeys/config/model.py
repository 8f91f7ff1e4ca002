# topmark:header:start
#
#   project      : NodeKeys
#   file         : model.py
#   file_relpath : src/nodekeys/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for NodeKeys.

Two layers, mirroring the usual builder/snapshot split:

* `MutableConfig`: a mutable builder used while loading TOML sources and
  applying overrides (``None`` means "inherit").
* `Config`: the immutable snapshot consumed by the flattener.

Use `Config.thaw` to obtain a builder from a snapshot and `MutableConfig.freeze`
to produce a snapshot again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from nodekeys.config.io import (
    discover_config_file,
    extract_nodekeys_table,
    load_toml_dict,
    to_toml,
)
from nodekeys.config.keys import Toml
from nodekeys.config.logging import get_logger
from nodekeys.core.errors import ConfigError
from nodekeys.diagnostic.model import (
    DiagnosticCode,
    DiagnosticLog,
    FrozenDiagnosticLog,
)

if TYPE_CHECKING:
    from pathlib import Path

    from nodekeys.config.io import TomlTable
    from nodekeys.config.logging import NodekeysLogger

logger: NodekeysLogger = get_logger(__name__)

DEFAULTS_SOURCE: str = "<defaults>"


class FlattenStrategy(str, Enum):
    """How the flattener walks a node tree.

    Both strategies produce identical output, keys, counts and callback order.

    Attributes:
        RECURSIVE: Direct recursion; depth is bounded by the interpreter recursion limit.
        ITERATIVE: Explicit work stack; safe for arbitrarily deep trees.
    """

    RECURSIVE = "recursive"
    ITERATIVE = "iterative"

    @classmethod
    def parse(cls, value: str) -> FlattenStrategy:
        """Parse a strategy name (case-insensitive).

        Args:
            value: The strategy name, e.g. ``"iterative"``.

        Returns:
            FlattenStrategy: The matching strategy.

        Raises:
            ConfigError: If ``value`` does not name a strategy.
        """
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            allowed: str = ", ".join(s.value for s in cls)
            raise ConfigError(
                f"Invalid value for '{Toml.KEY_STRATEGY}': {value!r} (expected one of: {allowed})"
            ) from e


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for NodeKeys.

    Attributes:
        strategy (FlattenStrategy): Walk strategy used by the flattener.
        dev_checks (bool): Whether development diagnostics run (key coercion
            safety checks and the mapping-as-children warning).
        config_files (tuple[Path | str, ...]): Provenance of the merged settings.
        diagnostics (FrozenDiagnosticLog): Warnings collected while loading config.
    """

    strategy: FlattenStrategy
    dev_checks: bool
    config_files: tuple[Path | str, ...] = ()
    diagnostics: FrozenDiagnosticLog = field(default_factory=lambda: FrozenDiagnosticLog(()))

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the default configuration snapshot."""
        return MutableConfig.from_defaults().freeze()

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict."""
        return {
            Toml.KEY_STRATEGY: self.strategy.value,
            Toml.KEY_DEV_CHECKS: self.dev_checks,
        }

    def to_toml(self) -> str:
        """Render this Config as a ``nodekeys.toml`` document."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            strategy=self.strategy,
            dev_checks=self.dev_checks,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while loading and merging sources.

    ``None`` fields inherit from whatever they are merged onto; `freeze`
    resolves any remaining ``None`` to the built-in defaults.
    """

    strategy: FlattenStrategy | None = None
    dev_checks: bool | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        return Config(
            strategy=self.strategy or FlattenStrategy.RECURSIVE,
            dev_checks=True if self.dev_checks is None else self.dev_checks,
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.freeze(),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls(
            strategy=FlattenStrategy.RECURSIVE,
            dev_checks=True,
            config_files=[DEFAULTS_SOURCE],
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a MutableConfig from a parsed NodeKeys settings table.

        Unknown keys are reported as warnings on the builder's diagnostics.

        Args:
            data: The settings table (already extracted from ``[tool.nodekeys]``
                when reading ``pyproject.toml``).
            config_file: Source path, recorded for provenance.

        Returns:
            MutableConfig: The populated builder.

        Raises:
            ConfigError: If a known key carries a value of the wrong type.
        """
        draft = cls()
        source: str = str(config_file) if config_file is not None else "<dict>"

        for key in sorted(set(data) - Toml.ALL_KEYS):
            draft.diagnostics.add_warning(
                f"Unknown config key '{key}' in {source} (ignored)",
                code=DiagnosticCode.UNKNOWN_CONFIG_KEY,
            )

        if Toml.KEY_STRATEGY in data:
            raw: Any = data[Toml.KEY_STRATEGY]
            if not isinstance(raw, str):
                raise ConfigError(
                    f"Invalid value for '{Toml.KEY_STRATEGY}' in {source}: expected a string"
                )
            draft.strategy = FlattenStrategy.parse(raw)

        if Toml.KEY_DEV_CHECKS in data:
            raw = data[Toml.KEY_DEV_CHECKS]
            if not isinstance(raw, bool):
                raise ConfigError(
                    f"Invalid value for '{Toml.KEY_DEV_CHECKS}' in {source}: expected a boolean"
                )
            draft.dev_checks = raw

        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``nodekeys.toml`` and ``pyproject.toml`` (``[tool.nodekeys]``).

        Args:
            path: Path to the TOML file.

        Returns:
            MutableConfig | None: The builder if successful; None if a
                ``pyproject.toml`` has no ``[tool.nodekeys]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable | None = extract_nodekeys_table(path, load_toml_dict(path))
        if table is None:
            logger.error("[tool.nodekeys] section missing or malformed in %s", path)
            return None
        draft: MutableConfig = cls.from_toml_dict(table, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        config_path: Path | None = None,
        start: Path | None = None,
    ) -> MutableConfig:
        """Load defaults merged with one config file.

        Precedence (lowest to highest): built-in defaults, then either the
        explicit ``config_path`` or the file discovered from ``start``.

        Args:
            config_path: Explicit config file; must provide NodeKeys settings.
            start: Directory to discover a config file from when ``config_path``
                is not given. No discovery happens when both are None.

        Returns:
            MutableConfig: The merged builder (not frozen, so callers can apply
                overrides).

        Raises:
            ConfigError: If the explicit file lacks a ``[tool.nodekeys]`` section,
                cannot be read, or holds invalid values.
        """
        draft: MutableConfig = cls.from_defaults()
        path: Path | None = config_path
        if path is None and start is not None:
            path = discover_config_file(start)
        if path is None:
            return draft

        loaded: MutableConfig | None = cls.from_toml_file(path)
        if loaded is None:
            raise ConfigError(f"No [tool.nodekeys] section in {path}")
        return draft.merge_with(loaded)

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where ``other``'s explicit settings win.

        Args:
            other: The higher-precedence builder.

        Returns:
            MutableConfig: The merged builder (neither input is modified).
        """
        merged = MutableConfig(
            strategy=other.strategy if other.strategy is not None else self.strategy,
            dev_checks=other.dev_checks if other.dev_checks is not None else self.dev_checks,
            config_files=[*self.config_files, *other.config_files],
            diagnostics=DiagnosticLog.from_iterable([*self.diagnostics, *other.diagnostics]),
        )
        return merged
