# topmark:header:start
#
#   project      : NodeKeys
#   file         : errors.py
#   file_relpath : src/nodekeys/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the NodeKeys CLI.

Raise these in commands to signal errors with standardized messages and exit
codes. Domain errors from the library are translated at the command boundary.
"""

from __future__ import annotations

import click

from nodekeys.cli.exit_codes import ExitCode


class NodekeysCliError(click.ClickException):
    """Base class for all NodeKeys CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))


class NodekeysUsageError(NodekeysCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class NodekeysDataError(NodekeysCliError):
    """Error for inputs that are not valid node trees."""

    exit_code = ExitCode.DATA_ERROR


class NodekeysFileNotFoundError(NodekeysCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class NodekeysIOError(NodekeysCliError):
    """Error for I/O errors reading the input."""

    exit_code = ExitCode.IO_ERROR


class NodekeysConfigError(NodekeysCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
