# topmark:header:start
#
#   project      : BuildParams
#   file         : errors.py
#   file_relpath : src/buildparams/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the BuildParams CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (`buildparams.errors`) are translated
    with `from_library_error`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from buildparams.cli.exit_codes import ExitCode
from buildparams.errors import (
    BuildParamsError,
    ConfigError,
    InvalidElementNameError,
    MalformedMessageError,
    UnrecognizedPrefixError,
)


class BuildParamsCliError(click.ClickException):
    """Base class for all BuildParams CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class BuildParamsUsageError(BuildParamsCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BuildParamsDataError(BuildParamsCliError):
    """Error for log data that cannot be parsed or rendered (bad prefix, invalid XML name)."""

    exit_code = ExitCode.DATA_ERROR


class BuildParamsFileNotFoundError(BuildParamsCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class BuildParamsUnrecognizedPrefixError(BuildParamsCliError):
    """Error for a prefix without a registered parameter variant."""

    exit_code = ExitCode.UNRECOGNIZED_PREFIX


class BuildParamsIOError(BuildParamsCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class BuildParamsConfigError(BuildParamsCliError):
    """Error for configuration errors (invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


def from_library_error(exc: BuildParamsError) -> BuildParamsCliError:
    """Return the CLI error matching a library error."""
    if isinstance(exc, UnrecognizedPrefixError):
        return BuildParamsUnrecognizedPrefixError(str(exc))
    if isinstance(exc, (MalformedMessageError, InvalidElementNameError)):
        return BuildParamsDataError(str(exc))
    if isinstance(exc, ConfigError):
        return BuildParamsConfigError(str(exc))
    return BuildParamsCliError(str(exc))
