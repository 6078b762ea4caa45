# topmark:header:start
#
#   project      : BuildParams
#   file         : errors.py
#   file_relpath : src/buildparams/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the BuildParams library.

Usage:
    Both parse errors are local to the single message being processed. Callers
    that process a stream of messages catch `BuildParamsError` per message and
    keep control of their loop; the error carries enough context (prefix and/or
    message) to report which message failed.

Notes:
    The CLI maps these onto `click.ClickException` subclasses with exit codes
    (see `buildparams.cli.errors`).
"""

from __future__ import annotations

from collections.abc import Iterable

_MESSAGE_PREVIEW_LENGTH: int = 60


def _preview(message: str) -> str:
    """Return a short, single-line preview of a log message for error texts."""
    first_line: str = message.splitlines()[0] if message else ""
    if len(first_line) > _MESSAGE_PREVIEW_LENGTH:
        return first_line[:_MESSAGE_PREVIEW_LENGTH] + "..."
    return first_line


class BuildParamsError(Exception):
    """Base class for all BuildParams errors."""


class MalformedMessageError(BuildParamsError, ValueError):
    """The message does not start with the prefix the caller asserted.

    Attributes:
        message (str): The offending log message.
        prefix (str): The prefix that was expected at the start of ``message``.
    """

    def __init__(self, message: str, prefix: str) -> None:
        self.message: str = message
        self.prefix: str = prefix
        super().__init__(f"Message {_preview(message)!r} does not start with prefix {prefix!r}")


class UnrecognizedPrefixError(BuildParamsError, KeyError):
    """No parameter variant is registered for a message prefix.

    Attributes:
        prefix (str): The prefix that has no registered variant.
        known_prefixes (tuple[str, ...]): The prefixes that are registered.
    """

    def __init__(self, prefix: str, known_prefixes: Iterable[str] = ()) -> None:
        self.prefix: str = prefix
        self.known_prefixes: tuple[str, ...] = tuple(known_prefixes)
        super().__init__(prefix)

    def __str__(self) -> str:
        """Return a readable message (``KeyError`` would only repr the key)."""
        text: str = f"Unrecognized task parameter prefix: {self.prefix!r}"
        if self.known_prefixes:
            known: str = ", ".join(repr(p) for p in self.known_prefixes)
            text += f" (known prefixes: {known})"
        return text


class ConfigError(BuildParamsError):
    """Invalid, malformed or unreadable configuration."""


class InvalidElementNameError(BuildParamsError, ValueError):
    """A parameter name, metadata key or attribute name is not a valid XML name.

    Such a tree can be built, but serializing it would produce malformed XML
    (e.g. ``<>`` for a message without a name or ``<My Key>`` for a metadata key
    containing a space).

    Attributes:
        name (str): The offending element or attribute name.
    """

    def __init__(self, name: str) -> None:
        self.name: str = name
        super().__init__(f"Cannot render {name!r} as an XML element or attribute name")
