# topmark:header:start
#
#   project      : BuildParams
#   file         : test_scanner.py
#   file_relpath : tests/parsing/test_scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for splitting a build log into ``(message, prefix)`` pairs."""

from __future__ import annotations

from buildparams.constants import (
    ITEM_GROUP_REMOVE_MESSAGE_PREFIX,
    OUTPUT_ITEMS_MESSAGE_PREFIX,
    OUTPUT_PROPERTY_MESSAGE_PREFIX,
    TASK_PARAMETER_MESSAGE_PREFIX,
)
from buildparams.parsing.scanner import iter_messages, match_prefix
from tests.conftest import mark_parsing

BUILD_LOG: str = (
    'Using "Csc" task from assembly "Microsoft.Build.Tasks.CodeAnalysis".\n'
    "Task Parameter:\n"
    "    Sources=\n"
    "        Program.cs\n"
    "\n"
    "        Util.cs\n"
    'Done executing task "Csc".\n'
    "Output Property: Configuration=Debug\n"
    "Removed Item(s): \n"
    "    _Temp=\n"
    "        obj/tmp.txt\n"
    "\n"
)


@mark_parsing
def test_iter_messages_splits_log_in_order() -> None:
    """Messages are yielded in log order with their prefixes; other lines are skipped."""
    messages: list[tuple[str, str]] = list(iter_messages(BUILD_LOG))

    assert [prefix for _, prefix in messages] == [
        TASK_PARAMETER_MESSAGE_PREFIX,
        OUTPUT_PROPERTY_MESSAGE_PREFIX,
        ITEM_GROUP_REMOVE_MESSAGE_PREFIX,
    ]
    assert messages[0][0] == (
        "Task Parameter:\n    Sources=\n        Program.cs\n\n        Util.cs"
    )
    assert messages[1][0] == "Output Property: Configuration=Debug"
    assert messages[2][0] == "Removed Item(s): \n    _Temp=\n        obj/tmp.txt"


@mark_parsing
def test_iter_messages_normalizes_crlf() -> None:
    """CRLF line endings become ``\\n`` inside messages."""
    text: str = "Output Item(s): \r\n    Foo.dll\r\n"

    assert list(iter_messages(text)) == [
        ("Output Item(s): \n    Foo.dll", OUTPUT_ITEMS_MESSAGE_PREFIX),
    ]


@mark_parsing
def test_iter_messages_keeps_unicode_line_boundaries_in_lines() -> None:
    """A form feed or NEL inside a line neither ends the message nor splits the line."""
    text: str = "Output Item(s): \n    a\x85b.dll\x0c\n    c.dll\nDone.\n"

    assert list(iter_messages(text)) == [
        ("Output Item(s): \n    a\x85b.dll\x0c\n    c.dll", OUTPUT_ITEMS_MESSAGE_PREFIX),
    ]


@mark_parsing
def test_iter_messages_without_messages() -> None:
    """A log without parameter messages yields nothing."""
    assert list(iter_messages("Build started.\n  indented noise\nBuild succeeded.\n")) == []


@mark_parsing
def test_match_prefix_prefers_longest() -> None:
    """When several candidates match, the longest one wins."""
    assert match_prefix("Task Parameter: X=1", ["Task", "Task Parameter:"]) == "Task Parameter:"
    assert match_prefix("Unrelated line") is None
