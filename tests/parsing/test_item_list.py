# topmark:header:start
#
#   project      : BuildParams
#   file         : test_item_list.py
#   file_relpath : tests/parsing/test_item_list.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `parse_item_list`: name line detection, items, metadata and errors."""

from __future__ import annotations

import pytest

from buildparams.constants import (
    ITEM_GROUP_INCLUDE_MESSAGE_PREFIX,
    OUTPUT_ITEMS_MESSAGE_PREFIX,
    OUTPUT_PROPERTY_MESSAGE_PREFIX,
    TASK_PARAMETER_MESSAGE_PREFIX,
)
from buildparams.errors import MalformedMessageError
from buildparams.model.item import Item
from buildparams.parsing.item_list import parse_item_list, split_lines
from tests.conftest import mark_parsing, parametrize


@mark_parsing
def test_output_items_example_without_name() -> None:
    """A blank head followed directly by items yields an empty name."""
    message: str = OUTPUT_ITEMS_MESSAGE_PREFIX + "\n    Foo.dll\n        Culture=en-US"

    items, name = parse_item_list(message, OUTPUT_ITEMS_MESSAGE_PREFIX)

    assert name == ""
    assert items == (Item("Foo.dll", {"Culture": "en-US"}),)


@mark_parsing
def test_multi_line_task_parameter(task_parameter_message: str) -> None:
    """Name line ``References=`` then two items, the first with ordered metadata."""
    items, name = parse_item_list(task_parameter_message, TASK_PARAMETER_MESSAGE_PREFIX)

    assert name == "References"
    assert [item.text for item in items] == ["lib/Foo.dll", "lib/Bar.dll"]
    assert list(items[0].metadata.items()) == [
        ("Private", "false"),
        ("HintPath", "..\\lib\\Foo.dll"),
    ]
    assert items[1].metadata == {}


@mark_parsing
def test_single_line_property_value_is_the_only_item() -> None:
    """``Name=Value`` on the prefix line is a name plus one inline item."""
    items, name = parse_item_list(
        OUTPUT_PROPERTY_MESSAGE_PREFIX + "Configuration=Debug", OUTPUT_PROPERTY_MESSAGE_PREFIX
    )

    assert name == "Configuration"
    assert items == (Item("Debug"),)


@mark_parsing
def test_name_on_prefix_line_with_items_below() -> None:
    """A ``Name=`` head followed by indented items."""
    message: str = ITEM_GROUP_INCLUDE_MESSAGE_PREFIX + "Compile=\n    a.cs\n    b.cs\n"

    items, name = parse_item_list(message, ITEM_GROUP_INCLUDE_MESSAGE_PREFIX)

    assert name == "Compile"
    assert [item.text for item in items] == ["a.cs", "b.cs"]


@mark_parsing
@parametrize(
    "payload",
    [
        "Compile",
        "Compile=",
        "\n    Compile=",
        "Compile=\n\n   \n",
    ],
)
def test_name_only_yields_no_items(payload: str) -> None:
    """A payload with only a name is a valid, empty item list."""
    prefix: str = ITEM_GROUP_INCLUDE_MESSAGE_PREFIX
    items, name = parse_item_list(prefix + payload, prefix)

    assert name == "Compile"
    assert items == ()


@mark_parsing
def test_metadata_value_keeps_later_delimiters() -> None:
    """Only the first ``=`` splits key from value."""
    message: str = TASK_PARAMETER_MESSAGE_PREFIX + "Defines=\n    a\n        Expr=x=1;y=2"

    items, _ = parse_item_list(message, TASK_PARAMETER_MESSAGE_PREFIX)

    assert items[0].metadata == {"Expr": "x=1;y=2"}


@mark_parsing
def test_metadata_before_first_item_is_discarded() -> None:
    """A deeper line with no preceding item has no owner and is dropped."""
    message: str = OUTPUT_ITEMS_MESSAGE_PREFIX + "\n        Orphan=1\n    Foo.dll\n        C=de"

    items, name = parse_item_list(message, OUTPUT_ITEMS_MESSAGE_PREFIX)

    assert name == ""
    assert items == (Item("Foo.dll", {"C": "de"}),)


@mark_parsing
def test_blank_lines_between_items_are_skipped() -> None:
    """Blank and whitespace-only lines do not create items or end metadata."""
    message: str = (
        TASK_PARAMETER_MESSAGE_PREFIX
        + "\n    Files=\n        a.txt\n\n            Kind=x\n   \n        b.txt"
    )

    items, _ = parse_item_list(message, TASK_PARAMETER_MESSAGE_PREFIX)

    assert items == (Item("a.txt", {"Kind": "x"}), Item("b.txt"))


@mark_parsing
def test_crlf_line_endings() -> None:
    """Windows line endings parse like ``\\n``."""
    message: str = TASK_PARAMETER_MESSAGE_PREFIX + "\r\n  Files=\r\n    a.txt\r\n      K=x\r\n"

    items, name = parse_item_list(message, TASK_PARAMETER_MESSAGE_PREFIX)

    assert name == "Files"
    assert items == (Item("a.txt", {"K": "x"}),)


@mark_parsing
@parametrize("separator", ["\x85", "\x0c", "\x0b", "\x1e", "\u2028", "\u2029"])
def test_only_cr_and_lf_break_lines(separator: str) -> None:
    """Other Unicode line boundaries are kept inside the item text."""
    text: str = f"a{separator}b.cs"
    message: str = f"{TASK_PARAMETER_MESSAGE_PREFIX}\n    Sources=\n        {text}\n        c.cs\n"

    items, name = parse_item_list(message, TASK_PARAMETER_MESSAGE_PREFIX)

    assert name == "Sources"
    assert items == (Item(text), Item("c.cs"))


@mark_parsing
@parametrize("newline", ["\n", "\r\n", "\r"])
def test_split_lines_breaks_on_cr_and_lf(newline: str) -> None:
    """`split_lines` recognizes ``\\n``, ``\\r\\n`` and ``\\r`` only."""
    assert split_lines(f"a\x85b{newline}c\u2028d") == ["a\x85b", "c\u2028d"]


@mark_parsing
def test_tabs_count_as_indentation() -> None:
    """Tab-indented metadata is attached to the preceding item."""
    message: str = TASK_PARAMETER_MESSAGE_PREFIX + "Files=\n\ta.txt\n\t\tKind=x"

    items, _ = parse_item_list(message, TASK_PARAMETER_MESSAGE_PREFIX)

    assert items == (Item("a.txt", {"Kind": "x"}),)


@mark_parsing
def test_metadata_line_without_delimiter_has_empty_value() -> None:
    """A deeper line without ``=`` is a key with an empty value."""
    message: str = TASK_PARAMETER_MESSAGE_PREFIX + "Files=\n    a.txt\n        Flag"

    items, _ = parse_item_list(message, TASK_PARAMETER_MESSAGE_PREFIX)

    assert items[0].metadata == {"Flag": ""}


@mark_parsing
def test_repeated_metadata_key_keeps_position_takes_last_value() -> None:
    """Keys stay unique; the last value wins in the first position."""
    message: str = TASK_PARAMETER_MESSAGE_PREFIX + "F=\n  a\n    K=1\n    J=2\n    K=3"

    items, _ = parse_item_list(message, TASK_PARAMETER_MESSAGE_PREFIX)

    assert list(items[0].metadata.items()) == [("K", "3"), ("J", "2")]


@mark_parsing
def test_parsing_is_deterministic(task_parameter_message: str) -> None:
    """Identical input yields identical output."""
    first = parse_item_list(task_parameter_message, TASK_PARAMETER_MESSAGE_PREFIX)
    second = parse_item_list(task_parameter_message, TASK_PARAMETER_MESSAGE_PREFIX)

    assert first == second


@mark_parsing
def test_message_without_prefix_raises() -> None:
    """A message that does not start with the prefix is malformed."""
    message: str = "Output Item(s):\n    Foo.dll"

    with pytest.raises(MalformedMessageError) as excinfo:
        parse_item_list(message, OUTPUT_ITEMS_MESSAGE_PREFIX)

    assert excinfo.value.prefix == OUTPUT_ITEMS_MESSAGE_PREFIX
    assert excinfo.value.message == message
    assert "Output Item(s): " in str(excinfo.value)


@mark_parsing
def test_output_items_prefix_requires_trailing_space() -> None:
    """``"Output Item(s):"`` without the trailing space is not the output items prefix."""
    message: str = "Output Item(s):\n    Foo.dll\n        Culture=en-US"

    with pytest.raises(MalformedMessageError):
        parse_item_list(message, OUTPUT_ITEMS_MESSAGE_PREFIX)
