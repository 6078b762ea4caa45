# topmark:header:start
#
#   project      : BuildParams
#   file         : item_list.py
#   file_relpath : src/buildparams/parsing/item_list.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse a prefixed task parameter log message into a name and a list of items.

The build engine logs task parameters, output items, output properties and item
group changes as indented text blocks. Two shapes occur in practice:

Single line, the value is the only item:

```text
Output Property: Configuration=Debug
```

Multi line, one item per line at the base indentation, metadata one level
deeper as ``key=value``:

```text
Task Parameter:
    References=
        lib/Foo.dll
                Private=false
                HintPath=..\\lib\\Foo.dll
        lib/Bar.dll
```

Grammar:
    * The *head* is the remainder of the first line after the prefix. A non-blank
      head is the name line. A blank head is followed either by a name line
      (first non-blank line whose stripped text ends with ``=``) or directly by
      item lines, in which case the name is empty.
    * A name line reads ``Name``, ``Name=`` or ``Name=Value``; a non-empty
      ``Value`` is an inline single item.
    * The base indent is the smallest indentation among the item lines. Lines at
      the base indent start a new item; deeper lines are metadata of the most
      recent item, split on the first ``=`` only.
    * Blank lines are skipped. Metadata before the first item has no owner and is
      discarded.

Parsing is a pure function of ``(message, prefix)``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from buildparams.config.logging import get_logger
from buildparams.constants import NAME_VALUE_DELIMITER, TAB_SIZE
from buildparams.errors import MalformedMessageError
from buildparams.model.item import Item

if TYPE_CHECKING:
    from collections.abc import Sequence

    from buildparams.config.logging import BuildParamsLogger

logger: BuildParamsLogger = get_logger(__name__)

LINE_BREAK_RE: re.Pattern[str] = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\r\\n``, ``\\r`` and ``\\n`` only.

    Unlike `str.splitlines`, other Unicode line boundaries (form feed, NEL,
    U+2028, ...) stay part of the line.
    """
    return LINE_BREAK_RE.split(text)


def _indent_of(line: str) -> int:
    """Return the indentation width of ``line`` (tabs expanded)."""
    expanded: str = line.expandtabs(TAB_SIZE)
    return len(expanded) - len(expanded.lstrip())


def _split_pair(text: str) -> tuple[str, str]:
    """Split ``key=value`` on the first delimiter; a missing delimiter yields an empty value."""
    key, _, value = text.partition(NAME_VALUE_DELIMITER)
    return key.strip(), value.strip()


def _split_name_line(lines: Sequence[str]) -> tuple[str | None, int]:
    """Locate the name line.

    Args:
        lines (Sequence[str]): Payload lines; ``lines[0]`` is the head.

    Returns:
        tuple[str | None, int]: The stripped name line (None when the message has no
            name line) and the index of the first item line.
    """
    head: str = lines[0].strip() if lines else ""
    if head:
        return head, 1

    for index in range(1, len(lines)):
        candidate: str = lines[index].strip()
        if not candidate:
            continue
        if candidate.endswith(NAME_VALUE_DELIMITER):
            return candidate, index + 1
        break

    return None, 1


def _parse_items(lines: Sequence[str]) -> list[Item]:
    """Turn indented item and metadata lines into items, in source order."""
    content: list[str] = [line for line in lines if line.strip()]
    if not content:
        return []

    base_indent: int = min(_indent_of(line) for line in content)
    items: list[Item] = []
    current: Item | None = None

    for line in content:
        text: str = line.strip()
        if _indent_of(line) <= base_indent:
            current = Item(text=text)
            items.append(current)
            logger.trace("item: %r", text)
            continue

        if current is None:
            logger.debug("Discarding metadata line without an owning item: %r", text)
            continue

        key, value = _split_pair(text)
        logger.trace("metadata of %r: %r=%r", current.text, key, value)
        current.add_metadata(key, value)

    return items


def parse_item_list(message: str, prefix: str) -> tuple[tuple[Item, ...], str]:
    """Parse a log message into its ordered items and its name.

    Args:
        message (str): The complete log message, starting with ``prefix``.
        prefix (str): The literal message prefix (e.g. ``"Output Item(s): "``).

    Returns:
        tuple[tuple[Item, ...], str]: The items in source order and the parameter,
            property or item group name (empty when the message carries none).

    Raises:
        MalformedMessageError: If ``message`` does not start with ``prefix``.
    """
    if not message.startswith(prefix):
        raise MalformedMessageError(message, prefix)

    lines: list[str] = split_lines(message[len(prefix) :])
    name_line, first_item_index = _split_name_line(lines)

    name: str = ""
    items: list[Item] = []
    if name_line is not None:
        name, inline_value = _split_pair(name_line)
        if inline_value:
            items.append(Item(text=inline_value))

    items.extend(_parse_items(lines[first_item_index:]))

    logger.debug("Parsed %r: name=%r, %d item(s)", prefix, name, len(items))
    return tuple(items), name
