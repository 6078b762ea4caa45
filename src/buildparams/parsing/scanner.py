# topmark:header:start
#
#   project      : BuildParams
#   file         : scanner.py
#   file_relpath : src/buildparams/parsing/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Split a build log into task parameter messages.

A message starts at a line beginning with a known prefix and continues over the
following blank or indented lines. Any other unindented line ends the message
and is skipped:

```text
Task Parameter:
    Sources=
        Program.cs
Done executing task "Csc".            <- not a message, skipped
Output Property: Configuration=Debug
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildparams.config.logging import get_logger
from buildparams.model.parameter import VARIANTS
from buildparams.parsing.item_list import split_lines

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from buildparams.config.logging import BuildParamsLogger

logger: BuildParamsLogger = get_logger(__name__)


def match_prefix(line: str, prefixes: Iterable[str] | None = None) -> str | None:
    """Return the longest of ``prefixes`` that ``line`` starts with, or None.

    Args:
        line (str): A log line.
        prefixes (Iterable[str] | None): Candidate prefixes; defaults to the registered ones.
    """
    candidates: Iterable[str] = VARIANTS.keys() if prefixes is None else prefixes
    matches: list[str] = [p for p in candidates if line.startswith(p)]
    return max(matches, key=len) if matches else None


def _is_continuation(line: str) -> bool:
    return not line.strip() or line[0] in " \t"


def _join(lines: list[str]) -> str:
    """Join message lines, dropping trailing blank lines."""
    end: int = len(lines)
    while end > 1 and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[:end])


def iter_messages(text: str) -> Iterator[tuple[str, str]]:
    """Yield ``(message, prefix)`` pairs in log order.

    Line endings inside the yielded messages are normalized to ``\\n`` and
    trailing blank lines are dropped.

    Args:
        text (str): The build log text.

    Yields:
        tuple[str, str]: A complete message and the prefix it starts with.
    """
    current: list[str] = []
    prefix: str | None = None

    for line in split_lines(text):
        if prefix is not None and _is_continuation(line):
            current.append(line)
            continue

        if prefix is not None:
            yield _join(current), prefix

        prefix = match_prefix(line)
        current = [line] if prefix is not None else []
        if prefix is None and line.strip():
            logger.trace("Skipping log line: %r", line)

    if prefix is not None:
        yield _join(current), prefix
