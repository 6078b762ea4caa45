# topmark:header:start
#
#   project      : BuildParams
#   file         : strategies_buildparams.py
#   file_relpath : tests/strategies_buildparams.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating task parameter log messages.

The generated messages follow the multi-line layout the build engine writes:
a ``Name=`` head on the prefix line, items indented four spaces and metadata
indented eight spaces.
"""

from __future__ import annotations

from dataclasses import dataclass

from hypothesis import strategies as st

from buildparams.model.parameter import VARIANTS

ITEM_INDENT: str = " " * 4
METADATA_INDENT: str = " " * 8

_VALUE_ALPHABET: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789./\\-_;:=() "

s_names: st.SearchStrategy[str] = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,10}", fullmatch=True)
s_values: st.SearchStrategy[str] = st.text(_VALUE_ALPHABET, max_size=20).map(str.strip)
s_item_texts: st.SearchStrategy[str] = s_values.filter(bool)


@dataclass(frozen=True)
class MessageSample:
    """A generated message together with the data it encodes."""

    prefix: str
    name: str
    items: tuple[tuple[str, tuple[tuple[str, str], ...]], ...]
    message: str


def render_message(
    prefix: str, name: str, items: tuple[tuple[str, tuple[tuple[str, str], ...]], ...]
) -> str:
    """Lay out ``items`` as a multi-line log message."""
    lines: list[str] = [f"{prefix}{name}="]
    for text, metadata in items:
        lines.append(f"{ITEM_INDENT}{text}")
        lines.extend(f"{METADATA_INDENT}{key}={value}" for key, value in metadata)
    return "\n".join(lines)


@st.composite
def s_messages(draw: st.DrawFn) -> MessageSample:
    """Draw a well-formed message for one of the registered prefixes."""
    prefix: str = draw(st.sampled_from(sorted(VARIANTS)))
    name: str = draw(s_names)
    items: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = tuple(
        (text, tuple(metadata.items()))
        for text, metadata in draw(
            st.lists(
                st.tuples(s_item_texts, st.dictionaries(s_names, s_values, max_size=4)),
                max_size=6,
            )
        )
    )
    return MessageSample(prefix, name, items, render_message(prefix, name, items))
