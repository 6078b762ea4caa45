# topmark:header:start
#
#   project      : BuildParams
#   file         : item.py
#   file_relpath : src/buildparams/model/item.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Item entity: one parsed value (e.g. a file path) plus its metadata.

Items are created while a log message is parsed. Metadata is appended during
construction only; afterwards the item is treated as immutable by convention.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from buildparams.config.logging import get_logger

if TYPE_CHECKING:
    from buildparams.config.logging import BuildParamsLogger

logger: BuildParamsLogger = get_logger(__name__)


@dataclass
class Item:
    """A single item with its primary text and insertion-ordered metadata.

    Attributes:
        text (str): The item's primary value and identity (never None, may be empty).
        metadata (dict[str, str]): Metadata entries in insertion order; keys are unique.
    """

    text: str = ""
    metadata: dict[str, str] = field(default_factory=lambda: {})

    def add_metadata(self, key: str, value: str) -> None:
        """Add a metadata entry.

        A repeated key keeps its original position and takes the new value.

        Args:
            key (str): Metadata name.
            value (str): Metadata value.
        """
        if key in self.metadata:
            logger.debug(
                "Item %r: metadata %r redefined (%r -> %r)",
                self.text,
                key,
                self.metadata[key],
                value,
            )
        self.metadata[key] = value

    @property
    def has_metadata(self) -> bool:
        """Return True if the item carries at least one metadata entry."""
        return bool(self.metadata)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping (``text`` and ``metadata``)."""
        return {"text": self.text, "metadata": dict(self.metadata)}
