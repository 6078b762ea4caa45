# topmark:header:start
#
#   project      : BuildParams
#   file         : parameter.py
#   file_relpath : src/buildparams/model/parameter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Task parameters and the prefix-based variant dispatch.

The parameter kinds (task input parameter, output item, output property and item
group include/remove) differ only in configuration, so they are expressed as data:

Sections:
    * ParameterKind: the closed set of parameter kinds.
    * ParameterVariant: immutable descriptor (kind, item attribute name, collapse flag).
    * VARIANTS: read-only mapping from message prefix to variant.
    * TaskParameter: one concrete parameter type configured by a variant.
    * create: look up the variant for a prefix and parse the message with it.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from buildparams.config.logging import get_logger
from buildparams.constants import (
    INCLUDE_ATTRIBUTE,
    ITEM_GROUP_INCLUDE_MESSAGE_PREFIX,
    ITEM_GROUP_REMOVE_MESSAGE_PREFIX,
    OUTPUT_ITEMS_MESSAGE_PREFIX,
    OUTPUT_PROPERTY_MESSAGE_PREFIX,
    REMOVE_ATTRIBUTE,
    TASK_PARAMETER_MESSAGE_PREFIX,
)
from buildparams.errors import UnrecognizedPrefixError
from buildparams.parsing.item_list import parse_item_list

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from buildparams.config.logging import BuildParamsLogger
    from buildparams.model.item import Item

logger: BuildParamsLogger = get_logger(__name__)


class ParameterKind(Enum):
    """Kinds of task parameters found in build logs."""

    INPUT_PARAMETER = "input_parameter"
    OUTPUT_ITEM = "output_item"
    OUTPUT_PROPERTY = "output_property"
    ITEM_GROUP = "item_group"


@dataclass(frozen=True, slots=True)
class ParameterVariant:
    """Immutable configuration of a parameter kind.

    Attributes:
        kind (ParameterKind): The parameter kind.
        item_attribute_name (str): Attribute naming each serialized item element.
        collapse_single_item (bool): Render a single metadata-free item as element text.
    """

    kind: ParameterKind
    item_attribute_name: str = INCLUDE_ATTRIBUTE
    collapse_single_item: bool = True


INPUT_PARAMETER = ParameterVariant(ParameterKind.INPUT_PARAMETER)
OUTPUT_ITEM = ParameterVariant(ParameterKind.OUTPUT_ITEM)
OUTPUT_PROPERTY = ParameterVariant(ParameterKind.OUTPUT_PROPERTY)
ITEM_GROUP_INCLUDE = ParameterVariant(ParameterKind.ITEM_GROUP, INCLUDE_ATTRIBUTE)
ITEM_GROUP_REMOVE = ParameterVariant(ParameterKind.ITEM_GROUP, REMOVE_ATTRIBUTE)

VARIANTS: Mapping[str, ParameterVariant] = MappingProxyType(
    {
        OUTPUT_ITEMS_MESSAGE_PREFIX: OUTPUT_ITEM,
        TASK_PARAMETER_MESSAGE_PREFIX: INPUT_PARAMETER,
        OUTPUT_PROPERTY_MESSAGE_PREFIX: OUTPUT_PROPERTY,
        ITEM_GROUP_INCLUDE_MESSAGE_PREFIX: ITEM_GROUP_INCLUDE,
        ITEM_GROUP_REMOVE_MESSAGE_PREFIX: ITEM_GROUP_REMOVE,
    }
)


@dataclass
class TaskParameter:
    """A task input/output parameter or item group with its items.

    Build one either from a log message (`TaskParameter.parse`, or `create` to
    dispatch on the prefix) or empty, then populate it with `add_item`.

    Attributes:
        name (str): Parameter, property or item group name.
        variant (ParameterVariant): Kind and serialization policy; assigning it after
            construction raises `dataclasses.FrozenInstanceError`.
    """

    name: str = ""
    variant: ParameterVariant = INPUT_PARAMETER
    _items: list[Item] = field(default_factory=lambda: [], repr=False)

    def __setattr__(self, name: str, value: object) -> None:
        """Reject reassigning ``variant`` once it has been set."""
        if name == "variant" and "variant" in self.__dict__:
            raise FrozenInstanceError("TaskParameter.variant is fixed at construction")
        super().__setattr__(name, value)

    @classmethod
    def parse(cls, message: str, prefix: str, variant: ParameterVariant) -> TaskParameter:
        """Parse ``message`` eagerly and return a parameter configured by ``variant``.

        Args:
            message (str): The log message.
            prefix (str): The literal prefix at the start of ``message``.
            variant (ParameterVariant): The parameter configuration.

        Returns:
            TaskParameter: The populated parameter.

        Raises:
            MalformedMessageError: If ``message`` does not start with ``prefix``.
        """
        items, name = parse_item_list(message, prefix)
        parameter = cls(name=name, variant=variant)
        for item in items:
            parameter.add_item(item)
        return parameter

    def add_item(self, item: Item) -> None:
        """Append an item; items keep the order in which they were added."""
        self._items.append(item)

    def add_items(self, items: Iterable[Item]) -> None:
        """Append several items in order."""
        self._items.extend(items)

    @property
    def items(self) -> tuple[Item, ...]:
        """Return the items in source order."""
        return tuple(self._items)

    @property
    def kind(self) -> ParameterKind:
        """Return the parameter kind."""
        return self.variant.kind

    @property
    def item_attribute_name(self) -> str:
        """Return the attribute name used for serialized item elements."""
        return self.variant.item_attribute_name

    @property
    def collapse_single_item(self) -> bool:
        """Return True if a single metadata-free item renders as element text."""
        return self.variant.collapse_single_item

    @property
    def is_collapsible(self) -> bool:
        """Return True if this parameter renders as a flat element with text content."""
        return (
            self.collapse_single_item and len(self._items) == 1 and not self._items[0].has_metadata
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of the parameter and its items."""
        return {
            "name": self.name,
            "kind": self.kind.value,
            "item_attribute_name": self.item_attribute_name,
            "items": [item.to_dict() for item in self._items],
        }


def variant_for(prefix: str) -> ParameterVariant:
    """Return the variant registered for ``prefix``.

    Raises:
        UnrecognizedPrefixError: If no variant is registered for ``prefix``.
    """
    try:
        return VARIANTS[prefix]
    except KeyError:
        raise UnrecognizedPrefixError(prefix, VARIANTS.keys()) from None


def create(message: str, prefix: str) -> TaskParameter:
    """Create the task parameter for a log message based on its prefix.

    Args:
        message (str): The message string from the logger.
        prefix (str): The prefix of the message string; must be one of `VARIANTS`.

    Returns:
        TaskParameter: The parsed parameter.

    Raises:
        UnrecognizedPrefixError: If ``prefix`` has no registered variant.
        MalformedMessageError: If ``message`` does not start with ``prefix``.
    """
    variant: ParameterVariant = variant_for(prefix)
    logger.debug("Prefix %r dispatched to %s", prefix, variant.kind.name)
    return TaskParameter.parse(message, prefix, variant)
