# topmark:header:start
#
#   project      : BuildParams
#   file         : __init__.py
#   file_relpath : src/buildparams/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildParams package.

BuildParams turns the task parameter messages a build engine writes to its log
(task inputs, output items, output properties, item group include/remove) into
typed `TaskParameter` objects and renders them as XML elements.

Example:
    ```python
    import xml.etree.ElementTree as ET

    from buildparams import OUTPUT_ITEMS_MESSAGE_PREFIX, create, save_to_element

    message = "Output Item(s): \\n    Foo.dll\\n        Culture=en-US"
    parameter = create(message, OUTPUT_ITEMS_MESSAGE_PREFIX)
    root = ET.Element("Task")
    save_to_element(parameter, root)
    ```
"""

from __future__ import annotations

from buildparams.constants import (
    ITEM_GROUP_INCLUDE_MESSAGE_PREFIX,
    ITEM_GROUP_REMOVE_MESSAGE_PREFIX,
    OUTPUT_ITEMS_MESSAGE_PREFIX,
    OUTPUT_PROPERTY_MESSAGE_PREFIX,
    TASK_PARAMETER_MESSAGE_PREFIX,
)
from buildparams.errors import (
    BuildParamsError,
    ConfigError,
    InvalidElementNameError,
    MalformedMessageError,
    UnrecognizedPrefixError,
)
from buildparams.model.item import Item
from buildparams.model.parameter import (
    VARIANTS,
    ParameterKind,
    ParameterVariant,
    TaskParameter,
    create,
)
from buildparams.parsing.item_list import parse_item_list
from buildparams.rendering.xml import save_to_element

__all__ = [
    "ITEM_GROUP_INCLUDE_MESSAGE_PREFIX",
    "ITEM_GROUP_REMOVE_MESSAGE_PREFIX",
    "OUTPUT_ITEMS_MESSAGE_PREFIX",
    "OUTPUT_PROPERTY_MESSAGE_PREFIX",
    "TASK_PARAMETER_MESSAGE_PREFIX",
    "VARIANTS",
    "BuildParamsError",
    "ConfigError",
    "InvalidElementNameError",
    "Item",
    "MalformedMessageError",
    "ParameterKind",
    "ParameterVariant",
    "TaskParameter",
    "UnrecognizedPrefixError",
    "create",
    "parse_item_list",
    "save_to_element",
]
