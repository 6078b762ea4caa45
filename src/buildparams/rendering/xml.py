# topmark:header:start
#
#   project      : BuildParams
#   file         : xml.py
#   file_relpath : src/buildparams/rendering/xml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render task parameters as XML elements.

A parameter becomes one element named after the parameter. Its items become
nested elements whose identifying attribute is the parameter's item attribute
name (``Include`` or ``Remove``), with one child element per metadata entry:

```xml
<References>
  <Item Include="lib/Foo.dll">
    <Private>false</Private>
  </Item>
  <Item Include="lib/Bar.dll" />
</References>
```

A single item without metadata collapses into the element text
(``<Configuration>Debug</Configuration>``) when the parameter allows it.
Rendering order always matches item order and metadata insertion order.
"""

from __future__ import annotations

import copy
import re
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from buildparams.config.logging import get_logger
from buildparams.constants import ITEM_ELEMENT_NAME
from buildparams.errors import InvalidElementNameError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from buildparams.config.logging import BuildParamsLogger
    from buildparams.config.model import RenderConfig
    from buildparams.model.item import Item
    from buildparams.model.parameter import TaskParameter

logger: BuildParamsLogger = get_logger(__name__)

# Letter or underscore, then letters, digits, underscores, dots or hyphens (no colon:
# prefixed names would need a namespace declaration).
XML_NAME_RE: re.Pattern[str] = re.compile(r"[^\W\d][\w.\-]*")


def save_item_to_element(item: Item, parent: ET.Element, item_attribute_name: str) -> ET.Element:
    """Append ``item`` as a nested item element under ``parent``.

    Args:
        item (Item): The item to render.
        parent (ET.Element): The parameter element.
        item_attribute_name (str): Name of the attribute carrying ``item.text``.

    Returns:
        ET.Element: The new item element.
    """
    element: ET.Element = ET.SubElement(parent, ITEM_ELEMENT_NAME, {item_attribute_name: item.text})
    for key, value in item.metadata.items():
        ET.SubElement(element, key).text = value
    return element


def save_to_element(parameter: TaskParameter, parent: ET.Element) -> ET.Element:
    """Append exactly one element named after ``parameter`` to ``parent``.

    Args:
        parameter (TaskParameter): The parameter to render.
        parent (ET.Element): The element to attach the parameter element to.

    Returns:
        ET.Element: The new parameter element.
    """
    element: ET.Element = ET.SubElement(parent, parameter.name)

    if parameter.is_collapsible:
        element.text = parameter.items[0].text
        logger.trace("Collapsed %r into text %r", parameter.name, element.text)
        return element

    for item in parameter.items:
        save_item_to_element(item, element, parameter.item_attribute_name)
    return element


def render_parameters(parameters: Iterable[TaskParameter], config: RenderConfig) -> ET.Element:
    """Render ``parameters`` in order under a new root element.

    Args:
        parameters (Iterable[TaskParameter]): The parameters to render.
        config (RenderConfig): Provides the root element name.

    Returns:
        ET.Element: The root element.
    """
    root: ET.Element = ET.Element(config.root_element)
    count: int = 0
    for parameter in parameters:
        save_to_element(parameter, root)
        count += 1
    logger.debug("Rendered %d parameter(s) under <%s>", count, config.root_element)
    return root


def check_names(root: ET.Element) -> None:
    """Verify every element and attribute name under ``root`` is a valid XML name.

    Raises:
        InvalidElementNameError: For the first invalid name in document order.
    """
    for element in root.iter():
        for name in (element.tag, *element.attrib):
            if not XML_NAME_RE.fullmatch(name):
                raise InvalidElementNameError(name)


def to_xml_text(root: ET.Element, config: RenderConfig) -> str:
    """Serialize ``root`` to text according to ``config``.

    Pretty printing is applied to a copy so the caller's tree is left untouched.

    Args:
        root (ET.Element): The element to serialize.
        config (RenderConfig): Indentation and declaration settings.

    Returns:
        str: The XML document text.

    Raises:
        InvalidElementNameError: If a name in the tree cannot be serialized as XML.
    """
    check_names(root)

    tree = ET.ElementTree(root)
    if config.indent:
        tree = ET.ElementTree(copy.deepcopy(root))
        ET.indent(tree, space=config.indent)

    text: str = ET.tostring(tree.getroot(), encoding="unicode")
    if config.xml_declaration:
        text = f'<?xml version="1.0" encoding="{config.encoding}"?>\n{text}'
    return text
