# topmark:header:start
#
#   project      : BuildParams
#   file         : model.py
#   file_relpath : src/buildparams/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable render configuration.

`RenderConfig` is a frozen snapshot; build a modified copy with
`RenderConfig.with_overrides` rather than mutating one.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

from buildparams.config.keys import Toml
from buildparams.config.logging import get_logger
from buildparams.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from buildparams.config.logging import BuildParamsLogger

logger: BuildParamsLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Settings for rendering parsed parameters as an XML document.

    Attributes:
        root_element (str): Name of the document root element.
        indent (str): Indentation unit for pretty printing; empty disables it.
        xml_declaration (bool): Emit an ``<?xml ...?>`` declaration.
        encoding (str): Encoding named in the declaration and used when writing files.
    """

    root_element: str = "TaskParameters"
    indent: str = "  "
    xml_declaration: bool = False
    encoding: str = "utf-8"

    @classmethod
    def from_toml_table(cls, table: Mapping[str, Any]) -> RenderConfig:
        """Build a config from a ``[render]`` table, validating keys and value types.

        Args:
            table (Mapping[str, Any]): The ``[render]`` table (plain values).

        Returns:
            RenderConfig: Defaults overlaid with the values in ``table``.

        Raises:
            ConfigError: On unknown keys or values of the wrong type.
        """
        return cls().with_overrides(table)

    def with_overrides(self, overrides: Mapping[str, Any]) -> RenderConfig:
        """Return a copy with ``overrides`` applied (``None`` values are ignored).

        Raises:
            ConfigError: On unknown keys or values of the wrong type.
        """
        expected: dict[str, type] = {
            Toml.KEY_ROOT_ELEMENT: str,
            Toml.KEY_INDENT: str,
            Toml.KEY_XML_DECLARATION: bool,
            Toml.KEY_ENCODING: str,
        }
        changes: dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in expected:
                raise ConfigError(
                    f"Unknown key {key!r} in [{Toml.SECTION_RENDER}] "
                    f"(expected one of: {', '.join(sorted(expected))})"
                )
            if value is None:
                continue
            if not isinstance(value, expected[key]):
                raise ConfigError(
                    f"[{Toml.SECTION_RENDER}] {key} must be of type {expected[key].__name__}, "
                    f"got {type(value).__name__}"
                )
            changes[key] = value

        if not changes.get(Toml.KEY_ROOT_ELEMENT, self.root_element):
            raise ConfigError(f"[{Toml.SECTION_RENDER}] {Toml.KEY_ROOT_ELEMENT} must not be empty")

        logger.trace("RenderConfig overrides: %r", changes)
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Return the config as a ``[render]`` table mapping."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
