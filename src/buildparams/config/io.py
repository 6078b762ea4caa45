# topmark:header:start
#
#   project      : BuildParams
#   file         : io.py
#   file_relpath : src/buildparams/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load BuildParams configuration from TOML files.

Sources, in order of discovery:
- ``buildparams.toml`` with a top-level ``[render]`` table, and
- ``pyproject.toml`` with a ``[tool.buildparams.render]`` table.

Parsing is done with `tomlkit` and unwrapped into plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from buildparams.config.keys import Toml
from buildparams.config.logging import get_logger
from buildparams.config.model import RenderConfig
from buildparams.constants import DEFAULT_CONFIG_FILE_NAME, PYPROJECT_FILE_NAME
from buildparams.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from buildparams.config.logging import BuildParamsLogger

TomlTable = dict[str, Any]

logger: BuildParamsLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document. Encoding is assumed to be UTF-8.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    data: Any = doc.unwrap()
    return cast("TomlTable", data) if isinstance(data, dict) else {}


def _get_table(table: TomlTable, key: str, source: Path) -> TomlTable:
    """Return sub-table ``key`` of ``table`` (empty when absent)."""
    value: Any = table.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] in {source} must be a table")
    return cast("TomlTable", value)


def extract_render_table(data: TomlTable, source: Path) -> TomlTable:
    """Return the ``[render]`` table of a parsed config document.

    ``pyproject.toml`` documents are read from ``[tool.buildparams]``; any other
    file is read from its top level.
    """
    if source.name == PYPROJECT_FILE_NAME:
        tool: TomlTable = _get_table(data, Toml.SECTION_TOOL, source)
        data = _get_table(tool, Toml.SECTION_TOOL_BUILDPARAMS, source)
    return _get_table(data, Toml.SECTION_RENDER, source)


def load_config(path: Path) -> RenderConfig:
    """Load a `RenderConfig` from ``path``.

    Raises:
        ConfigError: If the file is unreadable, not TOML, or holds invalid settings.
    """
    table: TomlTable = extract_render_table(load_toml_dict(path), path)
    logger.debug("Loaded render config from %s: %r", path, table)
    return RenderConfig.from_toml_table(table)


def discover_config_file(directory: Path) -> Path | None:
    """Return the config file to use in ``directory``, if any.

    ``buildparams.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only
    counts when it holds a ``[tool.buildparams]`` table.
    """
    candidate: Path = directory / DEFAULT_CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate

    pyproject: Path = directory / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        tool: Any = load_toml_dict(pyproject).get(Toml.SECTION_TOOL, {})
        if isinstance(tool, dict) and Toml.SECTION_TOOL_BUILDPARAMS in tool:
            return pyproject

    return None


def resolve_config(config_path: Path | None, directory: Path) -> RenderConfig:
    """Resolve the effective config: explicit file, discovered file, or defaults."""
    path: Path | None = config_path or discover_config_file(directory)
    if path is None:
        logger.debug("No config file found in %s, using defaults", directory)
        return RenderConfig()
    return load_config(path)
