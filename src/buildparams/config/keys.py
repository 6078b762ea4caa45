# topmark:header:start
#
#   project      : BuildParams
#   file         : keys.py
#   file_relpath : src/buildparams/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for BuildParams configuration.

Keys defined here are the external configuration API as it appears in
``buildparams.toml`` and in ``[tool.buildparams]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by BuildParams configuration."""

    # [tool.buildparams] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_BUILDPARAMS: Final[str] = "buildparams"

    # [render]
    SECTION_RENDER: Final[str] = "render"

    KEY_ROOT_ELEMENT: Final[str] = "root_element"
    KEY_INDENT: Final[str] = "indent"
    KEY_XML_DECLARATION: Final[str] = "xml_declaration"
    KEY_ENCODING: Final[str] = "encoding"
