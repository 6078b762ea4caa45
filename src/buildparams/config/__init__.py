# topmark:header:start
#
#   project      : BuildParams
#   file         : __init__.py
#   file_relpath : src/buildparams/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for BuildParams.

Render settings are read from ``buildparams.toml`` or ``[tool.buildparams]`` in
``pyproject.toml`` (see `buildparams.config.io`) into an immutable `RenderConfig`.
The log level is taken from the ``BUILDPARAMS_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

from buildparams.config.model import RenderConfig

__all__ = [
    "RenderConfig",
]
