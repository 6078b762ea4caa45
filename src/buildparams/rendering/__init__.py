# topmark:header:start
#
#   project      : BuildParams
#   file         : __init__.py
#   file_relpath : src/buildparams/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of parsed task parameters.

Public modules:
    - buildparams.rendering.xml
    - buildparams.rendering.formats
"""

from __future__ import annotations
