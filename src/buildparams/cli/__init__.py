# topmark:header:start
#
#   project      : BuildParams
#   file         : __init__.py
#   file_relpath : src/buildparams/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for BuildParams."""

from __future__ import annotations
