# topmark:header:start
#
#   project      : BuildParams
#   file         : __init__.py
#   file_relpath : src/buildparams/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildParams CLI subcommands."""

from __future__ import annotations
