# topmark:header:start
#
#   project      : BuildParams
#   file         : __init__.py
#   file_relpath : src/buildparams/parsing/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parsing of task parameter log messages.

Public modules:
    - buildparams.parsing.item_list
    - buildparams.parsing.scanner
"""

from __future__ import annotations
