# topmark:header:start
#
#   project      : BuildParams
#   file         : __init__.py
#   file_relpath : src/buildparams/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory model of task parameters parsed from build logs.

Included modules:

- ``item``
  The `Item` entity: a text value plus insertion-ordered metadata.

- ``parameter``
  `TaskParameter`, the `ParameterVariant` descriptors and the prefix dispatch
  table used by `create`.
"""

from __future__ import annotations
