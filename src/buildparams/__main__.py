# topmark:header:start
#
#   project      : BuildParams
#   file         : __main__.py
#   file_relpath : src/buildparams/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running BuildParams via ``python -m buildparams``.

Equivalent to running the ``buildparams`` console script.
"""

from __future__ import annotations

from buildparams.cli.main import cli

if __name__ == "__main__":
    cli()
