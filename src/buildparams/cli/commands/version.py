# topmark:header:start
#
#   project      : BuildParams
#   file         : version.py
#   file_relpath : src/buildparams/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildParams `version` command.

Prints the BuildParams version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from buildparams.cli.options import output_format_option
from buildparams.constants import BUILDPARAMS_VERSION
from buildparams.rendering.formats import OutputFormat

if TYPE_CHECKING:
    from buildparams.cli.console import ClickConsole


@click.command(name="version", help="Show the current version of BuildParams.")
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat) -> None:
    """Show the current version of BuildParams."""
    console: ClickConsole = ctx.obj["console"]

    if output_format in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": BUILDPARAMS_VERSION}))
    else:
        console.print(console.styled(BUILDPARAMS_VERSION, bold=True))
