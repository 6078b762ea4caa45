# topmark:header:start
#
#   project      : BuildParams
#   file         : prefixes.py
#   file_relpath : src/buildparams/cli/commands/prefixes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildParams `prefixes` command.

Lists the message prefixes and the parameter variant each one dispatches to.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from buildparams.cli.options import output_format_option
from buildparams.model.parameter import VARIANTS
from buildparams.rendering.formats import OutputFormat

if TYPE_CHECKING:
    from buildparams.cli.console import ClickConsole


@click.command(name="prefixes", help="List the recognized message prefixes.")
@output_format_option
@click.pass_context
def prefixes_command(ctx: click.Context, *, output_format: OutputFormat) -> None:
    """List the recognized message prefixes and their variants."""
    console: ClickConsole = ctx.obj["console"]

    rows: list[dict[str, object]] = [
        {
            "prefix": prefix,
            "kind": variant.kind.value,
            "item_attribute_name": variant.item_attribute_name,
            "collapse_single_item": variant.collapse_single_item,
        }
        for prefix, variant in VARIANTS.items()
    ]

    if output_format == OutputFormat.JSON:
        console.print(json.dumps(rows, indent=2))
        return
    if output_format == OutputFormat.NDJSON:
        for row in rows:
            console.print(json.dumps(row))
        return

    width: int = max(len(repr(prefix)) for prefix in VARIANTS)
    for prefix, variant in VARIANTS.items():
        console.print(
            f"{console.styled(repr(prefix).ljust(width), bold=True)}  "
            f"{variant.kind.value} ({variant.item_attribute_name})"
        )
