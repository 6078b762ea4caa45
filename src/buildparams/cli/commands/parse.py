# topmark:header:start
#
#   project      : BuildParams
#   file         : parse.py
#   file_relpath : src/buildparams/cli/commands/parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildParams `parse` command.

Parses a single message with an explicitly given prefix. Unlike `render`, the
prefix is not discovered, so unknown prefixes and messages that do not start
with their prefix are reported with dedicated exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from buildparams.cli.emitters import emit_parameters, emit_summary
from buildparams.cli.errors import from_library_error
from buildparams.cli.io import read_source
from buildparams.cli.options import config_option, input_output_options, output_format_option
from buildparams.config.io import resolve_config
from buildparams.errors import BuildParamsError
from buildparams.model.parameter import create

if TYPE_CHECKING:
    from buildparams.cli.console import ClickConsole
    from buildparams.config.model import RenderConfig
    from buildparams.model.parameter import TaskParameter
    from buildparams.rendering.formats import OutputFormat


@click.command(
    name="parse",
    help="Parse one message (SOURCE, or '-' for STDIN) that starts with PREFIX.",
)
@click.option(
    "-p",
    "--prefix",
    required=True,
    type=str,
    help="Literal message prefix, e.g. 'Task Parameter:' (see 'buildparams prefixes').",
)
@input_output_options
@output_format_option
@config_option
@click.pass_context
def parse_command(
    ctx: click.Context,
    *,
    prefix: str,
    source: Path,
    output_path: Path | None,
    output_format: OutputFormat,
    config_path: Path | None,
) -> None:
    """Parse one message with an explicit prefix."""
    console: ClickConsole = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    try:
        config: RenderConfig = resolve_config(config_path, Path.cwd())
        message: str = read_source(source).rstrip("\r\n")
        parameter: TaskParameter = create(message, prefix)
    except BuildParamsError as exc:
        raise from_library_error(exc) from exc

    emit_parameters(
        [parameter],
        output_format=output_format,
        config=config,
        output_path=output_path,
        console=console,
    )
    emit_summary([parameter], output_path=output_path, verbosity=verbosity, console=console)
