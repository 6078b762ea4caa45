# topmark:header:start
#
#   project      : BuildParams
#   file         : render.py
#   file_relpath : src/buildparams/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildParams `render` command.

Scans a build log for task parameter messages and renders every one of them.
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
from buildparams.config.logging import get_logger
from buildparams.errors import BuildParamsError
from buildparams.model.parameter import create
from buildparams.parsing.scanner import iter_messages

if TYPE_CHECKING:
    from buildparams.cli.console import ClickConsole
    from buildparams.config.logging import BuildParamsLogger
    from buildparams.config.model import RenderConfig
    from buildparams.model.parameter import TaskParameter
    from buildparams.rendering.formats import OutputFormat

logger: BuildParamsLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Render the task parameters found in a build log (SOURCE, or '-' for STDIN).",
)
@input_output_options
@output_format_option
@config_option
@click.option(
    "--root",
    "root_element",
    type=str,
    default=None,
    help="Name of the XML root element (overrides the configuration).",
)
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    source: Path,
    output_path: Path | None,
    output_format: OutputFormat,
    config_path: Path | None,
    root_element: str | None,
) -> None:
    """Render all task parameter messages of a build log."""
    console: ClickConsole = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    try:
        config: RenderConfig = resolve_config(config_path, Path.cwd()).with_overrides(
            {"root_element": root_element}
        )
        text: str = read_source(source)
        parameters: list[TaskParameter] = [
            create(message, prefix) for message, prefix in iter_messages(text)
        ]
    except BuildParamsError as exc:
        raise from_library_error(exc) from exc

    logger.info("Found %d task parameter message(s) in %s", len(parameters), source)
    emit_parameters(
        parameters,
        output_format=output_format,
        config=config,
        output_path=output_path,
        console=console,
    )
    emit_summary(parameters, output_path=output_path, verbosity=verbosity, console=console)
