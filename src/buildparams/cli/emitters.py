# topmark:header:start
#
#   project      : BuildParams
#   file         : emitters.py
#   file_relpath : src/buildparams/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Emit parsed task parameters in the requested output format."""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildparams.cli.errors import from_library_error
from buildparams.cli.io import write_result
from buildparams.errors import BuildParamsError
from buildparams.rendering.formats import OutputFormat, to_json_text, to_ndjson_lines
from buildparams.rendering.xml import render_parameters, to_xml_text

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from buildparams.cli.console import ClickConsole
    from buildparams.config.model import RenderConfig
    from buildparams.model.parameter import TaskParameter


def emit_parameters(
    parameters: Sequence[TaskParameter],
    *,
    output_format: OutputFormat,
    config: RenderConfig,
    output_path: Path | None,
    console: ClickConsole,
) -> None:
    """Render ``parameters`` and write them to ``output_path`` or STDOUT.

    Args:
        parameters (Sequence[TaskParameter]): Parameters in log order.
        output_format (OutputFormat): XML document, JSON array or NDJSON lines.
        config (RenderConfig): Render settings (XML only, plus output encoding).
        output_path (Path | None): Destination file; None prints to STDOUT.
        console (ClickConsole): Program-output console.

    Raises:
        BuildParamsDataError: If a parameter name or metadata key is not a valid XML name.
    """
    if output_format == OutputFormat.JSON:
        text: str = to_json_text(parameters)
    elif output_format == OutputFormat.NDJSON:
        text = "\n".join(to_ndjson_lines(parameters))
    else:
        try:
            text = to_xml_text(render_parameters(parameters, config), config)
        except BuildParamsError as exc:
            raise from_library_error(exc) from exc

    write_result(text, output_path, console, encoding=config.encoding)


def emit_summary(
    parameters: Sequence[TaskParameter],
    *,
    output_path: Path | None,
    verbosity: int,
    console: ClickConsole,
) -> None:
    """Report what was written when the document went to a file.

    STDOUT carries the document itself, so nothing is reported there. At the
    default verbosity one line names the file; ``-v`` lists every parameter and
    ``-q`` suppresses the report.
    """
    if output_path is None or verbosity < 0:
        return

    console.print(f"Wrote {len(parameters)} task parameter(s) to {output_path}")
    if verbosity > 0:
        for parameter in parameters:
            console.print(
                f"  {console.styled(parameter.name or '(unnamed)', bold=True)}"
                f"  {parameter.kind.value}, {len(parameter.items)} item(s)"
            )
