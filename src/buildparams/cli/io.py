# topmark:header:start
#
#   project      : BuildParams
#   file         : io.py
#   file_relpath : src/buildparams/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input/output helpers for CLI commands (file or STDIN in, file or STDOUT out)."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from buildparams.cli.errors import BuildParamsFileNotFoundError, BuildParamsIOError
from buildparams.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from buildparams.cli.console import ClickConsole
    from buildparams.config.logging import BuildParamsLogger

logger: BuildParamsLogger = get_logger(__name__)

STDIN_DASH: str = "-"


def read_source(source: Path) -> str:
    """Return the text of ``source``; ``-`` reads STDIN.

    Raises:
        BuildParamsFileNotFoundError: If ``source`` does not exist.
        BuildParamsIOError: If ``source`` cannot be read or decoded.
    """
    if str(source) == STDIN_DASH:
        logger.debug("Reading log text from STDIN")
        return sys.stdin.read()

    try:
        return source.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise BuildParamsFileNotFoundError(f"No such file: {source}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildParamsIOError(f"Cannot read {source}: {exc}") from exc


def write_result(
    text: str, output_path: Path | None, console: ClickConsole, encoding: str = "utf-8"
) -> None:
    """Write ``text`` to ``output_path`` or print it to the console.

    Raises:
        BuildParamsIOError: If the output file cannot be written.
    """
    if output_path is None:
        console.print(text)
        return

    try:
        output_path.write_text(text + "\n", encoding=encoding)
    except (OSError, LookupError) as exc:
        raise BuildParamsIOError(f"Cannot write {output_path}: {exc}") from exc
    logger.debug("Wrote %d characters to %s", len(text), output_path)
