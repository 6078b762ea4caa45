# topmark:header:start
#
#   project      : BuildParams
#   file         : options.py
#   file_relpath : src/buildparams/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic.

Reusable options (verbosity, output format, config file) are centralized here so
commands and the group stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from buildparams.cli.errors import BuildParamsUsageError
from buildparams.rendering.formats import OutputFormat

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the -v/-q counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The verbosity: ``-1`` when quiet, ``0`` by default, else the -v count.

    Raises:
        BuildParamsUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise BuildParamsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a --format option selecting an `OutputFormat`."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([v.value for v in OutputFormat], case_sensitive=False),
        default=OutputFormat.XML.value,
        show_default=True,
        callback=lambda _ctx, _param, value: OutputFormat(value.lower()),
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def input_output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the SOURCE argument (``-`` for STDIN) and the -o/--output option."""
    f = click.option(
        "-o",
        "--output",
        "output_path",
        type=click.Path(dir_okay=False, writable=True, path_type=Path),
        default=None,
        help="Write the result to this file instead of STDOUT.",
    )(f)
    f = click.argument(
        "source",
        type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
        default="-",
    )(f)
    return f


def config_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a --config option pointing at a TOML configuration file."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help=(
            "Configuration file (buildparams.toml or pyproject.toml). "
            "Defaults to discovery in the current directory."
        ),
    )(f)
