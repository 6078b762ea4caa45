# topmark:header:start
#
#   project      : BuildParams
#   file         : main.py
#   file_relpath : src/buildparams/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildParams command line entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

import click

from buildparams.cli.commands.parse import parse_command
from buildparams.cli.commands.prefixes import prefixes_command
from buildparams.cli.commands.render import render_command
from buildparams.cli.commands.version import version_command
from buildparams.cli.console import ClickConsole
from buildparams.cli.options import common_verbose_options, resolve_verbosity
from buildparams.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize shared state (verbosity, logging, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="BuildParams: parse build log task parameters and render them as XML.",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the BuildParams CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'buildparams render [LOGFILE]' to render a build log.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)
cli.add_command(parse_command)
cli.add_command(prefixes_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
