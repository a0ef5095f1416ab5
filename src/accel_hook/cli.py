"""accel-hook CLI: OCI lifecycle hook commands."""

from __future__ import annotations

import logging
import sys

import click

from accel_hook import __version__
from accel_hook.config import ACCELERATOR_TOOL, LOG_FILE, HookSettings
from accel_hook.container import get_container_config
from accel_hook.dispatcher import dispatch
from accel_hook.errors import HookError
from accel_hook.logs import setup_logging

logger = logging.getLogger(__name__)


class HookFailed(click.ClickException):
    """Fatal hook error reported on stderr with the error's exit code."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="accel-hook")
@click.option("--debug", is_flag=True, envvar="ACCEL_HOOK_DEBUG", help="Enable debug output.")
@click.option(
    "--log-file",
    default=LOG_FILE,
    show_default=True,
    envvar="ACCEL_HOOK_LOG_FILE",
    help="Log file shared with the configuration tool.",
)
@click.option(
    "--tool",
    default=ACCELERATOR_TOOL,
    show_default=True,
    envvar="ACCEL_HOOK_TOOL",
    help="Accelerator configuration tool, looked up on PATH.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, log_file: str, tool: str) -> None:
    """OCI runtime hook that configures accelerator containers."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help(), err=True)
        ctx.exit(2)

    setup_logging(log_file, debug)
    ctx.obj = HookSettings(debug=debug, log_file=log_file, tool=tool)


@cli.command()
@click.pass_obj
def prestart(settings: HookSettings) -> None:
    """Run the prestart hook."""
    try:
        container = get_container_config(sys.stdin)
        dispatch(container, settings)
    except HookError as exc:
        logger.critical(exc.message)
        raise HookFailed(exc.message, exc.exit_code) from exc


@cli.command()
def poststart() -> None:
    """Nothing to do."""


@cli.command()
def poststop() -> None:
    """Nothing to do."""


def main() -> None:
    cli(prog_name="accel-hook")


if __name__ == "__main__":
    main()
