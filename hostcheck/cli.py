"""Command line entry point for hostcheck.

Usage: hostcheck [-h|--help] [--version] [<host>[:<port>]]

Exit codes: 0 ok, 1 policy/consistency/usage failure, 2 unparseable version,
any other code is passed through from the remote probe (e.g. 101, 255).
"""

import asyncio
import logging
import sys

import click

from hostcheck.config import Config, HostKeyVerifier, Settings
from hostcheck.dependencies import Dependencies
from hostcheck.services import HostCheckError, run_host_check
from hostcheck.utils.console import configure_logging

logger = logging.getLogger(__name__)

EXIT_USAGE = 1


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(Settings.from_env().tool_version)
    ctx.exit(0)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--version",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_version,
    help="Show the tool version and exit.",
)
@click.argument("target", required=False, metavar="[<host>[:<port>]]")
@click.pass_context
def hostcheck(ctx: click.Context, target: str | None) -> None:
    """Verify connectivity with an appliance.

    Checks that <host> is reachable over SSH, is a compatible appliance
    running a supported release, and is eligible for backup or restore.
    Defaults to the configured hostname when <host> is omitted.
    """
    settings = Settings.from_env()
    configure_logging(settings.log_level, settings.log_colors)

    try:
        config = Config(settings=settings, host_keys=HostKeyVerifier.from_env())
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_USAGE)

    deps = Dependencies.from_config(config)
    try:
        report = asyncio.run(run_host_check(deps.executor, settings, target))
    except HostCheckError as e:
        logger.debug("Host check failed (exit_code=%d)", e.exit_code)
        click.echo(e.message, err=True)
        ctx.exit(e.exit_code)

    for line in report.node_versions:
        logger.debug("cluster node: %s", line)
    click.echo(report.success_line())


def main(argv: list[str] | None = None) -> None:
    """Run the CLI, reporting usage errors with exit code 1."""
    try:
        code = hostcheck.main(args=argv, prog_name="hostcheck", standalone_mode=False)
    except click.UsageError as e:
        e.show()
        sys.exit(EXIT_USAGE)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(EXIT_USAGE)
    sys.exit(code or 0)
