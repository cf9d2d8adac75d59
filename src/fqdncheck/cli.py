"""The fqdncheck command: ``fqdncheck [-v] <string-to-validate>``.

The argument list is taken verbatim.  The string to validate may look
like an option (``--help``, ``--``, ``-v``), so Click's option parser
never sees it.
"""

from __future__ import annotations

import logging
from typing import Any

import click

from fqdncheck.config.logging import configure_logging
from fqdncheck.config.settings import CheckSettings
from fqdncheck.domain.host import check_host
from fqdncheck.output.formatters import format_verdict

logger = logging.getLogger(__name__)

VERBOSE_FLAG = "-v"


def usage_line(program: str) -> str:
    return f"Usage: {program} [{VERBOSE_FLAG}] <string-to-validate>"


class InvalidArgumentsError(click.ClickException):
    """Bad invocation: prints the error and the usage line on stdout."""

    exit_code = 1

    def __init__(self, message: str, program: str) -> None:
        super().__init__(message)
        self.program = program

    def show(self, file: Any = None) -> None:
        click.echo(f"Error: {self.message}", file=file)
        click.echo(usage_line(self.program), file=file)


class RawArgsCommand(click.Command):
    """Click Command that hands its raw argument list to the callback as ``argv``."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.params["argv"] = tuple(args)
        return []


def parse_argv(argv: tuple[str, ...], program: str) -> tuple[bool, str]:
    """Split the arguments into ``(verbose, string_to_validate)``."""
    if len(argv) not in (1, 2):
        raise InvalidArgumentsError("Wrong number of arguments", program)
    if len(argv) == 2 and argv[0] != VERBOSE_FLAG:
        raise InvalidArgumentsError(f"Invalid first argument '{argv[0]}'", program)
    return len(argv) == 2, argv[-1]


@click.command(name="fqdncheck", cls=RawArgsCommand, add_help_option=False)
@click.pass_context
def cli(ctx: click.Context, argv: tuple[str, ...]) -> None:
    """Validate a fully-qualified domain name or an IPv4/IPv6 literal."""
    program = ctx.info_name or "fqdncheck"
    verbose, text = parse_argv(argv, program)

    settings = CheckSettings.from_cli(verbose=verbose)
    configure_logging(level=settings.log_level, log_json=settings.log_json)

    verdict = check_host(text)
    logger.debug(
        "verdict ok=%s kind=%s error=%s",
        verdict.ok,
        verdict.host_kind,
        verdict.error,
    )

    color = click.get_text_stream("stdout").isatty()
    output = format_verdict(verdict, verbose=settings.verbose, color=color)
    if output:
        click.echo(output)
    if not verdict.ok:
        raise SystemExit(1)


def main() -> None:
    """Console-script entry point."""
    cli()
