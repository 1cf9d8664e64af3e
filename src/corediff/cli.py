"""Command line interface entry point."""

from __future__ import annotations

import sys

import click

from corediff.configuration import (
    DIFF_OPTIONS,
    ConfigurationError,
    ConfigValidationError,
    settings_from_options,
)
from corediff.run_execution import execute_corediff_run
from corediff.tool_invocation import ToolLaunchError

CONFIG_VALIDATION_EXIT_CODE = 64
TOOL_LAUNCH_EXIT_CODE = 127


class CliError(Exception):
    """Custom CLI error."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


# Parses with the shared DIFF_OPTIONS, so it accepts exactly what parse_command_line accepts.
@click.command(
    name="corediff",
    params=list(DIFF_OPTIONS),
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(package_name="corediff")
@click.pass_context
def cli(ctx: click.Context, **options: str | None) -> None:
    """Diff the code generated by base and diff compilers over a CORE_ROOT and test tree."""
    try:
        settings = settings_from_options(options)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc

    try:
        outcome = execute_corediff_run(settings, notify=click.echo)
    except ToolLaunchError as exc:
        raise CliError(str(exc), exit_code=TOOL_LAUNCH_EXIT_CODE) from exc
    ctx.exit(outcome.exit_code)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        exit_code = cli.main(args=list(argv), standalone_mode=False)
    except ConfigValidationError as exc:
        for message in exc.messages:
            click.echo(message, err=True)
        return CONFIG_VALIDATION_EXIT_CODE
    except CliError as exc:
        click.echo(str(exc), err=True)
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
