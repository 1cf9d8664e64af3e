"""Command line option declarations and the click-backed option parser.

The `corediff` click command in `corediff.cli` is built from the same
`DIFF_OPTIONS` and parses the console arguments in production; it hands
its parsed options to `settings_from_options`. `parse_command_line` is the
standalone parser behind `build_config` and `build_run_settings` for callers
that start from a raw argument list.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import click

OptionParser = Callable[[Sequence[str]], dict[str, object]]


class OptionParseError(Exception):
    """Raised when raw arguments cannot be parsed into options."""


# None of these are click-required: missing values are reported together by validation.
DIFF_OPTIONS: tuple[click.Option, ...] = (
    click.Option(
        ["-b", "--base", "base_executable"],
        type=click.Path(path_type=str),
        help="The base compiler exe.",
    ),
    click.Option(
        ["-d", "--diff", "diff_executable"],
        type=click.Path(path_type=str),
        help="The diff compiler exe.",
    ),
    click.Option(
        ["-o", "--output", "output_path"],
        type=click.Path(path_type=str),
        help="The output path.",
    ),
    click.Option(
        ["-t", "--tag", "tag"],
        help="Name of root in output directory. Allows for many sets of output.",
    ),
    click.Option(
        ["--core_root", "core_root"],
        type=click.Path(path_type=str),
        help="Path to test CORE_ROOT.",
    ),
    click.Option(
        ["--test_root", "test_root"],
        type=click.Path(path_type=str),
        help="Path to test tree.",
    ),
    click.Option(
        ["-c", "--config", "config_path"],
        type=click.Path(path_type=str),
        help="Optional YAML file with default option values and probe lists.",
    ),
)


def parse_command_line(raw_args: Sequence[str]) -> dict[str, object]:
    """Parse raw arguments into an option mapping without running a command."""
    command = click.Command("corediff", params=list(DIFF_OPTIONS), add_help_option=False)
    try:
        with command.make_context("corediff", list(raw_args)) as ctx:
            return dict(ctx.params)
    except click.UsageError as exc:
        raise OptionParseError(exc.format_message()) from exc
