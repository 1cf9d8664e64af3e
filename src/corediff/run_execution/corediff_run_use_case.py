"""Run execution use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable

from corediff.command_assembly import assemble_command
from corediff.configuration.run_config import RunSettings
from corediff.tool_invocation import CommandRunner, run_diff_tool

from .run_contracts import RunOutcome

Notifier = Callable[[str], None]

_LOGGER = logging.getLogger(__name__)


def execute_corediff_run(
    settings: RunSettings,
    *,
    run_command: CommandRunner | None = None,
    notify: Notifier | None = None,
) -> RunOutcome:
    """Assemble the argument vector, run the comparison tool once and report its exit code.

    Raises:
      ToolLaunchError: If the comparison tool cannot be started.
    """
    report = notify or _LOGGER.info
    config = settings.config

    report(f"Beginning diff of {config.test_root}!")
    command = assemble_command(config, settings.reference_inputs)
    for skipped in command.skipped:
        report(skipped.reason or f"can't find {skipped.path}")

    exit_code = run_diff_tool(settings.tool, command.arguments, run_command=run_command)
    if exit_code != 0:
        report(f"Returned with {exit_code} failures")
    return RunOutcome(exit_code=exit_code, command=command)
