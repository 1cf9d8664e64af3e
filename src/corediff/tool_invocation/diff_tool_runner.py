"""Launch the external comparison tool as a child process."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable, Sequence

CommandRunner = Callable[[tuple[str, ...]], int]

_LOGGER = logging.getLogger(__name__)


class ToolLaunchError(Exception):
    """Raised when the comparison tool cannot be started."""


def run_diff_tool(
    tool: str, arguments: Sequence[str], *, run_command: CommandRunner | None = None
) -> int:
    """Run ``tool`` with ``arguments``, block until it exits, and return its exit code."""
    command_runner = run_command or _run_command
    command = (tool, *arguments)
    _LOGGER.debug("launching %s", shlex.join(command))
    exit_code = command_runner(command)
    _LOGGER.debug("%s exited with %d", tool, exit_code)
    return exit_code


def _run_command(command: tuple[str, ...]) -> int:
    """Run one command with inherited stdio and wrap launch errors with domain-friendly messages."""
    try:
        completed = subprocess.run(list(command), check=False)
    except FileNotFoundError as exc:
        raise ToolLaunchError(
            f"Comparison tool not found on the search path: {command[0]}"
        ) from exc
    except PermissionError as exc:
        raise ToolLaunchError(f"Comparison tool is not executable: {command[0]}") from exc
    except OSError as exc:
        raise ToolLaunchError(
            f"Comparison tool could not be started: {command[0]}: {exc}"
        ) from exc
    return completed.returncode
