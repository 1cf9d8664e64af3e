"""Tests for run execution domain entities."""

from __future__ import annotations

from corediff.command_assembly import AssembledCommand
from corediff.run_execution import RunOutcome

_EMPTY_COMMAND = AssembledCommand(arguments=("--platform", "/core"), probed_inputs=())


def test_run_outcome_succeeds_only_for_zero_exit_code() -> None:
    assert RunOutcome(exit_code=0, command=_EMPTY_COMMAND).succeeded is True
    assert RunOutcome(exit_code=2, command=_EMPTY_COMMAND).succeeded is False
