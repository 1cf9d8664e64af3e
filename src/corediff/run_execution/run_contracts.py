"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass

from corediff.command_assembly.probe_outcomes import AssembledCommand


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    exit_code: int
    command: AssembledCommand

    @property
    def succeeded(self) -> bool:
        """Return True when the comparison tool reported no failures."""
        return self.exit_code == 0
