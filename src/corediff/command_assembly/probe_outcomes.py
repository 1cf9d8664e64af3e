"""Command assembly domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InputKind(str, Enum):
    """Category of a probed comparison input."""

    FRAMEWORK_ASSEMBLY = "framework_assembly"
    TEST_DIRECTORY = "test_directory"


class InputStatus(str, Enum):
    """Whether a probed input made it into the argument vector."""

    INCLUDED = "included"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ProbedInput:
    """Outcome of checking one framework assembly or test directory on disk."""

    kind: InputKind
    path: str
    status: InputStatus
    reason: str | None

    @staticmethod
    def included(kind: InputKind, path: str) -> ProbedInput:
        return ProbedInput(kind=kind, path=path, status=InputStatus.INCLUDED, reason=None)

    @staticmethod
    def skipped(kind: InputKind, path: str) -> ProbedInput:
        return ProbedInput(
            kind=kind,
            path=path,
            status=InputStatus.SKIPPED,
            reason=f"can't find {path}",
        )


@dataclass(frozen=True)
class AssembledCommand:
    """Argument vector for the comparison tool plus the probe trail behind it."""

    arguments: tuple[str, ...]
    probed_inputs: tuple[ProbedInput, ...]

    @property
    def included(self) -> tuple[ProbedInput, ...]:
        return tuple(item for item in self.probed_inputs if item.status == InputStatus.INCLUDED)

    @property
    def skipped(self) -> tuple[ProbedInput, ...]:
        return tuple(item for item in self.probed_inputs if item.status == InputStatus.SKIPPED)
