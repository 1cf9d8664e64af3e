"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from corediff.command_assembly.reference_inputs import ReferenceInputs

DEFAULT_DIFF_TOOL = "mcgdiff"


@dataclass(frozen=True)
class DiffConfig:
    """Validated options describing one comparison scenario."""

    base_executable: str | None
    diff_executable: str | None
    output_path: str
    tag: str | None
    core_root: str
    test_root: str

    @property
    def has_base_executable(self) -> bool:
        return self.base_executable is not None

    @property
    def has_diff_executable(self) -> bool:
        return self.diff_executable is not None

    @property
    def has_tag(self) -> bool:
        return self.tag is not None


@dataclass(frozen=True)
class RunSettings:
    """Everything a run needs: validated options, probe lists and tool name."""

    config: DiffConfig
    reference_inputs: ReferenceInputs = field(default_factory=ReferenceInputs)
    tool: str = DEFAULT_DIFF_TOOL
