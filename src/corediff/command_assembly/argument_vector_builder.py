"""Argument vector construction for the comparison tool."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from .probe_outcomes import AssembledCommand, InputKind, InputStatus, ProbedInput
from .reference_inputs import ReferenceInputs

if TYPE_CHECKING:
    from corediff.configuration.run_config import DiffConfig

_LOGGER = logging.getLogger(__name__)

PLATFORM_FLAG = "--platform"
BASE_FLAG = "--base"
DIFF_FLAG = "--diff"
TAG_FLAG = "--tag"


def assemble_command(
    config: DiffConfig, reference_inputs: ReferenceInputs | None = None
) -> AssembledCommand:
    """Build the ordered argument vector for one comparison run.

    Flags come first (``--platform`` always leads), then every framework
    assembly found under the core root, then every test directory found
    under the test root. Missing inputs are skipped, never fatal.
    """
    references = reference_inputs or ReferenceInputs()
    arguments: list[str] = [PLATFORM_FLAG, config.core_root]
    if config.base_executable is not None:
        arguments.extend((BASE_FLAG, config.base_executable))
    if config.diff_executable is not None:
        arguments.extend((DIFF_FLAG, config.diff_executable))
    if config.tag is not None:
        arguments.extend((TAG_FLAG, config.tag))

    probed_inputs = [
        *_probe(
            config.core_root,
            references.framework_assemblies,
            InputKind.FRAMEWORK_ASSEMBLY,
            Path.is_file,
        ),
        *_probe(
            config.test_root,
            references.test_directories,
            InputKind.TEST_DIRECTORY,
            Path.is_dir,
        ),
    ]
    arguments.extend(item.path for item in probed_inputs if item.status == InputStatus.INCLUDED)
    return AssembledCommand(arguments=tuple(arguments), probed_inputs=tuple(probed_inputs))


def _probe(
    root: str,
    names: Sequence[str],
    kind: InputKind,
    exists: Callable[[Path], bool],
) -> list[ProbedInput]:
    outcomes = []
    for name in names:
        full_path = Path(root) / name
        if exists(full_path):
            outcomes.append(ProbedInput.included(kind, str(full_path)))
            continue
        skipped = ProbedInput.skipped(kind, str(full_path))
        _LOGGER.warning("%s", skipped.reason)
        outcomes.append(skipped)
    return outcomes
