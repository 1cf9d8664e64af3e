"""Command assembly domain exports."""

from .argument_vector_builder import assemble_command
from .probe_outcomes import AssembledCommand, InputKind, InputStatus, ProbedInput
from .reference_inputs import FRAMEWORK_ASSEMBLIES, TEST_DIRECTORIES, ReferenceInputs

__all__ = [
    "assemble_command",
    "AssembledCommand",
    "InputKind",
    "InputStatus",
    "ProbedInput",
    "ReferenceInputs",
    "FRAMEWORK_ASSEMBLIES",
    "TEST_DIRECTORIES",
]
