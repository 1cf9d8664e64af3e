"""Build validated run configuration from raw command line arguments."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .defaults_file import RunDefaults, load_run_defaults
from .option_parsing import OptionParser, parse_command_line
from .run_config import DiffConfig, RunSettings

CONFIG_OPTION_NAMES = (
    "base_executable",
    "diff_executable",
    "output_path",
    "tag",
    "core_root",
    "test_root",
)


class ConfigValidationError(Exception):
    """Raised when options do not describe a coherent comparison scenario.

    Every violated rule contributes one entry to ``messages``.
    """

    def __init__(self, messages: Sequence[str]) -> None:
        self.messages = tuple(messages)
        super().__init__("\n".join(self.messages))


def build_config(
    raw_args: Sequence[str], *, parse_options: OptionParser = parse_command_line
) -> DiffConfig:
    """Parse and validate raw arguments into a DiffConfig."""
    return build_run_settings(raw_args, parse_options=parse_options).config


def build_run_settings(
    raw_args: Sequence[str], *, parse_options: OptionParser = parse_command_line
) -> RunSettings:
    """Parse raw arguments, merge the defaults file if named, and validate."""
    return settings_from_options(parse_options(raw_args))


def settings_from_options(options: Mapping[str, object]) -> RunSettings:
    """Resolve parsed options into run settings.

    Raises:
      ConfigurationError: If a named defaults file is invalid.
      ConfigValidationError: If the merged options fail validation.
    """
    config_path = options.get("config_path")
    defaults = load_run_defaults(str(config_path)) if config_path else RunDefaults()
    config = validate_options(merge_option_defaults(options, defaults.options))
    return RunSettings(
        config=config,
        reference_inputs=defaults.reference_inputs,
        tool=defaults.tool,
    )


def merge_option_defaults(
    options: Mapping[str, object], defaults: Mapping[str, str]
) -> dict[str, str | None]:
    """Fill options missing from the command line with defaults file values."""
    merged: dict[str, str | None] = {}
    for name in CONFIG_OPTION_NAMES:
        value = _present(options.get(name))
        merged[name] = value if value is not None else _present(defaults.get(name))
    return merged


def validate_options(options: Mapping[str, object]) -> DiffConfig:
    """Check option interdependencies and collect every violation before failing."""
    core_root = _present(options.get("core_root"))
    test_root = _present(options.get("test_root"))
    output_path = _present(options.get("output_path"))
    base_executable = _present(options.get("base_executable"))
    diff_executable = _present(options.get("diff_executable"))

    messages: list[str] = []
    if core_root is None:
        messages.append("Specify --core_root <path>")
    if test_root is None:
        messages.append("Specify --test_root <path>")
    if output_path is None:
        messages.append("Specify --output <path>")
    if base_executable is None and diff_executable is None:
        messages.append("--base <path> or --diff <path> or both must be specified.")
    if messages:
        raise ConfigValidationError(messages)

    assert core_root is not None and test_root is not None and output_path is not None
    return DiffConfig(
        base_executable=base_executable,
        diff_executable=diff_executable,
        output_path=output_path,
        tag=_present(options.get("tag")),
        core_root=core_root,
        test_root=test_root,
    )


def _present(value: object) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text else None
