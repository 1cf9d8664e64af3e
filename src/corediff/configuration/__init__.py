"""Configuration domain exports."""

from .config_builder import (
    ConfigValidationError,
    build_config,
    build_run_settings,
    merge_option_defaults,
    settings_from_options,
    validate_options,
)
from .defaults_file import ConfigurationError, RunDefaults, load_run_defaults
from .option_parsing import DIFF_OPTIONS, OptionParseError, OptionParser, parse_command_line
from .run_config import DEFAULT_DIFF_TOOL, DiffConfig, RunSettings

__all__ = [
    "DiffConfig",
    "RunSettings",
    "DEFAULT_DIFF_TOOL",
    "ConfigValidationError",
    "ConfigurationError",
    "RunDefaults",
    "load_run_defaults",
    "build_config",
    "build_run_settings",
    "settings_from_options",
    "merge_option_defaults",
    "validate_options",
    "DIFF_OPTIONS",
    "OptionParser",
    "OptionParseError",
    "parse_command_line",
]
