"""Loader for the optional YAML defaults file."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from corediff.command_assembly.reference_inputs import ReferenceInputs

from .run_config import DEFAULT_DIFF_TOOL

_PATH_KEYS = {
    "base": "base_executable",
    "diff": "diff_executable",
    "output": "output_path",
    "core_root": "core_root",
    "test_root": "test_root",
}
_REFERENCE_KEYS = ("framework_assemblies", "test_directories")
_KNOWN_KEYS = frozenset({*_PATH_KEYS, "tag", "tool", *_REFERENCE_KEYS})


class ConfigurationError(Exception):
    """Raised when the defaults file is invalid."""


@dataclass(frozen=True)
class RunDefaults:
    """Option values and probe lists supplied by a defaults file."""

    options: Mapping[str, str] = field(default_factory=dict)
    tool: str = DEFAULT_DIFF_TOOL
    reference_inputs: ReferenceInputs = field(default_factory=ReferenceInputs)


def load_run_defaults(config_path: Path | str) -> RunDefaults:
    """Load and validate a YAML defaults file.

    Args:
      config_path: Location of the YAML file.

    Returns:
      The parsed defaults. Relative paths are resolved against the file's directory.

    Raises:
      ConfigurationError: If the file is missing, unparsable or holds invalid values.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration key(s): {', '.join(unknown)}")

    options: dict[str, str] = {}
    for key, option_name in _PATH_KEYS.items():
        value = _optional_string(parsed.get(key), key)
        if value is not None:
            options[option_name] = str(_resolve_path(path.parent, value))
    tag = _optional_string(parsed.get("tag"), "tag")
    if tag is not None:
        options["tag"] = tag

    tool = _optional_string(parsed.get("tool"), "tool")
    if "tool" in parsed and tool is None:
        raise ConfigurationError("tool must not be empty.")

    defaults = ReferenceInputs()
    reference_inputs = ReferenceInputs(
        framework_assemblies=_name_list(
            parsed.get("framework_assemblies"),
            "framework_assemblies",
            fallback=defaults.framework_assemblies,
        ),
        test_directories=_name_list(
            parsed.get("test_directories"),
            "test_directories",
            fallback=defaults.test_directories,
        ),
    )
    return RunDefaults(
        options=options,
        tool=tool or DEFAULT_DIFF_TOOL,
        reference_inputs=reference_inputs,
    )


def _name_list(value: Any, field_name: str, *, fallback: tuple[str, ...]) -> tuple[str, ...]:
    if value is None:
        return fallback
    if not isinstance(value, list):
        raise ConfigurationError(f"{field_name} must be a list of names.")
    names = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ConfigurationError(f"{field_name} entries must be non-empty strings.")
        names.append(item.strip())
    return tuple(names)


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate
