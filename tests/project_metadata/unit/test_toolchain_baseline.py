"""Tests for repository toolchain baseline configuration."""

from __future__ import annotations

import tomllib
from pathlib import Path


def _pyproject() -> dict:
    pyproject_path = Path(__file__).resolve().parents[3] / "pyproject.toml"
    return tomllib.loads(pyproject_path.read_text(encoding="utf-8"))


def test_project_uses_python_311_baseline_in_pyproject() -> None:
    pyproject = _pyproject()

    assert pyproject["project"]["requires-python"] == ">=3.11"
    assert pyproject["tool"]["ruff"]["target-version"] == "py311"
    assert pyproject["tool"]["mypy"]["python_version"] == "3.11"


def test_project_exposes_corediff_console_script() -> None:
    pyproject = _pyproject()

    assert pyproject["project"]["scripts"]["corediff"] == "corediff.cli:main"


def test_project_declares_runtime_dependencies_for_cli_and_defaults_file() -> None:
    dependencies = " ".join(_pyproject()["project"]["dependencies"])

    assert "click" in dependencies
    assert "PyYAML" in dependencies


def test_readme_documents_exit_code_overlaps_and_signal_statuses() -> None:
    readme = (Path(__file__).resolve().parents[3] / "README.md").read_text(encoding="utf-8")

    assert "| 64 | missing or inconsistent options |" in readme
    assert "Only 64 is reserved for corediff itself." in readme
    assert "killed by a signal" in readme
