"""CLI orchestration integration tests."""

from __future__ import annotations

import json
import stat
import sys
from pathlib import Path

import pytest
from corediff.cli import CONFIG_VALIDATION_EXIT_CODE, main


def _layout(tmp_path: Path) -> tuple[Path, Path]:
    core_root = tmp_path / "Core_Root"
    test_root = tmp_path / "tests"
    core_root.mkdir()
    (core_root / "mscorlib.dll").write_bytes(b"MZ")
    (test_root / "JIT").mkdir(parents=True)
    return core_root, test_root


def _install_fake_tool(bin_dir: Path, *, name: str, exit_code: int) -> Path:
    """Write an executable that records its arguments and exits with ``exit_code``."""
    bin_dir.mkdir(exist_ok=True)
    record_path = bin_dir / f"{name}.args.json"
    script = bin_dir / name
    script.write_text(
        f"#!{sys.executable}\n"
        "import json, sys\n"
        f"with open({str(record_path)!r}, 'w', encoding='utf-8') as handle:\n"
        "    json.dump(sys.argv[1:], handle)\n"
        f"raise SystemExit({exit_code})\n",
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IEXEC)
    return record_path


def test_main_propagates_tool_exit_code_with_injected_runner(
    tmp_path: Path, monkeypatch, capsys
) -> None:
    core_root, test_root = _layout(tmp_path)
    launched: list[tuple[str, ...]] = []

    def _fake_run(command: tuple[str, ...]) -> int:
        launched.append(command)
        return 3

    monkeypatch.setattr("corediff.tool_invocation.diff_tool_runner._run_command", _fake_run)

    exit_code = main(
        [
            "--core_root",
            str(core_root),
            "--test_root",
            str(test_root),
            "--output",
            str(tmp_path / "out"),
            "--base",
            "X.exe",
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 3
    assert launched[0][:5] == ("mcgdiff", "--platform", str(core_root), "--base", "X.exe")
    assert launched[0][5] == str(core_root / "mscorlib.dll")
    assert launched[0][-1] == str(test_root / "JIT")
    output_lines = captured.out.splitlines()
    assert output_lines[0] == f"Beginning diff of {test_root}!"
    assert f"can't find {core_root / 'System.dll'}" in output_lines
    assert f"can't find {test_root / 'Interop'}" in output_lines
    assert output_lines[-1] == "Returned with 3 failures"


@pytest.mark.skipif(sys.platform.startswith("win"), reason="uses a shebang script as the tool")
def test_main_runs_tool_from_search_path_and_returns_its_exit_code(
    tmp_path: Path, monkeypatch, capsys
) -> None:
    core_root, test_root = _layout(tmp_path)
    bin_dir = tmp_path / "bin"
    record_path = _install_fake_tool(bin_dir, name="mcgdiff", exit_code=5)
    monkeypatch.setenv("PATH", str(bin_dir))

    exit_code = main(
        [
            "--core_root",
            str(core_root),
            "--test_root",
            str(test_root),
            "-o",
            str(tmp_path / "out"),
            "-b",
            "base.exe",
            "-d",
            "diff.exe",
            "-t",
            "nightly",
        ]
    )

    assert exit_code == 5
    assert json.loads(record_path.read_text(encoding="utf-8")) == [
        "--platform",
        str(core_root),
        "--base",
        "base.exe",
        "--diff",
        "diff.exe",
        "--tag",
        "nightly",
        str(core_root / "mscorlib.dll"),
        str(test_root / "JIT"),
    ]
    assert "Returned with 5 failures" in capsys.readouterr().out


@pytest.mark.skipif(sys.platform.startswith("win"), reason="uses a shebang script as the tool")
def test_main_uses_tool_and_reference_lists_from_defaults_file(
    tmp_path: Path, monkeypatch, capsys
) -> None:
    core_root, test_root = _layout(tmp_path)
    bin_dir = tmp_path / "bin"
    record_path = _install_fake_tool(bin_dir, name="mcgdiff-next", exit_code=0)
    monkeypatch.setenv("PATH", str(bin_dir))
    config_file = tmp_path / "corediff.yaml"
    config_file.write_text(
        "core_root: Core_Root\n"
        "test_root: tests\n"
        "output: out\n"
        "diff: /opt/diff/crossgen\n"
        "tool: mcgdiff-next\n"
        "framework_assemblies: [mscorlib.dll]\n"
        "test_directories: [JIT]\n",
        encoding="utf-8",
    )

    exit_code = main(["--config", str(config_file), "--tag", "from-cli"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert json.loads(record_path.read_text(encoding="utf-8")) == [
        "--platform",
        str(core_root.resolve()),
        "--diff",
        "/opt/diff/crossgen",
        "--tag",
        "from-cli",
        str(core_root.resolve() / "mscorlib.dll"),
        str(test_root.resolve() / "JIT"),
    ]
    assert "can't find" not in captured.out
    assert "Returned with" not in captured.out


def test_main_validation_exit_code_differs_from_tool_failure_path(tmp_path: Path, capsys) -> None:
    exit_code = main(["--test_root", str(tmp_path)])

    assert exit_code == CONFIG_VALIDATION_EXIT_CODE
    assert capsys.readouterr().out == ""
