from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and validates exit codes,
stdout/stderr content and file side effects.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "shelltree" / "main.py"


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Isolated home so persisted config and logs never touch the real user dir."""
    home = tmp_path / "home"
    home.mkdir()
    return home


def run_cli(
        args: List[str],
        home: Path,
        extra_env: Optional[Dict[str, str]] = None,
) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process with 'src' on PYTHONPATH.

    Args:
        args: Command line arguments (excluding interpreter and script path).
        home: Directory used as HOME / LOCALAPPDATA for the child process.
        extra_env: Additional environment variables for the child process.
    """
    env = os.environ.copy()
    env.update(extra_env or {})
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_happy_path(sample_transcript_file: Path, home_dir: Path):
    result = run_cli(["-i", str(sample_transcript_file)], home_dir)

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert "Total size of directories under 100000: 95437" in result.stdout
    assert "Smallest directory to delete: 24933642" in result.stdout


def test_cli_print_tree(sample_transcript_file: Path, home_dir: Path):
    result = run_cli(["-i", str(sample_transcript_file), "--print-tree", "--no-files"], home_dir)

    assert result.returncode == 0, result.stderr
    assert "/ (dir, size=48381165)" in result.stdout
    assert "│   └── e (dir, size=584)" in result.stdout
    assert "b.txt" not in result.stdout


def test_cli_tree_file(sample_transcript_file: Path, home_dir: Path, tmp_path: Path):
    tree_file = tmp_path / "artifacts" / "tree.txt"
    result = run_cli(["-i", str(sample_transcript_file), "--tree-file", str(tree_file)], home_dir)

    assert result.returncode == 0, result.stderr
    assert tree_file.exists()
    assert "Tree saved to:" in result.stdout


def test_cli_json_output(sample_transcript_file: Path, home_dir: Path):
    result = run_cli(["-i", str(sample_transcript_file), "--json", "--threshold", "1000"], home_dir)
    assert result.returncode == 0, result.stderr

    data = json.loads(result.stdout)
    for key in ["ok", "error", "input_path", "total_under_threshold", "smallest_to_delete", "summary"]:
        assert key in data, f"JSON output missing key: {key}"
    assert data["ok"] is True
    assert data["threshold"] == 1000
    assert data["total_under_threshold"] == 584
    assert data["input_path"] == os.path.abspath(str(sample_transcript_file))


def test_cli_handles_missing_input(tmp_path: Path, home_dir: Path):
    result = run_cli(["-i", str(tmp_path / "missing.txt")], home_dir)

    assert result.returncode == 2
    assert "Input path does not exist" in result.stderr


def test_cli_malformed_transcript(tmp_path: Path, home_dir: Path):
    bad = tmp_path / "bad.txt"
    bad.write_text("$ cd /\n$ pwd\n", encoding="utf-8")

    result = run_cli(["-i", str(bad)], home_dir)

    assert result.returncode == 1
    assert "MalformedInputError" in result.stderr


def test_cli_undecodable_transcript(tmp_path: Path, home_dir: Path):
    bad = tmp_path / "latin1.txt"
    bad.write_bytes(b"$ cd /\n$ ls\n12 caf\xe9.txt\n")

    result = run_cli(["-i", str(bad)], home_dir)

    assert result.returncode == 1
    assert "Failed to read transcript" in result.stderr
    assert "Traceback" not in result.stderr


def test_cli_expands_variables_in_input_path(sample_transcript_file: Path, home_dir: Path):
    (home_dir / "input.txt").write_text(sample_transcript_file.read_text(encoding="utf-8"), encoding="utf-8")
    var_path = os.path.join("$SHELLTREE_TRANSCRIPT_DIR", "input.txt")

    result = run_cli(["-i", var_path], home_dir, extra_env={"SHELLTREE_TRANSCRIPT_DIR": str(home_dir)})

    assert result.returncode == 0, result.stderr
    assert "Smallest directory to delete: 24933642" in result.stdout


def test_cli_save_and_reuse_config(sample_transcript_file: Path, home_dir: Path):
    saved = run_cli(
        ["-i", str(sample_transcript_file), "--threshold", "1000", "--save-config", "--dump-config"],
        home_dir,
    )
    assert saved.returncode == 0, saved.stderr
    assert (home_dir / ".shelltree" / "config.json").exists() or os.name == "nt"

    reused = run_cli(["--dump-config"], home_dir)
    assert json.loads(reused.stdout)["threshold"] == 1000

    defaults = run_cli(["--dump-config", "--use-defaults"], home_dir)
    assert json.loads(defaults.stdout)["threshold"] == 100000


def test_cli_help_message(home_dir: Path):
    result = run_cli(["--help"], home_dir)

    assert result.returncode == 0
    assert "usage: shelltree" in result.stdout
    assert "--input" in result.stdout
