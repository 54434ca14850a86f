from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script in a subprocess and validates exit codes,
stdout content and stderr diagnostics.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "shelltree" / "main.py"


def run_cli(args: List[str], stdin: Optional[str] = None) -> subprocess.CompletedProcess:
    """
    Execute the CLI in a separate process with 'src' on PYTHONPATH.

    Args:
        args: Command line arguments (excluding interpreter and script).
        stdin: Optional text piped to the process.

    Returns:
        subprocess.CompletedProcess: returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        input=stdin,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def transcript_file(tmp_path: Path, sample_transcript: str) -> Path:
    path = tmp_path / "session.txt"
    path.write_text(sample_transcript, encoding="utf-8")
    return path


def test_cli_human_output(transcript_file) -> None:
    result = run_cli(["-i", str(transcript_file)])
    assert result.returncode == 0, result.stderr
    assert "Sum of directories <= 100,000: 95437" in result.stdout
    assert "Directory to delete: /d (24933642)" in result.stdout


def test_cli_json_from_stdin(sample_transcript) -> None:
    result = run_cli(["--json"], stdin=sample_transcript)
    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["bounded_size_sum"] == 95437
    assert payload["candidate"]["path"] == "/d"
    assert payload["candidate"]["needed"] == 8381165


def test_cli_print_tree(transcript_file) -> None:
    result = run_cli(["-i", str(transcript_file), "--print-tree", "--no-files"])
    assert result.returncode == 0
    assert "│   └── e (dir, size=584)" in result.stdout


def test_cli_malformed_transcript(tmp_path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("$ cd /\n$ pwd\n", encoding="utf-8")
    result = run_cli(["-i", str(path)])
    assert result.returncode == 1
    assert "MalformedLine" in result.stderr
    assert result.stdout == ""


def test_cli_missing_file(tmp_path) -> None:
    result = run_cli(["-i", str(tmp_path / "nope.txt")])
    assert result.returncode == 2
