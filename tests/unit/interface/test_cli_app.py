from __future__ import annotations

"""
In-process tests of the CLI controller.
"""

import io
import json
from pathlib import Path

import pytest

from shelltree.infra.logging import shutdown_logging
from shelltree.interface.cli import app


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach the handlers installed by each CLI run."""
    yield
    shutdown_logging()


@pytest.fixture
def transcript_file(tmp_path: Path, sample_transcript: str) -> Path:
    path = tmp_path / "session.txt"
    path.write_text(sample_transcript, encoding="utf-8")
    return path


def test_human_summary(transcript_file, capsys) -> None:
    assert app.main(["-i", str(transcript_file)]) == 0
    out = capsys.readouterr().out
    assert "95437" in out
    assert "/d (24933642)" in out


def test_json_output(transcript_file, capsys) -> None:
    assert app.main(["-i", str(transcript_file), "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is True
    assert payload["bounded_size_sum"] == 95437
    assert payload["candidate"]["size"] == 24933642


def test_reads_stdin(monkeypatch, sample_transcript, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(sample_transcript))
    assert app.main(["--json"]) == 0
    assert json.loads(capsys.readouterr().out)["used_space"] == 48381165


def test_missing_input_exit_code(tmp_path, capsys) -> None:
    assert app.main(["-i", str(tmp_path / "absent.txt")]) == 2
    assert "cannot read" in capsys.readouterr().err


def test_undecodable_input_exit_code(tmp_path, capsys) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"12 \xff\xfe\n")
    assert app.main(["-i", str(path)]) == 2
    assert "cannot read" in capsys.readouterr().err


class _InterruptedStdin:
    def read(self) -> str:
        raise KeyboardInterrupt


def test_interrupt_while_reading_exit_code(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", _InterruptedStdin())
    assert app.main([]) == 130
    assert "Interrupted." in capsys.readouterr().err


def test_rejected_transcript_exit_code(tmp_path, capsys) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("$ cd ..\n", encoding="utf-8")
    assert app.main(["-i", str(path)]) == 1
    assert "AtRoot" in capsys.readouterr().err


def test_config_file_and_overrides(tmp_path, transcript_file, capsys) -> None:
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"threshold": 1, "required_free": 7}), encoding="utf-8")

    assert app.main(["--config", str(cfg), "--threshold", "584", "--dump-config"]) == 0
    dumped = json.loads(capsys.readouterr().out)
    assert dumped["threshold"] == 584
    assert dumped["required_free"] == 7

    assert app.main(["--config", str(cfg), "--use-defaults", "--dump-config"]) == 0
    assert json.loads(capsys.readouterr().out)["required_free"] == 30000000
