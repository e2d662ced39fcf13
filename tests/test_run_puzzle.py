"""Tests for the command-line runner."""

import json
import sys
from dataclasses import replace
from pathlib import Path

import pytest

import run_puzzle
from wasteland.config import ANCHOR_CONFIG, config_to_json

SAMPLE_GHOSTS = """\
LR

11A = (11B, XXX)
11B = (XXX, 11Z)
11Z = (11B, XXX)
22A = (22B, XXX)
22B = (22C, 22C)
22C = (22Z, 22Z)
22Z = (22B, 22B)
XXX = (XXX, XXX)
"""


def _write_input(tmp_path: Path) -> Path:
    path = tmp_path / "day8.txt"
    path.write_text(SAMPLE_GHOSTS)
    return path


class TestRunPuzzle:
    def test_returns_answer(self, tmp_path: Path) -> None:
        assert run_puzzle.run_puzzle(_write_input(tmp_path), ANCHOR_CONFIG) == 6

    def test_writes_result(self, tmp_path: Path) -> None:
        out = tmp_path / "results"
        run_puzzle.run_puzzle(_write_input(tmp_path), ANCHOR_CONFIG, results_dir=str(out))
        written = list(out.glob("*/result.json"))
        assert len(written) == 1
        assert json.loads(written[0].read_text())["result"]["answer"] == 6


class TestMain:
    def _run(self, monkeypatch, *argv: str) -> None:
        monkeypatch.setattr(sys, "argv", ["run_puzzle.py", *argv])
        run_puzzle.main()

    def test_prints_answer(self, tmp_path, monkeypatch, capsys) -> None:
        self._run(monkeypatch, "--input", str(_write_input(tmp_path)))
        assert capsys.readouterr().out.strip().splitlines()[-1] == "6"

    def test_config_and_part_override(self, tmp_path, monkeypatch, capsys) -> None:
        cfg_path = tmp_path / "config.json"
        cfg_path.write_text(
            config_to_json(replace(ANCHOR_CONFIG, description="from file"))
        )
        self._run(
            monkeypatch,
            "--input", str(_write_input(tmp_path)),
            "--config", str(cfg_path),
            "--part", "2",
            "--max-steps", "10",
        )
        assert capsys.readouterr().out.strip().splitlines()[-1] == "6"

    def test_dry_run(self, tmp_path, monkeypatch, capsys) -> None:
        self._run(monkeypatch, "--input", str(_write_input(tmp_path)), "--dry-run")
        assert "[dry-run]" in capsys.readouterr().out

    def test_missing_input(self, tmp_path, monkeypatch) -> None:
        with pytest.raises(SystemExit) as exc_info:
            self._run(monkeypatch, "--input", str(tmp_path / "nope.txt"))
        assert exc_info.value.code == 1

    def test_failure_exits_nonzero(self, tmp_path, monkeypatch) -> None:
        with pytest.raises(SystemExit) as exc_info:
            self._run(
                monkeypatch,
                "--input", str(_write_input(tmp_path)),
                "--max-steps", "1",
            )
        assert exc_info.value.code == 1
