from __future__ import annotations

import io
import json

import pytest

from orchestrator import log
from tools.cli import solve as cli

from conftest import EASY_PUZZLE, EASY_SOLUTION


@pytest.fixture(autouse=True)
def _reset_log():
    yield
    log.configure("logs/solve")


def _run(argv, text):
    out = io.StringIO()
    code = cli.main(argv, stdin=io.StringIO(text), stdout=out)
    return code, out.getvalue()


def test_boxed_output_prints_puzzle_solution_and_time():
    code, output = _run([], EASY_PUZZLE + "\n\n")
    assert code == cli.EXIT_OK
    assert "|. . 3 |. 2 . |6 . . |" in output
    assert "|4 8 3 |9 2 1 |6 5 7 |" in output
    assert " seconds)" in output


def test_compact_output_with_trailing_block():
    code, output = _run(["--compact"], EASY_PUZZLE)
    assert code == cli.EXIT_OK
    lines = output.splitlines()
    assert lines[0] == EASY_PUZZLE.replace("0", ".")
    assert lines[1] == EASY_SOLUTION
    assert lines[2].startswith("(") and lines[2].endswith(" seconds)")


def test_unsolvable_puzzle_is_reported():
    code, output = _run(["--compact"], "11" + "." * 79 + "\n")
    assert code == cli.EXIT_OK
    assert "no solution" in output


def test_malformed_grid_exits_with_error(capsys):
    code, _ = _run([], "123\n\n")
    assert code == cli.EXIT_MALFORMED
    assert "malformed grid" in capsys.readouterr().err


def test_puzzle_file_and_event_log(tmp_path):
    puzzle_file = tmp_path / "puzzles.txt"
    puzzle_file.write_text(EASY_PUZZLE + "\n\n" + EASY_PUZZLE + "\n", encoding="utf-8")
    log_dir = tmp_path / "events"

    code, output = _run([str(puzzle_file), "--compact", "--verify", "--log-dir", str(log_dir)], "")

    assert code == cli.EXIT_OK
    assert output.count(EASY_SOLUTION) == 2
    (events_file,) = sorted(log_dir.glob("**/*.jsonl"))
    events = [json.loads(line) for line in events_file.read_text("utf-8").splitlines()]
    assert [event["index"] for event in events] == [0, 1]


def test_pdf_option_renders_file(tmp_path):
    pytest.importorskip("matplotlib")
    out_pdf = tmp_path / "out.pdf"
    code, output = _run(["--compact", "--pdf", str(out_pdf)], EASY_PUZZLE + "\n")
    assert code == cli.EXIT_OK
    assert out_pdf.read_bytes().startswith(b"%PDF")
    assert "PDF with 1 pages" in output
