"""Solve Sudoku puzzles read from a file or standard input.

Puzzles are separated by blank lines.  For each one the parsed grid is
printed, followed by the solved grid and the time the solve took.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, TextIO

from contracts.errors import MalformedGridError
from contracts.grid_text import format_grid, to_line
from orchestrator import log as solve_log
from orchestrator.runner import PuzzleOutcome, run_stream
from project_config import get_section

EXIT_OK = 0
EXIT_INVALID_SOLUTION = 1
EXIT_MALFORMED = 2


def _render(digits: List[int], compact: bool) -> str:
    if compact:
        return to_line(digits) + "\n"
    return format_grid(digits)


def _print_outcome(outcome: PuzzleOutcome, *, compact: bool, out: TextIO) -> None:
    out.write(_render(outcome.puzzle, compact))
    if not compact:
        out.write("\n")
    if outcome.solved:
        out.write(_render(outcome.digits, compact))
    else:
        out.write(_render(outcome.puzzle, compact))
        out.write("no solution\n")
    out.write(f"({outcome.result.elapsed:.6f} seconds)\n\n")


def build_parser() -> argparse.ArgumentParser:
    cli_cfg = get_section("cli", default={})
    parser = argparse.ArgumentParser(description="Solve 9x9 Sudoku puzzles separated by blank lines.")
    parser.add_argument("file", nargs="?", default=None, help="Puzzle file (default: standard input)")
    parser.add_argument(
        "--compact",
        action="store_true",
        default=cli_cfg.get("output") == "compact",
        help="Print each grid as a single 81-character line",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        default=bool(cli_cfg.get("verify", False)),
        help="Check every solution against the sudoku rules and the givens",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Append one JSONL event per puzzle below this directory",
    )
    parser.add_argument("--pdf", default=None, help="Also render puzzles and solutions to this PDF file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _solve_all(
    lines: Iterable[str],
    args: argparse.Namespace,
    log_events: bool,
    outcomes: List[PuzzleOutcome],
    out: TextIO,
) -> None:
    for outcome in run_stream(lines, verify=args.verify, log_events=log_events):
        _print_outcome(outcome, compact=args.compact, out=out)
        outcomes.append(outcome)


def _configure_event_log(args: argparse.Namespace) -> bool:
    log_cfg = get_section("log", default={})
    if args.log_dir:
        solve_log.configure(args.log_dir, max_bytes=log_cfg.get("max_bytes"))
        return True
    if log_cfg.get("enabled", False):
        solve_log.configure(log_cfg.get("directory", "logs/solve"), max_bytes=log_cfg.get("max_bytes"))
        return True
    return False


def main(argv: List[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    out = stdout or sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log_events = _configure_event_log(args)

    outcomes: List[PuzzleOutcome] = []
    try:
        if args.file:
            with Path(args.file).open("r", encoding="utf-8") as handle:
                _solve_all(handle, args, log_events, outcomes, out)
        else:
            _solve_all(stdin or sys.stdin, args, log_events, outcomes, out)
    except MalformedGridError as exc:
        print(f"error: puzzle {len(outcomes) + 1}: {exc}", file=sys.stderr)
        return EXIT_MALFORMED

    if args.pdf:
        from printer.pdf import render_pdf

        pages = render_pdf([(o.puzzle, o.digits) for o in outcomes], args.pdf)
        print(f"PDF with {pages} pages and {len(outcomes)} puzzles saved to: {Path(args.pdf).resolve()}", file=out)

    if any(outcome.issues for outcome in outcomes):
        return EXIT_INVALID_SOLUTION
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
