#!/usr/bin/env python3
"""Entry point for solving a haunted-wasteland navigation puzzle.

Chains the stages into a single executable command:
parse -> validate -> traverse -> combine -> write result.

Usage:
    python run_puzzle.py --input inputs/day8.txt
    python run_puzzle.py --input inputs/day8.txt --part 1
    python run_puzzle.py --input inputs/day8.txt --config config.json --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator

from wasteland.config import ANCHOR_CONFIG, PuzzleConfig, config_from_json, full_config_hash

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that logs stage start and elapsed time."""
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    log.info("Completed: %s in %.3fs", name, time.monotonic() - t0)


def run_puzzle(
    input_path: Path, config: PuzzleConfig, results_dir: str | None = None
) -> int:
    """Solve the puzzle in ``input_path`` and optionally write result.json.

    Args:
        input_path: Puzzle text file.
        config: Puzzle configuration.
        results_dir: If given, base directory for result.json output.

    Returns:
        The puzzle answer.
    """
    from wasteland.puzzle import parse_puzzle, solve_part_one, solve_part_two
    from wasteland.results import build_result, write_result

    with stage_timer("Parse"):
        instructions, graph = parse_puzzle(input_path.read_text())

    with stage_timer(f"Solve part {config.part}"):
        if config.part == 1:
            puzzle_result = solve_part_one(graph, instructions, config)
        else:
            puzzle_result = solve_part_two(graph, instructions, config)

    for start, steps in sorted(puzzle_result.arrivals.items()):
        log.info(
            "  %s -> %s in %d steps",
            start, puzzle_result.final_positions[start], steps,
        )

    if results_dir is not None:
        with stage_timer("Write result"):
            result = build_result(puzzle_result, config, input_path=str(input_path))
            write_result(result, results_dir)

    return puzzle_result.answer


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Count synchronised steps for L/R graph walkers"
    )
    parser.add_argument(
        "--input", type=str, required=True, help="Path to puzzle input text"
    )
    parser.add_argument(
        "--config", type=str, default=None, help="Path to puzzle config JSON file"
    )
    parser.add_argument(
        "--part", type=int, choices=(1, 2), default=None,
        help="Override the configured puzzle part",
    )
    parser.add_argument(
        "--max-steps", type=int, default=None,
        help="Override the divergence step bound",
    )
    parser.add_argument(
        "--output", type=str, default=None,
        help="Write result.json under this directory",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Show the resolved config without solving",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable DEBUG-level logging"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ANCHOR_CONFIG
    if args.config is not None:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        config = config_from_json(config_path.read_text())
    if args.part is not None:
        config = replace(config, part=args.part)
    if args.max_steps is not None:
        config = replace(
            config, traversal=replace(config.traversal, max_steps=args.max_steps)
        )

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: input file not found: {input_path}", file=sys.stderr)
        sys.exit(1)

    print(f"Config hash: {full_config_hash(config)}")
    print(f"Part:        {config.part}")
    if config.part == 1:
        print(f"Walk:        {config.graph.single_start} -> {config.graph.single_goal}")
    else:
        print(f"Walk:        *{config.graph.start_suffix} -> *{config.graph.terminal_suffix}")

    if args.dry_run:
        print("\n[dry-run] Config resolved successfully. Exiting.")
        return

    try:
        answer = run_puzzle(input_path, config, results_dir=args.output)
    except Exception:
        log.exception("Puzzle run failed")
        sys.exit(1)

    print(answer)


if __name__ == "__main__":
    main()
