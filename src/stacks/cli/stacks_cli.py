#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CLI entrypoint for the crate-stack rearrangement simulator.

This is a thin wrapper over :mod:`src.stacks.core.puzzle` that handles
argument parsing, configuration, logging and exit codes.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from src.stacks.core.engine import STRATEGIES, STRATEGY_ALIASES, canonical_strategy
from src.stacks.core.errors import CrateStackError, PreconditionViolation
from src.stacks.core.puzzle import DEFAULT_STRATEGIES, load_puzzle, run_strategies
from src.stacks.infra.config import load_stacks_config
from src.stacks.infra.logging_utils import configure_logging


EXIT_IO_ERROR = 1
EXIT_BAD_INPUT = 2
EXIT_PRECONDITION = 3


def _strategy_arg(value: str) -> str:
    try:
        return canonical_strategy(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_argparser() -> argparse.ArgumentParser:
    """CLI argument builder for the crate-stack simulator."""
    arg_parser = argparse.ArgumentParser(
        description="Replay crate-stack move instructions and report the top crates.",
    )
    arg_parser.add_argument(
        "-i",
        "--input",
        default=None,
        help="Puzzle input file (diagram, blank line, move list).",
    )
    arg_parser.add_argument(
        "--strategy",
        action="append",
        type=_strategy_arg,
        default=None,
        help=(
            "Crane semantics to simulate; repeat for several. One of: "
            f"{', '.join([*STRATEGIES, *STRATEGY_ALIASES])}. Defaults to all."
        ),
    )
    arg_parser.add_argument(
        "--config",
        default=None,
        help="YAML config file (defaults to configs/stacks.yml when present).",
    )
    arg_parser.add_argument("--loglevel", default=None)
    arg_parser.add_argument(
        "--show-stacks",
        action="store_true",
        help="Also print every final stack, bottom to top.",
    )
    return arg_parser


def _resolve_strategies(cli_values: Optional[List[str]], configured: List[str]) -> List[str]:
    if cli_values:
        return list(dict.fromkeys(cli_values))
    if configured:
        return list(dict.fromkeys(canonical_strategy(name) for name in configured))
    return list(DEFAULT_STRATEGIES)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entrypoint."""
    arg_parser = build_argparser()
    args = arg_parser.parse_args(argv)

    cfg = load_stacks_config(args.config)
    configure_logging(args.loglevel or cfg["loglevel"])

    input_path = args.input or cfg["input"]
    if not input_path:
        arg_parser.error("no input file given (use --input or set 'input' in the config)")
    try:
        strategies = _resolve_strategies(args.strategy, cfg["strategies"])
    except ValueError as exc:
        arg_parser.error(f"config: {exc}")

    try:
        puzzle = load_puzzle(input_path)
        logging.info(
            "Loaded %s: %d stacks, %d moves", input_path, len(puzzle.stacks), len(puzzle.moves)
        )
        results = run_strategies(puzzle, strategies)
    except (OSError, UnicodeDecodeError) as exc:
        logging.error("Cannot read %s: %s", input_path, exc)
        raise SystemExit(EXIT_IO_ERROR) from exc
    except PreconditionViolation as exc:
        logging.error("Move cannot be applied: %s", exc)
        raise SystemExit(EXIT_PRECONDITION) from exc
    except CrateStackError as exc:
        logging.error("Invalid puzzle input in %s: %s", input_path, exc)
        raise SystemExit(EXIT_BAD_INPUT) from exc

    for name, result in results.items():
        print(f"Top crates {name}: {result.top}")
        if args.show_stacks:
            for index, stack in enumerate(result.stacks, start=1):
                print(f"  {index}: {''.join(stack)}")


__all__ = ["build_argparser", "main"]

if __name__ == "__main__":
    main()
