#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Parse-then-simulate pipeline for crate-stack puzzle input (no CLI).

This module wires the diagram and move parsers to the replay engine:
- split raw text into the diagram block and the move block
- parse both into a :class:`Puzzle`
- replay independent clones of the initial stacks per strategy

CLI entrypoints (argparse / logging wiring) live in
``src.stacks.cli.stacks_cli`` and import from here.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .diagram import parse_diagram_block
from .engine import (
    BULK_PRESERVE,
    SINGLE_CRATE,
    StackEngine,
    StackSet,
    canonical_strategy,
    clone_stacks,
)
from .errors import FormatError, PreconditionViolation
from .moves import MoveRecord, parse_moves


logger = logging.getLogger(__name__)

DEFAULT_STRATEGIES: Tuple[str, ...] = (SINGLE_CRATE, BULK_PRESERVE)


@contextmanager
def timed(label: str):
    """Context manager to time a block and log at DEBUG."""
    start = time.time()
    try:
        yield
    finally:
        logger.debug("[TIMING] %s: %.4fs", label, time.time() - start)


@dataclass
class Puzzle:
    """Initial stacks plus the ordered move list."""

    stacks: StackSet
    moves: List[MoveRecord] = field(default_factory=list)


@dataclass
class SimulationResult:
    """Final stacks and top-of-stack readout for one strategy."""

    strategy: str
    stacks: StackSet
    top: str


def split_input(text: str) -> Tuple[str, str]:
    """
    Split puzzle text into ``(diagram_block, move_block)`` at the first blank line.

    :raises FormatError: if no blank separator line is present.
    """
    text = text.replace("\r\n", "\n")
    diagram, sep, moves = text.partition("\n\n")
    if not sep:
        raise FormatError("input has no blank line between the diagram and the moves")
    return diagram, moves


def parse_puzzle(text: str) -> Puzzle:
    """Parse raw puzzle text into a :class:`Puzzle`."""
    diagram, move_block = split_input(text)
    return Puzzle(stacks=parse_diagram_block(diagram), moves=parse_moves(move_block))


def load_puzzle(path: Union[str, Path]) -> Puzzle:
    """Read and parse a puzzle input file."""
    text = Path(path).read_text(encoding="utf-8")
    return parse_puzzle(text)


def simulate(puzzle: Puzzle, strategy: str) -> SimulationResult:
    """Replay ``puzzle.moves`` on a fresh clone of the initial stacks."""
    name = canonical_strategy(strategy)
    engine = StackEngine(clone_stacks(puzzle.stacks))
    before = engine.crate_count()
    with timed(f"replay {name}"):
        engine.replay(puzzle.moves, name)
    if engine.crate_count() != before:
        raise PreconditionViolation(
            f"{name} changed the crate count from {before} to {engine.crate_count()}"
        )
    top = engine.top()
    logger.debug("Top crates %s: %s", name, top)
    return SimulationResult(strategy=name, stacks=engine.stacks, top=top)


def run_strategies(
    puzzle: Puzzle,
    strategies: Optional[Iterable[str]] = None,
) -> Dict[str, SimulationResult]:
    """Simulate each strategy independently, keyed by canonical strategy name."""
    results: Dict[str, SimulationResult] = {}
    for strategy in strategies or DEFAULT_STRATEGIES:
        result = simulate(puzzle, strategy)
        results[result.strategy] = result
    return results


def solve(text: str) -> Dict[str, str]:
    """Return the top-of-stack readout for both strategies."""
    results = run_strategies(parse_puzzle(text))
    return {name: result.top for name, result in results.items()}


__all__ = [
    "DEFAULT_STRATEGIES",
    "Puzzle",
    "SimulationResult",
    "load_puzzle",
    "parse_puzzle",
    "run_strategies",
    "simulate",
    "solve",
    "split_input",
    "timed",
]
