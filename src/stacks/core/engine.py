#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Replay engine for crate-stack move records.

Two crane semantics are supported:

- ``single-crate`` (CrateMover 9000) moves crates one at a time, so a moved
  run lands on the target stack in reverse order.
- ``bulk-preserve`` (CrateMover 9001) lifts the top ``count`` crates as one
  slice, so the moved run keeps its order.

Both mutate the stack set in place; use :func:`clone_stacks` to give each
strategy its own copy.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List

from .errors import FormatError, PreconditionViolation
from .moves import MoveRecord


logger = logging.getLogger(__name__)

Stack = List[str]
StackSet = List[Stack]
Strategy = Callable[[StackSet, MoveRecord], None]

SINGLE_CRATE = "single-crate"
BULK_PRESERVE = "bulk-preserve"


def clone_stacks(stacks: StackSet) -> StackSet:
    """Return an independent copy of ``stacks``."""
    return [list(stack) for stack in stacks]


def _check_move(stacks: StackSet, move: MoveRecord) -> None:
    n_stacks = len(stacks)
    for role, index in (("source", move.source), ("target", move.target)):
        if not 0 <= index < n_stacks:
            raise PreconditionViolation(
                f"{move.to_text()!r}: {role} stack {index + 1} does not exist "
                f"(have {n_stacks})",
                move,
            )
    size = len(stacks[move.source])
    if move.count > size:
        raise PreconditionViolation(
            f"{move.to_text()!r}: stack {move.source + 1} holds only {size} crate(s)",
            move,
        )


def apply_single_crate(stacks: StackSet, move: MoveRecord) -> None:
    """Move ``move.count`` crates one by one from source to target."""
    _check_move(stacks, move)
    source, target = stacks[move.source], stacks[move.target]
    for _ in range(move.count):
        target.append(source.pop())


def apply_bulk_preserve(stacks: StackSet, move: MoveRecord) -> None:
    """Move the top ``move.count`` crates of source onto target as one run."""
    _check_move(stacks, move)
    source = stacks[move.source]
    split = len(source) - move.count
    lifted = source[split:]
    del source[split:]
    stacks[move.target].extend(lifted)


STRATEGIES: Dict[str, Strategy] = {
    SINGLE_CRATE: apply_single_crate,
    BULK_PRESERVE: apply_bulk_preserve,
}

STRATEGY_ALIASES: Dict[str, str] = {
    "9000": SINGLE_CRATE,
    "crate-mover-9000": SINGLE_CRATE,
    "9001": BULK_PRESERVE,
    "crate-mover-9001": BULK_PRESERVE,
}


def canonical_strategy(name: str) -> str:
    """Map a strategy name or alias to its canonical name."""
    key = name.strip().lower()
    key = STRATEGY_ALIASES.get(key, key)
    if key not in STRATEGIES:
        known = ", ".join(sorted([*STRATEGIES, *STRATEGY_ALIASES]))
        raise ValueError(f"unknown strategy {name!r} (choose from {known})")
    return key


def resolve_strategy(name: str) -> Strategy:
    """Return the move function registered for ``name``."""
    return STRATEGIES[canonical_strategy(name)]


def top_of_stacks(stacks: StackSet) -> str:
    """
    Concatenate the top crate of every stack in index order.

    :raises FormatError: if any stack is empty, since it has no top to report.
    """
    tops: List[str] = []
    for index, stack in enumerate(stacks):
        if not stack:
            raise FormatError(f"stack {index + 1} is empty; no top crate to report")
        tops.append(stack[-1])
    return "".join(tops)


class StackEngine:
    """Owns one stack set and replays move records against it."""

    def __init__(self, stacks: StackSet):
        self.stacks = stacks

    def apply(self, move: MoveRecord, strategy: str = SINGLE_CRATE) -> None:
        resolve_strategy(strategy)(self.stacks, move)

    def replay(self, moves: Iterable[MoveRecord], strategy: str = SINGLE_CRATE) -> StackSet:
        """Apply ``moves`` in order with ``strategy`` and return the mutated stacks."""
        apply_move = resolve_strategy(strategy)
        applied = 0
        for move in moves:
            apply_move(self.stacks, move)
            applied += 1
        logger.debug("Replayed %d moves with %s", applied, canonical_strategy(strategy))
        return self.stacks

    def top(self) -> str:
        return top_of_stacks(self.stacks)

    def crate_count(self) -> int:
        return sum(len(stack) for stack in self.stacks)


__all__ = [
    "BULK_PRESERVE",
    "SINGLE_CRATE",
    "STRATEGIES",
    "STRATEGY_ALIASES",
    "StackEngine",
    "apply_bulk_preserve",
    "apply_single_crate",
    "canonical_strategy",
    "clone_stacks",
    "resolve_strategy",
    "top_of_stacks",
]
