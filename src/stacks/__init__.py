"""
Public crate-stack simulator API.

Downstream code should generally import from :mod:`src.stacks` rather than
reaching into submodules directly, e.g.:

    from src.stacks import parse_puzzle, run_strategies
"""

from __future__ import annotations

from .core.diagram import label_offset, parse_diagram, parse_diagram_block
from .core.engine import (
    BULK_PRESERVE,
    SINGLE_CRATE,
    StackEngine,
    apply_bulk_preserve,
    apply_single_crate,
    clone_stacks,
    resolve_strategy,
    top_of_stacks,
)
from .core.errors import CrateStackError, FormatError, ParseError, PreconditionViolation
from .core.moves import MoveRecord, parse_move, parse_moves
from .core.puzzle import (
    Puzzle,
    SimulationResult,
    load_puzzle,
    parse_puzzle,
    run_strategies,
    simulate,
    solve,
    split_input,
)
from .infra.config import load_stacks_config


_ERRORS = [
    "CrateStackError",
    "FormatError",
    "ParseError",
    "PreconditionViolation",
]

__all__ = [
    *_ERRORS,
    "BULK_PRESERVE",
    "SINGLE_CRATE",
    "MoveRecord",
    "Puzzle",
    "SimulationResult",
    "StackEngine",
    "apply_bulk_preserve",
    "apply_single_crate",
    "clone_stacks",
    "label_offset",
    "load_puzzle",
    "load_stacks_config",
    "parse_diagram",
    "parse_diagram_block",
    "parse_move",
    "parse_moves",
    "parse_puzzle",
    "resolve_strategy",
    "run_strategies",
    "simulate",
    "solve",
    "split_input",
    "top_of_stacks",
]
