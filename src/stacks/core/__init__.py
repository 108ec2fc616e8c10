"""
Core crate-stack logic: diagram and move parsers, replay engine, pipeline.

Most callers should import via :mod:`src.stacks` instead of this subpackage.
"""

from .diagram import parse_diagram, parse_diagram_block
from .engine import StackEngine, top_of_stacks
from .errors import CrateStackError, FormatError, ParseError, PreconditionViolation
from .moves import MoveRecord, parse_moves
from .puzzle import Puzzle, parse_puzzle, run_strategies, solve


__all__ = [
    "CrateStackError",
    "FormatError",
    "MoveRecord",
    "ParseError",
    "PreconditionViolation",
    "Puzzle",
    "StackEngine",
    "parse_diagram",
    "parse_diagram_block",
    "parse_moves",
    "parse_puzzle",
    "run_strategies",
    "solve",
    "top_of_stacks",
]
