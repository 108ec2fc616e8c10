#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Parser for ``move <count> from <src> to <dst>`` instruction lines."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List

from .errors import ParseError


logger = logging.getLogger(__name__)

MOVE_RE = re.compile(r"^move (\d+) from (\d+) to (\d+)$")
MAX_UNSIGNED = 2**64 - 1


@dataclass(frozen=True)
class MoveRecord:
    """Relocate ``count`` crates from stack ``source`` to stack ``target`` (0-based)."""

    count: int
    source: int
    target: int

    def to_text(self) -> str:
        """Render the record in its 1-based textual form."""
        return f"move {self.count} from {self.source + 1} to {self.target + 1}"


def _unsigned(text: str, field: str, line_no: int, line: str) -> int:
    value = int(text)
    if value > MAX_UNSIGNED:
        raise ParseError(line_no, line, f"{field} {text} does not fit an unsigned integer")
    return value


def parse_move(line: str, line_no: int = 1) -> MoveRecord:
    """
    Parse one instruction line into a :class:`MoveRecord`.

    :raises ParseError: if the line does not match the pattern exactly, a
        number overflows, the count is zero, or a stack number is zero.
    """
    match = MOVE_RE.match(line)
    if not match:
        raise ParseError(line_no, line, "expected 'move <count> from <src> to <dst>'")
    count = _unsigned(match.group(1), "count", line_no, line)
    source = _unsigned(match.group(2), "source stack", line_no, line)
    target = _unsigned(match.group(3), "target stack", line_no, line)
    if count == 0:
        raise ParseError(line_no, line, "count must be positive")
    if source == 0 or target == 0:
        raise ParseError(line_no, line, "stack numbers start at 1")
    return MoveRecord(count=count, source=source - 1, target=target - 1)


def parse_moves(block: str) -> List[MoveRecord]:
    """Parse a block of instruction lines, preserving their order; blank lines are skipped."""
    moves: List[MoveRecord] = []
    for line_no, line in enumerate(block.split("\n"), start=1):
        if not line.strip():
            continue
        moves.append(parse_move(line, line_no))
    logger.debug("Parsed %d move instructions", len(moves))
    return moves


__all__ = ["MAX_UNSIGNED", "MOVE_RE", "MoveRecord", "parse_move", "parse_moves"]
