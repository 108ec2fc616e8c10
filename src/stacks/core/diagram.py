#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Fixed-column parser for the ASCII crate diagram.

The diagram is read as a character grid (``numpy`` array, one row per text
line). Stack ``c`` occupies the 4-character column starting at ``4 * c`` and
its crate label sits at :func:`label_offset`::

        [D]
    [N] [C]
    [Z] [M] [P]
     1   2   3

Rows are listed top-to-bottom, so each column is scanned in reverse to build
stacks bottom-to-top. Scanning stops at the first blank cell.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from .errors import FormatError


logger = logging.getLogger(__name__)

COLUMN_WIDTH = 4
BLANK = " "


def label_offset(column: int) -> int:
    """Return the character offset of the crate label for ``column``."""
    return column * COLUMN_WIDTH + 1


def stack_count(width: int) -> int:
    """
    Number of stacks in a diagram ``width`` characters wide.

    The last column is only three characters wide (no trailing separator), so
    the count rounds up to include that partial column.
    """
    count = width // COLUMN_WIDTH + 1
    if label_offset(count - 1) >= width:
        raise FormatError(
            f"diagram width {width} leaves no room for the label of stack {count}"
        )
    return count


def build_grid(rows: Sequence[str]) -> np.ndarray:
    """
    Turn diagram rows into a 2-D ``<U1`` character grid.

    :param rows: Diagram lines, top row first, without the index row.
    :returns: Array of shape ``(len(rows), width)``.
    :raises FormatError: if there are no rows or the rows differ in width.
    """
    if not rows:
        raise FormatError("crate diagram is empty")
    width = len(rows[0])
    if width == 0:
        raise FormatError("crate diagram is empty")
    for row_no, row in enumerate(rows, start=1):
        if len(row) != width:
            raise FormatError(
                f"diagram row {row_no} is {len(row)} characters wide, expected {width}: {row!r}"
            )
    return np.array([list(row) for row in rows], dtype="<U1")


def _column_stack(grid: np.ndarray, column: int) -> List[str]:
    cells = grid[::-1, label_offset(column)]
    stack: List[str] = []
    for height, cell in enumerate(cells):
        if cell == BLANK:
            floating = [str(c) for c in cells[height:] if c != BLANK]
            if floating:
                raise FormatError(
                    f"stack {column + 1} has crate(s) {''.join(floating)!r} above an empty slot"
                )
            break
        stack.append(str(cell))
    return stack


def parse_diagram(rows: Sequence[str]) -> List[List[str]]:
    """
    Build the initial stack set from diagram rows (index row excluded).

    :returns: One list per stack, each ordered bottom-to-top.
    """
    grid = build_grid(rows)
    n_stacks = stack_count(grid.shape[1])
    stacks = [_column_stack(grid, column) for column in range(n_stacks)]
    logger.debug(
        "Parsed %d stacks holding %d crates", n_stacks, sum(len(s) for s in stacks)
    )
    return stacks


def _is_index_row(row: str) -> bool:
    tokens = row.split()
    return bool(tokens) and all(token.isdigit() for token in tokens)


def parse_diagram_block(block: str) -> List[List[str]]:
    """
    Parse the full diagram block, including its trailing index-label row.

    When the index row is present its labels must read ``1 2 ... N`` for the
    ``N`` stacks found in the diagram.
    """
    rows = block.split("\n")
    while rows and not rows[-1].strip():
        rows.pop()
    labels: List[str] = []
    if rows and _is_index_row(rows[-1]):
        labels = rows.pop().split()
    stacks = parse_diagram(rows)
    if labels:
        expected = [str(n) for n in range(1, len(stacks) + 1)]
        if labels != expected:
            raise FormatError(
                f"index row {' '.join(labels)!r} does not match {len(stacks)} stacks"
            )
    return stacks


__all__ = [
    "COLUMN_WIDTH",
    "build_grid",
    "label_offset",
    "parse_diagram",
    "parse_diagram_block",
    "stack_count",
]
