#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import pytest

import src.stacks.core.diagram as diagram
from src.stacks.core.errors import FormatError


def test_label_offset_is_four_wide_columns():
    assert [diagram.label_offset(c) for c in range(4)] == [1, 5, 9, 13]


@pytest.mark.parametrize("width, expected", [(3, 1), (7, 2), (11, 3), (10, 3)])
def test_stack_count_includes_final_partial_column(width, expected):
    assert diagram.stack_count(width) == expected


@pytest.mark.parametrize("width", [1, 9, 12])
def test_stack_count_rejects_widths_without_a_last_label(width):
    with pytest.raises(FormatError):
        diagram.stack_count(width)


def test_build_grid_shape_and_cells(example_rows):
    grid = diagram.build_grid(example_rows)
    assert grid.shape == (3, 11)
    assert grid[0, diagram.label_offset(1)] == "D"
    assert grid[2, diagram.label_offset(2)] == "P"


def test_parse_diagram_builds_bottom_to_top(example_rows, example_stacks):
    assert diagram.parse_diagram(example_rows) == example_stacks


def test_parse_diagram_single_column():
    assert diagram.parse_diagram(["[A]", "[B]"]) == [["B", "A"]]


def test_parse_diagram_keeps_empty_stacks():
    rows = ["[A]     [C]", "[B]     [D]"]
    assert diagram.parse_diagram(rows) == [["B", "A"], [], ["D", "C"]]


def test_parse_diagram_empty_raises():
    with pytest.raises(FormatError, match="empty"):
        diagram.parse_diagram([])
    with pytest.raises(FormatError, match="empty"):
        diagram.parse_diagram([""])


def test_parse_diagram_inconsistent_width_raises():
    with pytest.raises(FormatError, match="row 2"):
        diagram.parse_diagram(["    [D]    ", "[N] [C]"])


def test_parse_diagram_floating_crate_raises():
    rows = ["[A]", "   ", "[B]"]
    with pytest.raises(FormatError, match="above an empty slot"):
        diagram.parse_diagram(rows)


def test_parse_diagram_block_strips_index_row(example_rows, example_stacks):
    block = "\n".join([*example_rows, " 1   2   3 "])
    assert diagram.parse_diagram_block(block) == example_stacks


def test_parse_diagram_block_without_index_row(example_rows, example_stacks):
    assert diagram.parse_diagram_block("\n".join(example_rows)) == example_stacks


def test_parse_diagram_block_index_mismatch_raises(example_rows):
    block = "\n".join([*example_rows, " 1   2 "])
    with pytest.raises(FormatError, match="index row"):
        diagram.parse_diagram_block(block)


def test_parse_diagram_block_only_index_row_is_empty():
    with pytest.raises(FormatError, match="empty"):
        diagram.parse_diagram_block(" 1   2   3 ")
