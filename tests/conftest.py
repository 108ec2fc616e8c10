from __future__ import annotations

from pathlib import Path

import pytest


EXAMPLE_DIAGRAM_ROWS = [
    "    [D]    ",
    "[N] [C]    ",
    "[Z] [M] [P]",
]

EXAMPLE_MOVES = [
    "move 1 from 2 to 1",
    "move 3 from 1 to 3",
    "move 2 from 2 to 1",
    "move 1 from 1 to 2",
]

EXAMPLE_TEXT = "\n".join([*EXAMPLE_DIAGRAM_ROWS, " 1   2   3 ", "", *EXAMPLE_MOVES]) + "\n"


@pytest.fixture
def example_text() -> str:
    return EXAMPLE_TEXT


@pytest.fixture
def example_rows():
    return list(EXAMPLE_DIAGRAM_ROWS)


@pytest.fixture
def example_stacks():
    return [["Z", "N"], ["M", "C", "D"], ["P"]]


@pytest.fixture
def example_file(tmp_path) -> Path:
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE_TEXT, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch, tmp_path):
    """Keep host env vars and a stray configs/stacks.yml out of every test."""
    for var in ("CRATE_STACKS_INPUT", "CRATE_STACKS_STRATEGIES", "LOGLEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
