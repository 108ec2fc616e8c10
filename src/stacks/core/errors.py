#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Error taxonomy for crate-stack parsing and replay.

``FormatError`` and ``ParseError`` describe bad input and are also
``ValueError`` subclasses; ``PreconditionViolation`` signals that the parsed
stacks and a move disagree about stack sizes and is a ``RuntimeError``.
"""

from __future__ import annotations

from typing import Any, Optional


class CrateStackError(Exception):
    """Base class for every error raised by :mod:`src.stacks`."""


class FormatError(CrateStackError, ValueError):
    """The crate diagram or overall input layout is malformed."""


class ParseError(CrateStackError, ValueError):
    """A move-instruction line does not match ``move <n> from <a> to <b>``."""

    def __init__(self, line_no: int, line: str, reason: str):
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_no}: {reason}: {line!r}")


class PreconditionViolation(CrateStackError, RuntimeError):
    """A move cannot be applied to the current stacks."""

    def __init__(self, message: str, move: Optional[Any] = None):
        self.move = move
        super().__init__(message)


__all__ = ["CrateStackError", "FormatError", "ParseError", "PreconditionViolation"]
