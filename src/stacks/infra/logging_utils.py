#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging setup shared by the crate-stack entrypoints.
"""

from __future__ import annotations

import logging
import os
from typing import Optional


__all__ = ["LOG_FORMAT", "configure_logging"]

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


def configure_logging(loglevel: Optional[str] = None) -> int:
    """
    Configure the root logger for a CLI run.

    :param loglevel: Level name such as ``"DEBUG"``; falls back to the
        ``LOGLEVEL`` environment variable and then ``INFO``.
    :returns: The numeric level that was applied.
    """
    name = (loglevel or os.getenv("LOGLEVEL", "INFO")).upper()
    level = getattr(logging, name, logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
    return level
