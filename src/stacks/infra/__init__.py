"""
Infrastructure helpers for the crate-stack tools (config loading, logging).

Most callers should import via :mod:`src.stacks` instead of this subpackage.
"""

from .config import load_stacks_config, load_yaml
from .logging_utils import configure_logging


__all__ = ["configure_logging", "load_stacks_config", "load_yaml"]
