"""
CLI entrypoints for the crate-stack simulator.

These modules are primarily intended to be executed as scripts.
"""

from .stacks_cli import build_argparser as stacks_build_argparser
from .stacks_cli import main as stacks_main


__all__ = ["stacks_build_argparser", "stacks_main"]
