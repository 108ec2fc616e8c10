#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import logging

import src.stacks.infra.config as cfg
from src.stacks.infra.logging_utils import configure_logging


def test_load_yaml_missing_and_present(tmp_path):
    assert cfg.load_yaml(tmp_path / "missing.yml") == {}
    yaml_path = tmp_path / "conf.yml"
    yaml_path.write_text("key: val\n", encoding="utf-8")
    assert cfg.load_yaml(yaml_path) == {"key": "val"}
    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    assert cfg.load_yaml(empty) == {}


def test_defaults_without_yaml():
    assert cfg.load_stacks_config() == {"input": None, "strategies": [], "loglevel": "INFO"}


def test_default_path_is_picked_up(tmp_path):
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "stacks.yml").write_text("input: in.txt\n", encoding="utf-8")
    assert cfg.load_stacks_config()["input"] == "in.txt"


def test_load_stacks_config_precedence(tmp_path, monkeypatch):
    yaml_path = tmp_path / "stacks.yml"
    yaml_path.write_text(
        "input: a.txt\nstrategies:\n  - single-crate\n  - 9001\nloglevel: debug\n",
        encoding="utf-8",
    )
    cfg_dict = cfg.load_stacks_config(str(yaml_path))
    assert cfg_dict == {
        "input": "a.txt",
        "strategies": ["single-crate", "9001"],
        "loglevel": "DEBUG",
    }

    monkeypatch.setenv("CRATE_STACKS_INPUT", "b.txt")
    monkeypatch.setenv("CRATE_STACKS_STRATEGIES", " bulk-preserve , ")
    monkeypatch.setenv("LOGLEVEL", "warning")
    cfg_env = cfg.load_stacks_config(str(yaml_path))
    assert cfg_env == {
        "input": "b.txt",
        "strategies": ["bulk-preserve"],
        "loglevel": "WARNING",
    }


def test_configure_logging_levels(monkeypatch):
    assert configure_logging("debug") == logging.DEBUG
    assert configure_logging("nonsense") == logging.INFO
    monkeypatch.setenv("LOGLEVEL", "ERROR")
    assert configure_logging() == logging.ERROR
