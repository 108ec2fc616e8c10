"""Lightweight config loader for the crate-stack CLI.

Loads built-in defaults, then optional YAML (configs/stacks.yml or user-specified),
then environment variables. Command-line flags override all of these.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml


DEFAULT_CONFIG_PATH = Path("configs/stacks.yml")


def load_yaml(path: Path) -> Dict[str, Any]:
    """
    Best-effort YAML loader.

    :param path: Path to a YAML file on disk.
    :returns: Parsed YAML mapping, or an empty dict if the file is missing or empty.
    """
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as file_handle:
        return yaml.safe_load(file_handle) or {}


def _split_names(value: Union[str, List[str], None]) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(name).strip() for name in value if str(name).strip()]


def load_stacks_config(yaml_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load crate-stack settings from environment variables and optional YAML.

    Precedence: environment variables override YAML, YAML overrides built-in
    defaults.

    :param yaml_path: Optional path to a YAML config file. When omitted,
        ``configs/stacks.yml`` is used if present.
    :returns: Mapping with keys ``input`` (path or ``None``), ``strategies``
        (list of names, empty meaning "all") and ``loglevel``.
    """
    defaults: Dict[str, Any] = {
        "input": None,
        "strategies": [],
        "loglevel": "INFO",
    }
    ypath = Path(yaml_path) if yaml_path else DEFAULT_CONFIG_PATH
    ycfg = load_yaml(ypath)

    cfg = {
        "input": os.getenv("CRATE_STACKS_INPUT", ycfg.get("input", defaults["input"])),
        "strategies": _split_names(
            os.getenv("CRATE_STACKS_STRATEGIES", ycfg.get("strategies", defaults["strategies"]))
        ),
        "loglevel": str(os.getenv("LOGLEVEL", ycfg.get("loglevel", defaults["loglevel"]))).upper(),
    }
    return cfg


__all__ = ["DEFAULT_CONFIG_PATH", "load_stacks_config", "load_yaml"]
