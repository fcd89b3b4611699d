#!/usr/bin/env python3
"""YAML settings loader for nomina (configs/app.yaml)."""

from __future__ import annotations

from functools import lru_cache, reduce
from pathlib import Path
from typing import Any
import os

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_ROOT.parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"

_MISSING = object()


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    """Parse app.yaml once; later calls reuse the cached mapping."""
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing app config: {APP_CONFIG_PATH}")
    with open(APP_CONFIG_PATH, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path, e.g. 'chain.order'."""
    def step(node, key):
        if isinstance(node, dict):
            return node.get(key, _MISSING)
        return _MISSING

    value = reduce(step, path.split('.'), load_app_config())
    return default if value is _MISSING else value


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Resolve a corpus path; relative paths are taken from the project root."""
    if value is None:
        raise ValueError("path value is required")
    path = Path(os.path.expanduser(str(value)))
    if path.is_absolute():
        return path
    return ((base or PROJECT_ROOT) / path).resolve()


__all__ = [
    "load_app_config",
    "get_setting",
    "resolve_path",
    "PROJECT_ROOT",
    "APP_CONFIG_PATH",
]
