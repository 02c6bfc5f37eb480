"""Centralized config loading — read once at import time.

config.yaml (beside this file) supplies the values, a .env file in the
project root may set environment variables, and ALGOTRACE_* variables
override the file:

    ALGOTRACE_HOST, ALGOTRACE_PORT, ALGOTRACE_DEBUG,
    ALGOTRACE_LOG_LEVEL, ALGOTRACE_MAX_STEPS
"""

import copy
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import yaml
from dotenv import load_dotenv

_PROJECT_ROOT = Path(__file__).resolve().parent
load_dotenv(_PROJECT_ROOT / ".env")

CONFIG_PATH = _PROJECT_ROOT / "config.yaml"

DEFAULTS: Dict[str, Any] = {
    "server":    {"host": "127.0.0.1", "port": 5000, "debug": False},
    "execution": {"max_steps": 10000},
    "store":     {"max_entries": 1000, "ttl_seconds": 3600},
    "logging":   {"level": "INFO", "file": None},
}


def _to_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _to_optional_int(raw: str) -> Optional[int]:
    return None if raw.strip().lower() in ("", "none", "null") else int(raw)


# env var → (section, key, parser)
ENV_OVERRIDES: Dict[str, Tuple[str, str, Callable[[str], Any]]] = {
    "ALGOTRACE_HOST":      ("server",    "host",      str),
    "ALGOTRACE_PORT":      ("server",    "port",      int),
    "ALGOTRACE_DEBUG":     ("server",    "debug",     _to_bool),
    "ALGOTRACE_LOG_LEVEL": ("logging",   "level",     str.upper),
    "ALGOTRACE_MAX_STEPS": ("execution", "max_steps", _to_optional_int),
}


def _merge(base: dict, override: Mapping) -> dict:
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> dict:
    """Defaults, then the YAML file (if present), then environment overrides."""
    path = CONFIG_PATH if path is None else Path(path)
    environ = os.environ if environ is None else environ

    config = copy.deepcopy(DEFAULTS)
    if path.exists():
        _merge(config, yaml.safe_load(path.read_text()) or {})

    for var, (section, key, parse) in ENV_OVERRIDES.items():
        raw = environ.get(var)
        if raw is not None:
            config.setdefault(section, {})[key] = parse(raw)
    return config


_config = load_config()


def get_config() -> dict:
    """Return the loaded config dictionary."""
    return _config
