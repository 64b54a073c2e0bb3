#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Configuration constants and settings for vibe."""

import os
import pathlib
from typing import Optional


def _env_bool(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Read an integer from the environment, falling back on bad values."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


# Configuration
ROOT = pathlib.Path(os.getcwd()).resolve()
VIBE_DIR = ROOT / ".vibe"
LOGS_DIR = pathlib.Path(os.getenv("VIBE_LOG_DIR", str(VIBE_DIR / "logs")))

DEBUG = _env_bool("VIBE_DEBUG")
LOG_RETENTION_LIMIT_DEFAULT = _env_int("VIBE_LOG_RETENTION", 7)
LOG_RETENTION_LIMIT = LOG_RETENTION_LIMIT_DEFAULT

# Debounce wait used when a caller does not pass one (milliseconds)
DEFAULT_DEBOUNCE_MS = _env_float("VIBE_DEBOUNCE_MS", 250.0)

# Seed for the shared RNG; None keeps the random module's own generator
RANDOM_SEED = _env_optional_int("VIBE_RANDOM_SEED")

