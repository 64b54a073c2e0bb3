#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Opt-in debug trace of vibe calls.

``log_function`` records each call of a public helper and ``raise_logged``
records a validation failure just before raising it. Both stay silent until
the trace is switched on, either with ``VIBE_DEBUG`` at import time or with
:meth:`DebugLogger.initialize`. Lines then go to
``config.LOGS_DIR/vibe_debug_<timestamp>.log``.
"""

import json
import logging
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import Any, Dict, NoReturn, Optional

from vibe import config
from vibe.errors import UtilityError

LOG_FORMAT = '%(asctime)s | %(name)-20s | %(levelname)-8s | %(message)s'


def prune_old_logs(log_dir: Path, keep: int) -> None:
    """Delete all but the ``keep`` newest trace files in ``log_dir``."""
    if keep < 1 or not log_dir.is_dir():
        return
    traces = sorted(
        log_dir.glob("vibe_debug_*.log"),
        key=lambda path: path.stat().st_mtime,
        reverse=True,
    )
    for stale in traces[keep:]:
        stale.unlink()


class DebugLogger:
    """Process-wide trace sink attached to the ``vibe`` logger."""

    _instance: Optional['DebugLogger'] = None

    def __init__(self, log_file: Optional[Path] = None):
        self.log_file = log_file
        self._handler: Optional[logging.Handler] = None
        if log_file is None:
            return

        handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        package_logger = logging.getLogger('vibe')
        package_logger.setLevel(logging.DEBUG)
        package_logger.addHandler(handler)
        self._handler = handler

    @classmethod
    def initialize(cls, enabled: bool = False, log_dir: Optional[Path] = None) -> 'DebugLogger':
        """Create the shared trace once; later calls return the same object.

        Args:
            enabled: Open a trace file when True
            log_dir: Where to put it (defaults to ``config.LOGS_DIR``)
        """
        if cls._instance is not None:
            return cls._instance

        if not enabled:
            cls._instance = cls()
            return cls._instance

        log_dir = log_dir or config.LOGS_DIR
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"vibe_debug_{datetime.now():%Y%m%d_%H%M%S}.log"
        cls._instance = cls(log_file)
        prune_old_logs(log_dir, config.LOG_RETENTION_LIMIT)
        return cls._instance

    @classmethod
    def get_instance(cls) -> 'DebugLogger':
        return cls.initialize()

    @property
    def enabled(self) -> bool:
        return self._handler is not None

    def event(self, component: str, name: str, data: Dict[str, Any], level: int = logging.DEBUG) -> None:
        """Write ``[NAME] {json}`` under the ``vibe.<component>`` logger."""
        if not self.enabled:
            return
        logging.getLogger(f'vibe.{component}').log(
            level, "[%s] %s", name, json.dumps(data, default=str)
        )

    def close(self) -> None:
        """Detach and close the trace file; the trace is disabled afterwards."""
        if self._handler is None:
            return
        logging.getLogger('vibe').removeHandler(self._handler)
        self._handler.close()
        self._handler = None


def log_function(component: str):
    """Decorator recording each call of the wrapped helper in the trace."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            trace = DebugLogger.get_instance()
            if trace.enabled:
                data: Dict[str, Any] = {
                    "function": func.__name__,
                    "args": [repr(arg)[:200] for arg in args],
                }
                if kwargs:
                    data["kwargs"] = {k: repr(v)[:200] for k, v in kwargs.items()}
                trace.event(component, "CALL", data)
            return func(*args, **kwargs)
        return wrapper
    return decorator


def raise_logged(component: str, error: UtilityError) -> NoReturn:
    """Record ``error`` in the trace, then raise it."""
    trace = DebugLogger.get_instance()
    if trace.enabled:
        data = error.to_dict()
        data["exception"] = type(error).__name__
        trace.event(component, "ERROR", data, logging.ERROR)
    raise error
