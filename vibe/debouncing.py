#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Debounced callables.

A :class:`Debouncer` postpones its action until calls stop arriving for
``wait_ms`` milliseconds. Every call cancels the pending execution and arms
a new one carrying that call's arguments, so only the last call of a burst
reaches the action.

Timers come from a *scheduler*: any callable ``scheduler(delay_seconds,
callback)`` returning a handle with a ``cancel()`` method. The default one
uses the running asyncio loop when there is one and a daemon
``threading.Timer`` otherwise. Tests pass their own scheduler to control
time explicitly.
"""

from __future__ import annotations

import asyncio
import functools
import logging
import math
import numbers
import threading
import types
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

from vibe import config
from vibe.debug_logger import raise_logged
from vibe.errors import InvalidArgumentError, InvalidRangeError, describe_type

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> Any: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


def thread_scheduler(delay: float, callback: Callable[[], None]) -> threading.Timer:
    """Run ``callback`` on a daemon timer thread after ``delay`` seconds."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


def default_scheduler(delay: float, callback: Callable[[], None]) -> TimerHandle:
    """Schedule on the running event loop, or on a timer thread outside one."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return thread_scheduler(delay, callback)
    return loop.call_later(delay, callback)


def _validate_wait(wait_ms: Any) -> float:
    if isinstance(wait_ms, bool) or not isinstance(wait_ms, numbers.Real):
        raise_logged("debounce", InvalidArgumentError(
            "wait_ms must be a number",
            {"received": describe_type(wait_ms)},
        ))
    if wait_ms < 0:
        raise_logged("debounce", InvalidRangeError(
            "wait_ms must not be negative", {"wait_ms": wait_ms}
        ))
    try:
        wait = float(wait_ms)
    except OverflowError:
        raise_logged("debounce", InvalidRangeError(
            "wait_ms is too large", {"wait_ms": repr(wait_ms)[:40]}
        ))
    if not math.isfinite(wait):
        raise_logged("debounce", InvalidArgumentError(
            "wait_ms must be finite", {"wait_ms": wait}
        ))
    return wait


class Debouncer:
    """Callable wrapper that runs ``action`` once per quiet period.

    Each instance owns a single timer slot. The action never runs
    concurrently with itself for the same instance, and the wrapper
    always returns None.

    Used as a method decorator, every object gets its own wrapper, so
    bursts on one object never cancel calls made on another. Objects
    without an instance ``__dict__`` (``__slots__`` classes) get a fresh
    wrapper per attribute access and are therefore not debounced.
    """

    def __init__(
        self,
        action: Callable[..., Any],
        wait_ms: Optional[float] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        if not callable(action):
            raise_logged("debounce", InvalidArgumentError(
                "action must be callable",
                {"received": describe_type(action)},
            ))
        if wait_ms is None:
            wait_ms = config.DEFAULT_DEBOUNCE_MS

        functools.update_wrapper(self, action, updated=())

        self.wait_ms = _validate_wait(wait_ms)
        self._action = action
        self._scheduler: Scheduler = scheduler or default_scheduler
        self._lock = threading.RLock()
        self._handle: Optional[TimerHandle] = None
        self._pending_args: Optional[Tuple[tuple, Dict[str, Any]]] = None
        # Bumped whenever the pending slot changes; stale timers compare against it
        self._generation = 0
        self._attr_name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self._attr_name = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> "Debouncer":
        """Give each instance its own wrapper bound to that instance."""
        if instance is None:
            return self
        bound = Debouncer(types.MethodType(self._action, instance), self.wait_ms, self._scheduler)
        # Cached in the instance dict, which shadows this non-data descriptor
        if self._attr_name is not None and hasattr(instance, "__dict__"):
            instance.__dict__[self._attr_name] = bound
        return bound

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                logger.debug("debounce: replaced pending call of %r", self._action)
            self._generation += 1
            generation = self._generation
            self._pending_args = (args, kwargs)
            self._handle = self._scheduler(
                self.wait_ms / 1000.0, lambda: self._fire(generation)
            )
        logger.debug("debounce: scheduled %r in %.1f ms", self._action, self.wait_ms)

    @property
    def pending(self) -> bool:
        """Whether an execution is currently scheduled."""
        with self._lock:
            return self._pending_args is not None

    def cancel(self) -> bool:
        """Drop the pending execution. Returns True if one was pending."""
        with self._lock:
            if self._pending_args is None:
                return False
            self._clear()
        logger.debug("debounce: cancelled pending call of %r", self._action)
        return True

    def flush(self) -> bool:
        """Run the pending execution now. Returns True if one was pending."""
        with self._lock:
            if self._pending_args is None:
                return False
            args, kwargs = self._pending_args
            self._clear()
            logger.debug("debounce: flushing %r", self._action)
            self._action(*args, **kwargs)
        return True

    def _clear(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._pending_args = None
        self._generation += 1

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._pending_args is None:
                return
            args, kwargs = self._pending_args
            self._handle = None
            self._pending_args = None
            logger.debug("debounce: firing %r", self._action)
            self._action(*args, **kwargs)


def debounce(
    action: Optional[Callable[..., Any]] = None,
    wait_ms: Optional[float] = None,
    *,
    scheduler: Optional[Scheduler] = None,
):
    """Wrap ``action`` so that bursts of calls collapse into one.

    Can be called directly, ``debounce(save, 500)``, or used as a decorator
    factory, ``@debounce(wait_ms=500)``.

    Args:
        action: Function to run after the quiet period.
        wait_ms: Quiet period in milliseconds (defaults to
            ``config.DEFAULT_DEBOUNCE_MS``).
        scheduler: Timer factory; see the module docstring.

    Returns:
        A :class:`Debouncer`, or a decorator producing one when ``action``
        is omitted.

    Raises:
        InvalidArgumentError: If ``action`` is not callable or ``wait_ms``
            is not a finite number.
        InvalidRangeError: If ``wait_ms`` is negative.
    """
    if action is None:
        def decorator(func: Callable[..., Any]) -> Debouncer:
            return Debouncer(func, wait_ms, scheduler)
        return decorator
    return Debouncer(action, wait_ms, scheduler)
