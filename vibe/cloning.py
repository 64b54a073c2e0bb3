#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Structural deep copies of plain data.

``deep_clone`` understands the value kinds that make up JSON-like data plus
dates, tuples and sets. Anything outside that model is rejected rather than
copied by guesswork. Shared references and cycles in the source are kept:
each source container is cloned once and reused wherever it reappears.
"""

from __future__ import annotations

import datetime
import enum
import logging
import numbers
from typing import Any, Dict

from vibe.debug_logger import log_function, raise_logged
from vibe.errors import InvalidArgumentError, describe_type

logger = logging.getLogger(__name__)

_IMMUTABLE_TYPES = (type(None), numbers.Number, str, bytes, enum.Enum)
_TEMPORAL_TYPES = (datetime.datetime, datetime.date, datetime.time, datetime.timedelta)


def _clone_temporal(value: Any) -> Any:
    if isinstance(value, datetime.timedelta):
        return datetime.timedelta(
            days=value.days, seconds=value.seconds, microseconds=value.microseconds
        )
    # replace() with no arguments builds a fresh instance of the same type
    return value.replace()


def _rebuild_tuple(value: tuple, members: list) -> tuple:
    cls = type(value)
    if cls is tuple:
        return tuple(members)
    # namedtuple constructors take fields positionally
    if hasattr(cls, "_make"):
        return cls._make(members)
    return cls(members)


def _clone(value: Any, memo: Dict[int, Any]) -> Any:
    if isinstance(value, _IMMUTABLE_TYPES):
        return value

    if isinstance(value, _TEMPORAL_TYPES):
        return _clone_temporal(value)

    key = id(value)
    if key in memo:
        return memo[key]

    if isinstance(value, list):
        cloned_list: list = []
        memo[key] = cloned_list
        cloned_list.extend(_clone(item, memo) for item in value)
        return cloned_list

    if isinstance(value, dict):
        cloned_dict: dict = {}
        memo[key] = cloned_dict
        for item_key, item_value in value.items():
            cloned_dict[_clone(item_key, memo)] = _clone(item_value, memo)
        return cloned_dict

    if isinstance(value, set):
        cloned_set: set = set()
        memo[key] = cloned_set
        cloned_set.update(_clone(item, memo) for item in value)
        return cloned_set

    # Immutable containers cannot be pre-registered, so a cycle running back
    # through one of them resolves to the mutable container that closes it.
    if isinstance(value, tuple):
        cloned_tuple = _rebuild_tuple(value, [_clone(item, memo) for item in value])
        memo[key] = cloned_tuple
        return cloned_tuple

    if isinstance(value, frozenset):
        cloned_frozen = type(value)(_clone(item, memo) for item in value)
        memo[key] = cloned_frozen
        return cloned_frozen

    if callable(value):
        return value

    raise_logged("cloning", InvalidArgumentError(
        f"Cannot deep clone value of type {describe_type(value)}",
        {"received": describe_type(value)},
    ))


@log_function("cloning")
def deep_clone(value: Any) -> Any:
    """Return a deep, structurally independent copy of ``value``.

    Rules, in order:

    - ``None``, booleans, numbers, strings, bytes and enum members are
      returned as-is.
    - ``datetime``, ``date``, ``time`` and ``timedelta`` values are rebuilt
      as new instances holding the same value.
    - Lists, tuples, dicts, sets and frozensets are rebuilt with every
      member cloned recursively. Dict key order is preserved. Tuple and
      frozenset subclasses (namedtuples included) keep their type.
    - Callables (functions, classes, bound methods) are shared.

    Mutating any container reachable from the result never affects the
    source, and the other way round.

    Raises:
        InvalidArgumentError: If ``value`` contains an object of any other kind.
    """
    memo: Dict[int, Any] = {}
    cloned = _clone(value, memo)
    logger.debug("deep_clone copied %d container(s)", len(memo))
    return cloned

