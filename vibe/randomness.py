#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Random integers, shuffling and random picks.

All helpers draw from the process-wide generator returned by
:func:`get_random` unless a ``random.Random`` instance is passed as ``rng``.
Setting ``VIBE_RANDOM_SEED`` makes the shared generator reproducible.
"""

from __future__ import annotations

import math
import numbers
import random
import threading
from collections.abc import Sequence
from typing import Any, List, Optional, TypeVar, Union

from vibe import config
from vibe.debug_logger import log_function, raise_logged
from vibe.errors import InvalidArgumentError, InvalidRangeError, describe_type

T = TypeVar("T")

_seeded_rng: Optional[random.Random] = None
_seeded_rng_seed: Optional[int] = None
_rng_lock = threading.Lock()


def get_random() -> Union[random.Random, Any]:
    """Return the shared random generator.

    With ``config.RANDOM_SEED`` set, a ``random.Random`` seeded once with that
    value is reused for every call. Otherwise the ``random`` module itself is
    returned, which exposes the interpreter's default generator.
    """
    global _seeded_rng, _seeded_rng_seed

    seed = config.RANDOM_SEED
    if seed is None:
        return random

    with _rng_lock:
        if _seeded_rng is None or _seeded_rng_seed != seed:
            _seeded_rng = random.Random(seed)
            _seeded_rng_seed = seed
        return _seeded_rng


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_finite(value: numbers.Real) -> bool:
    if isinstance(value, numbers.Integral):
        return True
    try:
        return math.isfinite(value)
    except OverflowError:
        # Rationals beyond float range are still finite
        return True


def _require_sequence(items: Any, function_name: str) -> Sequence:
    if isinstance(items, (str, bytes, bytearray)) or not isinstance(items, Sequence):
        raise_logged("randomness", InvalidArgumentError(
            "Input must be a sequence",
            {"function": function_name, "received": describe_type(items)},
        ))
    return items


@log_function("randomness")
def random_int(min_value: float, max_value: float, *, rng: Optional[random.Random] = None) -> int:
    """Return a uniformly distributed integer in ``[min_value, max_value]``.

    Both bounds are inclusive. Non-integral bounds are narrowed to the
    integers they enclose.

    Raises:
        InvalidArgumentError: If either bound is not a finite real number.
        InvalidRangeError: If ``min_value > max_value`` or no integer lies
            between the bounds.
    """
    if not _is_number(min_value) or not _is_number(max_value):
        raise_logged("randomness", InvalidArgumentError(
            "Both min and max must be numbers",
            {"min": describe_type(min_value), "max": describe_type(max_value)},
        ))
    if not (_is_finite(min_value) and _is_finite(max_value)):
        raise_logged("randomness", InvalidArgumentError(
            "Both min and max must be finite",
            {"min": min_value, "max": max_value},
        ))
    if min_value > max_value:
        raise_logged("randomness", InvalidRangeError(
            "min must be less than or equal to max",
            {"min": min_value, "max": max_value},
        ))

    low = math.ceil(min_value)
    high = math.floor(max_value)
    if low > high:
        raise_logged("randomness", InvalidRangeError(
            "No integer lies between min and max",
            {"min": min_value, "max": max_value},
        ))

    generator = rng if rng is not None else get_random()
    return generator.randint(low, high)


@log_function("randomness")
def shuffle(items: Sequence[T], *, rng: Optional[random.Random] = None) -> List[T]:
    """Return a shuffled copy of ``items`` using the Fisher-Yates algorithm.

    The input is never modified.

    Raises:
        InvalidArgumentError: If ``items`` is not a (non-text) sequence.
    """
    shuffled = list(_require_sequence(items, "shuffle"))
    generator = rng if rng is not None else get_random()

    for i in range(len(shuffled) - 1, 0, -1):
        j = generator.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


@log_function("randomness")
def random_choice(items: Sequence[T], *, rng: Optional[random.Random] = None) -> Optional[T]:
    """Pick one element of ``items`` at random, or None when it is empty.

    Raises:
        InvalidArgumentError: If ``items`` is not a (non-text) sequence.
    """
    items = _require_sequence(items, "random_choice")
    if len(items) == 0:
        return None
    generator = rng if rng is not None else get_random()
    return items[generator.randrange(len(items))]
