#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""vibe - small string and sequence utilities."""

import logging

from vibe._version import VIBE_GIT_COMMIT, VIBE_VERSION

__version__ = VIBE_VERSION
# Stamped by setup.py at build time; "unknown" in a source checkout
__git_commit__ = VIBE_GIT_COMMIT

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Configuration
from vibe import config
from vibe.debug_logger import DebugLogger

# Errors
from vibe.errors import (
    UtilityErrorType,
    UtilityError,
    InvalidArgumentError,
    InvalidRangeError,
)

# String helpers
from vibe.strings import (
    capitalize,
    is_palindrome,
    reverse_string,
    char_frequency,
)

# Randomness
from vibe.randomness import (
    get_random,
    random_int,
    shuffle,
    random_choice,
)

# Cloning
from vibe.cloning import deep_clone

# Debouncing
from vibe.debouncing import Debouncer, debounce

if config.DEBUG:
    DebugLogger.initialize(enabled=True)

__all__ = [
    "__version__",
    "__git_commit__",
    # Errors
    "UtilityErrorType",
    "UtilityError",
    "InvalidArgumentError",
    "InvalidRangeError",
    # Functions
    "capitalize",
    "random_int",
    "is_palindrome",
    "debounce",
    "deep_clone",
    "shuffle",
    "random_choice",
    "reverse_string",
    "char_frequency",
    "get_random",
    "Debouncer",
]
