"""
String utility functions.

This module provides capitalizing, palindrome checks, code-point reversal
and per-character frequency counting.
"""

import re
from collections import Counter
from typing import Any, Dict

from vibe.debug_logger import log_function, raise_logged
from vibe.errors import InvalidArgumentError, describe_type

_NON_ALNUM_ASCII = re.compile(r"[^a-z0-9]")


def _require_str(value: Any, function_name: str) -> str:
    if not isinstance(value, str):
        raise_logged("strings", InvalidArgumentError(
            "Input must be a string",
            {"function": function_name, "received": describe_type(value)},
        ))
    return value


@log_function("strings")
def capitalize(s: Any) -> Any:
    """
    Upper-case the first character of a string.

    Non-string and empty inputs are returned unchanged instead of raising.

    Args:
        s: The value to capitalize.

    Returns:
        A new string whose first character is upper-cased and whose
        remainder is untouched, or ``s`` itself.

    Examples:
        >>> capitalize("hello world")
        'Hello world'
        >>> capitalize("")
        ''
        >>> capitalize(None) is None
        True
    """
    if not isinstance(s, str) or not s:
        return s
    return s[0].upper() + s[1:]


@log_function("strings")
def is_palindrome(s: Any) -> bool:
    """
    Check if the given string is a palindrome.

    The string is lower-cased and everything outside ASCII letters and
    digits is dropped before comparing it with its reversal.

    Args:
        s: The value to check.

    Returns:
        True if the normalized string reads the same backwards. Empty
        strings return True; non-strings return False.

    Examples:
        >>> is_palindrome("racecar")
        True
        >>> is_palindrome("A man a plan a canal Panama")
        True
        >>> is_palindrome("hello")
        False
    """
    if not isinstance(s, str):
        return False
    cleaned = _NON_ALNUM_ASCII.sub("", s.lower())
    return cleaned == cleaned[::-1]


@log_function("strings")
def reverse_string(s: str) -> str:
    """
    Return a reversed copy of the input string.

    Reversal is by Unicode code point, so characters outside the BMP
    (emoji and the like) stay intact. Combining marks are not regrouped.

    Args:
        s: The string to reverse.

    Returns:
        The reversed string. Empty string returns empty string.

    Raises:
        InvalidArgumentError: If ``s`` is not a string.

    Examples:
        >>> reverse_string("hello")
        'olleh'
        >>> reverse_string("")
        ''
    """
    return _require_str(s, "reverse_string")[::-1]


@log_function("strings")
def char_frequency(s: str) -> Dict[str, int]:
    """
    Count the occurrences of each character in a string.

    Counting is case-sensitive and includes whitespace and punctuation.
    Keys appear in the order each character is first seen.

    Raises:
        InvalidArgumentError: If ``s`` is not a string.

    Examples:
        >>> char_frequency("hello")
        {'h': 1, 'e': 1, 'l': 2, 'o': 1}
    """
    return dict(Counter(_require_str(s, "char_frequency")))
