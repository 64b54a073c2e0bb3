#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Error taxonomy for the utility functions.

Two kinds of failure exist: an argument of the wrong shape, and a numeric
range that cannot be satisfied. Each kind is its own exception class so
callers can catch it directly, and each also derives from the matching
builtin (``TypeError`` / ``ValueError``) so generic handlers keep working.
"""

from enum import Enum
from typing import Any, Dict, Optional


class UtilityErrorType(Enum):
    """Standardized error categories raised by vibe."""

    INVALID_ARGUMENT = "invalid_argument"
    INVALID_RANGE = "invalid_range"


class UtilityError(Exception):
    """Base class for every error raised by vibe."""

    error_type: UtilityErrorType = UtilityErrorType.INVALID_ARGUMENT

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary for structured logging."""
        result = {
            "error_type": self.error_type.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class InvalidArgumentError(UtilityError, TypeError):
    """An argument does not have the required shape."""

    error_type = UtilityErrorType.INVALID_ARGUMENT


class InvalidRangeError(UtilityError, ValueError):
    """A numeric range is empty or inverted."""

    error_type = UtilityErrorType.INVALID_RANGE


def describe_type(value: Any) -> str:
    """Short type name used in error messages."""
    if value is None:
        return "None"
    return type(value).__name__
