"""Centralized version constant for vibe."""

# Note: VIBE_GIT_COMMIT is populated at build time so wheels/sdists carry
# the commit even when git metadata is unavailable at runtime.
VIBE_VERSION = "1.0.0"
VIBE_GIT_COMMIT = "unknown"

__all__ = ["VIBE_VERSION", "VIBE_GIT_COMMIT"]
