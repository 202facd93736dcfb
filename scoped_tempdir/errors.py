"""
Exception types raised by scoped_tempdir.

Filesystem failures (PermissionError, FileNotFoundError, other OSError)
are never wrapped: they reach the caller exactly as the filesystem
provider raised them. The classes here cover the remaining cases.
"""

from __future__ import annotations

from pathlib import Path


class TempDirError(Exception):
    """Base class for recoverable scoped_tempdir failures."""


class EnvironmentLookupError(TempDirError):
    """
    The current working directory could not be determined while
    resolving a relative temp root.
    """


class RetryBudgetExhaustedError(TempDirError):
    """
    Every candidate name tried by the allocator already existed.

    Distinct from any OSError: the filesystem accepted each request and
    reported a collision every time, which points at outside interference
    (e.g. someone pre-creating names under the root).
    """

    def __init__(self, root: Path, prefix: str, attempts: int):
        self.root = root
        self.prefix = prefix
        self.attempts = attempts
        super().__init__(
            f"Exhausted {attempts} attempts to create a temporary directory "
            f"under {root} with prefix {prefix!r}"
        )


class ConfigError(TempDirError, ValueError):
    """Invalid TempDirConfig value."""


class ConsumedHandleError(RuntimeError):
    """
    A TempDir handle was used after detach() or close().

    This is a programming error, not a recoverable condition, so it does
    not derive from TempDirError.
    """


__all__ = [
    "TempDirError",
    "EnvironmentLookupError",
    "RetryBudgetExhaustedError",
    "ConfigError",
    "ConsumedHandleError",
]
