"""
Global configuration settings for scoped_tempdir.

This module centralizes configuration for:

    - random suffix length of generated directory names
    - retry bound of the allocation loop
    - permission bits of newly created directories
    - feature flags (logging, etc.)

It provides:
    TempDirConfig  – structured config object
    load_config()  – load from environment variables or defaults
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import TYPE_CHECKING, Optional

from .errors import ConfigError

if TYPE_CHECKING:
    from .providers.base import EnvironmentProvider


# How many times the allocator (re)tries an unused random name. Large enough
# that an adversary pre-creating names runs out of luck first.
NUM_RETRIES = 1 << 31

# Characters of randomness per name. Enough to make pre-creating every
# candidate infeasible without draining entropy for no benefit.
NUM_RAND_CHARS = 12

DEFAULT_DIR_MODE = 0o700


@dataclass
class TempDirConfig:
    """
    Canonical configuration for temporary directory allocation.

    Attributes
    ----------
    suffix_length:
        Number of random alphanumeric characters in each candidate name.

    max_retries:
        Upper bound on creation attempts before giving up with
        RetryBudgetExhaustedError.

    dir_mode:
        Permission bits passed to mkdir (subject to the process umask).

    enable_logging:
        Whether to enable internal debug logging.
    """

    suffix_length: int = NUM_RAND_CHARS
    max_retries: int = NUM_RETRIES
    dir_mode: int = DEFAULT_DIR_MODE

    enable_logging: bool = False

    def __post_init__(self) -> None:
        if self.suffix_length < 1:
            raise ConfigError(
                f"suffix_length must be at least 1, got {self.suffix_length}"
            )
        if self.max_retries < 1:
            raise ConfigError(
                f"max_retries must be at least 1, got {self.max_retries}"
            )
        if not 0 <= self.dir_mode <= 0o7777:
            raise ConfigError(f"dir_mode out of range: {oct(self.dir_mode)}")


def load_config(environment: Optional["EnvironmentProvider"] = None) -> TempDirConfig:
    """
    Load TempDirConfig from environment variables, falling back to defaults.

    Variables are read from `environment` when given (any provider with a
    get(name) method), otherwise from the live process environment.

    Recognized variables:
        SCOPED_TEMPDIR_SUFFIX_LENGTH    (positive integer)
        SCOPED_TEMPDIR_MAX_RETRIES      (positive integer)
        SCOPED_TEMPDIR_DIR_MODE         (octal, e.g. "700")
        SCOPED_TEMPDIR_ENABLE_LOGGING   ("true" / "false" / "1" / "0")

    Returns
    -------
    TempDirConfig

    Raises
    ------
    ConfigError
        If a variable is set to something that cannot be parsed.
    """

    getenv = environment.get if environment is not None else os.getenv

    def _env_flag(name: str, default: bool) -> bool:
        val = getenv(name)
        if val is None:
            return default
        return val.strip().lower() in ("1", "true", "yes", "on")

    def _env_int(name: str, default: int, base: int = 10) -> int:
        val = getenv(name)
        if val is None or not val.strip():
            return default
        try:
            return int(val.strip(), base)
        except ValueError as e:
            raise ConfigError(f"{name}={val!r} is not a valid integer") from e

    return TempDirConfig(
        suffix_length=_env_int("SCOPED_TEMPDIR_SUFFIX_LENGTH", NUM_RAND_CHARS),
        max_retries=_env_int("SCOPED_TEMPDIR_MAX_RETRIES", NUM_RETRIES),
        dir_mode=_env_int("SCOPED_TEMPDIR_DIR_MODE", DEFAULT_DIR_MODE, base=8),

        enable_logging=_env_flag(
            "SCOPED_TEMPDIR_ENABLE_LOGGING",
            default=False
        ),
    )


__all__ = [
    "NUM_RETRIES",
    "NUM_RAND_CHARS",
    "DEFAULT_DIR_MODE",
    "TempDirConfig",
    "load_config",
]
