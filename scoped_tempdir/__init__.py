"""
scoped_tempdir

Collision-resistant temporary directories whose lifetime is tied to an
owning handle.

Submodules include:
    - core       (façade: temp_root, new_temp_dir, new_temp_dir_in, scoped_temp_dir)
    - handle     (TempDir)
    - allocator  (DirectoryAllocator)
    - resolver   (platform temp-root lookup)
    - naming     (random candidate names)
    - providers/ (filesystem + environment collaborators)
    - utils/
    - config, errors

This root package re-exports the public API for convenience.
"""

from .config import TempDirConfig, load_config
from .errors import (
    TempDirError,
    EnvironmentLookupError,
    RetryBudgetExhaustedError,
    ConfigError,
    ConsumedHandleError,
)
from .handle import TempDir
from .allocator import DirectoryAllocator, allocate
from .core import temp_root, new_temp_dir, new_temp_dir_in, scoped_temp_dir

__all__ = [
    # Config
    "TempDirConfig",
    "load_config",

    # Errors
    "TempDirError",
    "EnvironmentLookupError",
    "RetryBudgetExhaustedError",
    "ConfigError",
    "ConsumedHandleError",

    # Handle / allocation
    "TempDir",
    "DirectoryAllocator",
    "allocate",

    # Façade
    "temp_root",
    "new_temp_dir",
    "new_temp_dir_in",
    "scoped_temp_dir",
]
