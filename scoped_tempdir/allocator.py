"""
Directory allocation.

DirectoryAllocator turns a root and a prefix into a fresh, uniquely named
directory owned by a TempDir handle:

    1. make the root absolute (relative roots join the current directory)
    2. generate a candidate name and join it onto the root
    3. ask the filesystem to create exactly that directory, atomically
    4. on success hand the path to a TempDir
    5. on FileExistsError go back to 2; on any other OSError re-raise
    6. after max_retries collisions raise RetryBudgetExhaustedError

There is no separate existence check before creating: the atomic
create-exclusive call is the only point where concurrent allocators
meet, so two racing callers can never end up sharing a directory.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .config import TempDirConfig
from .errors import RetryBudgetExhaustedError
from .handle import TempDir
from .naming import candidate_name, generate_suffix
from .providers.base import (
    EnvironmentProvider,
    FilesystemProvider,
    ensure_environment,
    ensure_filesystem,
)
from .providers.environment import ProcessEnvironment
from .providers.local_fs import LocalFilesystem
from .utils.paths import absolute_root, candidate_path

logger = logging.getLogger(__name__)


@dataclass
class DirectoryAllocator:
    """
    Creates uniquely named directories and wraps them in TempDir handles.

    Parameters
    ----------
    filesystem : FilesystemProvider, optional
        Performs the atomic directory creation; also handed to every
        TempDir for later removal. Defaults to LocalFilesystem using
        config.dir_mode.
    environment : EnvironmentProvider, optional
        Supplies the current directory for relative roots. Defaults to
        the live process environment.
    config : TempDirConfig
        Suffix length, retry bound and directory mode.
    rng : random.Random, optional
        Randomness for suffixes. Defaults to a per-thread generator.

    The allocator keeps no mutable state between calls and may be shared
    by several threads.
    """

    filesystem: Optional[FilesystemProvider] = None
    environment: Optional[EnvironmentProvider] = None
    config: TempDirConfig = field(default_factory=TempDirConfig)
    rng: Optional[random.Random] = None

    def __post_init__(self) -> None:
        if self.filesystem is None:
            self.filesystem = LocalFilesystem(self.config.dir_mode)
        if self.environment is None:
            self.environment = ProcessEnvironment()
        ensure_filesystem(self.filesystem)
        ensure_environment(self.environment)

    def allocate(self, root: Union[str, Path], prefix: str = "") -> TempDir:
        """
        Create a new directory named "<prefix>.<random>" under `root`.

        Parameters
        ----------
        root : str | Path
            Parent directory. Must already exist; it is never created.
        prefix : str
            Optional name prefix. Empty means the name is the bare
            random suffix.

        Returns
        -------
        TempDir
            Handle owning the new directory.

        Raises
        ------
        EnvironmentLookupError
            `root` is relative and the current directory is unavailable.
        OSError
            Any creation failure other than a name collision, unchanged
            (PermissionError, FileNotFoundError, ...).
        RetryBudgetExhaustedError
            Every one of config.max_retries candidates already existed.
        """
        base = absolute_root(root, self.environment)
        attempts = self.config.max_retries

        for attempt in range(attempts):
            suffix = generate_suffix(self.config.suffix_length, self.rng)
            path = candidate_path(base, candidate_name(prefix, suffix))
            try:
                self.filesystem.create_dir_exclusive(path)
            except FileExistsError:
                logger.debug(
                    "Temporary directory name collision at %s (attempt %d)",
                    path,
                    attempt + 1,
                )
                continue

            logger.debug("Created temporary directory %s", path)
            return TempDir(path, self.filesystem)

        raise RetryBudgetExhaustedError(base, prefix, attempts)


def allocate(
    root: Union[str, Path],
    prefix: str = "",
    *,
    filesystem: Optional[FilesystemProvider] = None,
    environment: Optional[EnvironmentProvider] = None,
    config: Optional[TempDirConfig] = None,
    rng: Optional[random.Random] = None,
) -> TempDir:
    """
    One-shot convenience wrapper around DirectoryAllocator.allocate().

    Omitted collaborators default to the local filesystem, the live
    process environment and a default TempDirConfig.
    """
    allocator = DirectoryAllocator(
        filesystem=filesystem,
        environment=environment,
        config=config or TempDirConfig(),
        rng=rng,
    )
    return allocator.allocate(root, prefix)


__all__ = [
    "DirectoryAllocator",
    "allocate",
]
