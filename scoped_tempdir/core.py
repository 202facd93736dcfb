"""
Core façade for scoped_tempdir.

These functions are the intended entry points for callers:

    temp_root()          platform temp root (TMPDIR / TMP / ... / default)
    new_temp_dir()       new TempDir under temp_root()
    new_temp_dir_in()    new TempDir under an explicit root
    scoped_temp_dir()    context manager with guaranteed best-effort cleanup

They wire together configuration, providers, resolver and allocator.
Anything left unspecified is taken from load_config() and the live
process environment, re-read on every call. A caller-supplied
EnvironmentProvider replaces the process environment for both the temp
root and the SCOPED_TEMPDIR_* settings.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from .allocator import DirectoryAllocator
from .config import TempDirConfig, load_config
from .handle import TempDir
from .providers.base import EnvironmentProvider, FilesystemProvider
from .providers.environment import ProcessEnvironment
from .resolver import resolve

logger = logging.getLogger(__name__)


def temp_root(environment: Optional[EnvironmentProvider] = None) -> Path:
    """
    Return the path of the platform's temporary directory.

    On Unix this is $TMPDIR if set and non-empty, else /tmp
    (/data/local/tmp on Android, which has no shared temp area).

    On Windows it is the first non-empty value of TMP, TEMP,
    USERPROFILE and WINDIR, else C:\\Windows.
    """
    return resolve(environment)


def _allocator(
    config: Optional[TempDirConfig],
    filesystem: Optional[FilesystemProvider],
    environment: Optional[EnvironmentProvider],
) -> DirectoryAllocator:
    cfg = config or load_config(environment)

    if cfg.enable_logging:
        logging.basicConfig(level=logging.DEBUG)
        logger.debug("Allocating temporary directories with config: %s", cfg)

    return DirectoryAllocator(
        filesystem=filesystem,
        environment=environment,
        config=cfg,
    )


def new_temp_dir(
    prefix: str = "",
    *,
    config: Optional[TempDirConfig] = None,
    filesystem: Optional[FilesystemProvider] = None,
    environment: Optional[EnvironmentProvider] = None,
) -> TempDir:
    """
    Make a temporary directory inside temp_root() whose name starts with
    `prefix`. The directory is removed when the returned handle is
    closed, exits its ``with`` block, or is garbage collected.

    Raises the same errors as DirectoryAllocator.allocate().
    """
    environment = environment or ProcessEnvironment()
    return new_temp_dir_in(
        temp_root(environment),
        prefix,
        config=config,
        filesystem=filesystem,
        environment=environment,
    )


def new_temp_dir_in(
    root: Union[str, Path],
    prefix: str = "",
    *,
    config: Optional[TempDirConfig] = None,
    filesystem: Optional[FilesystemProvider] = None,
    environment: Optional[EnvironmentProvider] = None,
) -> TempDir:
    """
    Make a temporary directory inside `root` whose name starts with
    `prefix`. A relative `root` is taken relative to the current
    directory; it is never created if missing.

    Raises the same errors as DirectoryAllocator.allocate().
    """
    return _allocator(config, filesystem, environment).allocate(root, prefix)


@contextmanager
def scoped_temp_dir(
    prefix: str = "",
    root: Optional[Union[str, Path]] = None,
    *,
    config: Optional[TempDirConfig] = None,
    filesystem: Optional[FilesystemProvider] = None,
    environment: Optional[EnvironmentProvider] = None,
) -> Iterator[TempDir]:
    """
    Context manager yielding a fresh TempDir.

    Cleanup runs on every way out of the block (normal exit, early
    return, exception) and never raises. Inside the block the handle
    can still be close()d to observe removal errors, or detach()ed to
    keep the directory.

    Example:
        with scoped_temp_dir("extract") as tmp:
            unpack(archive, tmp.path)
    """
    if root is None:
        handle = new_temp_dir(
            prefix, config=config, filesystem=filesystem, environment=environment
        )
    else:
        handle = new_temp_dir_in(
            root, prefix, config=config, filesystem=filesystem, environment=environment
        )

    with handle:
        yield handle


__all__ = [
    "temp_root",
    "new_temp_dir",
    "new_temp_dir_in",
    "scoped_temp_dir",
]
