"""
Best-effort temporary directory cleanup.

Used on the implicit destruction paths of a TempDir (garbage collection,
context-manager exit), where a second failure must never surface.
Explicit TempDir.close() does not go through here: it propagates.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..providers.base import FilesystemProvider

logger = logging.getLogger(__name__)


def cleanup_temp_dir(path: Path, filesystem: FilesystemProvider) -> bool:
    """
    Remove a temporary directory and all its contents, ignoring errors.

    Parameters
    ----------
    path : Path
        Directory to remove.
    filesystem : FilesystemProvider
        Provider performing the removal.

    Returns
    -------
    bool
        True if the removal succeeded, False if it failed.

    Notes
    -----
    This function never raises. It may run from __del__ during
    interpreter shutdown, when even logging can fail.
    """
    try:
        filesystem.remove_tree(path)
        return True
    except Exception:
        try:
            logger.debug("Ignoring failure removing temporary directory %s", path, exc_info=True)
        except Exception:
            pass
        return False


__all__ = [
    "cleanup_temp_dir",
]
