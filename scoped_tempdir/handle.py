"""
TempDir: the owning handle for an allocated temporary directory.

A handle is always in exactly one of two states:

    Owning(path)   the directory at `path` belongs to this handle
    CONSUMED       ownership ended via detach(), close() or cleanup

Transitions are one-way:

    Owning --detach()-------------------> CONSUMED   (no filesystem effect)
    Owning --close()--------------------> CONSUMED   (removal, errors raised)
    Owning --__exit__ / __del__---------> CONSUMED   (removal, errors ignored)

Any path access on a CONSUMED handle raises ConsumedHandleError. Removal
is attempted at most once per handle: the state flips to CONSUMED before
the filesystem is touched, so a failed close() is not retried on
garbage collection.

Handles carry no locks. Passing one to another thread hands it over; the
receiving thread is then its only user.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .errors import ConsumedHandleError
from .providers.base import FilesystemProvider
from .utils.temp import cleanup_temp_dir

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# States
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Owning:
    path: Path


class _Consumed:
    __slots__ = ()

    def __repr__(self) -> str:
        return "CONSUMED"


CONSUMED = _Consumed()

HandleState = Union[Owning, _Consumed]


# ----------------------------------------------------------------------
# Handle
# ----------------------------------------------------------------------

class TempDir:
    """
    Owning wrapper around a temporary directory with scope-based removal.

    Instances are created by DirectoryAllocator; use new_temp_dir(),
    new_temp_dir_in() or scoped_temp_dir() rather than calling the
    constructor directly.

    Examples
    --------
    Automatic removal at the end of a ``with`` block::

        with new_temp_dir("build") as tmp:
            (tmp.path / "out.o").write_bytes(b"...")

    Keeping the directory::

        keep = new_temp_dir("artifacts").detach()

    Checking that removal worked::

        tmp = new_temp_dir("cache")
        ...
        tmp.close()  # raises OSError if the tree cannot be removed

    Although the handle also removes the directory when it is garbage
    collected, any error there is ignored. Call close() to see it.
    """

    def __init__(self, path: Path, filesystem: FilesystemProvider):
        self._filesystem = filesystem
        self._state: HandleState = Owning(Path(path))

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @property
    def path(self) -> Path:
        """The owned directory. Raises ConsumedHandleError once consumed."""
        state = self._state
        if not isinstance(state, Owning):
            raise ConsumedHandleError(
                "TempDir has already been detached or closed"
            )
        return state.path

    @property
    def consumed(self) -> bool:
        return not isinstance(self._state, Owning)

    def __fspath__(self) -> str:
        return str(self.path)

    def __str__(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        return f"TempDir({self._state!r})"

    # ------------------------------------------------------------------
    # Consuming operations
    # ------------------------------------------------------------------

    def _take(self) -> Path:
        path = self.path
        self._state = CONSUMED
        return path

    def detach(self) -> Path:
        """
        Give up ownership and return the path.

        The directory is left in place; removing it is now the caller's
        job.
        """
        path = self._take()
        logger.debug("Detached temporary directory %s", path)
        return path

    def close(self) -> None:
        """
        Remove the directory and everything in it.

        Unlike implicit cleanup, failures are raised (PermissionError,
        other OSError). The handle is consumed either way.
        """
        path = self._take()
        try:
            self._filesystem.remove_tree(path)
        except OSError:
            logger.warning("Failed to remove temporary directory %s", path)
            raise
        logger.debug("Closed temporary directory %s", path)

    # ------------------------------------------------------------------
    # Implicit destruction
    # ------------------------------------------------------------------

    def _destroy(self) -> None:
        # May run on a half-constructed instance from __del__
        state = getattr(self, "_state", CONSUMED)
        if not isinstance(state, Owning):
            return
        self._state = CONSUMED
        cleanup_temp_dir(state.path, self._filesystem)

    def __enter__(self) -> "TempDir":
        return self

    def __exit__(self, exc_type, exc, tb):
        self._destroy()
        # Propagate exceptions
        return False

    def __del__(self) -> None:
        try:
            self._destroy()
        except Exception:
            # Module globals may already be gone at interpreter shutdown
            pass


__all__ = [
    "Owning",
    "CONSUMED",
    "HandleState",
    "TempDir",
]
