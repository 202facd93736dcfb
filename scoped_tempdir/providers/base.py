"""
Provider interfaces for scoped_tempdir.

The allocator and the TempDir handle never touch the operating system
directly. They talk to two collaborators:

    - FilesystemProvider: atomic directory creation, recursive removal,
      existence queries
    - EnvironmentProvider: environment variable lookup and the current
      working directory

Concrete implementations:
    - LocalFilesystem (local disk via os / shutil)
    - ProcessEnvironment (live os.environ + os.getcwd)
    - MappingEnvironment (fixed snapshot, useful for embedding and tests)

This file provides:
- FilesystemProvider / EnvironmentProvider: structural protocols
- ensure_filesystem / ensure_environment: runtime validators
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Protocol, runtime_checkable


# ----------------------------------------------------------------------
# Protocols (interfaces)
# ----------------------------------------------------------------------

@runtime_checkable
class FilesystemProvider(Protocol):
    """
    Filesystem primitives required by the allocator and handle.

    create_dir_exclusive must be atomic: the existence check and the
    creation happen as one operation, and missing parents are not created.
    """

    def create_dir_exclusive(self, path: Path) -> None:
        """
        Create exactly `path`.

        Raises FileExistsError if anything already exists there, and any
        other OSError for every other failure.
        """
        ...

    def remove_tree(self, path: Path) -> None:
        """Recursively remove `path` and its contents, propagating errors."""
        ...

    def exists(self, path: Path) -> bool:
        """Return True if `path` exists. Diagnostics only."""
        ...


@runtime_checkable
class EnvironmentProvider(Protocol):
    """
    Read-only view of the process environment.
    """

    def get(self, name: str) -> Optional[str]:
        """Return the variable's value, or None if it is absent."""
        ...

    def current_dir(self) -> Path:
        """Return the current working directory. May raise OSError."""
        ...


# ----------------------------------------------------------------------
# Runtime Guards
# ----------------------------------------------------------------------

def _missing(obj: Any, names: tuple[str, ...]) -> list[str]:
    return [n for n in names if not callable(getattr(obj, n, None))]


def ensure_filesystem(provider: Any) -> FilesystemProvider:
    """
    Validate that an object behaves like a FilesystemProvider.

    Raises:
        TypeError if required methods are missing.
    """
    if not isinstance(provider, FilesystemProvider):
        missing = _missing(provider, ("create_dir_exclusive", "remove_tree", "exists"))
        if missing:
            raise TypeError(
                f"Invalid filesystem provider {provider!r}: missing attributes {missing}"
            )
    return provider  # type: ignore[return-value]


def ensure_environment(provider: Any) -> EnvironmentProvider:
    """
    Validate that an object behaves like an EnvironmentProvider.

    Raises:
        TypeError if required methods are missing.
    """
    if not isinstance(provider, EnvironmentProvider):
        missing = _missing(provider, ("get", "current_dir"))
        if missing:
            raise TypeError(
                f"Invalid environment provider {provider!r}: missing attributes {missing}"
            )
    return provider  # type: ignore[return-value]


__all__ = [
    "FilesystemProvider",
    "EnvironmentProvider",
    "ensure_filesystem",
    "ensure_environment",
]
