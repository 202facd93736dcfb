"""
Path helpers for temporary directory allocation.

These helpers turn a caller-supplied root into an absolute directory and
place candidate names beneath it. They never touch the filesystem.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from ..errors import EnvironmentLookupError
from ..providers.base import EnvironmentProvider


PathLike = Union[str, Path]


# ----------------------------------------------------------------------
# Roots
# ----------------------------------------------------------------------

def absolute_root(root: PathLike, environment: EnvironmentProvider) -> Path:
    """
    Return `root` as an absolute path.

    A relative root is joined onto the environment's current working
    directory. No normalization beyond that: symlinks and ".." are left
    for the filesystem to interpret.

    Raises
    ------
    EnvironmentLookupError
        If the current working directory cannot be retrieved.
    """
    root = Path(root)
    if root.is_absolute():
        return root

    try:
        cwd = environment.current_dir()
    except OSError as e:
        raise EnvironmentLookupError(
            f"Cannot resolve relative temp root {str(root)!r}: "
            f"current directory unavailable ({e})"
        ) from e
    return Path(cwd) / root


# ----------------------------------------------------------------------
# Candidates
# ----------------------------------------------------------------------

def candidate_path(root: Path, name: str) -> Path:
    """
    Place a single-component candidate name under root.

    Example:
        root = Path("/tmp")
        name = "build.Ab3dE9xYz01Q"
        -> /tmp/build.Ab3dE9xYz01Q
    """
    return root / name


__all__ = [
    "absolute_root",
    "candidate_path",
]
