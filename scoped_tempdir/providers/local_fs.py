"""
Local filesystem provider.

Directory creation goes straight to os.mkdir, which is atomic and fails
with FileExistsError when the name is taken. Removal uses shutil.rmtree
and lets every error through; swallowing is the caller's decision.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from ..config import DEFAULT_DIR_MODE
from .base import FilesystemProvider


class LocalFilesystem(FilesystemProvider):
    """
    Local disk implementation of FilesystemProvider.

    Parameters
    ----------
    dir_mode : int
        Permission bits for created directories (masked by the umask).
    """

    def __init__(self, dir_mode: int = DEFAULT_DIR_MODE):
        self.dir_mode = dir_mode

    def create_dir_exclusive(self, path: Path) -> None:
        os.mkdir(path, self.dir_mode)

    def remove_tree(self, path: Path) -> None:
        shutil.rmtree(path)

    def exists(self, path: Path) -> bool:
        return os.path.exists(path)

    def __repr__(self) -> str:
        return f"LocalFilesystem(dir_mode={oct(self.dir_mode)})"
