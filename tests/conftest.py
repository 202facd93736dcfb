from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from scoped_tempdir.providers import LocalFilesystem


class AlwaysExistsFilesystem:
    """Reports a name collision on every creation attempt."""

    def __init__(self) -> None:
        self.created: List[Path] = []

    def create_dir_exclusive(self, path: Path) -> None:
        self.created.append(path)
        raise FileExistsError(17, "File exists", str(path))

    def remove_tree(self, path: Path) -> None:
        raise AssertionError("nothing was ever created")

    def exists(self, path: Path) -> bool:
        return False


class FailingCreateFilesystem:
    """Raises a fixed error from create_dir_exclusive."""

    def __init__(self, error: OSError) -> None:
        self.error = error
        self.calls = 0

    def create_dir_exclusive(self, path: Path) -> None:
        self.calls += 1
        raise self.error

    def remove_tree(self, path: Path) -> None:
        raise AssertionError("nothing was ever created")

    def exists(self, path: Path) -> bool:
        return False


class FailingRemoveFilesystem(LocalFilesystem):
    """Creates real directories but refuses to remove them."""

    def __init__(self) -> None:
        super().__init__()
        self.remove_calls = 0

    def remove_tree(self, path: Path) -> None:
        self.remove_calls += 1
        raise PermissionError(13, "Permission denied", str(path))


@pytest.fixture
def always_exists_fs() -> AlwaysExistsFilesystem:
    return AlwaysExistsFilesystem()


@pytest.fixture
def failing_remove_fs() -> FailingRemoveFilesystem:
    return FailingRemoveFilesystem()


@pytest.fixture
def clean_env(monkeypatch):
    """Strip scoped_tempdir configuration variables from the environment."""
    for name in (
        "SCOPED_TEMPDIR_SUFFIX_LENGTH",
        "SCOPED_TEMPDIR_MAX_RETRIES",
        "SCOPED_TEMPDIR_DIR_MODE",
        "SCOPED_TEMPDIR_ENABLE_LOGGING",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def failing_create_fs():
    """Factory: failing_create_fs(PermissionError(...)) -> provider."""
    return FailingCreateFilesystem
