import random
import threading

import pytest

from scoped_tempdir.allocator import DirectoryAllocator, allocate
from scoped_tempdir.config import NUM_RETRIES, TempDirConfig
from scoped_tempdir.errors import EnvironmentLookupError, RetryBudgetExhaustedError
from scoped_tempdir.naming import generate_suffix
from scoped_tempdir.providers import LocalFilesystem, MappingEnvironment


def test_allocation_creates_directory_with_prefix(tmp_path):
    handle = allocate(tmp_path, "test_tempdir_prefix")
    try:
        assert handle.path.is_dir()
        assert handle.path.parent == tmp_path
        assert "test_tempdir_prefix" in handle.path.name
        assert handle.path.name.startswith("test_tempdir_prefix.")
    finally:
        handle.close()


def test_empty_prefix_yields_bare_suffix(tmp_path):
    handle = allocate(tmp_path, "")
    try:
        name = handle.path.name
        assert len(name) == 12
        assert name.isalnum()
        assert not name.startswith(".")
    finally:
        handle.close()


def test_two_allocations_with_same_prefix_differ(tmp_path):
    first = allocate(tmp_path, "same")
    second = allocate(tmp_path, "same")
    try:
        assert first.path != second.path
        assert first.path.is_dir()
        assert second.path.is_dir()
    finally:
        first.close()
        second.close()


def test_collision_retries_with_new_name(tmp_path):
    taken = "clash." + generate_suffix(12, random.Random(7))
    (tmp_path / taken).mkdir()

    handle = allocate(tmp_path, "clash", rng=random.Random(7))
    try:
        assert handle.path.name != taken
        assert handle.path.name.startswith("clash.")
        assert (tmp_path / taken).is_dir()
    finally:
        handle.close()


def test_concurrent_allocations_never_share(tmp_path):
    allocator = DirectoryAllocator()
    handles = []
    lock = threading.Lock()

    def worker():
        local = [allocator.allocate(tmp_path, "race") for _ in range(25)]
        with lock:
            handles.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    paths = [h.path for h in handles]
    assert len(paths) == 200
    assert len(set(paths)) == 200
    assert all(p.is_dir() for p in paths)

    for h in handles:
        h.close()


def test_relative_root_resolved_against_cwd(tmp_path, monkeypatch):
    (tmp_path / "work").mkdir()
    monkeypatch.chdir(tmp_path)

    handle = allocate("work", "rel")
    try:
        assert handle.path.is_absolute()
        assert handle.path.parent == tmp_path / "work"
        assert handle.path.is_dir()
    finally:
        handle.close()


def test_relative_root_uses_environment_cwd(tmp_path):
    (tmp_path / "nested").mkdir()
    env = MappingEnvironment(cwd=tmp_path)

    handle = allocate("nested", "rel", environment=env)
    try:
        assert handle.path.parent == tmp_path / "nested"
    finally:
        handle.close()


def test_missing_cwd_raises_environment_lookup_error():
    env = MappingEnvironment(cwd=None)
    with pytest.raises(EnvironmentLookupError) as excinfo:
        allocate("relative/root", "x", environment=env)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_missing_root_propagates_file_not_found(tmp_path):
    missing = tmp_path / "does" / "not" / "exist"
    with pytest.raises(FileNotFoundError):
        allocate(missing, "x")
    # Parents are never created implicitly
    assert not (tmp_path / "does").exists()


def test_permission_error_propagates_without_retry(tmp_path, failing_create_fs):
    fs = failing_create_fs(PermissionError(13, "Permission denied"))
    with pytest.raises(PermissionError):
        allocate(tmp_path, "x", filesystem=fs)
    assert fs.calls == 1


def test_other_os_error_propagates_unchanged(tmp_path, failing_create_fs):
    error = OSError(28, "No space left on device")
    fs = failing_create_fs(error)
    with pytest.raises(OSError) as excinfo:
        allocate(tmp_path, "x", filesystem=fs)
    assert excinfo.value is error
    assert fs.calls == 1


def test_exhaustion_raises_distinguished_error(tmp_path, always_exists_fs):
    config = TempDirConfig(max_retries=5)
    with pytest.raises(RetryBudgetExhaustedError) as excinfo:
        allocate(tmp_path, "busy", filesystem=always_exists_fs, config=config)

    err = excinfo.value
    assert not isinstance(err, OSError)
    assert err.attempts == 5
    assert err.prefix == "busy"
    assert err.root == tmp_path
    assert len(always_exists_fs.created) == 5
    assert len(set(always_exists_fs.created)) == 5


def test_default_retry_bound():
    assert NUM_RETRIES == 2 ** 31
    assert DirectoryAllocator().config.max_retries == NUM_RETRIES


def test_allocator_uses_config_suffix_length(tmp_path):
    allocator = DirectoryAllocator(config=TempDirConfig(suffix_length=20))
    handle = allocator.allocate(tmp_path, "long")
    try:
        assert len(handle.path.name) == len("long.") + 20
    finally:
        handle.close()


def test_allocator_default_filesystem_uses_config_mode():
    allocator = DirectoryAllocator(config=TempDirConfig(dir_mode=0o750))
    assert isinstance(allocator.filesystem, LocalFilesystem)
    assert allocator.filesystem.dir_mode == 0o750


def test_allocator_rejects_invalid_provider():
    with pytest.raises(TypeError):
        DirectoryAllocator(filesystem=object())
