import os
import random
import string
import threading

import pytest

from scoped_tempdir.naming import ALPHABET, candidate_name, generate_suffix


def test_alphabet_is_ascii_alphanumeric():
    assert set(ALPHABET) == set(string.ascii_letters + string.digits)
    assert len(ALPHABET) == 62


def test_generate_suffix_shape_over_many_calls():
    for _ in range(1000):
        suffix = generate_suffix(12)
        assert suffix != ""
        assert len(suffix) == 12
        assert all(c in ALPHABET for c in suffix)
        assert suffix.isalnum()


def test_default_length_is_twelve():
    assert len(generate_suffix()) == 12


def test_suffixes_use_both_cases_and_digits():
    seen = set("".join(generate_suffix(12) for _ in range(500)))
    assert seen & set(string.ascii_uppercase)
    assert seen & set(string.ascii_lowercase)
    assert seen & set(string.digits)


def test_suffixes_do_not_repeat():
    suffixes = {generate_suffix(12) for _ in range(1000)}
    assert len(suffixes) == 1000


def test_explicit_rng_is_deterministic():
    a = generate_suffix(12, random.Random(42))
    b = generate_suffix(12, random.Random(42))
    assert a == b


def test_zero_length_rejected():
    with pytest.raises(ValueError):
        generate_suffix(0)


def test_generation_from_many_threads():
    results = []
    lock = threading.Lock()

    def worker():
        local = [generate_suffix(12) for _ in range(200)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 800
    assert len(set(results)) == 800


def test_candidate_name_with_prefix():
    assert candidate_name("build", "Ab3dE9xYz01Q") == "build.Ab3dE9xYz01Q"


def test_candidate_name_without_prefix_is_not_hidden():
    name = candidate_name("", "Ab3dE9xYz01Q")
    assert name == "Ab3dE9xYz01Q"
    assert not name.startswith(".")


@pytest.mark.skipif(not hasattr(os, "fork"), reason="requires os.fork")
def test_forked_child_draws_different_suffixes():
    generate_suffix(12)

    read_fd, write_fd = os.pipe()
    pid = os.fork()
    if pid == 0:
        try:
            os.close(read_fd)
            os.write(write_fd, generate_suffix(12).encode("ascii"))
        finally:
            os._exit(0)

    os.close(write_fd)
    parent_suffix = generate_suffix(12)
    with os.fdopen(read_fd, "rb") as f:
        child_suffix = f.read().decode("ascii")
    os.waitpid(pid, 0)

    assert len(child_suffix) == 12
    assert child_suffix != parent_suffix
