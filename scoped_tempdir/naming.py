"""
Random candidate names for temporary directories.

Suffixes are drawn uniformly from the ASCII alphanumeric alphabet using a
per-thread random.Random seeded from OS entropy. This is not meant to be
cryptographically secure; twelve characters over 62 symbols (~71 bits)
are enough that pre-creating candidates is infeasible within the retry
bound.
"""

from __future__ import annotations

import os
import random
import string
import threading
from typing import Optional

from .config import NUM_RAND_CHARS


ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits

_local = threading.local()


def _thread_rng() -> random.Random:
    # A forked child inherits the parent's generator state; reseed per pid.
    pid = os.getpid()
    rng = getattr(_local, "rng", None)
    if rng is None or getattr(_local, "pid", None) != pid:
        # Seeded from os.urandom
        rng = random.Random()
        _local.rng = rng
        _local.pid = pid
    return rng


def generate_suffix(
    length: int = NUM_RAND_CHARS,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Return `length` random characters from ALPHABET.

    Parameters
    ----------
    length : int
        Number of characters; must be at least 1.
    rng : random.Random, optional
        Source of randomness. Defaults to this thread's generator.
    """
    if length < 1:
        raise ValueError(f"suffix length must be at least 1, got {length}")
    rng = rng or _thread_rng()
    return "".join(rng.choices(ALPHABET, k=length))


def candidate_name(prefix: str, suffix: str) -> str:
    """
    Join prefix and suffix with a ".".

    With an empty prefix the bare suffix is returned, so the name never
    begins with "." and does not end up hidden on systems that treat
    dot-files as hidden.
    """
    if prefix:
        return f"{prefix}.{suffix}"
    return suffix


__all__ = [
    "ALPHABET",
    "generate_suffix",
    "candidate_name",
]
