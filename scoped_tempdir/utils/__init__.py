"""
scoped_tempdir.utils

Lightweight utility helpers shared across scoped_tempdir.

This package aggregates:

    - temp:   best-effort cleanup of temporary directories
    - paths:  absolute-root and candidate-path builders

All public symbols from these modules are re-exported for convenience.
"""

from . import temp
from . import paths

# Re-export all public symbols from the submodules
from .temp import *        # noqa: F401,F403
from .paths import *       # noqa: F401,F403

__all__ = (
    temp.__all__
    + paths.__all__
)
