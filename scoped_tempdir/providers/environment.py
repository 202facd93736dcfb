"""
Environment providers.

ProcessEnvironment reads the live process state on every call, so
changes to os.environ or the working directory between two allocations
are always observed. MappingEnvironment is a fixed snapshot.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional, Union

from .base import EnvironmentProvider


class ProcessEnvironment(EnvironmentProvider):
    """Live view of os.environ and os.getcwd()."""

    def get(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def current_dir(self) -> Path:
        return Path(os.getcwd())

    def __repr__(self) -> str:
        return "ProcessEnvironment()"


class MappingEnvironment(EnvironmentProvider):
    """
    Environment backed by a plain mapping.

    Parameters
    ----------
    variables : Mapping[str, str]
        Variable names and values. Copied at construction.
    cwd : Optional[str | Path]
        Working directory to report. If None, current_dir() raises
        FileNotFoundError, the same way os.getcwd() does when the
        working directory has been deleted.
    """

    def __init__(
        self,
        variables: Optional[Mapping[str, str]] = None,
        cwd: Optional[Union[str, Path]] = None,
    ) -> None:
        self.variables = dict(variables or {})
        self.cwd = Path(cwd) if cwd is not None else None

    def get(self, name: str) -> Optional[str]:
        return self.variables.get(name)

    def current_dir(self) -> Path:
        if self.cwd is None:
            raise FileNotFoundError("no working directory configured")
        return self.cwd

    def __repr__(self) -> str:
        return f"MappingEnvironment({sorted(self.variables)}, cwd={self.cwd})"
