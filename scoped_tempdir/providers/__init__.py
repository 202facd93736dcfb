"""
scoped_tempdir - Provider package.

Provides:

    - FilesystemProvider: protocol for atomic mkdir / recursive removal
    - EnvironmentProvider: protocol for env lookup / current directory
    - LocalFilesystem: default local disk implementation
    - ProcessEnvironment: default live process environment
    - MappingEnvironment: fixed snapshot environment
    - ensure_filesystem / ensure_environment: runtime validators
"""

from .base import (
    FilesystemProvider,
    EnvironmentProvider,
    ensure_filesystem,
    ensure_environment,
)
from .local_fs import LocalFilesystem
from .environment import ProcessEnvironment, MappingEnvironment

__all__ = [
    "FilesystemProvider",
    "EnvironmentProvider",
    "ensure_filesystem",
    "ensure_environment",
    "LocalFilesystem",
    "ProcessEnvironment",
    "MappingEnvironment",
]
