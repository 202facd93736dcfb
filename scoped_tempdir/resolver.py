"""
Platform temp-root resolution.

The base directory for new temporary directories is chosen from an
ordered list of environment variables with a hard-coded fallback:

    unix      TMPDIR                             -> /tmp
    android   TMPDIR                             -> /data/local/tmp
    windows   TMP, TEMP, USERPROFILE, WINDIR     -> C:\\Windows

Android has no shared temp area (storage is usually allocated per app),
hence its own default.

A variable set to the empty string counts as unset. The result is
recomputed on every call and never cached, so changes to the environment
between calls are honoured.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

from .providers.base import EnvironmentProvider
from .providers.environment import ProcessEnvironment


UNIX = "unix"
ANDROID = "android"
WINDOWS = "windows"


# ----------------------------------------------------------------------
# Rule tables
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class EnvVarRule:
    """A single variable in a lookup chain."""
    name: str
    non_empty: bool = True

    def lookup(self, environment: EnvironmentProvider) -> Optional[str]:
        value = environment.get(self.name)
        if value is None:
            return None
        if self.non_empty and value == "":
            return None
        return value


@dataclass(frozen=True)
class PlatformTempRoots:
    """Ordered variable chain plus the unconditional default."""
    variables: Tuple[EnvVarRule, ...]
    default: str

    def resolve(self, environment: EnvironmentProvider) -> Path:
        for rule in self.variables:
            value = rule.lookup(environment)
            if value is not None:
                return Path(value)
        return Path(self.default)


PLATFORM_RULES: Dict[str, PlatformTempRoots] = {
    UNIX: PlatformTempRoots(
        variables=(EnvVarRule("TMPDIR"),),
        default="/tmp",
    ),
    ANDROID: PlatformTempRoots(
        variables=(EnvVarRule("TMPDIR"),),
        default="/data/local/tmp",
    ),
    WINDOWS: PlatformTempRoots(
        variables=(
            EnvVarRule("TMP"),
            EnvVarRule("TEMP"),
            EnvVarRule("USERPROFILE"),
            EnvVarRule("WINDIR"),
        ),
        default="C:\\Windows",
    ),
}


# ----------------------------------------------------------------------
# Platform detection
# ----------------------------------------------------------------------

def detect_platform(
    sys_platform: Optional[str] = None,
    os_name: Optional[str] = None,
) -> str:
    """
    Classify the running interpreter as "unix", "android" or "windows".

    Both arguments default to the live values (sys.platform, os.name) and
    exist so every branch can be exercised on any host. The live os.name
    is only consulted when sys_platform is omitted too, so an explicit
    sys_platform alone always decides.
    """
    live = sys_platform is None
    sys_platform = sys.platform if live else sys_platform
    if os_name is None:
        os_name = os.name if live else ""

    if os_name == "nt" or sys_platform == "win32":
        return WINDOWS
    # Before 3.13 Android builds report "linux"; getandroidapilevel gives them away.
    if sys_platform == "android" or (live and hasattr(sys, "getandroidapilevel")):
        return ANDROID
    return UNIX


def rules_for(platform: str) -> PlatformTempRoots:
    try:
        return PLATFORM_RULES[platform]
    except KeyError:
        raise ValueError(
            f"Unknown platform {platform!r}; expected one of {sorted(PLATFORM_RULES)}"
        ) from None


# ----------------------------------------------------------------------
# Public entry point
# ----------------------------------------------------------------------

def resolve(
    environment: Optional[EnvironmentProvider] = None,
    platform: Optional[str] = None,
) -> Path:
    """
    Return the base directory for temporary directories.

    Parameters
    ----------
    environment : EnvironmentProvider, optional
        Where to read variables from. Defaults to the live process
        environment.
    platform : str, optional
        "unix", "android" or "windows". Defaults to detect_platform().

    Returns
    -------
    Path
        Never fails; falls back to the platform default.
    """
    environment = environment or ProcessEnvironment()
    return rules_for(platform or detect_platform()).resolve(environment)


__all__ = [
    "UNIX",
    "ANDROID",
    "WINDOWS",
    "EnvVarRule",
    "PlatformTempRoots",
    "PLATFORM_RULES",
    "detect_platform",
    "rules_for",
    "resolve",
]
