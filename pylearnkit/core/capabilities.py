"""
Capability registry for optional numeric backends.

This module is the SINGLE SOURCE OF TRUTH for capability strings and the
backends that provide them. Import from here, never use raw strings.

A capability is available only when its backend distribution is installed
AND meets the minimum version. Resolution happens once per process and is
cached; reset_capabilities() clears the cache (tests, late installs).

Usage:
    from pylearnkit.core.capabilities import (
        CAPABILITY_LINALG,
        check_capability,
    )

    if check_capability(CAPABILITY_LINALG, warn=False):
        ...  # scipy fast path
    else:
        ...  # numpy fallback
"""

from __future__ import annotations

import functools
import warnings
from dataclasses import dataclass
from importlib import metadata

from packaging.version import parse as V

from pylearnkit.core.exceptions import BackendUnavailableWarning

# Dense linear algebra beyond numpy.linalg (LAPACK drivers via SciPy)
CAPABILITY_LINALG = 'linalg'

# Fork-join worker pool for independent tasks
CAPABILITY_PARALLEL = 'parallel'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_LINALG,
    CAPABILITY_PARALLEL,
})


@dataclass(frozen=True)
class BackendRequirement:
    """
    What an optional capability needs to be installed.

    Attributes:
        capability: Capability string this backend provides
        distribution: Name of the distribution on the package index
        min_version: Oldest release implementing what pylearnkit calls
    """
    capability: str
    distribution: str
    min_version: str


@dataclass(frozen=True)
class BackendStatus:
    """
    Resolved state of one optional backend.

    Attributes:
        requirement: The requirement that was checked
        installed_version: Installed version string, or None if absent
    """
    requirement: BackendRequirement
    installed_version: str | None

    @property
    def available(self) -> bool:
        """True if the backend is installed and new enough."""
        if self.installed_version is None:
            return False
        return V(self.installed_version) >= V(self.requirement.min_version)

    @property
    def reason(self) -> str:
        """Why the backend is unavailable ('' when available)."""
        req = self.requirement
        if self.installed_version is None:
            return (
                f"If you want to use features that depend on {req.distribution}, "
                f"install {req.distribution}>={req.min_version}."
            )
        if not self.available:
            return (
                f"The installed {req.distribution} {self.installed_version} does not "
                f"implement the methods required by pylearnkit. "
                f"Please install {req.distribution} {req.min_version} or later."
            )
        return ''


BACKEND_REQUIREMENTS: dict[str, BackendRequirement] = {
    CAPABILITY_LINALG: BackendRequirement(CAPABILITY_LINALG, 'scipy', '1.6.0'),
    CAPABILITY_PARALLEL: BackendRequirement(CAPABILITY_PARALLEL, 'joblib', '1.0.0'),
}


def _installed_version(distribution: str) -> str | None:
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return None


@functools.lru_cache(maxsize=None)
def backend_status(capability: str) -> BackendStatus:
    """
    Resolve (once) whether the backend for a capability is usable.

    Args:
        capability: One of ALL_CAPABILITIES

    Returns:
        BackendStatus for the capability

    Raises:
        ValueError: If the capability string is unknown
    """
    if capability not in BACKEND_REQUIREMENTS:
        raise ValueError(
            f"Unknown capability: {capability!r}. "
            f"Expected one of {sorted(ALL_CAPABILITIES)}"
        )
    requirement = BACKEND_REQUIREMENTS[capability]
    return BackendStatus(
        requirement=requirement,
        installed_version=_installed_version(requirement.distribution),
    )


def available_capabilities() -> frozenset[str]:
    """Capabilities whose backends are installed and new enough."""
    return frozenset(c for c in ALL_CAPABILITIES if backend_status(c).available)


def check_capability(
    capability: str,
    warn: bool = True,
    capabilities: frozenset[str] | None = None,
) -> bool:
    """
    Check a capability, optionally warning when it is missing.

    Never raises for a missing backend: the caller is expected to take
    its sequential / pure-numpy path when this returns False.

    Args:
        capability: One of ALL_CAPABILITIES
        warn: Emit BackendUnavailableWarning if unavailable
        capabilities: Explicit capability set to check against instead of
            the process-wide registry (injected by estimators and tests)

    Returns:
        True if the capability can be used
    """
    status = backend_status(capability)
    if capabilities is None:
        usable = status.available
    else:
        usable = capability in capabilities

    if not usable and warn:
        reason = status.reason or (
            f"The {capability!r} capability is disabled for this estimator."
        )
        warnings.warn(reason, BackendUnavailableWarning, stacklevel=3)
    return usable


def reset_capabilities() -> None:
    """Forget cached backend resolution."""
    backend_status.cache_clear()


__all__ = [
    'CAPABILITY_LINALG',
    'CAPABILITY_PARALLEL',
    'ALL_CAPABILITIES',
    'BACKEND_REQUIREMENTS',
    'BackendRequirement',
    'BackendStatus',
    'available_capabilities',
    'backend_status',
    'check_capability',
    'reset_capabilities',
]
