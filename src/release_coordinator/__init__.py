"""release-coordinator: version bump, changelog and tag automation for CI."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version

DISTRIBUTION_NAME = "release-coordinator"


def package_version() -> str:
    """Installed package version, without local build metadata.

    Returns "0.0.0" when the distribution is not installed.
    """
    try:
        return _distribution_version(DISTRIBUTION_NAME).split("+")[0]
    except PackageNotFoundError:
        return "0.0.0"


__version__ = package_version()

__all__ = ["__version__", "package_version"]
