"""
standardcheck package bootstrap.

Checks whether filesystem paths would be portable to legacy and modern
filesystem standards.
"""

from importlib import metadata


def get_version() -> str:
    """Return the package version if installed, else '0.0.0'."""
    try:
        return metadata.version("standardcheck")
    except metadata.PackageNotFoundError:  # pragma: no cover - best effort only
        return "0.0.0"


__all__ = ["get_version"]
