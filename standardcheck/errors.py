"""Exceptions raised by the standardcheck library."""

from __future__ import annotations


class StandardCheckError(Exception):
    """Base class for configuration errors that abort a run."""


class CatalogError(StandardCheckError):
    """The standards catalog could not be loaded or is malformed."""


class UnknownStandardError(CatalogError):
    """A requested standard name is not present in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid standard: {name}")


__all__ = ["CatalogError", "StandardCheckError", "UnknownStandardError"]
