"""
Rule records describing a filesystem portability standard.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CharlistMode(str, Enum):
    """How a standard's charlist is applied to a path."""

    WHITELIST = "whitelist"
    BLACKLIST = "blacklist"


class StandardRule(BaseModel):
    """Limits and restrictions of one named standard.

    Limits left as ``None`` are not applicable. Link and duplicate flags
    default to allowed: a standard only disallows what its catalog entry
    explicitly sets to ``false``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    charlist: Optional[str] = Field(default=None, min_length=1)
    charlist_mode: CharlistMode = CharlistMode.BLACKLIST
    size_limit: Optional[int] = Field(default=None, ge=1)
    max_entries: Optional[int] = Field(default=None, ge=1)
    max_component_length: Optional[int] = Field(default=None, ge=1)
    max_path_length: Optional[int] = Field(default=None, ge=1)
    duplicates_allowed: bool = True
    symlinks_allowed: bool = True
    hardlinks_allowed: bool = True


class CatalogDocument(BaseModel):
    """Top-level shape of a catalog JSON file."""

    model_config = ConfigDict(extra="forbid")

    standards: List[StandardRule]


__all__ = ["CatalogDocument", "CharlistMode", "StandardRule"]
