"""
Rule evaluators for portability standards.

Each evaluator returns ``True`` when the path complies with the rule. The
ones that need filesystem state take it as arguments (size, mode, link
count) or perform a single directory read; ``OSError`` from that read is
left to the caller so it can be reported rather than treated as a pass.
"""

from __future__ import annotations

import os
import stat

from standardcheck.catalog.models import CharlistMode

SEPARATOR = "/"


def check_path_length(path: str, limit: int) -> bool:
    """Compare the literal path string against ``limit`` characters."""
    return len(path) <= limit


def check_component_length(path: str, limit: int) -> bool:
    """Every ``/``-separated segment must be at most ``limit`` characters.

    Empty segments from leading, trailing or doubled separators are ignored,
    so ``"/"`` has no components and passes.
    """
    return all(len(component) <= limit for component in path.split(SEPARATOR) if component)


def check_characters(path: str, charlist: str, mode: CharlistMode) -> bool:
    """Validate every character of ``path`` against ``charlist``."""
    chars = set(charlist)
    if mode is CharlistMode.WHITELIST:
        return all(ch in chars for ch in path)
    return not any(ch in chars for ch in path)


def check_file_size(size: int, limit: int) -> bool:
    return size <= limit


def check_directory_entries(path: str, limit: int) -> bool:
    """Count regular files directly inside ``path``; stop once over ``limit``."""
    count = 0
    with os.scandir(path) as entries:
        for entry in entries:
            if not entry.is_file(follow_symlinks=False):
                continue
            count += 1
            if count > limit:
                return False
    return True


def check_symlink(mode: int, allowed: bool) -> bool:
    return allowed or not stat.S_ISLNK(mode)


def check_hardlink(mode: int, nlink: int, allowed: bool) -> bool:
    # Directories always carry extra links for "." and their subdirectories.
    if allowed or stat.S_ISDIR(mode):
        return True
    return nlink <= 1


def check_duplicate_name(path: str, allowed: bool) -> bool:
    """Fail when a sibling differs from this entry's name only by case."""
    if allowed:
        return True
    stripped = path.rstrip(SEPARATOR)
    name = os.path.basename(stripped)
    if not name or name in (".", ".."):
        return True
    parent = os.path.dirname(stripped) or "."
    folded = name.casefold()
    with os.scandir(parent) as entries:
        for entry in entries:
            if entry.name != name and entry.name.casefold() == folded:
                return False
    return True


__all__ = [
    "check_characters",
    "check_component_length",
    "check_directory_entries",
    "check_duplicate_name",
    "check_file_size",
    "check_hardlink",
    "check_path_length",
    "check_symlink",
]
