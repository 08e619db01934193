"""
Dataclasses describing violation records and run-level results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

SYSTEM_STANDARD = "SYSTEM"


class ErrorKind(str, Enum):
    """Rule breaches the checker can detect; values are the printed codes."""

    PATH_TOO_LONG = "ERR_PATHLEN"
    COMPONENT_TOO_LONG = "ERR_COMPLEN"
    FILE_TOO_LARGE = "ERR_TOOBIG"
    INVALID_CHARACTER = "ERR_BADNAME"
    DUPLICATE_NAME = "ERR_DUPE"
    TOO_MANY_ENTRIES = "ERR_FILECOUNT"
    PERMISSION_DENIED = "ERR_PERMS"
    PATH_NOT_FOUND = "ERR_NOFILE"
    HARDLINK_NOT_ALLOWED = "ERR_HARDLINK"
    SYMLINK_NOT_ALLOWED = "ERR_SYMLINK"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ViolationRecord:
    """Single breach of one rule of one standard by one path."""

    standard_name: str
    error_kind: ErrorKind
    path: str


ViolationCallback = Callable[[ViolationRecord], None]


@dataclass(slots=True)
class ComplianceRun:
    """Accumulates violations for a run of the checker.

    ``violation_seen`` is sticky: the first recorded violation sets it and
    nothing clears it again. It drives the final exit status.
    """

    violations: List[ViolationRecord] = field(default_factory=list)
    on_violation: Optional[ViolationCallback] = None
    paths_checked: int = 0
    _violation_seen: bool = field(default=False, init=False, repr=False)

    @property
    def violation_seen(self) -> bool:
        return self._violation_seen

    def record(self, record: ViolationRecord) -> ViolationRecord:
        self.violations.append(record)
        self._violation_seen = True
        if self.on_violation is not None:
            self.on_violation(record)
        return record

    def for_path(self, path: str) -> List[ViolationRecord]:
        return [record for record in self.violations if record.path == path]


__all__ = [
    "ComplianceRun",
    "ErrorKind",
    "SYSTEM_STANDARD",
    "ViolationCallback",
    "ViolationRecord",
]
