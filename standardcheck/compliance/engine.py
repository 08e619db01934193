"""
Compliance engine applying catalog standards to filesystem paths.
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Set

from standardcheck.catalog.models import StandardRule
from standardcheck.compliance import evaluators
from standardcheck.compliance.types import (
    SYSTEM_STANDARD,
    ComplianceRun,
    ErrorKind,
    ViolationCallback,
    ViolationRecord,
)

logger = logging.getLogger("standardcheck.compliance")


def error_kind_for(exc: OSError) -> ErrorKind:
    """Map a metadata or directory read failure onto a reportable kind."""
    if isinstance(exc, PermissionError):
        return ErrorKind.PERMISSION_DENIED
    return ErrorKind.PATH_NOT_FOUND


@dataclass(slots=True)
class _PathProbe:
    """Filesystem reads for one path, shared by every standard.

    Each read happens at most once. A failed read is reported once against
    ``SYSTEM``; later standards needing it skip the dependent check.
    """

    path: str
    lstat: os.stat_result
    run: ComplianceRun
    _results: Dict[str, Any] = field(default_factory=dict)
    _failed: Set[str] = field(default_factory=set)

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.lstat.st_mode)

    def read(self, key: str, reader: Callable[[], Any], failure_kind: Optional[ErrorKind] = None) -> Any:
        """Return the cached result of ``reader``.

        ``failure_kind`` fixes the reported kind; otherwise it is derived
        from the exception.
        """
        if key in self._failed:
            return None
        if key not in self._results:
            try:
                self._results[key] = reader()
            except OSError as exc:
                logger.debug("%s read failed for %r: errno=%s %s", key, self.path, exc.errno, exc.strerror)
                self._failed.add(key)
                kind = failure_kind or error_kind_for(exc)
                self.run.record(ViolationRecord(SYSTEM_STANDARD, kind, self.path))
                return None
        return self._results[key]


class ComplianceEngine:
    """Evaluates paths against an ordered sequence of standards."""

    def __init__(self, rules: Sequence[StandardRule]):
        self.rules: tuple[StandardRule, ...] = tuple(rules)

    def evaluate(self, path: str, run: Optional[ComplianceRun] = None) -> List[ViolationRecord]:
        """Check ``path`` against every configured standard.

        Returns the records produced for this path; they are also appended to
        ``run`` when one is supplied.
        """
        if run is None:
            run = ComplianceRun()
        start = len(run.violations)
        run.paths_checked += 1

        try:
            lstat_result = os.lstat(path)
        except OSError as exc:
            logger.debug("lstat failed for %r: errno=%s %s", path, exc.errno, exc.strerror)
            run.record(ViolationRecord(SYSTEM_STANDARD, error_kind_for(exc), path))
            return run.violations[start:]
        except ValueError as exc:
            # Embedded NUL bytes cannot name any file.
            logger.debug("lstat rejected %r: %s", path, exc)
            run.record(ViolationRecord(SYSTEM_STANDARD, ErrorKind.PATH_NOT_FOUND, path))
            return run.violations[start:]

        probe = _PathProbe(path=path, lstat=lstat_result, run=run)
        for rule in self.rules:
            self._check_rule(probe, rule)
        return run.violations[start:]

    def run(self, paths: Iterable[str], on_violation: Optional[ViolationCallback] = None) -> ComplianceRun:
        """Evaluate each path in order and return the aggregate result."""
        result = ComplianceRun(on_violation=on_violation)
        for path in paths:
            self.evaluate(path, result)
        logger.debug(
            "Checked %d path(s) against %d standard(s): %d violation(s)",
            result.paths_checked,
            len(self.rules),
            len(result.violations),
        )
        return result

    def _check_rule(self, probe: _PathProbe, rule: StandardRule) -> None:
        path = probe.path

        if rule.max_path_length is not None:
            if not evaluators.check_path_length(path, rule.max_path_length):
                self._report(probe, rule, ErrorKind.PATH_TOO_LONG)

        if rule.max_component_length is not None:
            if not evaluators.check_component_length(path, rule.max_component_length):
                self._report(probe, rule, ErrorKind.COMPONENT_TOO_LONG)

        if rule.charlist is not None:
            if not evaluators.check_characters(path, rule.charlist, rule.charlist_mode):
                self._report(probe, rule, ErrorKind.INVALID_CHARACTER)

        if rule.size_limit is not None:
            followed = probe.read("stat", lambda: os.stat(path))
            if followed is not None and not evaluators.check_file_size(followed.st_size, rule.size_limit):
                self._report(probe, rule, ErrorKind.FILE_TOO_LARGE)

        if rule.max_entries is not None and probe.is_dir:
            limit = rule.max_entries
            # An unopenable directory always reads as missing for this check.
            within = probe.read(
                f"entries:{limit}",
                lambda: evaluators.check_directory_entries(path, limit),
                failure_kind=ErrorKind.PATH_NOT_FOUND,
            )
            if within is False:
                self._report(probe, rule, ErrorKind.TOO_MANY_ENTRIES)

        if not evaluators.check_symlink(probe.lstat.st_mode, rule.symlinks_allowed):
            self._report(probe, rule, ErrorKind.SYMLINK_NOT_ALLOWED)

        if not evaluators.check_hardlink(probe.lstat.st_mode, probe.lstat.st_nlink, rule.hardlinks_allowed):
            self._report(probe, rule, ErrorKind.HARDLINK_NOT_ALLOWED)

        if not rule.duplicates_allowed:
            unique = probe.read("siblings", lambda: evaluators.check_duplicate_name(path, False))
            if unique is False:
                self._report(probe, rule, ErrorKind.DUPLICATE_NAME)

    @staticmethod
    def _report(probe: _PathProbe, rule: StandardRule, kind: ErrorKind) -> None:
        probe.run.record(ViolationRecord(rule.name, kind, probe.path))


def evaluate_path(path: str, rules: Sequence[StandardRule]) -> List[ViolationRecord]:
    """Convenience wrapper returning the violations of a single path."""
    return ComplianceEngine(rules).evaluate(path)


def check_paths(
    paths: Iterable[str],
    rules: Sequence[StandardRule],
    on_violation: Optional[ViolationCallback] = None,
) -> ComplianceRun:
    """Check ``paths`` against ``rules``; ``on_violation`` streams each record."""
    return ComplianceEngine(rules).run(paths, on_violation=on_violation)


__all__ = ["ComplianceEngine", "check_paths", "error_kind_for", "evaluate_path"]
