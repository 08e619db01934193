"""
Compliance evaluation of filesystem paths against portability standards.

The engine runs the rule evaluators for every resolved standard and records
one violation per breached rule.
"""

from .engine import ComplianceEngine, check_paths, evaluate_path
from .types import SYSTEM_STANDARD, ComplianceRun, ErrorKind, ViolationRecord

__all__ = [
    "ComplianceEngine",
    "ComplianceRun",
    "ErrorKind",
    "SYSTEM_STANDARD",
    "ViolationRecord",
    "check_paths",
    "evaluate_path",
]
