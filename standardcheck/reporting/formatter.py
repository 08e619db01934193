"""
Output formatting for violation records.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from standardcheck.compliance.types import ViolationRecord

DEFAULT_DELIMITER = ":"
OUTPUT_FORMATS = ("text", "json")


def format_text(record: ViolationRecord, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Render ``ERRCODE<d>STANDARD<d>"path"``."""
    return f'{record.error_kind.value}{delimiter}{record.standard_name}{delimiter}"{record.path}"'


def record_to_dict(record: ViolationRecord) -> Dict[str, Any]:
    return {
        "error": record.error_kind.value,
        "standard": record.standard_name,
        "path": record.path,
    }


def format_json(record: ViolationRecord) -> str:
    return json.dumps(record_to_dict(record), ensure_ascii=False)


def format_record(record: ViolationRecord, output_format: str = "text", delimiter: str = DEFAULT_DELIMITER) -> str:
    if output_format == "json":
        return format_json(record)
    if output_format == "text":
        return format_text(record, delimiter)
    raise ValueError(f"Unsupported output format: {output_format}")


__all__ = [
    "DEFAULT_DELIMITER",
    "OUTPUT_FORMATS",
    "format_json",
    "format_record",
    "format_text",
    "record_to_dict",
]
