"""Rendering of violation records for the command line."""

from .formatter import DEFAULT_DELIMITER, OUTPUT_FORMATS, format_record

__all__ = ["DEFAULT_DELIMITER", "OUTPUT_FORMATS", "format_record"]
