"""
Runtime settings resolved from the environment.

Values may come from a ``.env`` file (loaded by the CLI via python-dotenv)
or the process environment; command-line flags override them.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_STANDARDS = "TESTING"
DEFAULT_DELIMITER = ":"
DEFAULT_FORMAT = "text"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(slots=True)
class Settings:
    """Checker configuration before command-line overrides."""

    standards: str = DEFAULT_STANDARDS
    delimiter: str = DEFAULT_DELIMITER
    output_format: str = DEFAULT_FORMAT
    catalog_path: Optional[Path] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from ``environ`` (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    catalog = (env.get("STANDARDCHECK_CATALOG") or "").strip()
    return Settings(
        standards=env.get("STANDARDCHECK_STANDARDS") or DEFAULT_STANDARDS,
        delimiter=env.get("STANDARDCHECK_DELIMITER") or DEFAULT_DELIMITER,
        output_format=(env.get("STANDARDCHECK_FORMAT") or DEFAULT_FORMAT).lower(),
        catalog_path=Path(catalog) if catalog else None,
        log_level=env.get("STANDARDCHECK_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
    )


__all__ = ["Settings", "load_settings"]
