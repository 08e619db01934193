"""
Standards catalog loading and name resolution.

The catalog is a JSON document (``{"standards": [...]}``) validated with
pydantic. The embedded ``standards.json`` ships with the package; callers may
point at another file to check against a different set of standards
without touching the evaluators.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence

from pydantic import ValidationError

from standardcheck.catalog.models import CatalogDocument, StandardRule
from standardcheck.errors import CatalogError, UnknownStandardError

logger = logging.getLogger("standardcheck.catalog")

EMBEDDED_CATALOG = "standards.json"


class StandardCatalog:
    """Immutable, ordered collection of standards keyed case-insensitively."""

    def __init__(self, rules: Sequence[StandardRule]):
        self._rules: tuple[StandardRule, ...] = tuple(rules)
        self._index: Dict[str, StandardRule] = {}
        for rule in self._rules:
            key = rule.name.casefold()
            if key in self._index:
                raise CatalogError(
                    f"Duplicate standard name '{rule.name}' "
                    f"(conflicts with '{self._index[key].name}')"
                )
            self._index[key] = rule

    def __iter__(self) -> Iterator[StandardRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._index

    def names(self) -> List[str]:
        return [rule.name for rule in self._rules]

    def lookup(self, name: str) -> StandardRule:
        """Return the standard called ``name`` (case-insensitive)."""
        rule = self._index.get(name.casefold()) if name else None
        if rule is None:
            raise UnknownStandardError(name)
        return rule

    def resolve_list(self, names: str) -> List[StandardRule]:
        """Resolve a comma-separated list of names, preserving order and repeats.

        Empty input or an empty token is rejected rather than resolving to
        zero standards.
        """
        tokens = names.split(",")
        return [self.lookup(token) for token in tokens]


def _read_embedded() -> str:
    return resources.files("standardcheck.catalog").joinpath(EMBEDDED_CATALOG).read_text(encoding="utf-8")


def parse_catalog(text: str, *, source: str = "<string>") -> StandardCatalog:
    """Build a catalog from JSON text."""
    try:
        document = CatalogDocument.model_validate(json.loads(text))
    except (json.JSONDecodeError, ValidationError) as exc:
        raise CatalogError(f"Invalid standards catalog {source}: {exc}") from exc
    catalog = StandardCatalog(document.standards)
    logger.debug("Loaded %d standards from %s", len(catalog), source)
    return catalog


def load_catalog(path: Optional[Path] = None) -> StandardCatalog:
    """Load the catalog from ``path``, or the embedded one when omitted."""
    if path is None:
        return parse_catalog(_read_embedded(), source=f"package:{EMBEDDED_CATALOG}")
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Unable to read standards catalog {path}: {exc}") from exc
    return parse_catalog(text, source=str(path))


@lru_cache(maxsize=1)
def default_catalog() -> StandardCatalog:
    return load_catalog()


def resolve_list(names: str, catalog: Optional[StandardCatalog] = None) -> List[StandardRule]:
    """Resolve ``names`` against ``catalog`` (the embedded catalog by default)."""
    if catalog is None:
        catalog = default_catalog()
    return catalog.resolve_list(names)


__all__ = [
    "StandardCatalog",
    "default_catalog",
    "load_catalog",
    "parse_catalog",
    "resolve_list",
]
