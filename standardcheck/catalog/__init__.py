"""
Catalog of filesystem portability standards.

Standards are data: each entry in ``standards.json`` lists the limits a
target filesystem imposes on names, sizes, directories and links.
"""

from .loader import StandardCatalog, default_catalog, load_catalog, parse_catalog, resolve_list
from .models import CharlistMode, StandardRule

__all__ = [
    "CharlistMode",
    "StandardCatalog",
    "StandardRule",
    "default_catalog",
    "load_catalog",
    "parse_catalog",
    "resolve_list",
]
