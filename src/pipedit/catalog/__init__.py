"""Step catalog facade: schema directory, loading and cached state."""

from .core import catalog_path, current, install, reset, use
from .directory import SchemaDirectory, StepCatalog
from .home import load_json, resolve_catalog_path

__all__ = [
    "SchemaDirectory",
    "StepCatalog",
    "catalog_path",
    "current",
    "install",
    "load_json",
    "reset",
    "resolve_catalog_path",
    "use",
]
