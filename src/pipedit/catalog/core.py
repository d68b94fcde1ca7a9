"""Core catalog state management."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .directory import StepCatalog
from .home import load_json, resolve_catalog_path

logger = logging.getLogger(__name__)

_CATALOG: StepCatalog | None = None
_CATALOG_PATH: Path | None = None


def reset() -> None:
    """Reset cached catalog (primarily for tests)."""

    global _CATALOG, _CATALOG_PATH
    _CATALOG = None
    _CATALOG_PATH = None


def catalog_path() -> Path | None:
    """Return the path the active catalog was loaded from, if any."""

    return _CATALOG_PATH


def install(catalog_obj: StepCatalog, path: Path | None = None) -> StepCatalog:
    """Cache an already built catalog."""

    global _CATALOG, _CATALOG_PATH
    _CATALOG = catalog_obj
    _CATALOG_PATH = path
    return catalog_obj


def use(path: Path | str | None = None) -> StepCatalog:
    """Load the catalog from ``path`` (or fallback locations) and cache it."""

    target: Optional[Path]
    if path is None:
        target = None
    elif isinstance(path, Path):
        target = path
    else:
        target = Path(path)

    resolved = resolve_catalog_path(target)
    if resolved is None:
        logger.debug("No step catalog configured; all steps are unknown")
        return install(StepCatalog(), None)

    catalog_obj = StepCatalog.from_data(load_json(resolved))
    logger.debug("Loaded %d step schemas from %s", len(catalog_obj), resolved)
    return install(catalog_obj, resolved)


def current() -> StepCatalog:
    """Return the cached catalog, or an empty one if none was loaded."""

    if _CATALOG is None:
        return StepCatalog()
    return _CATALOG


__all__ = ["catalog_path", "current", "install", "reset", "use"]
