"""Home layer: catalog path resolution and file I/O (no Pydantic dependencies)."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from pipedit.errors import CatalogError

ENV_VAR = "PIPEDIT_STEPS"
CATALOG_FILENAMES = (".pipedit-steps.json", "pipedit-steps.json")


def resolve_catalog_path(cli_path: Optional[Path] = None) -> Optional[Path]:
    """
    Resolve the step catalog file with precedence:
    1. CLI --steps path
    2. PIPEDIT_STEPS env var
    3. CWD: .pipedit-steps.json or pipedit-steps.json (prefer .pipedit-steps.json)

    Returns None when nothing is configured, meaning an empty catalog.
    """
    if cli_path:
        return cli_path

    env = os.getenv(ENV_VAR)
    if env:
        return Path(env).expanduser()

    cwd = Path.cwd()
    for name in CATALOG_FILENAMES:
        p = cwd / name
        if p.exists():
            return p

    return None


def load_json(path: Path) -> Any:
    """Load and parse JSON file."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogError(f"Cannot read step catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Step catalog {path} is not valid JSON: {e}") from e


__all__ = ["CATALOG_FILENAMES", "ENV_VAR", "load_json", "resolve_catalog_path"]
