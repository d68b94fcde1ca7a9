"""Errors raised while converting between pipeline JSON and the editor tree."""

from __future__ import annotations

from typing import Optional


class ConversionError(Exception):
    """Base error for a failed conversion.

    ``path`` locates the offending node, e.g.
    ``pipeline.stages[0].branches[0].steps[1]``.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class MalformedPipeline(ConversionError):
    """Document is not a pipeline (missing root, non-list collections)."""

    pass


class MalformedStage(ConversionError):
    """Stage has neither or both of ``branches`` and ``parallel``."""

    pass


class MalformedArguments(ConversionError):
    """Step arguments mix named and unnamed values, or hold several unnamed ones."""

    pass


class ValidationError(ConversionError):
    """Editor tree cannot be encoded (missing name, conflicting contents)."""

    pass


class CatalogError(Exception):
    """Step catalog could not be loaded."""

    pass


__all__ = [
    "CatalogError",
    "ConversionError",
    "MalformedArguments",
    "MalformedPipeline",
    "MalformedStage",
    "ValidationError",
]
