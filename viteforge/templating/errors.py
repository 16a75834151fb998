"""Error types and render diagnostics for the template engine.

Only a missing template file is a hard failure.  Everything else the engine
can run into while rendering (an opening block tag with no matching close, a
partial that does not exist) is recovered locally and reported as a
:class:`Diagnostic` so the rest of the file still renders.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TemplateError(Exception):
    """Base class for template engine errors."""


class TemplateNotFoundError(TemplateError, FileNotFoundError):
    """Raised when a template file does not exist under the template root."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Template file not found: {path}")
        self.path = path


class DiagnosticKind(str, Enum):
    UNMATCHED_BLOCK = "unmatched_block"
    MISSING_PARTIAL = "missing_partial"
    PARTIAL_DEPTH = "partial_depth"


@dataclass(frozen=True)
class Diagnostic:
    """A recoverable problem found while compiling or rendering a template."""

    kind: DiagnosticKind
    message: str
    detail: str = ""

    def __str__(self) -> str:
        return self.message
