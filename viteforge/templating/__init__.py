"""Template engine for feature-driven project templates.

Quick usage::

    from viteforge.templating import TemplateEngine

    engine = TemplateEngine({"features": {"redux": True}, "projectName": "demo"})
    engine.process("name={{projectName}}{{#if features.redux}} +redux{{/if}}")
    # -> "name=demo +redux"
"""

from viteforge.templating.context import (
    compute_provider_order,
    create_template_context,
    create_template_engine,
)
from viteforge.templating.engine import RenderResult, TemplateEngine
from viteforge.templating.errors import (
    Diagnostic,
    DiagnosticKind,
    TemplateError,
    TemplateNotFoundError,
)
from viteforge.templating.escaper import escape_html
from viteforge.templating.linter import LintIssue, lint_directory, lint_template
from viteforge.templating.matcher import (
    NOT_FOUND,
    find_else_at_same_level,
    find_matching_close,
)
from viteforge.templating.partials import PartialStore
from viteforge.templating.resolver import resolve_path
from viteforge.templating.values import is_truthy
from viteforge.templating.whitespace import cleanup_whitespace

__all__ = [
    "NOT_FOUND",
    "Diagnostic",
    "DiagnosticKind",
    "LintIssue",
    "PartialStore",
    "RenderResult",
    "TemplateEngine",
    "TemplateError",
    "TemplateNotFoundError",
    "cleanup_whitespace",
    "compute_provider_order",
    "create_template_context",
    "create_template_engine",
    "escape_html",
    "find_else_at_same_level",
    "find_matching_close",
    "is_truthy",
    "lint_directory",
    "lint_template",
    "resolve_path",
]
