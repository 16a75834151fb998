"""Template engine.

Supported syntax:

- ``{{path}}`` - HTML-escaped interpolation
- ``{{{path}}}`` - raw interpolation
- ``{{#if path}}...{{else}}...{{/if}}`` - conditional, ``{{else}}`` optional
- ``{{#unless path}}...{{/unless}}`` - negated conditional
- ``{{#each path}}...{{/each}}`` - iteration with ``{{this}}``, ``{{@index}}``,
  ``{{@first}}`` and ``{{@last}}``
- ``{{#with path}}...{{/with}}`` - context switching
- ``{{> name}}`` - partial inclusion
- ``{{!-- comment --}}`` - removed from the output

Rendering is synchronous.  The only side effects are reads of template and
partial files; parsed templates and partial sources are cached per engine.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence

from ..config import EngineConfig
from ..utils import print_warning
from .errors import Diagnostic, DiagnosticKind, TemplateNotFoundError
from .escaper import escape_html
from .nodes import (
    Each,
    IfElse,
    Partial,
    RawVariable,
    TemplateNode,
    Text,
    Unless,
    Variable,
    With,
)
from .parser import ParseResult, TemplateParser
from .partials import PartialStore
from .resolver import resolve_path
from .values import Context, is_sequence, is_truthy, to_text
from .whitespace import cleanup_whitespace


def missing_partial_placeholder(name: str) -> str:
    """Text rendered in place of a partial that does not exist."""
    return f'<!-- Partial "{name}" not found -->'


@dataclass
class RenderResult:
    """Rendered text plus the problems recovered from while producing it."""

    text: str
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics


class TemplateEngine:
    """Renders templates against a base context.

    The base context is set at construction and can be updated with
    :meth:`set_context`.  Every render merges an optional per-call context on
    top of it (the call context wins on key collisions).

    Args:
        context: Base context shared by every render.
        config: Engine settings; defaults to the bundled template directory.
        partials: Partial store to read partials from.  When omitted one is
            built for ``config.partials_dir``.
    """

    def __init__(
        self,
        context: Optional[Mapping[str, Any]] = None,
        *,
        config: Optional[EngineConfig] = None,
        partials: Optional[PartialStore] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self._context: Context = dict(context or {})
        self.partials = (
            partials
            if partials is not None
            else PartialStore(self.config.partials_dir, self.config.extension)
        )
        self._parser = TemplateParser()
        self._compile = functools.lru_cache(maxsize=self.config.compile_cache_size)(
            self._parser.parse
        )

    # -- Context -----------------------------------------------------------

    @property
    def context(self) -> Context:
        """A copy of the base context."""
        return dict(self._context)

    def set_context(self, context: Mapping[str, Any]) -> None:
        """Shallow-merge *context* into the base context."""
        self._context = {**self._context, **context}

    @property
    def templates_dir(self) -> Path:
        return self.config.templates_dir

    # -- Public API --------------------------------------------------------

    def compile(self, template: str) -> ParseResult:
        """Parse *template*, reusing the cached tree for a repeated source.

        At most ``config.compile_cache_size`` trees are kept; the least
        recently used one is dropped first.
        """
        return self._compile(template)

    def cached_template_count(self) -> int:
        """Number of parsed trees currently cached."""
        return self._compile.cache_info().currsize

    def render(
        self, template: str, context: Optional[Mapping[str, Any]] = None
    ) -> RenderResult:
        """Render *template* and report what was recovered along the way."""
        ctx: Context = {**self._context, **(context or {})}
        compiled = self.compile(template)
        diagnostics = list(compiled.diagnostics)

        renderer = _Renderer(self, diagnostics)
        text = cleanup_whitespace(renderer.render(compiled.nodes, ctx))

        if self.config.verbose:
            for diagnostic in diagnostics:
                print_warning(f"Template warning: {diagnostic.message}")
        return RenderResult(text=text, diagnostics=diagnostics)

    def process(self, template: str, context: Optional[Mapping[str, Any]] = None) -> str:
        """Render a template string with the base context plus *context*.

        Never raises for malformed directives: they degrade to literal text,
        empty text, or a placeholder comment.
        """
        return self.render(template, context).text

    def process_file(
        self, template_path: str | Path, context: Optional[Mapping[str, Any]] = None
    ) -> str:
        """Render a template file.

        Relative paths are resolved against the template directory.

        Raises:
            TemplateNotFoundError: If the file does not exist.
        """
        full_path = self._full_path(template_path)
        if not full_path.is_file():
            raise TemplateNotFoundError(str(full_path))
        template = full_path.read_text(encoding="utf-8")
        return self.process(template, context)

    def template_exists(self, template_path: str | Path) -> bool:
        """Return ``True`` if *template_path* names an existing template file."""
        return self._full_path(template_path).is_file()

    def register_partial(self, name: str, source: str) -> bool:
        """Add an in-memory partial; the first registration of a name wins."""
        return self.partials.register(name, source)

    def _full_path(self, template_path: str | Path) -> Path:
        path = Path(template_path)
        return path if path.is_absolute() else self.templates_dir / path


class _Renderer:
    """Walks a parsed template once, context down."""

    def __init__(self, engine: TemplateEngine, diagnostics: List[Diagnostic]) -> None:
        self.engine = engine
        self.diagnostics = diagnostics
        self._partial_stack: List[str] = []

    def render(self, nodes: Sequence[TemplateNode], ctx: Context) -> str:
        return "".join(self._render_node(node, ctx) for node in nodes)

    def _render_node(self, node: TemplateNode, ctx: Context) -> str:
        if isinstance(node, Text):
            return node.text
        if isinstance(node, Variable):
            return escape_html(to_text(resolve_path(node.path, ctx)))
        if isinstance(node, RawVariable):
            return to_text(resolve_path(node.path, ctx))
        if isinstance(node, IfElse):
            branch = node.then_nodes if is_truthy(resolve_path(node.condition, ctx)) else node.else_nodes
            return self.render(branch, ctx)
        if isinstance(node, Unless):
            if is_truthy(resolve_path(node.condition, ctx)):
                return ""
            return self.render(node.body, ctx)
        if isinstance(node, Each):
            return self._render_each(node, ctx)
        if isinstance(node, With):
            value = resolve_path(node.path, ctx)
            if not isinstance(value, Mapping):
                return ""
            return self.render(node.body, {**ctx, **value})
        if isinstance(node, Partial):
            return self._render_partial(node, ctx)
        raise TypeError(f"Unknown template node: {type(node).__name__}")

    def _render_each(self, node: Each, ctx: Context) -> str:
        items = resolve_path(node.path, ctx)
        if not is_sequence(items):
            return ""

        last = len(items) - 1
        parts: List[str] = []
        for index, item in enumerate(items):
            item_ctx: Context = {
                **ctx,
                "this": item,
                "@index": index,
                "@first": index == 0,
                "@last": index == last,
            }
            if isinstance(item, Mapping):
                item_ctx.update(item)
            parts.append(self.render(node.body, item_ctx))
        return "".join(parts)

    def _render_partial(self, node: Partial, ctx: Context) -> str:
        if len(self._partial_stack) >= self.engine.config.max_partial_depth:
            chain = " > ".join([*self._partial_stack, node.name])
            self.diagnostics.append(Diagnostic(
                kind=DiagnosticKind.PARTIAL_DEPTH,
                message=f'Partial "{node.name}" exceeds the nesting limit',
                detail=chain,
            ))
            return f'<!-- Partial "{node.name}" exceeds nesting limit -->'

        source = self.engine.partials.load(node.name)
        if source is None:
            self.diagnostics.append(Diagnostic(
                kind=DiagnosticKind.MISSING_PARTIAL,
                message=f'Partial "{node.name}" not found',
                detail=node.name,
            ))
            return missing_partial_placeholder(node.name)

        compiled = self.engine.compile(source)
        self.diagnostics.extend(compiled.diagnostics)
        self._partial_stack.append(node.name)
        try:
            return self.render(compiled.nodes, ctx)
        finally:
            self._partial_stack.pop()
