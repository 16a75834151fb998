"""Template parser.

Turns template source into a tree of :mod:`~viteforge.templating.nodes`.
The source is scanned left to right for ``{{``; each directive found there is
turned into a node.  For block openers the body is located with
:func:`~viteforge.templating.matcher.find_matching_close` and parsed
recursively, so nesting is resolved once, at parse time, rather than by
repeatedly splicing rendered text back into the source.

Malformed directives never raise: an opener without a matching close is kept
as literal text (and reported as a diagnostic), and anything else that looks
like a directive but is not one passes through untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import Diagnostic, DiagnosticKind
from .matcher import (
    BLOCK_KINDS,
    ELSE_TAG,
    NOT_FOUND,
    OPEN_PATTERNS,
    PATH_PATTERN,
    BlockSpan,
    find_else_at_same_level,
    match_block,
)
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

_COMMENT = re.compile(r"\{\{!--.*?--\}\}", re.DOTALL)
_PARTIAL = re.compile(r"\{\{>\s*([\w./-]+)\s*\}\}")
_RAW_VARIABLE = re.compile(r"\{\{\{\s*(" + PATH_PATTERN + r")\s*\}\}\}")
_VARIABLE = re.compile(r"\{\{\s*(" + PATH_PATTERN + r")\s*\}\}")


def strip_comments(source: str, keep_lines: bool = False) -> str:
    """Remove every ``{{!-- ... --}}`` comment.

    With *keep_lines* each comment is replaced by the newlines it spanned so
    that line numbers in the result still match the input.
    """
    if keep_lines:
        return _COMMENT.sub(lambda m: "\n" * m.group(0).count("\n"), source)
    return _COMMENT.sub("", source)


@dataclass(frozen=True)
class ParseResult:
    """Nodes of a parsed template plus anything recovered from along the way."""

    nodes: Tuple[TemplateNode, ...]
    diagnostics: Tuple[Diagnostic, ...] = ()


class TemplateParser:
    """Parses template source into a node tree."""

    def parse(self, source: str) -> ParseResult:
        diagnostics: List[Diagnostic] = []
        nodes = self._parse_nodes(strip_comments(source), diagnostics)
        return ParseResult(nodes=nodes, diagnostics=tuple(diagnostics))

    # -- Scanning ----------------------------------------------------------

    def _parse_nodes(
        self, source: str, diagnostics: List[Diagnostic]
    ) -> Tuple[TemplateNode, ...]:
        nodes: List[TemplateNode] = []
        pending: List[str] = []

        def flush_text() -> None:
            text = "".join(pending)
            pending.clear()
            if text:
                nodes.append(Text(text))

        pos = 0
        while pos < len(source):
            start = source.find("{{", pos)
            if start == NOT_FOUND:
                pending.append(source[pos:])
                break
            pending.append(source[pos:start])

            node, end = self._parse_directive(source, start, diagnostics)
            if node is None:
                pending.append(source[start:end])
            else:
                flush_text()
                nodes.append(node)
            pos = end

        flush_text()
        return tuple(nodes)

    def _parse_directive(
        self, source: str, start: int, diagnostics: List[Diagnostic]
    ) -> Tuple[Optional[TemplateNode], int]:
        """Parse the directive at *start*.

        Returns the node (or ``None`` when the text at *start* is to be kept
        literally) and the position where scanning resumes.
        """
        if source.startswith("{{#", start):
            for kind in BLOCK_KINDS:
                opener = OPEN_PATTERNS[kind].match(source, start)
                if opener is None:
                    continue
                span = match_block(source, kind, start)
                if span is None:
                    diagnostics.append(Diagnostic(
                        kind=DiagnosticKind.UNMATCHED_BLOCK,
                        message=f"Unmatched {{{{#{kind}}}}} block: {opener.group(0)}",
                        detail=opener.group(0),
                    ))
                    return None, opener.end()
                return self._build_block(source, span, diagnostics), span.end

        match = _PARTIAL.match(source, start)
        if match:
            return Partial(match.group(1)), match.end()

        match = _RAW_VARIABLE.match(source, start)
        if match:
            return RawVariable(match.group(1)), match.end()

        match = _VARIABLE.match(source, start)
        if match:
            return Variable(match.group(1)), match.end()

        return None, start + 1

    # -- Blocks ------------------------------------------------------------

    def _build_block(
        self, source: str, span: BlockSpan, diagnostics: List[Diagnostic]
    ) -> TemplateNode:
        body = span.body(source)

        if span.kind == "if":
            else_index = find_else_at_same_level(body)
            if else_index == NOT_FOUND:
                then_src, else_src = body, ""
            else:
                then_src = body[:else_index]
                else_src = body[else_index + len(ELSE_TAG):]
            return IfElse(
                condition=span.argument,
                then_nodes=self._parse_nodes(then_src, diagnostics),
                else_nodes=self._parse_nodes(else_src, diagnostics),
            )

        children = self._parse_nodes(body, diagnostics)
        if span.kind == "unless":
            return Unless(condition=span.argument, body=children)
        if span.kind == "each":
            return Each(path=span.argument, body=children)
        return With(path=span.argument, body=children)
