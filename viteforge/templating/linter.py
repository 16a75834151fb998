"""Static checks for template sources.

Catches the mistakes that tend to slip into hand-written templates: a block
closed with one brace too many, misspelt block keywords, and openers that
never get closed.  Rendering would not fail on any of these (the engine
degrades gracefully) but the generated project would silently be wrong.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from .matcher import BLOCK_KINDS, BlockSpan, close_literal, find_blocks
from .parser import strip_comments

_BRACE_COLLISION = re.compile(r"\{\{/[^}]+\}\}\}")

_TYPOS: tuple[tuple[str, str], ...] = (
    ("{{#fi ", 'Typo: "{{#fi" should be "{{#if"'),
    ("{{#elseif", 'Invalid syntax: "{{#elseif" should be a nested {{#if}}'),
    ("{{elseif", 'Invalid syntax: "{{elseif" is not supported'),
    ("{{ #if", 'Invalid spacing: "{{ #if" should be "{{#if"'),
    ("{{# if", 'Invalid spacing: "{{# if" should be "{{#if"'),
)


@dataclass(frozen=True)
class LintIssue:
    """One problem found in a template."""

    template: str
    line: int
    rule: str
    message: str

    def __str__(self) -> str:
        location = f"{self.template}:{self.line}" if self.line else self.template
        return f"{location} - {self.message}"


def _line_of(source: str, position: int) -> int:
    return source.count("\n", 0, position) + 1


def lint_template(source: str, name: str = "<template>") -> list[LintIssue]:
    """Lint one template source and return the issues in line order."""
    issues: list[LintIssue] = []

    for number, line in enumerate(source.split("\n"), start=1):
        collision = _BRACE_COLLISION.search(line)
        if collision:
            issues.append(LintIssue(
                name, number, "brace-collision",
                f'Potential }}}}}} collision after block close: "{collision.group(0)}"',
            ))
        for needle, message in _TYPOS:
            if needle in line:
                issues.append(LintIssue(name, number, "typo", message))

    stripped = strip_comments(source, keep_lines=True)
    for kind in BLOCK_KINDS:
        opens = len(re.findall(r"\{\{#" + kind + r"\s", stripped))
        closes = stripped.count(close_literal(kind))
        if opens != closes:
            issues.append(LintIssue(
                name, 0, "block-count",
                f"{{{{#{kind}}}}} count ({opens}) != {{{{/{kind}}}}} count ({closes})",
            ))

        for found in find_blocks(stripped, kind):
            if isinstance(found, BlockSpan):
                continue
            issues.append(LintIssue(
                name, _line_of(stripped, found), "unmatched-block",
                f"{{{{#{kind}}}}} opened here is never closed",
            ))

    return sorted(issues, key=lambda issue: issue.line)


def lint_directory(directory: str | Path, extension: str = ".hbs") -> list[LintIssue]:
    """Lint every ``*<extension>`` file under *directory* (recursively).

    Issues are reported against paths relative to *directory*.
    """
    root = Path(directory)
    issues: list[LintIssue] = []
    for path in sorted(root.rglob(f"*{extension}")):
        if not path.is_file():
            continue
        rel = path.relative_to(root).as_posix()
        issues.extend(lint_template(path.read_text(encoding="utf-8"), rel))
    return issues
