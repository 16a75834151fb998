"""Depth-tracking block matching.

Block directives nest (an ``{{#if}}`` inside another ``{{#if}}``, an
``{{#each}}`` inside a ``{{#with}}``), so the closing tag for an opener cannot
be found with a non-greedy pattern: the first ``{{/if}}`` after an ``{{#if}}``
may belong to an inner block.  These helpers scan forward while counting
opening and closing tags of the same kind and return the close that brings
the depth back to zero.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

NOT_FOUND = -1

BLOCK_KINDS: tuple[str, ...] = ("with", "each", "unless", "if")

ELSE_TAG = "{{else}}"

_BLOCK_OPEN_PREFIX = "{{#"

PATH_PATTERN = r"@?\w+(?:\.\w+)*"

# One opener pattern per block kind; the argument is a single dotted path.
OPEN_PATTERNS: dict[str, re.Pattern[str]] = {
    kind: re.compile(r"\{\{#" + kind + r"\s+(" + PATH_PATTERN + r")\s*\}\}")
    for kind in BLOCK_KINDS
}


def open_literal(kind: str) -> str:
    """Prefix shared by every opening tag of *kind* (``{{#if``)."""
    return "{{#" + kind


def close_literal(kind: str) -> str:
    """Closing tag of *kind* (``{{/if}}``)."""
    return "{{/" + kind + "}}"


@dataclass(frozen=True)
class BlockSpan:
    """Location of one matched block inside a template source.

    ``body_start``/``body_end`` delimit the text between the opening and
    closing tags; ``start``/``end`` include the tags themselves.
    """

    kind: str
    argument: str
    start: int
    body_start: int
    body_end: int
    end: int

    def body(self, source: str) -> str:
        return source[self.body_start:self.body_end]


def find_matching_close(
    source: str,
    search_start: int,
    open_tag: str,
    close_tag: str,
) -> int:
    """Return the index of the close tag matching an already-consumed opener.

    Scanning starts at *search_start* (just past the opening tag) with a
    depth of one.  Every *open_tag* found before the next *close_tag* adds a
    level; every *close_tag* removes one.  The close that brings the depth to
    zero is the match.

    Returns:
        Index of the matching close tag, or ``NOT_FOUND`` if the source runs
        out of close tags first.
    """
    if not open_tag or not close_tag:
        raise ValueError("open_tag and close_tag must be non-empty")

    depth = 1
    pos = search_start
    while True:
        next_close = source.find(close_tag, pos)
        if next_close == NOT_FOUND:
            return NOT_FOUND

        next_open = source.find(open_tag, pos)
        if next_open != NOT_FOUND and next_open < next_close:
            depth += 1
            pos = next_open + len(open_tag)
            continue

        depth -= 1
        if depth == 0:
            return next_close
        pos = next_close + len(close_tag)


def find_else_at_same_level(body: str, else_tag: str = ELSE_TAG) -> int:
    """Return the index of the ``{{else}}`` that belongs to the enclosing block.

    *body* is the text between an ``{{#if ...}}`` and its matching
    ``{{/if}}``.  Every well-formed nested block (``if``, ``each``,
    ``unless`` or ``with``) is skipped as a whole, so an ``{{else}}`` inside
    one of them never splits the outer body.  An opener without a matching
    close is not a block and does not hide what follows it.
    """
    pos = 0
    while True:
        next_else = body.find(else_tag, pos)
        if next_else == NOT_FOUND:
            return NOT_FOUND

        next_open = body.find(_BLOCK_OPEN_PREFIX, pos)
        if next_open == NOT_FOUND or next_open > next_else:
            return next_else

        span = _match_any_block(body, next_open)
        pos = span.end if span is not None else next_open + len(_BLOCK_OPEN_PREFIX)


def _match_any_block(source: str, start: int) -> BlockSpan | None:
    for kind in BLOCK_KINDS:
        span = match_block(source, kind, start)
        if span is not None:
            return span
    return None


def match_block(source: str, kind: str, start: int) -> BlockSpan | None:
    """Match a *kind* opener exactly at *start* and locate its closing tag.

    Returns ``None`` when there is no well-formed opener at *start* or when
    the opener has no matching close.
    """
    opener = OPEN_PATTERNS[kind].match(source, start)
    if opener is None:
        return None

    close = find_matching_close(
        source, opener.end(), open_literal(kind), close_literal(kind)
    )
    if close == NOT_FOUND:
        return None

    return BlockSpan(
        kind=kind,
        argument=opener.group(1),
        start=start,
        body_start=opener.end(),
        body_end=close,
        end=close + len(close_literal(kind)),
    )


def find_blocks(source: str, kind: str) -> list[BlockSpan | int]:
    """Scan *source* for every *kind* opener.

    Each opener yields either its matched :class:`BlockSpan` or, when it has
    no matching close, the integer position of the unmatched opener.
    """
    results: list[BlockSpan | int] = []
    for opener in OPEN_PATTERNS[kind].finditer(source):
        span = match_block(source, kind, opener.start())
        results.append(span if span is not None else opener.start())
    return results
