"""Final whitespace normalisation for rendered output."""

from __future__ import annotations

import re

_TRAILING_SPACE = re.compile(r"[ \t]+$", re.MULTILINE)
_BLANK_RUN = re.compile(r"\n{3,}")


def cleanup_whitespace(text: str) -> str:
    """Strip trailing spaces/tabs from every line, then collapse blank runs.

    Three or more consecutive newlines become exactly two.  Trailing
    whitespace is stripped first because stripping can turn a whitespace-only
    line into an empty one and lengthen a newline run.  Running this twice
    gives the same result as running it once.
    """
    text = _TRAILING_SPACE.sub("", text)
    return _BLANK_RUN.sub("\n\n", text)
