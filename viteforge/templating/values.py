"""Context value model.

Context values are plain Python data: strings, booleans, numbers, lists and
mappings, with ``None`` standing for both ``null`` and an unresolved path.
The helpers here decide truthiness and turn a value into output text.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any, Dict, List, Union

Value = Union[str, bool, int, float, List["Value"], Dict[str, "Value"], None]
Context = Dict[str, Any]


def is_sequence(value: Any) -> bool:
    """Return ``True`` for list-like values (``list`` and ``tuple``)."""
    return isinstance(value, (list, tuple))


def is_truthy(value: Value) -> bool:
    """Template truthiness.

    Lists and mappings are truthy only when non-empty.  Everything else follows
    Python's boolean coercion, except that ``NaN`` is falsy.
    """
    if is_sequence(value):
        return len(value) > 0
    if isinstance(value, Mapping):
        return len(value) > 0
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def to_text(value: Value) -> str:
    """Convert a resolved value to the text written into the output.

    Booleans render as ``true``/``false`` and integral floats without a
    trailing ``.0`` so that values drop cleanly into generated JavaScript.
    Lists join their items with commas; mappings render as JSON.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if is_sequence(value):
        return ",".join(to_text(item) for item in value)
    if isinstance(value, Mapping):
        return json.dumps(value, default=str)
    return str(value)
