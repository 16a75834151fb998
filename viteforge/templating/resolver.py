"""Dotted path resolution against a render context."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_FEATURES_PREFIX = "features."


def resolve_path(path: str, ctx: Mapping[str, Any]) -> Any:
    """Resolve *path* against *ctx*, returning ``None`` when it is absent.

    * ``this`` and ``@``-prefixed names (``@index``, ``@first``, ``@last``)
      are looked up directly.
    * ``features.<flag>`` looks ``<flag>`` up in ``ctx["features"]`` as a
      single key, without walking any further dots.
    * Anything else is split on ``.`` and walked through nested mappings.
      The walk stops at the first missing key or non-mapping value.

    Resolution never raises and is not cached.
    """
    if path == "this" or path.startswith("@"):
        return ctx.get(path)

    if path.startswith(_FEATURES_PREFIX):
        features = ctx.get("features")
        if not isinstance(features, Mapping):
            return None
        return features.get(path[len(_FEATURES_PREFIX):])

    current: Any = ctx
    for part in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current
