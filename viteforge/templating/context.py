"""Context factories for feature-driven templates.

Templates see the feature flags under ``features`` plus a few computed
helpers: ``hasProviders`` tells whether any React context provider wraps the
app, and ``providerOrder`` lists those providers outermost first.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ..config import EngineConfig
from .engine import TemplateEngine
from .values import Context

# Outermost provider first.
_PROVIDERS: tuple[tuple[str, str], ...] = (
    ("i18n", "i18n"),
    ("redux", "redux"),
    ("reactRouter", "router"),
)

DEFAULT_PROJECT_NAME = "my-app"
DEFAULT_LICENSE = "MIT"


def _as_flags(features: Any) -> dict[str, Any]:
    if hasattr(features, "model_dump"):
        return features.model_dump(by_alias=True)
    return dict(features or {})


def compute_provider_order(features: Any) -> list[str]:
    """Return the enabled providers in wrapping order (``i18n``, ``redux``, ``router``)."""
    flags = _as_flags(features)
    return [name for flag, name in _PROVIDERS if flags.get(flag)]


def create_template_context(
    features: Any,
    additional: Optional[Mapping[str, Any]] = None,
) -> Context:
    """Build a render context from feature flags.

    *features* may be a plain mapping or a ``FeatureFlags`` model.  Keys in
    *additional* are merged on top of the computed ones.
    """
    flags = _as_flags(features)
    provider_order = compute_provider_order(flags)
    return {
        "features": flags,
        "hasProviders": bool(provider_order),
        "providerOrder": provider_order,
        **(additional or {}),
    }


def create_template_engine(
    features: Any,
    project: Optional[Mapping[str, Any]] = None,
    *,
    config: Optional[EngineConfig] = None,
) -> TemplateEngine:
    """Create an engine whose base context holds the features and project metadata.

    Missing metadata falls back to ``projectName="my-app"`` and
    ``license="MIT"``; ``author`` and ``description`` default to empty.
    """
    project = project or {}
    context = create_template_context(features, {
        "projectName": project.get("projectName") or DEFAULT_PROJECT_NAME,
        "author": project.get("author") or "",
        "description": project.get("description") or "",
        "license": project.get("license") or DEFAULT_LICENSE,
    })
    return TemplateEngine(context, config=config)
