"""Shared pytest fixtures for the viteforge test suite.

Provides reusable fixtures for:
- Temporary template and partial directories
- Engines bound to those directories
- Feature flag sets and render contexts
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any

import pytest

from viteforge.config import EngineConfig
from viteforge.scaffolder.features import FeatureFlags
from viteforge.templating import TemplateEngine


# ---------------------------------------------------------------------------
# Template directories
# ---------------------------------------------------------------------------


def _write(root: Path, rel: str, content: str) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Temporary template root with a few templates and partials."""
    root = tmp_path / "templates"
    _write(root, "greeting.txt.hbs", "Hello {{name}}!\n")
    _write(root, "nested/config.json.hbs", '{"name": "{{{projectName}}}"}\n')
    _write(root, "partials/header.hbs", "# {{projectName}}")
    _write(root, "partials/providers/redux.hbs", "{{#if features.redux}}<Provider>{{/if}}")
    _write(root, "partials/user.hbs", "{{name}} <{{email}}>")
    _write(root, "partials/loop.hbs", "{{> loop}}")
    return root


@pytest.fixture
def engine_config(templates_dir: Path) -> EngineConfig:
    return EngineConfig(templates_dir=templates_dir)


@pytest.fixture
def engine(engine_config: EngineConfig) -> TemplateEngine:
    """Engine bound to the temporary template root, with an empty context."""
    return TemplateEngine(config=engine_config)


@pytest.fixture
def bare_engine(tmp_path: Path) -> TemplateEngine:
    """Engine whose template root has no templates or partials."""
    empty = tmp_path / "empty"
    empty.mkdir()
    return TemplateEngine(config=EngineConfig(templates_dir=empty))


# ---------------------------------------------------------------------------
# Contexts & features
# ---------------------------------------------------------------------------


@pytest.fixture
def base_context() -> dict[str, Any]:
    """A typical render context for a project with Redux and i18n."""
    return {
        "features": {"redux": True, "reactRouter": False, "i18n": True},
        "projectName": "demo",
        "author": "Jane Doe",
        "license": "MIT",
        "description": "",
        "hasProviders": True,
        "providerOrder": ["i18n", "redux"],
    }


@pytest.fixture
def all_features() -> FeatureFlags:
    """Every feature enabled, advanced test profile."""
    return FeatureFlags(
        typescript=True,
        tailwindcss=True,
        redux=True,
        react_router=True,
        i18n=True,
        eslint=True,
        prettier=True,
        husky=True,
        github_actions=True,
        vscode=True,
        testing=True,
        test_profile="advanced",
    )


@pytest.fixture
def minimal_features() -> FeatureFlags:
    """Only the defaults (TypeScript), minimum test profile."""
    return FeatureFlags(testing=True, test_profile="minimum")
