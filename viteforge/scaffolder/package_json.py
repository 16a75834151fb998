"""``package.json`` for the generated application."""

from __future__ import annotations

from typing import Any

from ..utils import sanitize_name
from .features import FeatureFlags, ProjectMetadata

_BASE_DEPENDENCIES: dict[str, str] = {
    "react": "^19.0.0",
    "react-dom": "^19.0.0",
}

_BASE_DEV_DEPENDENCIES: dict[str, str] = {
    "@vitejs/plugin-react": "^4.3.4",
    "vite": "^6.0.0",
}

# flag -> (dependencies, devDependencies)
_FEATURE_PACKAGES: dict[str, tuple[dict[str, str], dict[str, str]]] = {
    "typescript": ({}, {
        "typescript": "~5.6.2",
        "@types/react": "^19.0.0",
        "@types/react-dom": "^19.0.0",
    }),
    "tailwindcss": ({}, {"tailwindcss": "^4.0.0", "@tailwindcss/vite": "^4.0.0"}),
    "redux": ({"@reduxjs/toolkit": "^2.5.0", "react-redux": "^9.2.0"}, {}),
    "reactRouter": ({"react-router-dom": "^7.1.0"}, {}),
    "i18n": ({
        "i18next": "^24.2.0",
        "react-i18next": "^15.4.0",
        "i18next-browser-languagedetector": "^8.0.2",
    }, {}),
    "eslint": ({}, {
        "eslint": "^9.17.0",
        "@eslint/js": "^9.17.0",
        "eslint-plugin-react-hooks": "^5.1.0",
        "eslint-plugin-react-refresh": "^0.4.16",
        "globals": "^15.14.0",
    }),
    "prettier": ({}, {"prettier": "^3.4.2"}),
    "husky": ({}, {"husky": "^9.1.7", "lint-staged": "^15.3.0"}),
    "testing": ({}, {
        "vitest": "^2.1.8",
        "@testing-library/react": "^16.1.0",
        "@testing-library/jest-dom": "^6.6.3",
        "jsdom": "^25.0.1",
    }),
}


def build_package_json(features: FeatureFlags, metadata: ProjectMetadata) -> dict[str, Any]:
    """Build the ``package.json`` payload for the selected features."""
    flags = features.as_context()
    dependencies = dict(_BASE_DEPENDENCIES)
    dev_dependencies = dict(_BASE_DEV_DEPENDENCIES)
    for flag, (deps, dev_deps) in _FEATURE_PACKAGES.items():
        if flags.get(flag):
            dependencies.update(deps)
            dev_dependencies.update(dev_deps)

    build = "tsc -b && vite build" if features.typescript else "vite build"
    scripts: dict[str, str] = {
        "dev": "vite",
        "build": build,
        "preview": "vite preview",
    }
    if features.eslint:
        scripts["lint"] = "eslint ."
    if features.prettier:
        scripts["format"] = "prettier --write ."
    if features.husky:
        scripts["prepare"] = "husky"
    if features.testing:
        scripts["test"] = "vitest"
        scripts["test:coverage"] = "vitest run --coverage"

    payload: dict[str, Any] = {
        "name": sanitize_name(metadata.project_name),
        "private": True,
        "version": "0.0.0",
        "type": "module",
        "scripts": scripts,
        "dependencies": dict(sorted(dependencies.items())),
        "devDependencies": dict(sorted(dev_dependencies.items())),
    }
    if metadata.description:
        payload["description"] = metadata.description
    if metadata.author:
        payload["author"] = metadata.author
    if metadata.license:
        payload["license"] = metadata.license
    return payload
