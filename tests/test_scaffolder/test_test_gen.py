"""Tests for viteforge.scaffolder.test_gen."""

from __future__ import annotations

import pytest

from viteforge.scaffolder import FeatureFlags, TestGenerator
from viteforge.scaffolder.test_gen import SUPPORT_DIR, TESTS_DIR

pytestmark = pytest.mark.unit


def _filenames(features: FeatureFlags) -> list[str]:
    return [f.filename for f in TestGenerator(features).generate_all()]


class TestProfileSelection:
    def test_minimum_profile(self, minimal_features):
        assert _filenames(minimal_features) == ["setup.ts", "test-utils.tsx", "App.test.tsx"]

    def test_standard_profile_with_features(self):
        features = FeatureFlags(redux=True, react_router=True, i18n=True, testing=True, test_profile="standard")
        assert _filenames(features) == [
            "setup.ts",
            "test-utils.tsx",
            "App.test.tsx",
            "store.test.ts",
            "router.test.tsx",
            "integration.test.tsx",
            "i18n.test.tsx",
        ]

    def test_feature_tests_need_the_feature(self):
        features = FeatureFlags(testing=True, test_profile="advanced")
        names = _filenames(features)
        assert "store.test.ts" not in names
        assert "integration.test.tsx" not in names
        assert "tailwind.test.tsx" not in names
        assert "a11y.test.tsx" in names
        assert "performance.test.tsx" in names

    def test_advanced_everything(self, all_features):
        assert len(_filenames(all_features)) == 10

    def test_default_profile_is_standard(self):
        gen = TestGenerator(FeatureFlags(testing=True))
        assert gen.profile.name == "standard"
        assert gen.includes("integration")


class TestContextAndRendering:
    def test_build_context(self, all_features):
        ctx = TestGenerator(all_features).build_context()
        assert ctx["redux"] is True
        assert ctx["reactRouter"] is True
        assert ctx["custom"] is True
        assert ctx["coverageThreshold"] == 85
        assert ctx["providerOrder"] == ["i18n", "redux", "router"]
        assert ctx["features"]["tailwindcss"] is True

    def test_custom_false_without_redux_or_router(self, minimal_features):
        assert TestGenerator(minimal_features).build_context()["custom"] is False

    def test_destinations(self, minimal_features):
        files = {f.filename: f.destination for f in TestGenerator(minimal_features).generate_all()}
        assert files["setup.ts"] == f"{SUPPORT_DIR}/setup.ts"
        assert files["App.test.tsx"] == f"{TESTS_DIR}/App.test.tsx"

    def test_output_is_stripped_with_trailing_newline(self, minimal_features):
        for generated in TestGenerator(minimal_features).generate_all():
            assert generated.content.endswith("\n")
            assert not generated.content.endswith("\n\n")
            assert not generated.content.startswith("\n")

    def test_test_utils_wraps_providers(self, all_features):
        files = {f.filename: f.content for f in TestGenerator(all_features).generate_all()}
        utils = files["test-utils.tsx"]
        assert "<MemoryRouter>" in utils
        assert utils.index("<I18nextProvider") < utils.index("<Provider store") < utils.index("<MemoryRouter>")
        assert "return <>{children}</>;" not in utils

    def test_test_utils_without_providers(self, minimal_features):
        files = {f.filename: f.content for f in TestGenerator(minimal_features).generate_all()}
        utils = files["test-utils.tsx"]
        assert "return <>{children}</>;" in utils
        assert "MemoryRouter" not in utils

    def test_integration_blocks(self):
        features = FeatureFlags(redux=True, testing=True, test_profile="standard")
        files = {f.filename: f.content for f in TestGenerator(features).generate_all()}
        integration = files["integration.test.tsx"]
        assert "toggles the theme" in integration
        assert "while navigating" not in integration

    def test_vitest_config_threshold(self, minimal_features):
        config = TestGenerator(minimal_features).generate_vitest_config()
        assert "lines: 50," in config
        assert "statements: 50," in config

    def test_missing_and_empty_templates(self, tmp_path, capsys):
        (tmp_path / "setup.ts.hbs").write_text("   \n", encoding="utf-8")
        gen = TestGenerator(FeatureFlags(testing=True), templates_dir=tmp_path)
        assert gen.render("setup.ts.hbs") == ""
        assert gen.render("absent.hbs") == ""
        assert "absent.hbs" in capsys.readouterr().out
        assert gen.generate_all() == []
