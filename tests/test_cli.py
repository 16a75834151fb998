"""Tests for the viteforge command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from viteforge.cli import apply_assignment, build_parser, load_context, main, parse_value

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Context helpers
# ---------------------------------------------------------------------------


class TestContextHelpers:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", True), ("42", 42), ('["a","b"]', ["a", "b"]), ("demo", "demo"), ("", "")],
    )
    def test_parse_value(self, raw, expected):
        assert parse_value(raw) == expected

    def test_apply_nested_assignment(self):
        ctx: dict = {"features": {"i18n": True}}
        apply_assignment(ctx, "features.redux=true")
        apply_assignment(ctx, "projectName=demo")
        assert ctx == {"features": {"i18n": True, "redux": True}, "projectName": "demo"}

    def test_assignment_replaces_scalar_parent(self):
        ctx: dict = {"a": "text"}
        apply_assignment(ctx, "a.b=1")
        assert ctx == {"a": {"b": 1}}

    def test_value_may_contain_equals(self):
        ctx: dict = {}
        apply_assignment(ctx, "expr=a=b")
        assert ctx == {"expr": "a=b"}

    @pytest.mark.parametrize("bad", ["novalue", "=x", "..=x"])
    def test_invalid_assignment(self, bad):
        with pytest.raises(ValueError):
            apply_assignment({}, bad)

    def test_load_context_file_and_overrides(self, tmp_path):
        path = tmp_path / "ctx.json"
        path.write_text(json.dumps({"projectName": "file", "features": {"redux": False}}), encoding="utf-8")
        ctx = load_context(str(path), ["features.redux=true"])
        assert ctx == {"projectName": "file", "features": {"redux": True}}

    def test_load_context_defaults_features(self):
        assert load_context(None, []) == {"features": {}}

    def test_load_context_rejects_non_object(self, tmp_path):
        path = tmp_path / "ctx.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError):
            load_context(str(path), [])


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


class TestRenderCommand:
    def test_render_to_stdout(self, templates_dir, capsys):
        main(["render", str(templates_dir / "greeting.txt.hbs"), "--set", "name=Ada"])
        assert capsys.readouterr().out == "Hello Ada!\n"

    def test_render_with_partials_from_templates_dir(self, tmp_path, templates_dir, capsys):
        template = tmp_path / "page.hbs"
        template.write_text("{{> header}}\n", encoding="utf-8")
        main([
            "render", str(template),
            "--templates-dir", str(templates_dir),
            "--set", "projectName=demo",
        ])
        assert capsys.readouterr().out == "# demo\n"

    def test_render_to_file(self, templates_dir, tmp_path):
        out = tmp_path / "out" / "greeting.txt"
        main(["render", str(templates_dir / "greeting.txt.hbs"), "-s", "name=B", "-o", str(out)])
        assert out.read_text(encoding="utf-8") == "Hello B!\n"

    def test_render_directory(self, templates_dir, tmp_path):
        out = tmp_path / "site"
        main(["render", str(templates_dir), "-o", str(out), "-s", "name=C"])
        assert (out / "greeting.txt").read_text(encoding="utf-8") == "Hello C!\n"
        assert (out / "nested" / "config.json").is_file()

    def test_render_directory_requires_output(self, templates_dir):
        with pytest.raises(SystemExit) as exc_info:
            main(["render", str(templates_dir)])
        assert exc_info.value.code == 1

    def test_missing_template_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["render", str(tmp_path / "missing.hbs")])
        assert exc_info.value.code == 1
        assert "Template file not found" in capsys.readouterr().out

    def test_verbose_reports_missing_partial(self, tmp_path, capsys):
        template = tmp_path / "page.hbs"
        template.write_text("{{> nope}}", encoding="utf-8")
        main(["--verbose", "render", str(template)])
        out = capsys.readouterr().out
        assert 'Partial "nope" not found' in out


class TestLintCommand:
    def test_clean_directory(self, templates_dir, capsys):
        main(["lint", str(templates_dir)])
        assert "No template issues" in capsys.readouterr().out

    def test_issues_exit_nonzero(self, tmp_path, capsys):
        (tmp_path / "bad.hbs").write_text("{{#if a}}", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["lint", str(tmp_path)])
        assert exc_info.value.code == 1
        assert "bad.hbs" in capsys.readouterr().out

    def test_not_a_directory(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["lint", str(tmp_path / "nowhere")])

    def test_bundled_templates_are_clean(self, capsys):
        main(["lint"])
        assert "No template issues" in capsys.readouterr().out


class TestNewCommand:
    def test_creates_project(self, tmp_path):
        main([
            "new", "demo", "-o", str(tmp_path),
            "--feature", "redux", "--feature", "reactRouter",
            "--test-profile", "minimum",
        ])
        root = tmp_path / "demo"
        assert (root / "src" / "store" / "store.ts").is_file()
        assert (root / "src" / "__tests__" / "App.test.tsx").is_file()
        payload = json.loads((root / "package.json").read_text(encoding="utf-8"))
        assert "react-router-dom" in payload["dependencies"]

    def test_snake_case_feature_names(self, tmp_path):
        main(["new", "demo", "-o", str(tmp_path), "-f", "react_router"])
        main_tsx = (tmp_path / "demo" / "src" / "main.tsx").read_text(encoding="utf-8")
        assert "<BrowserRouter>" in main_tsx

    def test_unknown_feature(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["new", "demo", "-o", str(tmp_path), "-f", "angular"])
        assert exc_info.value.code == 1
        assert "angular" in capsys.readouterr().out
        assert not (tmp_path / "demo").exists()

    def test_existing_project(self, tmp_path, capsys):
        (tmp_path / "demo").mkdir()
        with pytest.raises(SystemExit) as exc_info:
            main(["new", "demo", "-o", str(tmp_path)])
        assert exc_info.value.code == 1
        assert "already exists" in capsys.readouterr().out


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_new_defaults(self):
        args = build_parser().parse_args(["new", "app"])
        assert args.output == "."
        assert args.feature == []
        assert args.package_manager == "npm"
        assert args.test_profile is None
