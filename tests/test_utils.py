"""Unit tests for utility functions (viteforge.utils).

Tests cover:
- sanitize_name (various inputs)
- write_text_file (use tmp_path)
- Rich output helpers (print_summary_table, print_success, etc.)
"""

from __future__ import annotations

import pytest

from viteforge.utils import (
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
    sanitize_name,
    write_text_file,
)


# ---------------------------------------------------------------------------
# sanitize_name
# ---------------------------------------------------------------------------


class TestSanitizeName:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("My Cool App", "my-cool-app"),
            ("  Demo (v2)  ", "demo-v2"),
            ("already-fine", "already-fine"),
            ("dots.and_underscores", "dots.and_underscores"),
            ("---x---", "x"),
            ("Ünïcode App", "n-code-app"),
        ],
    )
    def test_sanitize(self, raw, expected):
        assert sanitize_name(raw) == expected

    @pytest.mark.unit
    def test_empty(self):
        assert sanitize_name("   ") == ""


# ---------------------------------------------------------------------------
# write_text_file
# ---------------------------------------------------------------------------


class TestWriteTextFile:
    @pytest.mark.unit
    def test_creates_parents(self, tmp_path):
        target = tmp_path / "a" / "b" / "file.txt"
        result = write_text_file(target, "héllo")
        assert result == target
        assert target.read_text(encoding="utf-8") == "héllo"

    @pytest.mark.unit
    def test_accepts_str_path(self, tmp_path):
        result = write_text_file(str(tmp_path / "f.txt"), "x")
        assert result.read_text(encoding="utf-8") == "x"

    @pytest.mark.unit
    def test_overwrites(self, tmp_path):
        target = tmp_path / "f.txt"
        write_text_file(target, "one")
        write_text_file(target, "two")
        assert target.read_text(encoding="utf-8") == "two"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichHelpers:
    @pytest.mark.unit
    def test_print_summary_table(self, capsys):
        print_summary_table({"Project": "demo", "Files": "12"}, title="Created")
        out = capsys.readouterr().out
        assert "Created" in out
        assert "demo" in out

    @pytest.mark.unit
    def test_print_messages(self, capsys):
        print_success("all good")
        print_error("broken")
        print_warning("careful")
        print_info("fyi")
        out = capsys.readouterr().out
        for text in ("all good", "broken", "careful", "fyi"):
            assert text in out
