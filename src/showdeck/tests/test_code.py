"""Tests for showdeck.render.code — lexer lookup, highlighting, measurement cache."""

import re

import pytest

from showdeck.core.elements import Code, code
from showdeck.render.code import CodeView, UnknownLanguage, find_lexer

HEX_COLOR = re.compile(r"^#[0-9A-F]{6}$")


# ── find_lexer ──────────────────────────────────────────────────────────

class TestFindLexer:
    def test_by_alias(self):
        assert "Python" in find_lexer("py").name

    def test_by_extension(self):
        # "pyw" is only known as a filename pattern
        assert "Python" in find_lexer("pyw").name

    def test_rust(self):
        assert find_lexer("rs").name == "Rust"

    def test_unknown(self):
        with pytest.raises(UnknownLanguage):
            find_lexer("definitely-not-a-language")

    def test_unknown_is_value_error(self):
        with pytest.raises(ValueError):
            find_lexer("definitely-not-a-language")


# ── CodeView ────────────────────────────────────────────────────────────

class TestCodeView:
    def test_one_entry_per_source_line(self):
        view = CodeView("py", "a = 1\nb = 2\n")
        assert view.plain_lines() == ["a = 1", "b = 2"]

    def test_blank_lines_kept(self):
        view = CodeView("py", "a = 1\n\nb = 2")
        assert view.plain_lines() == ["a = 1", "", "b = 2"]
        assert view.lines()[1] == []

    def test_empty_source(self):
        view = CodeView("py", "")
        assert view.lines() == []
        measured = view.measure(10)
        assert measured.width == 0
        assert measured.height == 0

    def test_colors_are_hex(self):
        view = CodeView("py", "def f(x):\n    return x + 1\n")
        for line in view.lines():
            for span in line:
                assert HEX_COLOR.match(span.color)

    def test_keyword_uses_style_color(self):
        view = CodeView("py", "def f(): pass", style="monokai")
        first = view.lines()[0][0]
        assert first.text == "def"
        assert first.color == "#66D9EF"

    def test_highlight_is_cached(self):
        view = CodeView("py", "x = 1")
        assert view.lines() is view.lines()

    def test_measure_sizes(self):
        view = CodeView("py", "abcd\nab")
        m = view.measure(10, char_width_ratio=0.5, line_height_ratio=1.5)
        assert m.width == 20
        assert m.height == 30
        assert m.line_height == 15
        assert [s.x for s in m.lines[0]] == sorted(s.x for s in m.lines[0])

    def test_measure_recomputed_when_ratios_change(self):
        view = CodeView("py", "abcdef")
        narrow = view.measure(1, char_width_ratio=0.6, line_height_ratio=1.2)
        wide = view.measure(1, char_width_ratio=1.0, line_height_ratio=1.0)
        assert narrow.width == pytest.approx(3.6)
        assert wide.width == 6
        assert wide.height == 1
        assert view.measure(1, char_width_ratio=1.0, line_height_ratio=1.0) is wide

    def test_measure_cached_per_size(self):
        view = CodeView("py", "x = 1")
        first = view.measure(12)
        assert view.measure(12) is first
        second = view.measure(24)
        assert second is not first
        assert second.width == pytest.approx(first.width * 2)


# ── code() element ──────────────────────────────────────────────────────

class TestCodeElement:
    def test_builds_code_kind(self):
        el = code("rs", "fn main() {}")
        assert isinstance(el.kind, Code)
        assert el.kind.language == "rs"

    def test_unknown_language_rejected_at_construction(self):
        with pytest.raises(UnknownLanguage):
            code("definitely-not-a-language", "x")
