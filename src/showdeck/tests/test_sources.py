"""Tests for showdeck.sources — anchored excerpts."""

import pytest

from showdeck.sources import anchored_range, read_anchored


class TestAnchoredRange:
    def test_hash_markers_dedented(self):
        source = (
            "def build():\n"
            "    # ANCHOR_START\n"
            "    x = 1\n"
            "    if x:\n"
            "        y = 2\n"
            "    # ANCHOR_END\n"
            "    return x\n"
        )
        assert anchored_range(source) == "x = 1\nif x:\n    y = 2"

    def test_slash_markers(self):
        source = "fn main() {\n    // ANCHOR_START\n    let a = 1;\n    // ANCHOR_END\n}\n"
        assert anchored_range(source) == "let a = 1;"

    def test_surrounding_blank_lines_trimmed(self):
        source = "# ANCHOR_START\n\n\nvalue = 3\n\n# ANCHOR_END\n"
        assert anchored_range(source) == "value = 3"

    def test_whitespace_only_lines_trimmed(self):
        source = "# ANCHOR_START\n    \n    x = 1\n  \n# ANCHOR_END\n"
        assert anchored_range(source) == "x = 1"

    def test_missing_start(self):
        with pytest.raises(ValueError):
            anchored_range("x = 1\n# ANCHOR_END\n")

    def test_missing_end(self):
        with pytest.raises(ValueError):
            anchored_range("# ANCHOR_START\nx = 1\n")

    def test_first_pair_only(self):
        source = "# ANCHOR_START\na\n# ANCHOR_END\n# ANCHOR_START\nb\n# ANCHOR_END\n"
        assert anchored_range(source) == "a"

    def test_read_anchored(self, tmp_path):
        path = tmp_path / "snippet.py"
        path.write_text("# ANCHOR_START\nprint('hi')\n# ANCHOR_END\n")
        assert read_anchored(path) == "print('hi')"

    def test_demo_excerpt(self):
        import showdeck.demo as demo
        excerpt = read_anchored(demo.__file__)
        assert excerpt.startswith("return (")
        assert "ANCHOR" not in excerpt
