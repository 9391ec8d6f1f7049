"""Tests for showdeck.core.deck — SlideMeta, Slide, Show."""

import sys
import types

import pytest
from pydantic import ValidationError

from showdeck.core.context import Context
from showdeck.core.deck import Show, Slide, SlideMeta, UnknownSlide, load_show
from showdeck.core.elements import Text, text
from showdeck.core.theme import BUILTIN_THEMES
from showdeck.render.tree import TreeBackend, collect_text


def _slide(path: str, next_slide: str = "", body: str = "") -> Slide:
    return Slide.new(SlideMeta(path=path, next_slide=next_slide), body or path)


# ── SlideMeta ───────────────────────────────────────────────────────────

class TestSlideMeta:
    def test_defaults(self):
        m = SlideMeta(path="intro")
        assert m.next_slide == ""
        assert m.index is None

    def test_empty_path_rejected(self):
        with pytest.raises(ValidationError):
            SlideMeta(path="")

    def test_with_next_slide_returns_copy(self):
        m = SlideMeta(path="a")
        m2 = m.with_next_slide("b")
        assert m2.next_slide == "b"
        assert m.next_slide == ""


# ── Slide ───────────────────────────────────────────────────────────────

class TestSlide:
    def test_new_from_path_and_string(self):
        s = Slide.new("intro", "Hello")
        assert s.path == "intro"
        assert isinstance(s.contents.kind, Text)

    def test_materialize_returns_successor(self):
        s = _slide("a", next_slide="b")
        ctx = Context.for_slide(BUILTIN_THEMES["dark"], 0, 1)
        node, successor = s.materialize(ctx, TreeBackend())
        assert successor == "b"
        assert collect_text(node) == ["a"]

    def test_terminal_slide_successor_is_empty(self):
        ctx = Context.for_slide(BUILTIN_THEMES["dark"], 0, 1)
        _, successor = _slide("z").materialize(ctx, TreeBackend())
        assert successor == ""


# ── Show ────────────────────────────────────────────────────────────────

class TestShow:
    def test_empty(self):
        show = Show()
        assert show.first_slide == ""
        assert len(show) == 0

    def test_add_assigns_indices_in_order(self):
        show = Show()
        for path in ["a", "b", "c"]:
            show.add(_slide(path))
        assert [s.meta.index for s in show.slides.values()] == [0, 1, 2]

    def test_resolve_returns_added_slide(self):
        show = Show()
        s = _slide("a")
        stored = show.add(s)
        assert show.resolve("a") is stored
        assert stored.contents == s.contents
        assert "a" in show

    def test_first_slide_is_entry_point(self):
        show = Show().with_slide(_slide("x")).with_slide(_slide("y"))
        assert show.first_slide == "x"

    def test_overwrite_keeps_entry_point(self):
        show = Show().with_slide(_slide("x")).with_slide(_slide("y"))
        replacement = _slide("x", body="new")
        stored = show.add(replacement)
        assert show.first_slide == "x"
        assert show.resolve("x") is stored
        assert len(show) == 2

    def test_overwrite_does_not_renumber(self):
        show = Show().with_slide(_slide("a")).with_slide(_slide("b"))
        replacement = _slide("a", body="again")
        stored = show.add(replacement)
        # index comes from the deck size at insertion time
        assert stored.meta.index == 2
        assert show.resolve("b").meta.index == 1

    def test_add_leaves_caller_slide_untouched(self):
        s = _slide("a")
        Show().add(s)
        assert s.meta.index is None

    def test_shared_slide_keeps_index_per_deck(self):
        shared = _slide("shared")
        first = Show().with_slide(_slide("intro")).with_slide(shared)
        second = Show().with_slide(shared)
        assert first.resolve("shared").meta.index == 1
        assert second.resolve("shared").meta.index == 0

    def test_slides_are_frozen(self):
        s = _slide("a")
        with pytest.raises(ValidationError):
            s.meta.index = 3
        with pytest.raises(ValidationError):
            s.contents = text("b")

    def test_resolve_unknown_raises(self):
        with pytest.raises(UnknownSlide) as exc:
            Show().resolve("missing")
        assert exc.value.path == "missing"
        assert str(exc.value) == "unknown slide: missing"

    def test_unknown_slide_is_key_error(self):
        with pytest.raises(KeyError):
            Show().resolve("missing")

    def test_get_unknown_is_none(self):
        assert Show().get("missing") is None

    def test_to_summary(self):
        show = Show().with_slide(_slide("a", "b")).with_slide(_slide("b"))
        summary = show.to_summary()
        assert summary[0] == {"path": "a", "index": 0, "next_slide": "b", "is_first": True}
        assert summary[1]["next_slide"] is None
        assert summary[1]["is_first"] is False


# ── load_show ───────────────────────────────────────────────────────────

class TestLoadShow:
    def test_loads_demo(self):
        show = load_show("showdeck.demo:build_show")
        assert show.first_slide == "title"
        assert len(show) == 5

    def test_bad_target_format(self):
        with pytest.raises(ValueError):
            load_show("showdeck.demo")

    def test_missing_attribute(self):
        with pytest.raises(ValueError):
            load_show("showdeck.demo:nope")

    def test_missing_module(self):
        with pytest.raises(ImportError):
            load_show("showdeck_no_such_module:build")

    def test_factory_must_return_show(self, monkeypatch):
        module = types.ModuleType("fake_deck_module")
        module.build = lambda: text("not a show")
        monkeypatch.setitem(sys.modules, "fake_deck_module", module)
        with pytest.raises(TypeError):
            load_show("fake_deck_module:build")

    def test_show_instance_attribute(self, monkeypatch):
        module = types.ModuleType("fake_deck_instance")
        module.deck = Show().with_slide(_slide("only"))
        monkeypatch.setitem(sys.modules, "fake_deck_instance", module)
        assert load_show("fake_deck_instance:deck").first_slide == "only"
