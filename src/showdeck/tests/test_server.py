"""Tests for showdeck_mcp.server — tools called directly, without a transport."""

import json

import pytest

import showdeck_mcp.server as server


@pytest.fixture(autouse=True)
def reset_viewer():
    server._viewer = None
    server._deck_target = None
    yield
    server._viewer = None
    server._deck_target = None


class TestServerDeckTools:
    def test_tools_require_loaded_deck(self):
        assert server.list_slides(None).startswith("Error")
        assert server.next_slide(None).startswith("Error")
        assert server.show_current_slide(None).startswith("Error")
        assert server.press_key(None, "Enter").startswith("Error")

    def test_load_demo_deck(self):
        result = json.loads(server.load_deck(None))
        assert result["status"] == "loaded"
        assert result["slide_count"] == 5
        assert result["first_slide"] == "title"

    def test_load_bad_target(self):
        assert server.load_deck(None, target="showdeck.demo").startswith("Error loading deck")

    def test_load_unknown_theme(self):
        assert server.load_deck(None, theme="neon").startswith("Error loading deck")
        assert server._viewer is None

    def test_list_slides(self):
        server.load_deck(None)
        slides = json.loads(server.list_slides(None))
        assert [s["path"] for s in slides] == ["title", "01", "02", "03", "04"]
        assert slides[-1]["next_slide"] is None


class TestServerNavigationTools:
    def test_next_and_previous(self):
        server.load_deck(None)
        state = json.loads(server.next_slide(None))
        assert state["changed"] is True
        assert state["current"] == "01"
        assert state["history"] == ["title"]

        state = json.loads(server.previous_slide(None))
        assert state["current"] == "title"
        assert state["history"] == []

        state = json.loads(server.previous_slide(None))
        assert state["changed"] is False

    def test_next_on_last_slide_is_noop(self):
        server.load_deck(None)
        for _ in range(4):
            server.next_slide(None)
        state = json.loads(server.next_slide(None))
        assert state["changed"] is False
        assert state["current"] == "04"
        assert state["next"] is None

    def test_press_key(self):
        server.load_deck(None)
        state = json.loads(server.press_key(None, "Space"))
        assert state["handled"] is True
        assert state["action"] == "advance"
        assert state["current"] == "01"

    def test_press_key_with_modifier(self):
        server.load_deck(None)
        state = json.loads(server.press_key(None, "ArrowRight", modifiers=["Shift"]))
        assert state["handled"] is False
        assert state["action"] is None
        assert state["current"] == "title"

    def test_show_current_slide(self):
        server.load_deck(None)
        output = server.show_current_slide(None, width=60, height=15)
        assert "Introducing ShowDeck" in output

    def test_navigation_state(self):
        server.load_deck(None)
        state = json.loads(server.get_navigation_state(None))
        assert state["deck"] == server.DEFAULT_DECK
        assert state["position"] == 0
        assert state["next"] == "01"
