"""ShowDeck MCP Server - drive a slide deck viewer through MCP tools."""

from mcp.server.fastmcp import FastMCP, Context
import json
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Any, Optional

from showdeck.core.deck import load_show
from showdeck.core.navigation import KeyEvent, classify
from showdeck.core.theme import ShowSettings
from showdeck.core.viewer import Viewer

# Configure logging
logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("ShowDeckMCP")

DEFAULT_DECK = "showdeck.demo:build_show"


# ── Global State ────────────────────────────────────────────────────────

_viewer: Optional[Viewer] = None
_deck_target: Optional[str] = None


def _require_viewer() -> Viewer:
    if _viewer is None:
        raise RuntimeError("No deck is loaded. Use load_deck first.")
    return _viewer


def _state_payload(viewer: Viewer) -> dict:
    return {
        "deck": _deck_target,
        "current": viewer.state.current,
        "next": viewer.state.next or None,
        "history": list(viewer.state.history),
        "position": viewer.position,
        "slide_count": len(viewer.show),
    }


# ── Server Setup ────────────────────────────────────────────────────────

@asynccontextmanager
async def server_lifespan(server: FastMCP) -> AsyncIterator[Dict[str, Any]]:
    try:
        logger.info("ShowDeckMCP server starting up")
        yield {}
    finally:
        global _viewer
        _viewer = None
        logger.info("ShowDeckMCP server shut down")


mcp = FastMCP("ShowDeckMCP", lifespan=server_lifespan)


# ═══════════════════════════════════════════════════════════════════════
# DECK TOOLS
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def load_deck(ctx: Context, target: str = DEFAULT_DECK, theme: str = "") -> str:
    """Load a deck and start presenting it from its first slide.

    Parameters:
    - target: Deck factory as 'package.module:function'
    - theme: Optional theme name (dark, light)
    """
    global _viewer, _deck_target
    try:
        settings = ShowSettings.from_env(theme=theme or None)
        show = load_show(target)
        _viewer = Viewer(show, settings=settings)
        _deck_target = target
        return json.dumps({
            "status": "loaded",
            "deck": target,
            "theme": settings.theme,
            "slide_count": len(show),
            "first_slide": show.first_slide,
        }, indent=2)
    except Exception as e:
        logger.error(f"Failed to load deck {target}: {str(e)}")
        return f"Error loading deck: {str(e)}"


@mcp.tool()
def list_slides(ctx: Context) -> str:
    """List every slide in the loaded deck with its index and successor."""
    try:
        viewer = _require_viewer()
    except RuntimeError as e:
        return f"Error: {str(e)}"
    return json.dumps(viewer.show.to_summary(), indent=2)


# ═══════════════════════════════════════════════════════════════════════
# NAVIGATION TOOLS
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def show_current_slide(ctx: Context, width: int = 0, height: int = 0) -> str:
    """Render the current slide as plain text.

    Parameters:
    - width: Viewport width in characters (defaults to settings)
    - height: Viewport height in lines (defaults to settings)
    """
    try:
        viewer = _require_viewer()
        return viewer.render_text(width or None, height or None)
    except Exception as e:
        return f"Error: {str(e)}"


@mcp.tool()
def next_slide(ctx: Context) -> str:
    """Advance to the current slide's successor (no-op on the last slide)."""
    try:
        viewer = _require_viewer()
    except RuntimeError as e:
        return f"Error: {str(e)}"
    changed = viewer.advance()
    payload = _state_payload(viewer)
    payload["changed"] = changed
    return json.dumps(payload, indent=2)


@mcp.tool()
def previous_slide(ctx: Context) -> str:
    """Go back to the previously shown slide (no-op with empty history)."""
    try:
        viewer = _require_viewer()
    except RuntimeError as e:
        return f"Error: {str(e)}"
    changed = viewer.retreat()
    payload = _state_payload(viewer)
    payload["changed"] = changed
    return json.dumps(payload, indent=2)


@mcp.tool()
def press_key(ctx: Context, key: str, modifiers: Optional[list[str]] = None,
              pressed: bool = True) -> str:
    """Send a key event to the viewer.

    Parameters:
    - key: Logical key (ArrowRight, ArrowLeft, Space, Enter, Backspace, n, p, h, l)
    - modifiers: Held modifier keys (Shift, Control, Alt, Super); any modifier suppresses navigation
    - pressed: True for key press, False for release
    """
    try:
        viewer = _require_viewer()
    except RuntimeError as e:
        return f"Error: {str(e)}"
    event = KeyEvent(key=key, pressed=pressed, modifiers=frozenset(modifiers or []))
    action = classify(event)
    handled = viewer.press(event)
    payload = _state_payload(viewer)
    payload["handled"] = handled
    payload["action"] = action.value if action else None
    return json.dumps(payload, indent=2)


@mcp.tool()
def get_navigation_state(ctx: Context) -> str:
    """Get the current slide, its successor and the back-history."""
    try:
        viewer = _require_viewer()
    except RuntimeError as e:
        return f"Error: {str(e)}"
    return json.dumps(_state_payload(viewer), indent=2)


@mcp.prompt()
def presentation_workflow() -> str:
    """Recommended workflow for presenting a deck"""
    return """You are helping the user rehearse or present a slide deck.

1. **Load**: Use load_deck() with the deck factory ('module:function').
   Use list_slides() to see every slide and its declared successor.

2. **Present**: Use show_current_slide() to see the slide as text.

3. **Navigate**: Use next_slide() and previous_slide(), or press_key()
   to reproduce exact keyboard input (modifiers suppress navigation).

Tips:
- next_slide() does nothing on the last slide of a chain
- previous_slide() walks back through the slides actually visited
- Use get_navigation_state() to inspect current/next/history
"""


# ── Main ────────────────────────────────────────────────────────────────

def main():
    """Run the MCP server"""
    mcp.run()


if __name__ == "__main__":
    main()
