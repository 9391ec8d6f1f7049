"""Viewer — the control loop that owns navigation state and re-renders slides."""

import logging
from typing import Any, Callable, Optional

from ..render.backend import RenderBackend
from ..render.layout import LayoutBox, LayoutEngine, Rect, TextMetrics
from ..render.painter import paint
from ..render.tree import TreeBackend
from .deck import Show
from .materializer import Materializer
from .navigation import KeyEvent, NavigationState
from .theme import ShowSettings, Theme

logger = logging.getLogger("ShowDeck.core.viewer")


class Viewer:
    """Presents a Show: materializes the current slide and handles key input.

    The show is treated as read-only once handed to the viewer.
    """

    def __init__(self, show: Show, theme: Optional[Theme] = None,
                 backend: Optional[RenderBackend] = None,
                 settings: Optional[ShowSettings] = None):
        self.settings = settings or ShowSettings()
        self.theme = theme or self.settings.resolve_theme()
        self.backend = backend or TreeBackend()
        self.show = show
        self.materializer = Materializer(show, self.theme, self.backend)
        self.state = NavigationState(current=show.first_slide)
        self.node: Any = None
        self.refresh()

    def refresh(self) -> Any:
        """Materialize the current slide and record its successor."""
        self.node, self.state.next = self.materializer.materialize(self.state.current)
        logger.debug(f"Rendered '{self.state.current}' (next: '{self.state.next}')")
        return self.node

    def press(self, event: KeyEvent) -> bool:
        """Handle one key event; returns whether it was consumed."""
        before = self.state.current
        handled = self.state.handle_key(event)
        if self.state.current != before:
            logger.info(f"Slide {before} -> {self.state.current}")
            self.refresh()
        return handled

    def advance(self) -> bool:
        changed = self.state.advance()
        if changed:
            self.refresh()
        return changed

    def retreat(self) -> bool:
        changed = self.state.retreat()
        if changed:
            self.refresh()
        return changed

    @property
    def position(self) -> Optional[int]:
        slide = self.show.get(self.state.current)
        return slide.meta.index if slide else None

    def layout(self, width: float, height: float,
               metrics: Optional[TextMetrics] = None) -> LayoutBox:
        """Lay the current slide out on a width x height surface."""
        if not isinstance(self.backend, TreeBackend):
            raise TypeError("layout() requires the TreeBackend render tree")
        engine = LayoutEngine(metrics or TextMetrics.for_viewport(width, height))
        return engine.arrange(self.node, Rect(0, 0, width, height))

    def render_text(self, width: Optional[int] = None, height: Optional[int] = None) -> str:
        width = width or self.settings.width
        height = height or self.settings.height
        box = self.layout(width, height, TextMetrics.cells())
        return paint(box, width, height)


# Typed commands for the line-based terminal viewer.
TERMINAL_KEYS = {
    "": "Enter",
    "n": "n",
    "l": "l",
    "p": "p",
    "h": "h",
    "b": "Backspace",
}
QUIT_COMMANDS = {"q", "quit", "exit"}


class TerminalViewer(Viewer):
    """Line-based interactive viewer for a terminal."""

    def header(self) -> str:
        index = self.position
        where = f"{index + 1}/{len(self.show)}" if index is not None else f"?/{len(self.show)}"
        return f"[{self.state.current}] {where}  (enter/n: next, p/b: back, q: quit)"

    def frame(self) -> str:
        return self.header() + "\n" + self.render_text()

    def run(self, read_line: Callable[[str], str] = input,
            write: Callable[[str], Any] = print) -> None:
        write(self.frame())
        while True:
            try:
                command = read_line("> ").strip().lower()
            except EOFError:
                break
            if command in QUIT_COMMANDS:
                break
            key = TERMINAL_KEYS.get(command)
            if key is None:
                write(f"Unknown command: {command}")
                continue
            before = self.state.current
            self.press(KeyEvent(key=key))
            self.press(KeyEvent(key=key, pressed=False))
            if self.state.current != before:
                write(self.frame())
        logger.info("Viewer closed")
