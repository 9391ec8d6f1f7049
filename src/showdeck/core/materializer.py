"""Turns the active slide into a backend render tree."""

import logging
from typing import Any

from ..render.backend import RenderBackend
from .context import Context
from .deck import Show, UnknownSlide
from .elements import text
from .theme import Theme

logger = logging.getLogger("ShowDeck.core.materializer")


class Materializer:
    """Builds root contexts from the deck and theme and materializes slides."""

    def __init__(self, show: Show, theme: Theme, backend: RenderBackend):
        self.show = show
        self.theme = theme
        self.backend = backend

    def context_for(self, slide_index: int) -> Context:
        return Context.for_slide(self.theme, slide_index, len(self.show))

    def materialize(self, path: str) -> tuple[Any, str]:
        """Return (render node, successor path) for the slide at path.

        Unknown paths render a centered "unknown slide" notice with no
        successor instead of raising.
        """
        try:
            slide = self.show.resolve(path)
        except UnknownSlide as e:
            logger.warning(str(e))
            fallback = text(str(e)).centered()
            return fallback.materialize(self.context_for(0), self.backend), ""

        return slide.materialize(self.context_for(slide.meta.index), self.backend)
