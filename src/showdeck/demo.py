"""A sample deck introducing ShowDeck itself."""

import platform
from pathlib import Path
from typing import Optional

from .core.deck import Show, Slide, SlideMeta
from .core.elements import (
    ElementLike, bullet_list, code, h1, h3, h5, hr, lazy, slide_count, slide_index, text,
)
from .core.split import expand_weighted, fit, hsplit, hstack, stack, vsplit
from .core.types import PRIMARY
from .render.tree import TextNode
from .sources import anchored_range

FOOTER_TITLE = "Introducing ShowDeck"


def content_slide(path: str, title: str, next_slide: Optional[str],
                  contents: ElementLike) -> Slide:
    """Title bar, body and a footer with the slide position."""
    meta = SlideMeta(path=path)
    if next_slide:
        meta = meta.with_next_slide(next_slide)
    return Slide.new(
        meta,
        vsplit((
            fit(stack((h3(title).left_aligned(), hr()))),
            contents,
            fit(stack((
                hr(),
                hsplit((
                    fit(h5(FOOTER_TITLE)),
                    "",
                    fit(hstack((slide_index(), "/", slide_count()))),
                )),
            ))),
        )),
    )


def _interpreter_widget() -> TextNode:
    return TextNode(text=f"Running on Python {platform.python_version()}")


def build_show() -> Show:
    own_source = Path(__file__).read_text()
    # ANCHOR_START
    return (
        Show()
        .with_slide(Slide.new(
            SlideMeta(path="title").with_next_slide("01"),
            stack((
                h1("Introducing ShowDeck").text_color(PRIMARY),
                h3("Slides as composable element trees"),
                h5("Arrow keys, space or enter to advance"),
            )),
        ))
        .with_slide(content_slide(
            "01", "What is ShowDeck?", "02",
            bullet_list([
                "Declarative slide elements",
                "Inherited alignment and color",
                "Weighted split layouts",
                "History-aware navigation",
            ]),
        ))
        .with_slide(content_slide(
            "02", "How is this slide built?", "03",
            hsplit((
                expand_weighted(3, code("py", anchored_range(own_source))),
                bullet_list(("Fit or expand", "Weights share space")),
            )),
        ))
        .with_slide(content_slide(
            "03", "Native content", "04",
            lazy(_interpreter_widget),
        ))
        .with_slide(content_slide(
            "04", "Learn More", None,
            stack((
                h1("Questions?"),
                text("Press backspace to go back").text_color(PRIMARY),
            )),
        ))
    )
    # ANCHOR_END
