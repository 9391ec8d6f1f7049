"""Slide and deck (Show) data models."""

import importlib
import logging
from typing import Any, Optional, Union
from pydantic import BaseModel, Field, field_validator

from ..render.backend import RenderBackend
from .context import Context
from .elements import Element, ElementLike, as_element

logger = logging.getLogger("ShowDeck.core.deck")


class UnknownSlide(KeyError):
    """A path that is not registered in the deck."""

    def __init__(self, path: str):
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"unknown slide: {self.path}"


class SlideMeta(BaseModel):
    """Slide identity and its declared successor.

    next_slide == "" means the slide is terminal. index is assigned by
    Show.add() from the deck size at insertion time.
    """
    model_config = {"frozen": True}

    path: str = Field(min_length=1)
    next_slide: str = ""
    index: Optional[int] = None

    def with_next_slide(self, next_slide: str) -> "SlideMeta":
        return self.model_copy(update={"next_slide": next_slide})


class Slide(BaseModel):
    """One slide: metadata plus a root element."""
    model_config = {"frozen": True}

    meta: SlideMeta
    contents: Element

    @field_validator("contents", mode="before")
    @classmethod
    def _coerce_contents(cls, value):
        return as_element(value)

    @classmethod
    def new(cls, meta: Union[SlideMeta, str], contents: ElementLike) -> "Slide":
        if isinstance(meta, str):
            meta = SlideMeta(path=meta)
        return cls(meta=meta, contents=contents)

    @property
    def path(self) -> str:
        return self.meta.path

    def materialize(self, context: Context, backend: RenderBackend) -> tuple[Any, str]:
        """Render the contents; returns (node, successor path)."""
        return self.contents.materialize(context, backend), self.meta.next_slide


class Show(BaseModel):
    """Path-keyed, insertion-ordered collection of slides."""
    first_slide: str = ""
    slides: dict[str, Slide] = Field(default_factory=dict)

    def add(self, slide: Slide) -> Slide:
        """Register a copy of slide carrying its index; returns the stored copy.

        An existing path is overwritten in place.
        """
        if slide.path in self.slides:
            logger.warning(
                f"Slide '{slide.path}' replaced; index {len(self.slides)} "
                "is assigned without renumbering the deck"
            )
        slide = slide.model_copy(update={
            "meta": slide.meta.model_copy(update={"index": len(self.slides)}),
        })
        if not self.first_slide:
            self.first_slide = slide.path
        self.slides[slide.path] = slide
        return slide

    def with_slide(self, slide: Slide) -> "Show":
        self.add(slide)
        return self

    def get(self, path: str) -> Optional[Slide]:
        return self.slides.get(path)

    def resolve(self, path: str) -> Slide:
        slide = self.slides.get(path)
        if slide is None:
            raise UnknownSlide(path)
        return slide

    def __len__(self) -> int:
        return len(self.slides)

    def __contains__(self, path: str) -> bool:
        return path in self.slides

    def to_summary(self) -> list[dict]:
        return [
            {
                "path": s.path,
                "index": s.meta.index,
                "next_slide": s.meta.next_slide or None,
                "is_first": s.path == self.first_slide,
            }
            for s in self.slides.values()
        ]

    def present(self, theme: Optional[str] = None, width: Optional[int] = None,
                height: Optional[int] = None) -> None:
        """Run this deck in the interactive terminal viewer."""
        from .theme import ShowSettings
        from .viewer import TerminalViewer

        settings = ShowSettings.from_env(theme=theme, width=width, height=height)
        TerminalViewer(self, settings=settings).run()


def load_show(target: str) -> Show:
    """Import "package.module:function" and call it to build a Show."""
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Deck target must look like 'module:function', got '{target}'")
    module = importlib.import_module(module_name)
    factory = getattr(module, attr, None)
    if factory is None:
        raise ValueError(f"Module '{module_name}' has no attribute '{attr}'")
    show = factory() if callable(factory) else factory
    if not isinstance(show, Show):
        raise TypeError(f"'{target}' produced {type(show).__name__}, expected Show")
    logger.info(f"Loaded deck '{target}' with {len(show)} slides")
    return show
