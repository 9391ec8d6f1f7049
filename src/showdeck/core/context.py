"""Presentation context threaded down an element tree during materialization."""

from pydantic import BaseModel

from .theme import Theme
from .types import ElementColor, HAlign, PrimaryColor


class Context(BaseModel):
    """Inherited presentation state.

    Passed by value: elements that override a field materialize their
    children with a modified copy, never with a mutated original.
    """
    model_config = {"frozen": True}

    align: HAlign = HAlign.CENTER
    theme: Theme
    color: ElementColor
    slide_index: int = 0
    slide_count: int = 0

    @classmethod
    def for_slide(cls, theme: Theme, slide_index: int, slide_count: int) -> "Context":
        return cls(
            align=HAlign.CENTER,
            theme=theme,
            color=theme.on_surface,
            slide_index=slide_index,
            slide_count=slide_count,
        )

    def resolved_color(self) -> str:
        """Concrete paint color; PRIMARY is looked up in the theme only here."""
        if isinstance(self.color, PrimaryColor):
            return self.theme.primary
        return self.color

    def override(self, align: HAlign | None = None,
                 color: ElementColor | None = None) -> "Context":
        update = {}
        if align is not None:
            update["align"] = align
        if color is not None:
            update["color"] = color
        if not update:
            return self
        return self.model_copy(update=update)
