"""Element tree — immutable descriptions of the visual units on a slide.

Every element kind exposes a single ``materialize(context, backend)`` that
returns an unaligned render node. ``Element`` wraps a kind with optional
alignment/color overrides and applies them around the kind's output.
"""

import logging
from typing import Any, Callable, Optional, Sequence, Union
from pydantic import BaseModel, Field, field_validator, model_validator

from ..render.backend import RenderBackend
from ..render.code import CodeView, find_lexer
from ..render.texture import Texture
from .context import Context
from .types import ElementColor, HAlign, Orientation, SplitPolicy, validate_color

logger = logging.getLogger("ShowDeck.core.elements")

# Largest fixed-arity tuple accepted where a sequence of children is expected.
MAX_TUPLE_ARITY = 6


# ── Kinds ───────────────────────────────────────────────────────────────

class Text(BaseModel):
    """A run of text painted with the context's color."""
    model_config = {"frozen": True}

    value: str

    def materialize(self, context: Context, backend: RenderBackend) -> Any:
        return backend.text(self.value, context.resolved_color())


class Heading(BaseModel):
    """Heading-level styling (1 is largest) around a child element."""
    model_config = {"frozen": True}

    level: int = Field(ge=1, le=6)
    child: "Element"

    def materialize(self, context, backend):
        return backend.heading(self.child.materialize(context, backend), self.level)


class Code(BaseModel):
    """Syntax-highlighted source. ``language`` is a lexer alias or file extension."""
    model_config = {"frozen": True}

    language: str
    source: str

    @model_validator(mode="after")
    def _known_language(self) -> "Code":
        find_lexer(self.language)
        return self

    def materialize(self, context, backend):
        return backend.code(CodeView(self.language, self.source, context.theme.code_style))


class Image(BaseModel):
    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    texture: Texture

    def materialize(self, context, backend):
        return backend.image(self.texture)


class BulletList(BaseModel):
    model_config = {"frozen": True}

    items: list["Element"] = Field(default_factory=list)

    def materialize(self, context, backend):
        return backend.bullet_list([item.materialize(context, backend) for item in self.items])


class Delimiter(BaseModel):
    """A rule. ROWS draws a horizontal line, COLUMNS a vertical one."""
    model_config = {"frozen": True}

    orientation: Orientation = Orientation.ROWS

    def materialize(self, context, backend):
        return backend.delimiter(self.orientation)


class SlideIndexMarker(BaseModel):
    """Displays the 1-based position of the slide in the deck."""
    model_config = {"frozen": True}

    def materialize(self, context, backend):
        return backend.label(str(context.slide_index + 1))


class SlideCountMarker(BaseModel):
    model_config = {"frozen": True}

    def materialize(self, context, backend):
        return backend.label(str(context.slide_count))


class LazyWidget(BaseModel):
    """Backend-native content built on demand; the context is ignored."""
    model_config = {"frozen": True}

    builder: Callable[[], Any]

    def materialize(self, context, backend):
        return backend.native(self.builder())


class SplitElement(BaseModel):
    model_config = {"frozen": True}

    element: "Element"
    policy: SplitPolicy


class Split(BaseModel):
    """Children arranged along one axis; the context passes through unchanged."""
    model_config = {"frozen": True}

    orientation: Orientation
    children: list[SplitElement] = Field(default_factory=list)

    def materialize(self, context, backend):
        return backend.stack(
            self.orientation,
            [(child.element.materialize(context, backend), child.policy)
             for child in self.children],
        )


class Group(BaseModel):
    """A child element inside a padded container."""
    model_config = {"frozen": True}

    child: "Element"

    def materialize(self, context, backend):
        return backend.contain(self.child.materialize(context, backend))


ElementKind = Union[
    Text, Heading, Code, Image, BulletList, Delimiter,
    SlideIndexMarker, SlideCountMarker, LazyWidget, Split, Group,
]
KIND_TYPES = (
    Text, Heading, Code, Image, BulletList, Delimiter,
    SlideIndexMarker, SlideCountMarker, LazyWidget, Split, Group,
)


# ── Element ─────────────────────────────────────────────────────────────

class Element(BaseModel):
    """One node of a slide's element tree.

    Transforms (centered, text_color, ...) return new elements.
    """
    model_config = {"frozen": True}

    kind: ElementKind
    align: Optional[HAlign] = None
    color: Optional[ElementColor] = None
    attrs: dict[str, str] = Field(default_factory=dict)

    @field_validator("color")
    @classmethod
    def _check_color(cls, value):
        if value is None:
            return value
        return validate_color(value)

    def centered(self) -> "Element":
        return self.model_copy(update={"align": HAlign.CENTER})

    def left_aligned(self) -> "Element":
        return self.model_copy(update={"align": HAlign.LEFT})

    def right_aligned(self) -> "Element":
        return self.model_copy(update={"align": HAlign.RIGHT})

    def fill(self) -> "Element":
        return self.model_copy(update={"align": HAlign.FILL})

    def text_color(self, color: ElementColor) -> "Element":
        return self.model_copy(update={"color": validate_color(color)})

    def with_attr(self, key: str, value: str) -> "Element":
        return self.model_copy(update={"attrs": {**self.attrs, key: value}})

    def materialize(self, context: Context, backend: RenderBackend) -> Any:
        context = context.override(align=self.align, color=self.color)
        node = self.kind.materialize(context, backend)
        if context.align == HAlign.FILL:
            return node
        return backend.align(node, context.align)


for _model in (Heading, BulletList, SplitElement, Split, Group, Element):
    _model.model_rebuild()


# ── Coercion & builders ────────────────────────────────────────────────

ElementLike = Union[Element, str, Texture, ElementKind]


def as_element(value: ElementLike) -> Element:
    """Coerce a string, texture or bare kind into an Element."""
    if isinstance(value, Element):
        return value
    if isinstance(value, str):
        return Element(kind=Text(value=value))
    if isinstance(value, Texture):
        return Element(kind=Image(texture=value))
    if isinstance(value, KIND_TYPES):
        return Element(kind=value)
    raise TypeError(f"Cannot use {type(value).__name__} as a slide element")


def check_children(children: Any) -> Sequence:
    """Accept a tuple of 1..MAX_TUPLE_ARITY items or a list of any length."""
    if isinstance(children, list):
        return children
    if isinstance(children, tuple):
        if not 1 <= len(children) <= MAX_TUPLE_ARITY:
            raise TypeError(
                f"Expected a tuple of 1 to {MAX_TUPLE_ARITY} children, got {len(children)}; "
                "use a list for larger groups"
            )
        return children
    raise TypeError(
        f"Children must be a tuple or list, not {type(children).__name__}"
    )


def as_elements(children: Any) -> list[Element]:
    return [as_element(child) for child in check_children(children)]


def text(value: str) -> Element:
    return Element(kind=Text(value=value))


def heading(level: int, contents: ElementLike) -> Element:
    return Element(kind=Heading(level=level, child=as_element(contents)))


def h1(contents: ElementLike) -> Element:
    return heading(1, contents)


def h2(contents: ElementLike) -> Element:
    return heading(2, contents)


def h3(contents: ElementLike) -> Element:
    return heading(3, contents)


def h4(contents: ElementLike) -> Element:
    return heading(4, contents)


def h5(contents: ElementLike) -> Element:
    return heading(5, contents)


def h6(contents: ElementLike) -> Element:
    return heading(6, contents)


def code(language: str, source: str) -> Element:
    find_lexer(language)
    return Element(kind=Code(language=language, source=source))


def image(texture: Texture | str) -> Element:
    """An image from a Texture, a URL or a file path."""
    if isinstance(texture, str):
        if texture.startswith(("http://", "https://")):
            texture = Texture.from_url(texture)
        else:
            texture = Texture.from_path(texture)
    return Element(kind=Image(texture=texture))


def bullet_list(children) -> Element:
    return Element(kind=BulletList(items=as_elements(children)))


def hr() -> Element:
    return Element(kind=Delimiter(orientation=Orientation.ROWS))


def vr() -> Element:
    return Element(kind=Delimiter(orientation=Orientation.COLUMNS))


def slide_index() -> Element:
    return Element(kind=SlideIndexMarker())


def slide_count() -> Element:
    return Element(kind=SlideCountMarker())


def lazy(builder: Callable[[], Any]) -> Element:
    return Element(kind=LazyWidget(builder=builder))
