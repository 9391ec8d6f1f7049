"""ShowDeck — public API re-exports."""

from .core.types import HAlign, Orientation, PRIMARY, PrimaryColor, Fit, Expand
from .core.theme import Theme, ShowSettings, BUILTIN_THEMES
from .core.context import Context
from .core.elements import (
    Element, Text, Heading, Code, Image, BulletList, Delimiter,
    SlideIndexMarker, SlideCountMarker, LazyWidget, Split, SplitElement, Group,
    as_element, text, heading, h1, h2, h3, h4, h5, h6, code, image, bullet_list,
    hr, vr, slide_index, slide_count, lazy,
)
from .core.split import fit, expand, expand_weighted, hsplit, vsplit, stack, hstack, group
from .core.deck import Slide, SlideMeta, Show, UnknownSlide, load_show
from .core.navigation import Action, KeyEvent, NavigationState, classify
from .core.materializer import Materializer
from .core.viewer import Viewer, TerminalViewer
from .render.code import CodeView, UnknownLanguage
from .render.texture import Texture

__all__ = [
    "HAlign", "Orientation", "PRIMARY", "PrimaryColor", "Fit", "Expand",
    "Theme", "ShowSettings", "BUILTIN_THEMES",
    "Context",
    "Element", "Text", "Heading", "Code", "Image", "BulletList", "Delimiter",
    "SlideIndexMarker", "SlideCountMarker", "LazyWidget", "Split", "SplitElement", "Group",
    "as_element", "text", "heading", "h1", "h2", "h3", "h4", "h5", "h6", "code", "image",
    "bullet_list", "hr", "vr", "slide_index", "slide_count", "lazy",
    "fit", "expand", "expand_weighted", "hsplit", "vsplit", "stack", "hstack", "group",
    "Slide", "SlideMeta", "Show", "UnknownSlide", "load_show",
    "Action", "KeyEvent", "NavigationState", "classify",
    "Materializer",
    "Viewer", "TerminalViewer",
    "CodeView", "UnknownLanguage",
    "Texture",
]
