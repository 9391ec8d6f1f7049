"""Split/stack builders — arranging children along one axis."""

from typing import Any, Union

from .elements import Element, ElementLike, Group, Split, SplitElement, as_element, as_elements, check_children
from .types import Expand, Fit, Orientation

SplitLike = Union[SplitElement, ElementLike]


def fit(element: ElementLike) -> SplitElement:
    """Keep the element at its natural size."""
    return SplitElement(element=as_element(element), policy=Fit())


def expand(element: ElementLike) -> SplitElement:
    return expand_weighted(1, element)


def expand_weighted(weight: int, element: ElementLike) -> SplitElement:
    """Share remaining space with expanding siblings in proportion to weight."""
    return SplitElement(element=as_element(element), policy=Expand(weight=weight))


def as_split_element(value: SplitLike) -> SplitElement:
    """Bare elements inside a split expand with weight 1."""
    if isinstance(value, SplitElement):
        return value
    return expand(value)


def _split(orientation: Orientation, children: Any) -> Element:
    return Element(kind=Split(
        orientation=orientation,
        children=[as_split_element(child) for child in check_children(children)],
    ))


def hsplit(children) -> Element:
    """Children side by side, left to right."""
    return _split(Orientation.COLUMNS, children)


def vsplit(children) -> Element:
    """Children top to bottom."""
    return _split(Orientation.ROWS, children)


def stack(children) -> Element:
    return vsplit([fit(element) for element in as_elements(children)])


def hstack(children) -> Element:
    return hsplit([fit(element) for element in as_elements(children)])


def group(children) -> Element:
    """A vertical stack framed in a padded container."""
    return Element(kind=Group(child=stack(children)))
