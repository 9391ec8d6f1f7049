"""In-memory render tree backend."""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.types import Fit, HAlign, Orientation, SplitPolicy
from .backend import RenderBackend
from .code import CodeView
from .texture import Texture


class RenderNode:
    """Base class for nodes produced by TreeBackend."""

    def children(self) -> list["RenderNode"]:
        return []

    def walk(self):
        yield self
        for child in self.children():
            yield from child.walk()


@dataclass
class TextNode(RenderNode):
    text: str
    color: Optional[str] = None  # None: surface default


@dataclass
class AlignNode(RenderNode):
    child: RenderNode
    align: HAlign

    def children(self):
        return [self.child]


@dataclass
class StackItem:
    node: RenderNode
    policy: SplitPolicy = field(default_factory=Fit)


@dataclass
class StackNode(RenderNode):
    orientation: Orientation
    items: list[StackItem] = field(default_factory=list)

    def children(self):
        return [item.node for item in self.items]


@dataclass
class HeadingNode(RenderNode):
    child: RenderNode
    level: int

    def children(self):
        return [self.child]


@dataclass
class ListNode(RenderNode):
    items: list[RenderNode] = field(default_factory=list)

    def children(self):
        return list(self.items)


@dataclass
class RuleNode(RenderNode):
    orientation: Orientation


@dataclass
class ImageNode(RenderNode):
    texture: Texture
    fit_ratio: float = 0.5


@dataclass
class CodeNode(RenderNode):
    view: CodeView


@dataclass
class ContainNode(RenderNode):
    child: RenderNode

    def children(self):
        return [self.child]


class TreeBackend(RenderBackend):
    """Builds RenderNode dataclasses for the layout engine and painter."""

    def align(self, node, align):
        return AlignNode(child=node, align=align)

    def stack(self, orientation, children):
        return StackNode(
            orientation=orientation,
            items=[StackItem(node=node, policy=policy) for node, policy in children],
        )

    def text(self, value, color):
        return TextNode(text=value, color=color)

    def label(self, value):
        return TextNode(text=value)

    def heading(self, node, level):
        return HeadingNode(child=node, level=level)

    def bullet_list(self, items):
        return ListNode(items=list(items))

    def delimiter(self, orientation):
        return RuleNode(orientation=orientation)

    def image(self, texture):
        return ImageNode(texture=texture)

    def code(self, view):
        return CodeNode(view=view)

    def contain(self, node):
        return ContainNode(child=node)

    def native(self, value: Any) -> RenderNode:
        if isinstance(value, RenderNode):
            return value
        return TextNode(text=str(value))


def find_nodes(root: RenderNode, node_type: type) -> list[RenderNode]:
    return [node for node in root.walk() if isinstance(node, node_type)]


def collect_text(root: RenderNode) -> list[str]:
    """All TextNode strings in depth-first order."""
    return [node.text for node in find_nodes(root, TextNode)]
